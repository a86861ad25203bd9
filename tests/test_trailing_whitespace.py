"""Tests for the trailing whitespace analyzer and line locator."""

from pathlib import Path

import pytest

from ws_audit.analyzers.trailing_whitespace import (
    LINE_NOT_FOUND,
    TrailingWhitespaceAnalyzer,
    find_line_number,
    find_trailing_whitespace,
)
from ws_audit.model import FileStatus
from ws_audit.model.finding import RULE_ID


class TestFindTrailingWhitespace:
    """Pattern matching on decoded file content."""

    def test_clean_content(self):
        assert find_trailing_whitespace("foo\nbar\n") is None

    def test_empty_content(self):
        assert find_trailing_whitespace("") is None

    def test_space_before_newline(self):
        assert find_trailing_whitespace("foo \nbar\n") == 3

    def test_tab_before_newline(self):
        assert find_trailing_whitespace("foo\nbar\t\n") == 7

    def test_run_start_is_reported(self):
        """The offset points at the first char of the whitespace run."""
        assert find_trailing_whitespace("ab \t \n") == 2

    def test_first_match_only(self):
        assert find_trailing_whitespace("foo \nbar\t\nbaz\n") == 3

    def test_last_line_without_terminator(self):
        assert find_trailing_whitespace("foo\nbar  ") == 7

    def test_whitespace_only_line(self):
        assert find_trailing_whitespace("a\n   \nb\n") == 2

    def test_other_whitespace_not_matched(self):
        """Only spaces and tabs count; form feeds and NBSP do not."""
        assert find_trailing_whitespace("a\f\nb\xa0\n") is None

    def test_unicode_line_separators_are_not_terminators(self):
        """``$`` anchors only before ``\\n``; U+2028/U+2029 do not end a line."""
        assert find_trailing_whitespace("a \u2028b \u2029c\n") is None

    def test_leading_whitespace_not_matched(self):
        assert find_trailing_whitespace("    indented\n\tx\n") is None


class TestFindLineNumber:
    """Offset → 1-based line mapping."""

    def test_offset_in_second_line(self):
        content = "a\nb \nc\n"
        assert find_line_number(content, 3) == 2

    def test_offset_at_start(self):
        assert find_line_number("abc\n", 0) == 1

    def test_offset_on_newline_belongs_to_its_line(self):
        assert find_line_number("ab\ncd\n", 2) == 1
        assert find_line_number("ab\ncd\n", 3) == 2

    def test_out_of_range_returns_sentinel(self):
        assert find_line_number("a\nb \nc\n", 100) == LINE_NOT_FOUND

    def test_negative_offset_returns_sentinel(self):
        assert find_line_number("a\n", -1) == LINE_NOT_FOUND

    def test_empty_content(self):
        assert find_line_number("", 0) == 1
        assert find_line_number("", 1) == LINE_NOT_FOUND

    def test_agrees_with_scanner(self):
        content = "one\ntwo\nthree  \nfour \n"
        index = find_trailing_whitespace(content)
        assert find_line_number(content, index) == 3


class TestTrailingWhitespaceAnalyzer:
    """File-level scanning."""

    def test_analyzer_protocol(self):
        analyzer = TrailingWhitespaceAnalyzer()
        assert analyzer.id == "trailing_whitespace"
        assert analyzer.version == "1.0.0"
        assert callable(analyzer.scan_file)

    def test_clean_file(self, tmp_path: Path):
        (tmp_path / "ok.txt").write_text("foo\nbar\n", encoding="utf-8")

        outcome = TrailingWhitespaceAnalyzer().scan_file(tmp_path, "ok.txt")

        assert outcome.status is FileStatus.CLEAN
        assert outcome.finding is None

    def test_single_violation(self, tmp_path: Path):
        (tmp_path / "bad.txt").write_text("foo \nbar\n", encoding="utf-8")

        outcome = TrailingWhitespaceAnalyzer().scan_file(tmp_path, "bad.txt")

        assert outcome.status is FileStatus.OFFENDING
        f = outcome.finding
        assert f.path == "bad.txt"
        assert f.line == 1
        assert f.location.line_end == 1
        assert f.rule_id == RULE_ID
        assert f.snippet == "foo "

    def test_only_first_violation_reported(self, tmp_path: Path):
        (tmp_path / "bad.txt").write_text("foo \nbar\t\nbaz\n", encoding="utf-8")

        outcome = TrailingWhitespaceAnalyzer().scan_file(tmp_path, "bad.txt")

        assert outcome.finding.line == 1

    def test_nested_relative_path(self, tmp_path: Path):
        (tmp_path / "pkg").mkdir()
        (tmp_path / "pkg" / "mod.py").write_text("x = 1\ny = 2 \n", encoding="utf-8")

        outcome = TrailingWhitespaceAnalyzer().scan_file(tmp_path, "pkg/mod.py")

        assert outcome.finding.path == "pkg/mod.py"
        assert outcome.finding.line == 2

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (b"foo\r\nbar \r\n", 2),
            (b"foo\rbar\t\r", 2),
            (b"foo\r\nbar\r\n", None),
        ],
    )
    def test_crlf_and_cr_terminators(self, tmp_path: Path, raw: bytes, expected):
        (tmp_path / "f.txt").write_bytes(raw)

        outcome = TrailingWhitespaceAnalyzer().scan_file(tmp_path, "f.txt")

        line = outcome.finding.line if outcome.finding else None
        assert line == expected

    def test_missing_file_is_skipped(self, tmp_path: Path):
        outcome = TrailingWhitespaceAnalyzer().scan_file(tmp_path, "gone.txt")

        assert outcome.status is FileStatus.SKIPPED
        assert outcome.finding is None

    def test_directory_is_skipped(self, tmp_path: Path):
        (tmp_path / "sub").mkdir()

        outcome = TrailingWhitespaceAnalyzer().scan_file(tmp_path, "sub")

        assert outcome.status is FileStatus.SKIPPED

    def test_undecodable_file_is_skipped(self, tmp_path: Path):
        (tmp_path / "blob.bin").write_bytes(b"\xff\xfe\x00 junk \n")

        outcome = TrailingWhitespaceAnalyzer().scan_file(tmp_path, "blob.bin")

        assert outcome.status is FileStatus.SKIPPED
        assert outcome.finding is None

    def test_skip_is_logged_at_debug(self, tmp_path: Path, caplog):
        with caplog.at_level("DEBUG", logger="ws_audit.analyzers.trailing_whitespace"):
            TrailingWhitespaceAnalyzer().scan_file(tmp_path, "gone.txt")

        assert any("gone.txt" in r.getMessage() for r in caplog.records)
