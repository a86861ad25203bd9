"""ws_audit — fail CI when git-tracked files carry trailing whitespace."""

__all__ = [
    "__version__",
    "scan_repository",
]
__version__ = "0.1.0"

# Programmatic entrypoint (backend use).
from ws_audit.api import scan_repository  # noqa: E402, F401
