"""Protected filesystem paths that deletion refuses to touch.

The built-in list only guards the filesystem root and the user's home
directory. Additional patterns come from the ``[delete]`` section of
the user configuration.
"""

import fnmatch
import os
from collections.abc import Iterable
from pathlib import Path

# Protected filesystem path patterns (glob-style).
# Patterns starting with ~ are expanded to the user's home directory
# before matching. Patterns starting with / are matched as-is.
PROTECTED_PATH_PATTERNS: list[str] = [
    "/",
    "~",
]


def _expand(pattern: str) -> str:
    if pattern == "~" or pattern.startswith("~/"):
        return str(Path.home()) + pattern[1:]
    return pattern


def is_protected_path(path: str | Path, extra_patterns: Iterable[str] = ()) -> bool:
    """Check if a filesystem path is protected and must not be deleted.

    The path is made absolute and normalized (without resolving symbolic
    links) before it is compared with fnmatch against every built-in and
    extra pattern.

    Args:
        path: Filesystem path to check.
        extra_patterns: Additional patterns, e.g. from the user configuration.

    Returns:
        True if the path matches any protected pattern, False otherwise.
    """
    normalized = os.path.normpath(os.path.abspath(path))

    for pattern in (*PROTECTED_PATH_PATTERNS, *extra_patterns):
        expanded = _expand(pattern)
        if expanded != "/":
            expanded = expanded.rstrip("/")

        if fnmatch.fnmatchcase(normalized, expanded):
            return True

    return False
