"""Filesystem operations for coco.

This module provides recursive deletion, directory listing, the option
values both understand, and protected path matching.
"""

from coco.filesystem.delete import delete_path
from coco.filesystem.listing import list_path
from coco.filesystem.models import (
    DeleteOption,
    Depth,
    GlobPattern,
    ListingPlan,
    ListOption,
    Recursive,
)
from coco.filesystem.protected import PROTECTED_PATH_PATTERNS, is_protected_path

__all__ = [
    "PROTECTED_PATH_PATTERNS",
    "DeleteOption",
    "Depth",
    "GlobPattern",
    "ListOption",
    "ListingPlan",
    "Recursive",
    "delete_path",
    "is_protected_path",
    "list_path",
]
