"""Recursive filesystem deletion.

Deletion is immediate and permanent: there is no dry-run, no
confirmation, and no trash. Directories are emptied depth-first before
they are removed, and symbolic links are removed without being followed.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from coco.core.errors import PathNotFoundError, ProtectedPathError
from coco.filesystem.protected import is_protected_path

logger = logging.getLogger(__name__)


def delete_path(path: Path, *, protected_patterns: Iterable[str] = ()) -> None:
    """Delete a file, symbolic link, or directory tree.

    The first failure aborts the whole operation. Entries removed before
    the failure stay removed.

    Args:
        path: Path to delete.
        protected_patterns: Extra protected patterns on top of the built-in ones.

    Raises:
        PathNotFoundError: If nothing exists at ``path``.
        ProtectedPathError: If ``path`` is protected.
        OSError: If removing any entry fails.
    """
    # A dangling symlink still exists as far as deletion is concerned
    if not (path.exists() or path.is_symlink()):
        msg = f'The system cannot find "{path}". It may have been moved or already deleted.'
        raise PathNotFoundError(msg)

    if is_protected_path(path, protected_patterns):
        msg = f'Refusing to delete protected path "{path}".'
        raise ProtectedPathError(msg)

    _remove(path)


def _remove(path: Path) -> None:
    """Remove a path, emptying directories first (post-order)."""
    if path.is_dir() and not path.is_symlink():
        for child in sorted(path.iterdir()):
            _remove(child)
        path.rmdir()
        logger.debug("Removed directory %s", path)
        return

    path.unlink()
    logger.debug("Removed %s", path)
