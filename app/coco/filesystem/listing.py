"""Directory listing with glob filters and depth limits.

Lists the entries below a directory, optionally descending into
subdirectories. Symbolic links are reported but never followed.
"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from coco.core.errors import PathNotFoundError, TargetNotDirectoryError
from coco.filesystem.models import ListingPlan, ListOption

logger = logging.getLogger(__name__)


def list_path(
    path: Path,
    options: Iterable[ListOption] = (),
    *,
    sort_entries: bool = True,
) -> Iterator[Path]:
    """List the entries of a directory.

    The target is validated when this function is called; the entries
    themselves are produced lazily. Directories are yielded before their
    contents. Glob patterns filter what is yielded, not where the walk
    goes, so matches inside non-matching directories are still found.

    Args:
        path: Directory to list.
        options: List options (glob patterns, recursion, depth).
        sort_entries: Yield siblings in lexicographic order instead of
            directory-read order.

    Returns:
        Iterator over entry paths, each built as ``path / name``.

    Raises:
        PathNotFoundError: If ``path`` does not exist.
        TargetNotDirectoryError: If ``path`` is not a directory.
    """
    if not path.exists():
        msg = f'Could not find the directory path "{path}".'
        raise PathNotFoundError(msg)
    if not path.is_dir():
        msg = f'"{path}" is not a directory.'
        raise TargetNotDirectoryError(msg)

    plan = ListingPlan.from_options(options)
    logger.debug("Listing %s with %s", path, plan)
    return _walk(path, plan, 0, sort_entries)


def _walk(directory: Path, plan: ListingPlan, level: int, sort_entries: bool) -> Iterator[Path]:
    entries = list(directory.iterdir())
    if sort_entries:
        entries.sort()

    for entry in entries:
        if plan.matches(entry.name):
            yield entry

        if plan.descends_below(level) and entry.is_dir() and not entry.is_symlink():
            yield from _walk(entry, plan, level + 1, sort_entries)
