"""Option values for the filesystem operations.

Options are parsed from ``--flag`` tokens by the argument parser and
handed to the operations unchanged. :class:`ListingPlan` folds a
sequence of list options into the traversal policy the lister follows.
"""

import fnmatch
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GlobPattern:
    """Shell-style wildcard filter on entry names.

    Matching is case-sensitive and applies to the entry name only,
    never to the full path, so ``*`` does not cross directory levels.

    Attributes:
        pattern: fnmatch pattern (``*``, ``?``, ``[seq]``).
    """

    pattern: str

    def __post_init__(self) -> None:
        """Validate the pattern after initialization."""
        if not self.pattern:
            msg = "Glob pattern cannot be empty"
            raise ValueError(msg)

    def matches(self, name: str) -> bool:
        """Check whether an entry name matches the pattern."""
        return fnmatch.fnmatchcase(name, self.pattern)


@dataclass(frozen=True, slots=True)
class Recursive:
    """Descend into subdirectories while listing."""


@dataclass(frozen=True, slots=True)
class Depth:
    """Limit recursive listing to a number of levels below the target.

    Attributes:
        levels: Levels to descend; 0 lists only the immediate children.
    """

    levels: int

    def __post_init__(self) -> None:
        """Validate the depth after initialization."""
        if self.levels < 0:
            msg = f"Depth must be zero or greater, got {self.levels}"
            raise ValueError(msg)


DeleteOption = GlobPattern
ListOption = GlobPattern | Recursive | Depth


@dataclass(frozen=True, slots=True)
class ListingPlan:
    """Traversal policy resolved from a sequence of list options.

    Attributes:
        max_depth: Levels below the target to descend into, None for no limit.
        patterns: Name filters; an entry is emitted if it matches any of them.
    """

    max_depth: int | None = 0
    patterns: tuple[GlobPattern, ...] = ()

    @classmethod
    def from_options(cls, options: Iterable[ListOption]) -> "ListingPlan":
        """Resolve list options into a plan.

        ``Depth`` always bounds the traversal (the last one given wins).
        ``Recursive`` without any ``Depth`` means unlimited depth. With
        neither, only the immediate children are listed.

        Args:
            options: Options in the order they were given.

        Returns:
            The resolved ListingPlan.
        """
        recursive = False
        depth: int | None = None
        patterns: list[GlobPattern] = []

        for option in options:
            if isinstance(option, Recursive):
                recursive = True
            elif isinstance(option, Depth):
                depth = option.levels
            elif isinstance(option, GlobPattern):
                patterns.append(option)

        if depth is not None:
            max_depth: int | None = depth
        elif recursive:
            max_depth = None
        else:
            max_depth = 0

        return cls(max_depth=max_depth, patterns=tuple(patterns))

    def matches(self, name: str) -> bool:
        """Check whether an entry with this name should be emitted."""
        if not self.patterns:
            return True
        return any(pattern.matches(name) for pattern in self.patterns)

    def descends_below(self, level: int) -> bool:
        """Check whether directories found at ``level`` should be opened.

        Level 0 holds the immediate children of the listing target.
        """
        return self.max_depth is None or level < self.max_depth
