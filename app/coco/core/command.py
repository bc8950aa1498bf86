"""Command model and argument parsing.

A command line such as ``coco ls src --glob=*.py --depth=2`` is split
by the CLI into a subcommand name (``ls``) and the remaining tokens.
:func:`parse_command` turns those into one of the command dataclasses
below. Tokens starting with ``--`` are flags, everything else is a
target path.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from coco.core.errors import TargetNotSpecifiedError, UnrecognizedCommandError
from coco.filesystem.models import DeleteOption, Depth, GlobPattern, ListOption, Recursive

logger = logging.getLogger(__name__)

FLAG_PREFIX = "--"


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    """Delete one or more paths recursively.

    ``coco delete <target>... [--glob=<pattern>]``

    Attributes:
        targets: Paths to delete, in the order given. Never empty.
        options: Delete options.
    """

    name: ClassVar[str] = "delete"

    targets: tuple[Path, ...]
    options: frozenset[DeleteOption] = frozenset()

    def __post_init__(self) -> None:
        """Validate delete command data after initialization."""
        if not self.targets:
            msg = "Delete target not specified."
            raise TargetNotSpecifiedError(msg)


@dataclass(frozen=True, slots=True)
class ListCommand:
    """List the contents of one or more directories.

    ``coco list [<target>...] [--glob=<pattern>] [--recursive] [--depth=<n>]``

    Attributes:
        targets: Directories to list, in the order given.
        options: List options in the order given, duplicates kept.
    """

    name: ClassVar[str] = "list"

    targets: tuple[Path, ...]
    options: tuple[ListOption, ...] = ()


@dataclass(frozen=True, slots=True)
class MkdirCommand:
    """Create a directory (not supported yet)."""

    name: ClassVar[str] = "mkdir"


@dataclass(frozen=True, slots=True)
class ClearCommand:
    """Clear the terminal (not supported yet)."""

    name: ClassVar[str] = "clear"


@dataclass(frozen=True, slots=True)
class HelpCommand:
    """Show usage (not supported yet)."""

    name: ClassVar[str] = "help"


@dataclass(frozen=True, slots=True)
class RunCommand:
    """Run an external command (not supported yet)."""

    name: ClassVar[str] = "run"


Command = DeleteCommand | ListCommand | MkdirCommand | ClearCommand | HelpCommand | RunCommand


@dataclass(frozen=True, slots=True)
class ParseResult:
    """A parsed command plus the warnings produced while parsing it.

    Attributes:
        command: The parsed command.
        warnings: Messages for flags that were ignored.
    """

    command: Command
    warnings: tuple[str, ...] = ()


def _split_flag(token: str) -> tuple[str, str | None]:
    """Split ``--name=value`` into ``("--name", "value")``."""
    flag, sep, value = token.partition("=")
    return flag, (value if sep else None)


def parse_delete_flag(token: str) -> DeleteOption | None:
    """Parse a delete flag, returning None if it is not recognized."""
    flag, value = _split_flag(token)
    if flag == "--glob" and value:
        return GlobPattern(value)
    return None


def parse_list_flag(token: str) -> ListOption | None:
    """Parse a list flag, returning None if it is not recognized.

    A recognized flag with a missing or malformed value counts as not
    recognized: ``--glob=``, ``--depth=-1``, ``--recursive=yes``.
    """
    flag, value = _split_flag(token)
    if flag == "--recursive" and value is None:
        return Recursive()
    if flag == "--depth" and value is not None and value.isdecimal():
        return Depth(int(value))
    if flag == "--glob" and value:
        return GlobPattern(value)
    return None


def _invalid_argument(token: str, warnings: list[str]) -> None:
    message = f'Invalid argument "{token}".'
    logger.debug("Ignoring argument %r", token)
    warnings.append(message)


def delete_command(tokens: Sequence[str]) -> ParseResult:
    """Build a delete command from its tokens.

    Raises:
        TargetNotSpecifiedError: If no target path was given. Warnings for
            ignored flags travel with the error.
    """
    targets: list[Path] = []
    options: set[DeleteOption] = set()
    warnings: list[str] = []

    for token in tokens:
        if token.startswith(FLAG_PREFIX):
            option = parse_delete_flag(token)
            if option is None:
                _invalid_argument(token, warnings)
            else:
                options.add(option)
        else:
            targets.append(Path(token))

    if not targets:
        msg = "Delete target not specified."
        raise TargetNotSpecifiedError(msg, warnings=warnings)

    command = DeleteCommand(targets=tuple(targets), options=frozenset(options))
    return ParseResult(command=command, warnings=tuple(warnings))


def list_command(tokens: Sequence[str], current_directory: Path) -> ParseResult:
    """Build a list command from its tokens.

    Lists ``current_directory`` when no target path was given.
    """
    targets: list[Path] = []
    options: list[ListOption] = []
    warnings: list[str] = []

    for token in tokens:
        if token.startswith(FLAG_PREFIX):
            option = parse_list_flag(token)
            if option is None:
                _invalid_argument(token, warnings)
            else:
                options.append(option)
        else:
            targets.append(Path(token))

    if not targets:
        targets.append(current_directory)

    command = ListCommand(targets=tuple(targets), options=tuple(options))
    return ParseResult(command=command, warnings=tuple(warnings))


def parse_command(name: str, tokens: Sequence[str], current_directory: Path) -> ParseResult:
    """Parse a subcommand name and its remaining tokens.

    Args:
        name: Subcommand name or alias (``delete``/``del``, ``list``/``ls``,
            ``clear``/``cls``, ``mkdir``, ``run``).
        tokens: Tokens following the subcommand.
        current_directory: Default listing target.

    Returns:
        ParseResult with the command and any warnings.

    Raises:
        TargetNotSpecifiedError: If a delete command has no target.
        UnrecognizedCommandError: If the subcommand name is unknown.
    """
    if name in ("delete", "del"):
        return delete_command(tokens)
    if name in ("list", "ls"):
        return list_command(tokens, current_directory)
    # Remaining tokens are not parsed for the placeholder commands
    if name in ("clear", "cls"):
        return ParseResult(command=ClearCommand())
    if name == "mkdir":
        return ParseResult(command=MkdirCommand())
    if name == "run":
        return ParseResult(command=RunCommand())

    msg = f'Cannot recognise the command "{name}".'
    raise UnrecognizedCommandError(msg)
