"""Session setup and command execution.

A :class:`Session` is built once from the raw argument vector and the
working directory, then handed to :class:`CommandRunner`, which runs the
command target by target and yields :class:`Outcome` values for the CLI
to render. Failures are raised, never yielded: the first error stops the
run.
"""

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from coco.core.command import (
    Command,
    DeleteCommand,
    HelpCommand,
    ListCommand,
    ParseResult,
    parse_command,
)
from coco.core.errors import EnvironmentUnavailableError, UnsupportedCommandError
from coco.core.settings import CocoSettings
from coco.filesystem.delete import delete_path
from coco.filesystem.listing import list_path

logger = logging.getLogger(__name__)

AVAILABLE_COMMANDS = "delete (del), list (ls)"


class OutcomeKind(str, Enum):
    """Kind of outcome produced while running a command.

    Attributes:
        SUCCESS: A target was processed (e.g. deleted).
        WARNING: A recoverable problem, such as an ignored flag.
        ENTRY: One listed path.
    """

    SUCCESS = "success"
    WARNING = "warning"
    ENTRY = "entry"


@dataclass(frozen=True, slots=True)
class Outcome:
    """A renderable result of running a command.

    Attributes:
        kind: What happened.
        message: Message text, or the path for ENTRY outcomes.
    """

    kind: OutcomeKind
    message: str


@dataclass(frozen=True, slots=True)
class Session:
    """One parsed command and the directory it runs in.

    Attributes:
        command: The command to run.
        current_directory: Working directory at startup; relative targets
            are resolved against it.
        warnings: Warnings produced while parsing the command.
    """

    command: Command
    current_directory: Path
    warnings: tuple[str, ...] = ()


def build_session(argv: Sequence[str], current_directory: Path) -> Session:
    """Build a session from the full argument vector.

    ``argv[0]`` is the program itself, ``argv[1]`` the subcommand name,
    and the rest belongs to the subcommand. Without a subcommand the
    session holds a :class:`HelpCommand`.

    Args:
        argv: Raw argument vector, program token included.
        current_directory: Working directory of the process.

    Returns:
        The resolved Session.

    Raises:
        EnvironmentUnavailableError: If ``argv`` is empty.
        TargetNotSpecifiedError: If a delete command has no target.
        UnrecognizedCommandError: If the subcommand name is unknown.
    """
    if not argv:
        msg = "The path to the program could not be determined."
        raise EnvironmentUnavailableError(msg)

    if len(argv) < 2:
        result = ParseResult(command=HelpCommand())
    else:
        result = parse_command(argv[1], argv[2:], current_directory)

    logger.debug("Parsed %r in %s", result.command, current_directory)
    return Session(
        command=result.command,
        current_directory=current_directory,
        warnings=result.warnings,
    )


class CommandRunner:
    """Runs the command held by a session.

    Args:
        session: The session to run.
        settings: User settings. Defaults apply if None.
    """

    def __init__(self, session: Session, settings: CocoSettings | None = None) -> None:
        self._session = session
        self._settings = settings or CocoSettings()

    def run(self) -> Iterator[Outcome]:
        """Run the command, yielding outcomes as they happen.

        Parse warnings come first. Targets are processed in order and the
        first failure propagates, so later targets are not attempted.

        Yields:
            Outcome for every warning, deleted target, and listed entry.

        Raises:
            CocoError: For domain failures (missing path, unsupported command, ...).
            OSError: If the filesystem refuses an operation.
        """
        for warning in self._session.warnings:
            yield Outcome(OutcomeKind.WARNING, warning)

        command = self._session.command
        if isinstance(command, DeleteCommand):
            yield from self._run_delete(command)
        elif isinstance(command, ListCommand):
            yield from self._run_list(command)
        elif isinstance(command, HelpCommand):
            msg = f"Help is not supported yet. Available commands: {AVAILABLE_COMMANDS}."
            raise UnsupportedCommandError(msg)
        else:
            msg = f'The "{command.name}" command is not supported yet.'
            raise UnsupportedCommandError(msg)

    def _resolve(self, target: Path) -> Path:
        """Resolve a target against the session directory, keeping absolute ones."""
        if target.is_absolute():
            return target
        return self._session.current_directory / target

    def _run_delete(self, command: DeleteCommand) -> Iterator[Outcome]:
        if command.options:
            msg = "Glob-filtered deletion is not supported yet. Nothing was deleted."
            raise UnsupportedCommandError(msg)

        protected = self._settings.delete.protected_paths
        for target in command.targets:
            delete_path(self._resolve(target), protected_patterns=protected)
            logger.info("Deleted %s", target)
            yield Outcome(OutcomeKind.SUCCESS, f"Deleted {target}.")

    def _run_list(self, command: ListCommand) -> Iterator[Outcome]:
        sort_entries = self._settings.list.sort_entries
        for target in command.targets:
            resolved = self._resolve(target)
            for entry in list_path(resolved, command.options, sort_entries=sort_entries):
                yield Outcome(OutcomeKind.ENTRY, str(target / entry.relative_to(resolved)))
