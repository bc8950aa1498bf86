"""Error types raised by coco.

Every failure that should reach the user as a readable message derives
from :class:`CocoError`. Raw ``OSError`` from the filesystem is left
as-is and handled next to these at the CLI edge.
"""

from collections.abc import Sequence


class CocoError(Exception):
    """Base exception for coco errors.

    Attributes:
        warnings: Warnings collected before the failure. They are shown
            ahead of the error message.
    """

    def __init__(self, message: str, *, warnings: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.warnings = tuple(warnings)


class TargetNotSpecifiedError(CocoError):
    """Raised when a command that needs targets received none."""


class PathNotFoundError(CocoError):
    """Raised when a target path does not exist."""


class TargetNotDirectoryError(CocoError):
    """Raised when a listing target exists but is not a directory."""


class UnrecognizedCommandError(CocoError):
    """Raised when the subcommand name is unknown."""


class EnvironmentUnavailableError(CocoError):
    """Raised when the invocation context cannot be determined."""


class UnsupportedCommandError(CocoError):
    """Raised for commands and options that are not implemented yet."""


class ProtectedPathError(CocoError):
    """Raised when deletion targets a protected path."""


class SettingsError(CocoError):
    """Raised when the user configuration cannot be loaded."""
