"""Rich console formatting utilities.

Messages are rendered by :func:`render_message`, a pure function from a
message and a severity to Rich markup. The ``print_*`` helpers send the
rendered markup to the shared consoles.
"""

import sys
from enum import Enum

from rich.console import Console
from rich.markup import escape

from coco.core.theme import get_theme


class Severity(str, Enum):
    """Category of a user-facing message."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def render_message(message: str, severity: Severity) -> str:
    """Render a message with its severity label as Rich markup.

    The message text is escaped, so paths containing square brackets are
    printed literally.

    Args:
        message: Plain message text.
        severity: Category that selects the label and colors.

    Returns:
        Markup string such as ``[label.error] ERROR: [/] [error]...[/]``.
    """
    label = f" {severity.value.upper()}: "
    return f"[label.{severity.value}]{label}[/] [{severity.value}]{escape(message)}[/]"


def print_entry(entry: str) -> None:
    """Print a listed path on its own line, without styling or wrapping."""
    console.print(entry, markup=False, highlight=False, soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(render_message(message, Severity.WARNING), soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(render_message(message, Severity.ERROR), soft_wrap=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(render_message(message, Severity.SUCCESS), soft_wrap=True)
