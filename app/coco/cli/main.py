"""Main CLI application entry point.

Defines the Typer application and global options. Global options are
only read before the subcommand; everything from the subcommand on is
handed to the command parser as raw tokens, so ``--glob=*.py`` and a
file named ``-v.txt`` both reach it untouched.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from coco import __version__
from coco.core.errors import CocoError, EnvironmentUnavailableError
from coco.core.runner import CommandRunner, Outcome, OutcomeKind, build_session
from coco.core.settings import load_settings
from coco.utils.formatting import (
    err_console,
    print_entry,
    print_error,
    print_success,
    print_warning,
)

app = typer.Typer(
    name="coco",
    help="A small command-line file manager.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"coco version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route log records through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _current_directory() -> Path:
    """Get the working directory, which may have been removed under us."""
    try:
        return Path.cwd()
    except OSError as e:
        msg = f"The current directory could not be determined: {e}"
        raise EnvironmentUnavailableError(msg) from e


def _render(outcome: Outcome, quiet: bool) -> None:
    """Print a single outcome."""
    if outcome.kind == OutcomeKind.ENTRY:
        print_entry(outcome.message)
    elif outcome.kind == OutcomeKind.WARNING:
        print_warning(outcome.message)
    elif not quiet:
        print_success(outcome.message)


@app.command(
    context_settings={
        "allow_extra_args": True,
        "allow_interspersed_args": False,
        "ignore_unknown_options": True,
    },
)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress success messages.",
        ),
    ] = False,
) -> None:
    """coco - delete and list files.

    [bold]coco delete[/] TARGET... [--glob=PATTERN]  (alias: del)

    [bold]coco list[/] [TARGET...] [--glob=PATTERN] [--recursive] [--depth=N]  (alias: ls)
    """
    _configure_logging(verbose)

    program = ctx.find_root().info_name
    argv = [program, *ctx.args] if program else []

    try:
        settings = load_settings()
        session = build_session(argv, _current_directory())
        for outcome in CommandRunner(session, settings).run():
            _render(outcome, quiet)
    except CocoError as e:
        for warning in e.warnings:
            print_warning(warning)
        print_error(str(e))
        raise typer.Exit(code=1) from e
    except OSError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
