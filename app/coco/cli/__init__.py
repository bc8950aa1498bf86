"""CLI package for coco.

This package contains the Typer application.
"""

from coco.cli.main import app

__all__ = ["app"]
