"""User settings for coco.

Settings are optional and live in ``~/.config/coco/config.toml``::

    [list]
    sort_entries = true

    [delete]
    protected_paths = ["~/projects", "/srv/*"]
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from coco.core.errors import SettingsError
from coco.core.paths import get_settings_path

logger = logging.getLogger(__name__)


class ListSettings(BaseModel):
    """Settings for the list command.

    Attributes:
        sort_entries: Sort sibling entries by name instead of keeping
            directory-read order.
    """

    model_config = ConfigDict(extra="forbid")

    sort_entries: bool = True


class DeleteSettings(BaseModel):
    """Settings for the delete command.

    Attributes:
        protected_paths: Glob patterns for paths that must never be deleted,
            in addition to the filesystem root and the home directory.
    """

    model_config = ConfigDict(extra="forbid")

    protected_paths: Annotated[
        list[str],
        Field(description="Extra protected path patterns (~ expands to home)"),
    ] = []


class CocoSettings(BaseModel):
    """Top-level coco settings."""

    model_config = ConfigDict(extra="forbid")

    list: ListSettings = ListSettings()
    delete: DeleteSettings = DeleteSettings()


def load_settings(path: Path | None = None) -> CocoSettings:
    """Load settings from a TOML file.

    A missing file is not an error: defaults are returned.

    Args:
        path: Path to the settings file. If None, uses the default settings path.

    Returns:
        Validated CocoSettings object.

    Raises:
        SettingsError: If the file cannot be read, is not valid TOML,
            or doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        logger.debug("No settings file at %s, using defaults", settings_path)
        return CocoSettings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings {settings_path}: {e}") from e

    try:
        return CocoSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e
