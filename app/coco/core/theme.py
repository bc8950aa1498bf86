"""Message colors.

Each severity gets a text style (``error``) and an inverted label style
(``label.error``) used by :func:`coco.utils.formatting.render_message`.
Any color can be overridden in ``~/.config/coco/theme.toml``::

    [colors]
    error = "red"
    label = "#000000"
"""

import logging
import tomllib
from functools import cache

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.color import Color, ColorParseError
from rich.theme import Theme

from coco.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

SEVERITIES = ("success", "warning", "error", "info")


class ThemeColors(BaseModel):
    """Severity colors plus the text color of labels.

    Values are anything Rich can parse: names, ``#rrggbb``, ``rgb(...)``.
    """

    model_config = ConfigDict(extra="forbid")

    label: str = "#000000"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    @field_validator("*")
    @classmethod
    def check_color(cls, value: str) -> str:
        try:
            Color.parse(value)
        except ColorParseError as e:
            raise ValueError(str(e)) from e
        return value


def load_theme() -> ThemeColors:
    """Load colors, applying the user's overrides if there are any.

    A broken theme file is logged and ignored.
    """
    path = get_user_theme_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return ThemeColors()
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return ThemeColors()

    try:
        return ThemeColors.model_validate(data.get("colors", {}))
    except ValidationError as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return ThemeColors()


def build_theme(colors: ThemeColors) -> Theme:
    """Turn colors into the Rich styles the message renderer refers to."""
    styles: dict[str, str] = {}
    for severity in SEVERITIES:
        color = getattr(colors, severity)
        styles[severity] = color
        styles[f"label.{severity}"] = f"bold {colors.label} on {color}"
    return Theme(styles)


@cache
def get_theme() -> Theme:
    """Get the Rich theme shared by the consoles."""
    return build_theme(load_theme())
