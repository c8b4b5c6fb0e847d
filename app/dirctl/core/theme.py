"""Color theme for listings and messages.

The formatter only emits semantic style names (``dired.*``). This module
resolves them to colors: defaults ship in ``dirctl/data/theme.toml``,
and ``~/.config/dirctl/theme.toml`` may override any subset of them.
"""

import logging
import re
import sys
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from dirctl.core.config import load_toml_section
from dirctl.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


class ThemeColors(BaseModel):
    """Hex colors (#RGB or #RRGGBB) for every themed element."""

    model_config = ConfigDict(extra="forbid")

    # Messages
    text: str = "#ffffff"
    muted: str = "#b2bec3"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    # Listing columns
    dim_text: str = "#7f8c8d"
    username: str = "#69B9A1"
    month: str = "#0e8ac8"
    day: str = "#0ec1c8"
    time: str = "#b2bec3"

    # Names
    directory_name: str = "#0e8ac8"
    dotfile: str = "#7f8c8d"
    file_name: str = "#ffffff"

    # Size magnitudes
    size_bytes: str = "#b2bec3"
    size_kilo: str = "#03b971"
    size_mega: str = "#faf870"
    size_giga: str = "#f5b332"
    size_huge: str = "#f53263"
    size_unit: str = "#226666"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        if not isinstance(v, str):
            msg = f"{info.field_name}: color must be a string"
            raise ValueError(msg)
        color = v.strip()
        if not color.startswith("#"):
            msg = f"{info.field_name}: color must start with '#'"
            raise ValueError(msg)
        if len(color) not in (4, 7):
            msg = f"{info.field_name}: color must be #RGB or #RRGGBB format"
            raise ValueError(msg)
        if not _HEX_COLOR.fullmatch(color):
            msg = f"{info.field_name}: invalid hex color '{color}'"
            raise ValueError(msg)
        return color


# Rich style name -> (ThemeColors field, bold)
_STYLE_FIELDS: dict[str, tuple[str, bool]] = {
    "text": ("text", False),
    "muted": ("muted", False),
    "dim": ("muted", False),
    "success": ("success", False),
    "warning": ("warning", False),
    "error": ("error", True),
    "info": ("info", False),
    "dired.normal": ("text", False),
    "dired.dim": ("dim_text", False),
    "dired.username": ("username", False),
    "dired.month": ("month", False),
    "dired.day": ("day", False),
    "dired.time": ("time", False),
    "dired.directory": ("directory_name", True),
    "dired.dotfile": ("dotfile", False),
    "dired.file": ("file_name", False),
    "dired.size.bytes": ("size_bytes", False),
    "dired.size.kilo": ("size_kilo", False),
    "dired.size.mega": ("size_mega", False),
    "dired.size.giga": ("size_giga", False),
    "dired.size.huge": ("size_huge", True),
    "dired.size_unit": ("size_unit", False),
}


def get_bundled_theme_path() -> Path:
    """Return the path of the theme file shipped in ``dirctl.data``."""
    return Path(str(resources.files("dirctl.data").joinpath("theme.toml")))


def _color_table(path: Path) -> dict[str, str] | None:
    table = load_toml_section(path, "colors")
    if table is None:
        return None
    return {key: value for key, value in table.items() if isinstance(value, str)}


def load_theme(user_path: Path | None = None) -> ThemeColors:
    """Load the bundled colors and apply user overrides on top.

    Args:
        user_path: Override file to read instead of ~/.config/dirctl/theme.toml.

    Returns:
        Merged ThemeColors. An invalid merge falls back to the defaults.
    """
    colors = _color_table(get_bundled_theme_path())
    if colors is None:
        logger.error("Bundled theme is missing or unreadable, using built-in colors")
        colors = {}

    path = user_path if user_path is not None else get_user_theme_path()
    overrides = _color_table(path)
    if overrides:
        logger.debug("Applying theme overrides from %s", path)
        colors.update(overrides)

    try:
        return ThemeColors(**colors)
    except ValidationError as e:
        logger.warning("Theme validation failed, using defaults: %s", e)
        print(f"Warning: Invalid theme configuration in {path}: {e}", file=sys.stderr)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme for the given colors (loaded if omitted)."""
    colors = colors or load_theme()
    styles: dict[str, str] = {}
    for style, (field, bold) in _STYLE_FIELDS.items():
        color = getattr(colors, field)
        styles[style] = f"bold {color}" if bold else color
    return Theme(styles)


@lru_cache(maxsize=1)
def get_theme() -> Theme:
    """Return the process-wide Rich theme, built on first use."""
    return get_rich_theme()
