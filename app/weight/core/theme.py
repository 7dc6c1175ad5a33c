"""Theme management for weight CLI.

Colors are fixed in code; weight reads no configuration files.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from rich.theme import Theme


class ThemeColors(BaseModel):
    """Color configuration for weight CLI.

    All colors must be valid hex codes (#RRGGBB or #RGB). Defaults are
    validated too, so every theme built at startup has been checked.
    """

    model_config = ConfigDict(extra="forbid", validate_default=True)

    # Base colors
    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#0ec1c8"

    # Semantic colors
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    # Report colors
    path: str = "#5c9ded"
    size: str = "#03b971"
    count: str = "#0ec1c8"
    total: str = "#d44ebc"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        """Validate that all color values are valid hex codes."""
        if not isinstance(v, str):
            msg = f"{info.field_name}: color must be a string"
            raise ValueError(msg)
        color = v.strip()
        if not color.startswith("#"):
            msg = f"{info.field_name}: color must start with '#'"
            raise ValueError(msg)
        color_part = color[1:]
        if len(color_part) not in (3, 6):
            msg = f"{info.field_name}: color must be #RGB or #RRGGBB format"
            raise ValueError(msg)
        try:
            int(color_part, 16)
        except ValueError:
            msg = f"{info.field_name}: invalid hex color '{color}'"
            raise ValueError(msg) from None
        return color


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Convert ThemeColors to a Rich Theme.

    Args:
        colors: ThemeColors instance to convert. Defaults to ThemeColors().

    Returns:
        Rich Theme instance configured with the color scheme.
    """
    if colors is None:
        colors = ThemeColors()

    styles: dict[str, str] = {
        "text": colors.text,
        "muted": colors.muted,
        "header": f"bold {colors.header}",
        "success": colors.success,
        "warning": f"bold {colors.warning}",
        "error": f"bold {colors.error}",
        "info": colors.info,
        "path": colors.path,
        "size": colors.size,
        "count": f"bold {colors.count}",
        "total": f"bold {colors.total}",
        # Debug trace markers
        "added": colors.success,
        "skipped": colors.error,
        "hint.good": colors.success,
        "hint.bad": f"strike {colors.error}",
    }

    return Theme(styles)


# Module-level cached theme instance
_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Get the Rich theme, building and caching it if necessary.

    Returns:
        Cached Rich Theme instance.
    """
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme
