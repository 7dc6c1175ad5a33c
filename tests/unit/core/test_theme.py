"""Unit tests for theme module.

Tests for color validation and Rich theme generation.
"""

import pytest
from rich.theme import Theme
from weight.core.theme import ThemeColors, get_rich_theme, get_theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.text == "#ffffff"
        assert colors.success == "#03b971"
        assert colors.error == "#f53263"

    def test_valid_hex_colors(self) -> None:
        """ThemeColors accepts valid hex color codes."""
        colors = ThemeColors(path="#abc", total="#123456")
        assert colors.path == "#abc"
        assert colors.total == "#123456"

    def test_invalid_hex_no_hash(self) -> None:
        """ThemeColors rejects colors without # prefix."""
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(text="ffffff")

    def test_invalid_hex_wrong_length(self) -> None:
        """ThemeColors rejects colors with wrong length."""
        with pytest.raises(ValueError, match="must be #RGB or #RRGGBB"):
            ThemeColors(size="#ff")

    def test_invalid_hex_chars(self) -> None:
        """ThemeColors rejects non-hex digits."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(count="#gggggg")

    def test_defaults_are_validated(self) -> None:
        """A bad built-in color fails when the model is constructed."""

        class _BrokenColors(ThemeColors):
            text: str = "white"

        with pytest.raises(ValueError, match="must start with '#'"):
            _BrokenColors()

    def test_unknown_color_rejected(self) -> None:
        """Unknown color names are rejected."""
        with pytest.raises(ValueError):
            ThemeColors(sparkle="#ffffff")  # type: ignore[call-arg]


class TestRichTheme:
    """Tests for Rich theme generation."""

    def test_report_styles_present(self) -> None:
        """The theme defines every style the report uses."""
        theme = get_rich_theme()
        for name in ("path", "size", "count", "total", "header", "warning", "error", "info"):
            assert name in theme.styles

    def test_custom_colors_applied(self) -> None:
        """Custom colors flow into the generated styles."""
        theme = get_rich_theme(ThemeColors(path="#112233"))
        assert theme.styles["path"].color is not None
        assert theme.styles["path"].color.triplet.hex == "#112233"

    def test_get_theme_is_cached(self) -> None:
        """get_theme returns the same instance on repeated calls."""
        assert isinstance(get_theme(), Theme)
        assert get_theme() is get_theme()
