"""Unit tests for formatting utilities."""

import os
import re
from pathlib import Path

import pytest
from weight.utils.formatting import SIZE_UNITS, display_path, format_size

_RENDERED = re.compile(r"^(\d+(?:\.\d{2})?) (B|KB|MB|GB|TB)$")


def _parse(rendered: str) -> tuple[float, int]:
    """Parse a rendered size back into its value and unit exponent."""
    match = _RENDERED.match(rendered)
    assert match is not None, rendered
    return float(match.group(1)), SIZE_UNITS.index(match.group(2))


class TestFormatSize:
    """Tests for format_size."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0 B"),
            (1, "1 B"),
            (1023, "1023 B"),
            (1024, "1.00 KB"),
            (1536, "1.50 KB"),
            (1024**2, "1.00 MB"),
            (5 * 1024**3 + 1024**3 // 4, "5.25 GB"),
            (1024**4, "1.00 TB"),
        ],
    )
    def test_known_values(self, size: int, expected: str) -> None:
        """Sizes render in the largest unit keeping the value under 1024."""
        assert format_size(size) == expected

    def test_terabytes_are_the_largest_unit(self) -> None:
        """Sizes beyond 1024 TB stay in TB."""
        assert format_size(2048 * 1024**4) == "2048.00 TB"

    def test_negative_size(self) -> None:
        """Negative sizes are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            format_size(-1)

    @pytest.mark.parametrize("size", [0, 7, 1000, 4097, 123_456_789, 9_876_543_210_123])
    def test_rendered_value_recovers_scaled_size(self, size: int) -> None:
        """Parsing the rendering recovers size / 1024**k within 0.01."""
        value, exponent = _parse(format_size(size))

        assert abs(value - size / 1024**exponent) <= 0.01
        if exponent < len(SIZE_UNITS) - 1:
            assert size / 1024**exponent < 1024


class TestDisplayPath:
    """Tests for display_path."""

    def test_plain_path_unchanged(self) -> None:
        """Valid UTF-8 names render as they are."""
        assert display_path(Path("docs/ünïcode.txt")) == "docs/ünïcode.txt"

    def test_undecodable_bytes_replaced(self) -> None:
        """Bytes that are not UTF-8 become U+FFFD and the result encodes cleanly."""
        rendered = display_path(Path(os.fsdecode(b"bad\xff.txt")))

        assert rendered == "bad�.txt"
        assert rendered.encode("utf-8") == b"bad\xef\xbf\xbd.txt"

    def test_accepts_strings(self) -> None:
        """Plain strings such as patterns are accepted too."""
        assert display_path(os.fsdecode(b"*\xfe.png")) == "*�.png"
