"""Tests for the byte-size formatter."""

import pytest

from aelist.units import format_bytes


class TestFormatBytes:
    """Test format_bytes function."""

    @pytest.mark.parametrize(
        "size, expected",
        [
            (0, "0.00 B"),
            (1023, "1023.00 B"),
            (1024, "1.00 KiB"),
            (1536, "1.50 KiB"),
            (1024**2, "1.00 MiB"),
            (5 * 1024**3, "5.00 GiB"),
            (1024**6, "1.00 EiB"),
        ],
    )
    def test_known_values(self, size, expected):
        """Test binary unit boundaries."""
        assert format_bytes(size) == expected

    def test_unit_ceiling(self):
        """Test values beyond EiB are still reported in EiB."""
        assert format_bytes(1024**7) == "1024.00 EiB"
