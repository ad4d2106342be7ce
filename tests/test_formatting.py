"""
Tests for the human-readable formatters.
"""

import pytest

from jdcli.utils.formatting import compress_url, format_eta, format_size, format_speed


class TestFormatSize:
    """Test format_size."""

    def test_none(self):
        assert format_size(None) == "N/A"

    def test_bytes(self):
        assert format_size(0) == "0 B"
        assert format_size(500) == "500 B"
        assert format_size(1023) == "1023 B"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1024, "1.0 KiB"),
            (1536, "1.5 KiB"),
            (5 * 1024**2, "5.0 MiB"),
            (3 * 1024**3 // 2, "1.5 GiB"),
            (2 * 1024**4, "2.0 TiB"),
        ],
    )
    def test_binary_prefixes(self, value, expected):
        assert format_size(value) == expected


class TestFormatSpeed:
    """Test format_speed."""

    def test_speeds(self):
        assert format_speed(1000.0) == "1000 B/s"
        assert format_speed(10000.0) == "9.8 KiB/s"
        assert format_speed(1000000.0) == "976.6 KiB/s"
        assert format_speed(100000000.0) == "95.4 MiB/s"

    def test_truncates_fraction(self):
        assert format_speed(1023.9) == "1023 B/s"

    def test_none(self):
        assert format_speed(None) == "N/A"


class TestFormatEta:
    """Test format_eta."""

    def test_under_a_day(self):
        assert format_eta(1000) == "00:16:40"
        assert format_eta(0) == "00:00:00"

    def test_days_prefix(self):
        assert format_eta(768754) == "8 days 21:32:34"

    def test_none(self):
        assert format_eta(None) == "N/A"

    def test_unknown_remaining_time(self):
        """The remote reports -1 when the ETA is unknown."""
        assert format_eta(-1) == "N/A"


class TestCompressUrl:
    """Test compress_url."""

    def test_short_url_unchanged(self):
        url = "https://example.com/file.zip"
        assert compress_url(url) == url

    def test_exactly_80_unchanged(self):
        url = "https://example.com/" + "a" * 60
        assert len(url) == 80
        assert compress_url(url) == url

    def test_long_url_truncated(self):
        url = "https://example.com/" + "a" * 100
        assert compress_url(url) == url[:80]
        assert len(compress_url(url)) == 80
