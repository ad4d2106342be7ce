"""
Tests for reading link files.
"""

import pytest

from jdcli.exceptions import ArgumentValidationError
from jdcli.utils.links_file import parse_links_file


class TestParseLinksFile:
    """Test parse_links_file."""

    def test_skips_blank_and_comment_lines(self, tmp_path):
        path = tmp_path / "links.txt"
        path.write_text(
            "https://example.com/a\n"
            "\n"
            "   \n"
            "; a comment\n"
            "  https://example.com/b  \n",
            encoding="utf-8",
        )
        assert parse_links_file(path) == ["https://example.com/a", "https://example.com/b"]

    def test_skips_unparsable_lines(self, tmp_path):
        path = tmp_path / "links.txt"
        path.write_text("http://[::1\nhttps://example.com/c\n", encoding="utf-8")
        assert parse_links_file(path) == ["https://example.com/c"]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "links.txt"
        path.write_text("", encoding="utf-8")
        assert parse_links_file(path) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(ArgumentValidationError):
            parse_links_file(tmp_path / "missing.txt")
