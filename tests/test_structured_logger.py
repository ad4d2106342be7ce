"""
Tests for structured logging.
"""

import logging

from jdcli.utils.structured_logger import StructuredLogger, setup_logging


class TestStructuredLogger:
    """Test event rendering and log routing."""

    def test_records_go_to_stderr(self, capsys):
        setup_logging(debug=True)
        StructuredLogger().debug("connecting", mail="me@example.com")
        captured = capsys.readouterr()
        assert "[connecting] mail=me@example.com" in captured.err
        assert captured.out == ""

    def test_password_is_hidden(self, capsys):
        setup_logging(debug=True)
        StructuredLogger().warning("login", password="hunter2")
        captured = capsys.readouterr()
        assert "password=[hidden]" in captured.err
        assert "hunter2" not in captured.err

    def test_debug_suppressed_at_info(self, capsys):
        logger = setup_logging(debug=False)
        assert logger.level == logging.INFO
        StructuredLogger().debug("connected", devices=2)
        StructuredLogger().warning("disconnect_failed", error="gone")
        err = capsys.readouterr().err
        assert "[connected]" not in err
        assert "[disconnect_failed] error=gone" in err
