"""
Structured logging for session events.
Renders events as '[event] key=value' records on stderr through a Rich console handler.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "jdcli"

# Never rendered, even at debug level
SENSITIVE_KEYS = frozenset({"password"})


def setup_logging(debug: bool = False, console: Console | None = None) -> logging.Logger:
    """
    Configures the application logger.

    Args:
        debug: Log at DEBUG level when set, INFO otherwise.
        console: Console to render records to (a stderr console by default).

    Returns:
        The configured application logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        show_level=debug,
        show_time=debug,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False
    return logger


class StructuredLogger:
    """
    Logger that emits events with key/value context.

    Usage:
        logger = StructuredLogger("jdcli.api")
        logger.debug("device_resolved", name="home-nas", source="argument")
    """

    def __init__(self, name: str = LOGGER_NAME):
        self.name = name
        self._logger = logging.getLogger(name)

    def _format_message(self, event: str, **context: Any) -> str:
        parts = [f"[{event}]"]
        for key, value in context.items():
            if key in SENSITIVE_KEYS:
                value = "[hidden]"
            parts.append(f"{key}={value}")
        return " ".join(parts)

    def debug(self, event: str, **context: Any) -> None:
        self._logger.debug(self._format_message(event, **context))

    def warning(self, event: str, **context: Any) -> None:
        self._logger.warning(self._format_message(event, **context))


class SessionLogger:
    """Specialized logger for remote session events."""

    def __init__(self, logger: StructuredLogger):
        self.logger = logger

    def connecting(self, mail: str):
        """Log connection attempt."""
        self.logger.debug("connecting", mail=mail)

    def connected(self, mail: str, devices: int):
        """Log connection established."""
        self.logger.debug("connected", mail=mail, devices=devices)

    def device_resolved(self, name: str, source: str):
        """Log which device a command will run against and why."""
        self.logger.debug("device_resolved", name=name, source=source)

    def disconnected(self):
        """Log connection closed."""
        self.logger.debug("disconnected")

    def disconnect_failed(self, error: str):
        """Log a failure to close the connection; never fatal."""
        self.logger.warning("disconnect_failed", error=error)


def create_session_logger(name: str = LOGGER_NAME) -> SessionLogger:
    """Create a session logger bound to the application logger hierarchy."""
    return SessionLogger(StructuredLogger(name))
