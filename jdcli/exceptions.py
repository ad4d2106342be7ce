"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class JdCliError(Exception):
    """Base exception for all application-specific errors."""


class ConfigurationError(JdCliError):
    """Raised when the credentials file is missing, unreadable or incomplete."""


class RemoteConnectionError(JdCliError):
    """Raised when a connection to the MyJDownloader service cannot be opened."""


class NoDeviceError(JdCliError):
    """Raised when the account has no registered device to pick from."""


class DeviceNotFoundError(JdCliError):
    """Raised when the requested device is not registered with the account."""


class ArgumentValidationError(JdCliError):
    """Raised when a command is missing required input, before any remote call."""
