"""
MyJDownloader API Layer.

This package owns the connection to the MyJDownloader service: it opens
the session, resolves the target device and guarantees the session is
closed again.
"""

from .session import DeviceSession, pick_device, verify_credentials, with_device

__all__ = ["DeviceSession", "pick_device", "verify_credentials", "with_device"]
