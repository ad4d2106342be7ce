"""
Data Models Layer.

This package contains Pydantic models for the stored credentials, the
snapshots returned by the MyJDownloader API, and the build information.
"""

from .build_info import BuildInfo
from .config import Credentials
from .remote import CollectorLink, DeviceInfo, DownloadLink, DownloadPackage

__all__ = [
    "BuildInfo",
    "CollectorLink",
    "Credentials",
    "DeviceInfo",
    "DownloadLink",
    "DownloadPackage",
]
