"""
Immutable description of the running build, reported by `jdcli version`.
"""

import platform
import sys
from importlib.metadata import PackageNotFoundError, version

from pydantic import BaseModel, ConfigDict

from jdcli import __version__

DISTRIBUTION_NAME = "jdcli"


class BuildInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: str
    python_version: str
    platform: str
    arch: str

    @classmethod
    def collect(cls) -> "BuildInfo":
        """Builds the info from installed package metadata and the interpreter."""
        try:
            pkg_version = version(DISTRIBUTION_NAME)
        except PackageNotFoundError:
            pkg_version = __version__
        return cls(
            version=pkg_version,
            python_version=platform.python_version(),
            platform=sys.platform,
            arch=platform.machine() or "unknown",
        )
