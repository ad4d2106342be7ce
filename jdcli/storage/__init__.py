"""
Storage Layer.

This package handles the only persisted state, the credentials file.
"""

from .config_manager import ConfigManager, resolve_config_path

__all__ = ["ConfigManager", "resolve_config_path"]
