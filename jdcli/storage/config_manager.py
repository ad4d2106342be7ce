"""
Manages loading and saving of the YAML credentials file.
"""

import logging
import os
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from jdcli.exceptions import ConfigurationError
from jdcli.models.config import Credentials

log = logging.getLogger(__name__)

CONFIG_ENV_VAR = "JD_CONFIG"
CONFIG_FILE_NAME = "jdconfig.yaml"
CONFIG_FILE_MODE = 0o600

LOGIN_HINT = "Use 'jdcli login' to populate them."


def get_config_dir() -> Path:
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    elif sys.platform == "darwin":
        base_dir = Path("~/Library/Application Support")
    else:
        base_dir = Path(os.getenv("XDG_CONFIG_HOME") or "~/.config")
    return base_dir.expanduser()


def resolve_config_path() -> Path:
    """Returns the credentials file path, honouring the JD_CONFIG override."""
    override = os.getenv(CONFIG_ENV_VAR)
    if override is not None:
        return Path(override)
    return get_config_dir() / CONFIG_FILE_NAME


class ConfigManager:
    """Handles all operations related to the application's credentials file."""

    def __init__(self, config_file_path: Path | None = None):
        self.config_file_path = config_file_path or resolve_config_path()

    def load(self) -> Credentials:
        """
        Loads and validates the stored credentials.

        Returns:
            The validated Credentials.

        Raises:
            ConfigurationError: If the file is missing, cannot be parsed, or does
            not contain both mail and password.
        """
        try:
            raw = self.config_file_path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ConfigurationError(
                f"Configuration file not found at '{self.config_file_path}'. "
                f"{LOGIN_HINT}"
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file '{self.config_file_path}': {e}. "
                f"{LOGIN_HINT}"
            ) from e

        try:
            data = yaml.safe_load(raw) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Error parsing configuration file: {e}. {LOGIN_HINT}"
            ) from e
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file '{self.config_file_path}' is malformed. "
                f"{LOGIN_HINT}"
            )

        try:
            credentials = Credentials.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Configuration validation failed:\n{e}\n{LOGIN_HINT}"
            ) from e

        if not credentials.is_complete:
            raise ConfigurationError(f"Credentials are not specified. {LOGIN_HINT}")

        log.debug(f"Loaded credentials for {credentials.mail} from {self.config_file_path}")
        return credentials

    def save(self, credentials: Credentials) -> None:
        """
        Writes the credentials file, readable by the owner only.

        Raises:
            ConfigurationError: If the credentials cannot be serialized or written.
        """
        try:
            content = yaml.safe_dump(
                credentials.model_dump(), default_flow_style=False, sort_keys=False
            )
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to serialize configuration: {e}") from e

        try:
            self.config_file_path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(
                self.config_file_path,
                os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
                CONFIG_FILE_MODE,
            )
            with os.fdopen(fd, "w", encoding="utf-8") as config_file:
                config_file.write(content)
            # O_CREAT's mode does not apply to a file that already exists
            os.chmod(self.config_file_path, CONFIG_FILE_MODE)
        except OSError as e:
            raise ConfigurationError(f"Failed to save configuration file: {e}") from e

        log.debug(f"Saved credentials to {self.config_file_path}")
