"""
Pytest configuration and fixtures for jdcli tests.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
import yaml

from jdcli.models.config import Credentials

DEVICES = [
    {"id": "dev-1", "type": "jd", "name": "home-nas", "status": "ONLINE"},
    {"id": "dev-2", "type": "jd", "name": "office", "status": "ONLINE"},
]


@pytest.fixture
def credentials() -> Credentials:
    """Provide complete credentials without a preferred device."""
    return Credentials(mail="user@example.com", password="secret")


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Write a credentials file and point JD_CONFIG at it."""
    path = tmp_path / "jdconfig.yaml"
    path.write_text(
        yaml.safe_dump({"mail": "user@example.com", "password": "secret", "device": None}),
        encoding="utf-8",
    )
    monkeypatch.setenv("JD_CONFIG", str(path))
    return path


@pytest.fixture
def mock_client() -> MagicMock:
    """Provide a connected-looking Myjdapi client with two devices."""
    client = MagicMock(name="Myjdapi()")
    client.list_devices.return_value = list(DEVICES)
    return client


@pytest.fixture
def mock_device(mock_client: MagicMock) -> MagicMock:
    """The device handle returned by the mock client."""
    return mock_client.get_device.return_value


@pytest.fixture
def patched_myjdapi(monkeypatch: pytest.MonkeyPatch, mock_client: MagicMock) -> MagicMock:
    """Replace the Myjdapi class used by the session helper."""
    factory = MagicMock(name="Myjdapi", return_value=mock_client)
    monkeypatch.setattr("jdcli.api.session.Myjdapi", factory)
    return factory
