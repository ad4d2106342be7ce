"""
Tests for the data models.
"""

import pytest
from pydantic import ValidationError

from jdcli.models import BuildInfo, CollectorLink, Credentials, DownloadLink, DownloadPackage


class TestCredentials:
    """Test Credentials."""

    def test_complete(self):
        assert Credentials(mail="a@b.c", password="pw").is_complete

    def test_incomplete(self):
        assert not Credentials(mail="a@b.c").is_complete
        assert not Credentials(mail=None, password="pw").is_complete

    def test_blank_device_is_none(self):
        assert Credentials(mail="a", password="b", device="  ").device is None

    def test_password_not_in_repr(self):
        assert "secret" not in repr(Credentials(mail="a@b.c", password="secret"))


class TestRemoteModels:
    """Test the remote snapshot models."""

    def test_download_link_aliases(self):
        link = DownloadLink.model_validate(
            {
                "uuid": 1,
                "url": "https://example.com/a",
                "status": "Finished",
                "bytesTotal": 1536,
                "packageUUID": 9,
                "unknownField": True,
            }
        )
        assert link.bytes_total == 1536
        assert link.package_uuid == 9
        assert link.eta is None
        assert link.speed is None

    def test_to_json_uses_remote_names(self):
        pkg = DownloadPackage(uuid=2, name="pkg", save_to="/data", bytes_total=10)
        assert pkg.to_json() == {
            "uuid": 2,
            "name": "pkg",
            "saveTo": "/data",
            "bytesTotal": 10,
        }

    def test_parse_list(self):
        links = CollectorLink.parse_list([{"uuid": 1}, {"uuid": 2, "name": "b"}])
        assert [link.uuid for link in links] == [1, 2]
        assert CollectorLink.parse_list(None) == []


class TestBuildInfo:
    """Test BuildInfo."""

    def test_collect(self):
        info = BuildInfo.collect()
        assert info.version
        assert info.python_version
        assert info.platform

    def test_frozen(self):
        info = BuildInfo.collect()
        with pytest.raises(ValidationError):
            info.version = "changed"
