"""
Read-only snapshots of the entities returned by the MyJDownloader API.

Every remote field is optional: the API omits keys it was not asked for or
has no value for, and the formatters render missing values as 'N/A'.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RemoteModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def parse_list(cls, items: list[dict[str, Any]] | None) -> list["RemoteModel"]:
        return [cls.model_validate(item) for item in items or []]

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class DeviceInfo(RemoteModel):
    """A device registered with the account."""

    id: str | None = None
    type: str | None = None
    name: str | None = None
    status: str | None = None


class DownloadLink(RemoteModel):
    """A link in the download list."""

    uuid: int | None = None
    name: str | None = None
    url: str | None = None
    status: str | None = None
    bytes_total: int | None = Field(None, alias="bytesTotal")
    bytes_loaded: int | None = Field(None, alias="bytesLoaded")
    eta: int | None = None
    speed: float | None = None
    package_uuid: int | None = Field(None, alias="packageUUID")
    finished: bool | None = None


class DownloadPackage(RemoteModel):
    """A package in the download list."""

    uuid: int | None = None
    name: str | None = None
    status: str | None = None
    save_to: str | None = Field(None, alias="saveTo")
    bytes_total: int | None = Field(None, alias="bytesTotal")
    bytes_loaded: int | None = Field(None, alias="bytesLoaded")
    eta: int | None = None
    speed: float | None = None


class CollectorLink(RemoteModel):
    """A link waiting in the link collector."""

    uuid: int | None = None
    name: str | None = None
    url: str | None = None
    status: str | None = None
    availability: str | None = None
    bytes_total: int | None = Field(None, alias="bytesTotal")
    package_uuid: int | None = Field(None, alias="packageUUID")
