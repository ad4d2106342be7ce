"""
Pydantic model for the stored account credentials.
"""

from pydantic import BaseModel, Field, field_validator


class Credentials(BaseModel):
    """Account credentials and the preferred device, as stored on disk."""

    mail: str = ""
    password: str = Field("", repr=False)
    device: str | None = None

    @field_validator("mail", "password", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return "" if v is None else v

    @field_validator("device", mode="before")
    @classmethod
    def _blank_device_as_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def is_complete(self) -> bool:
        return bool(self.mail) and bool(self.password)
