from pydantic import Field

from .base import ApiModel, RecordModel


class LoginRequest(ApiModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserRecord(RecordModel):
    """Stored operator account. Never returned over HTTP."""

    username: str
    password_hash: str = Field(..., repr=False)


class UserRead(RecordModel):
    username: str
