from pydantic import Field

from lutorlandia.domain.enums import StaffRole

from .base import ApiModel, TimestampedRecord, UpdateModel


class StaffMemberCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=255, description="In-game name")
    role: str = Field(..., min_length=1, max_length=255, description="Display title")
    role_label: StaffRole = Field(..., description="Role badge")
    description: str = Field(..., description="Short biography")
    avatar: str = Field(..., min_length=1, max_length=255, description="Head render URL")


class StaffMemberUpdate(UpdateModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    role: str | None = Field(None, min_length=1, max_length=255)
    role_label: StaffRole | None = None
    description: str | None = None
    avatar: str | None = Field(None, min_length=1, max_length=255)


class StaffMemberRead(TimestampedRecord):
    name: str
    role: str
    role_label: StaffRole
    description: str
    avatar: str
