from typing import ClassVar

from pydantic import Field

from .base import ApiModel, TimestampedRecord, UpdateModel


class AnnouncementCreate(ApiModel):
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., description="Rich HTML body")
    date: str = Field(..., min_length=1, max_length=255)
    type: str = Field(..., min_length=1, max_length=255, description="EVENTO/ACTUALIZACIÓN/TIENDA")
    image: str = Field(..., max_length=255)
    time: str | None = Field(None, max_length=255)
    link: str | None = Field(None, max_length=255)


class AnnouncementUpdate(UpdateModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"time", "link"})

    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = None
    date: str | None = Field(None, min_length=1, max_length=255)
    type: str | None = Field(None, min_length=1, max_length=255)
    image: str | None = Field(None, max_length=255)
    time: str | None = Field(None, max_length=255)
    link: str | None = Field(None, max_length=255)


class AnnouncementRead(TimestampedRecord):
    title: str
    content: str
    date: str
    type: str
    image: str
    time: str | None = None
    link: str | None = None
