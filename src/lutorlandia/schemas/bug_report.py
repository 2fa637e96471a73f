from typing import ClassVar

from pydantic import Field

from lutorlandia.domain.enums import BugPriority, BugStatus, GameMode

from .base import ApiModel, TimestampedRecord, UpdateModel, UtcDatetime


class BugReportCreate(ApiModel):
    """Public submission form. Any ``status`` sent by the caller is dropped."""

    username: str = Field(..., min_length=1, max_length=255)
    rank: str = Field(..., min_length=1, max_length=255)
    game_mode: GameMode
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    image_url: str | None = Field(None, max_length=255)
    priority: BugPriority


class BugReportUpdate(UpdateModel):
    """Operator edits. Status only moves through the transition endpoints."""

    nullable_fields: ClassVar[frozenset[str]] = frozenset({"image_url"})

    username: str | None = Field(None, min_length=1, max_length=255)
    rank: str | None = Field(None, min_length=1, max_length=255)
    game_mode: GameMode | None = None
    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    image_url: str | None = Field(None, max_length=255)
    priority: BugPriority | None = None


class BugReportRead(TimestampedRecord):
    username: str
    rank: str
    game_mode: GameMode
    title: str
    description: str
    image_url: str | None = None
    priority: BugPriority
    status: BugStatus
    validated_at: UtcDatetime | None = None
    resolved_at: UtcDatetime | None = None
