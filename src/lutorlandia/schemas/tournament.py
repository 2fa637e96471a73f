"""Schemas for tournaments and their child collections.

Podium, form-field and registration payloads take their tournament from the
URL, so the create bodies carry no ``tournament_id``.
"""

from typing import Any, ClassVar

from pydantic import Field

from lutorlandia.domain.enums import GameMode, RegistrationStatus, TournamentStatus

from .base import ApiModel, TimestampedRecord, UpdateModel


class TournamentCreate(ApiModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(...)
    date: str = Field(..., min_length=1, max_length=255)
    time: str = Field(..., min_length=1, max_length=255)
    game_mode: GameMode
    max_participants: int = Field(..., ge=1)
    prizes: str = Field(...)
    banner_image: str = Field(..., max_length=255)
    status: TournamentStatus = TournamentStatus.UPCOMING


class TournamentUpdate(UpdateModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    date: str | None = Field(None, min_length=1, max_length=255)
    time: str | None = Field(None, min_length=1, max_length=255)
    game_mode: GameMode | None = None
    max_participants: int | None = Field(None, ge=1)
    prizes: str | None = None
    banner_image: str | None = Field(None, max_length=255)
    status: TournamentStatus | None = None


class TournamentRead(TimestampedRecord):
    title: str
    description: str
    date: str
    time: str
    game_mode: GameMode
    max_participants: int
    prizes: str
    banner_image: str
    status: TournamentStatus


class PodiumCreate(ApiModel):
    player_username: str = Field(..., min_length=1, max_length=255)
    position: int = Field(..., ge=1)
    prize: str = Field(..., max_length=255)
    image_url: str | None = Field(None, max_length=255)


class PodiumUpdate(UpdateModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"image_url"})

    player_username: str | None = Field(None, min_length=1, max_length=255)
    position: int | None = Field(None, ge=1)
    prize: str | None = Field(None, max_length=255)
    image_url: str | None = Field(None, max_length=255)


class PodiumRead(TimestampedRecord):
    tournament_id: int
    player_username: str
    position: int
    prize: str
    image_url: str | None = None


class FormFieldCreate(ApiModel):
    label: str = Field(..., min_length=1, max_length=255)
    field_type: str = Field(..., min_length=1, max_length=50, description="text, select, ...")
    required: bool = True
    options: str | None = Field(None, description="Choices for select-style fields")


class FormFieldUpdate(UpdateModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"options"})

    label: str | None = Field(None, min_length=1, max_length=255)
    field_type: str | None = Field(None, min_length=1, max_length=50)
    required: bool | None = None
    options: str | None = None
    order: int | None = Field(None, ge=0)


class FormFieldRead(TimestampedRecord):
    tournament_id: int
    label: str
    field_type: str
    required: bool
    options: str | None = None
    order: int


class RegistrationCreate(ApiModel):
    player_username: str = Field(..., min_length=1, max_length=255)
    form_data: dict[str, Any] = Field(default_factory=dict)


class RegistrationRead(TimestampedRecord):
    tournament_id: int
    player_username: str
    form_data: dict[str, Any]
    status: RegistrationStatus
