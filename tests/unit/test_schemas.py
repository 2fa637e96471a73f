"""Tests for request and record schemas."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from lutorlandia.domain import BugStatus
from lutorlandia.schemas import (
    AnnouncementUpdate,
    BugReportCreate,
    BugReportRead,
    PodiumUpdate,
    ServerStatusCreate,
    StaffMemberCreate,
    StaffMemberUpdate,
    UserRead,
    UserRecord,
)


class TestWireFormat:
    def test_accepts_camel_case_and_snake_case(self):
        camel = BugReportCreate.model_validate(
            {
                "username": "Steve",
                "rank": "VIP",
                "gameMode": "SURVIVAL",
                "title": "Door glitch",
                "description": "Doors close by themselves",
                "imageUrl": None,
                "priority": "MEDIA",
            }
        )
        snake = BugReportCreate(
            username="Steve",
            rank="VIP",
            game_mode="SURVIVAL",
            title="Door glitch",
            description="Doors close by themselves",
            priority="MEDIA",
        )
        assert camel == snake

    def test_records_dump_camel_case(self):
        now = datetime(2026, 10, 19, tzinfo=UTC)
        record = BugReportRead(
            id=1,
            username="Steve",
            rank="VIP",
            game_mode="SURVIVAL",
            title="Door glitch",
            description="Doors close by themselves",
            priority="MEDIA",
            status=BugStatus.PENDING,
            created_at=now,
            updated_at=now,
        )
        payload = record.model_dump(mode="json", by_alias=True)
        assert payload["gameMode"] == "SURVIVAL"
        assert payload["status"] == "PENDIENTE"
        assert payload["validatedAt"] is None
        assert "game_mode" not in payload

    def test_records_are_frozen(self):
        user = UserRead(id=1, username="lutorlandia")
        with pytest.raises(ValidationError):
            user.username = "other"


class TestValidation:
    def test_unknown_staff_role_rejected(self):
        with pytest.raises(ValidationError):
            StaffMemberCreate(
                name="Herobrine",
                role="Fantasma",
                role_label="GHOST",
                description="",
                avatar="https://mc-heads.net/avatar/Herobrine",
            )

    def test_unknown_bug_priority_rejected(self):
        with pytest.raises(ValidationError):
            BugReportCreate(
                username="Steve",
                rank="VIP",
                game_mode="SURVIVAL",
                title="Door glitch",
                description="x",
                priority="URGENTE",
            )

    def test_negative_player_count_rejected(self):
        with pytest.raises(ValidationError):
            ServerStatusCreate(online=True, players={"online": -1, "max": 10}, version="1.20")

    def test_naive_timestamp_is_treated_as_utc(self):
        snapshot = ServerStatusCreate(
            online=True,
            players={"online": 1, "max": 10},
            version="1.20",
            timestamp=datetime(2026, 1, 1, 12, 0),
        )
        assert snapshot.timestamp.tzinfo is UTC


class TestPartialUpdates:
    def test_only_sent_fields_change(self):
        update = StaffMemberUpdate.model_validate({"roleLabel": "MOD"})
        assert update.changes() == {"role_label": "MOD"}

    def test_null_ignored_for_required_columns(self):
        update = StaffMemberUpdate.model_validate({"name": None, "role": "Moderador"})
        assert update.changes() == {"role": "Moderador"}

    def test_null_clears_nullable_columns(self):
        assert AnnouncementUpdate.model_validate({"link": None}).changes() == {"link": None}
        assert PodiumUpdate.model_validate({"imageUrl": None}).changes() == {"image_url": None}


def test_user_record_hides_hash_from_repr():
    record = UserRecord(id=1, username="lutorlandia", password_hash="$2b$12$secret")
    assert "secret" not in repr(record)
    assert UserRead.model_validate(record).model_dump() == {"id": 1, "username": "lutorlandia"}
