"""Shared pydantic bases for request and record schemas."""

from datetime import UTC, datetime
from typing import Annotated, Any, ClassVar

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class ApiModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UpdateModel(ApiModel):
    """Partial update payload.

    Only fields the caller actually sent are applied. An explicit ``null`` is
    honoured for the columns listed in ``nullable_fields`` and ignored for
    the rest.
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    def changes(self) -> dict[str, Any]:
        data = self.model_dump(exclude_unset=True)
        return {
            key: value
            for key, value in data.items()
            if value is not None or key in self.nullable_fields
        }


class RecordModel(ApiModel):
    """A stored entity as returned by either storage backend."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int


class TimestampedRecord(RecordModel):
    created_at: UtcDatetime
    updated_at: UtcDatetime
