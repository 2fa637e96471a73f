from pydantic import Field

from .base import ApiModel, RecordModel, UtcDatetime


class PlayerCount(ApiModel):
    online: int = Field(..., ge=0)
    max: int = Field(..., ge=0)


class ServerStatusCreate(ApiModel):
    online: bool
    players: PlayerCount
    version: str = Field(..., max_length=255)
    timestamp: UtcDatetime | None = Field(None, description="Defaults to the time of recording")


class ServerStatusRead(RecordModel):
    timestamp: UtcDatetime
    online: bool
    players: PlayerCount
    version: str
