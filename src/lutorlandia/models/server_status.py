"""Server status snapshot model."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class ServerStatus(Base):
    """A point-in-time reading of the game server.

    Attributes:
        id: Primary key
        timestamp: When the reading was taken
        online: Whether the server answered
        players: JSON ``{"online": int, "max": int}``
        version: Reported server version string
    """

    __tablename__ = "server_status"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    online: Mapped[bool] = mapped_column(Boolean, nullable=False)
    players: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    version: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<ServerStatus(id={self.id}, online={self.online}, version='{self.version}')>"
