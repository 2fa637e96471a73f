"""Bug report model."""

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from lutorlandia.domain.enums import BugStatus

from .base import Base, TimestampMixin


class BugReport(Base, TimestampMixin):
    """A player-submitted bug report and its triage state.

    Attributes:
        id: Primary key
        username: Reporter's in-game name
        rank: Reporter's rank on the server
        game_mode: Game mode the bug happened in
        title: Short summary
        description: Steps to reproduce
        image_url: Optional screenshot URL
        priority: Reporter-assigned priority (ALTA/MEDIA/BAJA)
        status: Triage state (PENDIENTE/VALIDADO/RECHAZADO/RESUELTO)
        validated_at: When an operator validated the report
        resolved_at: When the report was marked resolved
    """

    __tablename__ = "bug_reports"
    __table_args__ = (Index("idx_bug_reports_status", "status"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False)
    rank: Mapped[str] = mapped_column(String(255), nullable=False)
    game_mode: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
    priority: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(
        String(255), nullable=False, default=BugStatus.PENDING.value
    )
    validated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    resolved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<BugReport(id={self.id}, title='{self.title}', status='{self.status}')>"
