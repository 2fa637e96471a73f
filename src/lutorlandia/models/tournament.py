"""Tournament models.

This module contains the tournament itself plus the three child tables that
hang off it: podium placements, registration form fields, and player
registrations. Children are removed together with their tournament.
"""

from typing import Any

from sqlalchemy import JSON, Boolean, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lutorlandia.domain.enums import RegistrationStatus, TournamentStatus

from .base import Base, TimestampMixin


class Tournament(Base, TimestampMixin):
    """A scheduled in-game tournament.

    Attributes:
        id: Primary key
        title: Tournament name
        description: Rules and details
        date: Display date
        time: Display start time
        game_mode: Game mode the tournament is played in
        max_participants: Registration cap shown to players
        prizes: Prize description
        banner_image: Banner image URL
        status: PRÓXIMO/ACTIVO/COMPLETADO
    """

    __tablename__ = "tournaments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[str] = mapped_column(String(255), nullable=False)
    time: Mapped[str] = mapped_column(String(255), nullable=False)
    game_mode: Mapped[str] = mapped_column(String(255), nullable=False)
    max_participants: Mapped[int] = mapped_column(Integer, nullable=False)
    prizes: Mapped[str] = mapped_column(Text, nullable=False)
    banner_image: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(
        String(255), nullable=False, default=TournamentStatus.UPCOMING.value
    )

    podiums: Mapped[list["TournamentPodium"]] = relationship(
        "TournamentPodium", back_populates="tournament", passive_deletes=True
    )
    form_fields: Mapped[list["FormField"]] = relationship(
        "FormField", back_populates="tournament", passive_deletes=True
    )
    registrations: Mapped[list["TournamentRegistration"]] = relationship(
        "TournamentRegistration", back_populates="tournament", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Tournament(id={self.id}, title='{self.title}', status='{self.status}')>"


class TournamentPodium(Base, TimestampMixin):
    """A podium placement awarded at the end of a tournament."""

    __tablename__ = "tournament_podiums"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    tournament_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tournaments.id"), nullable=False
    )
    player_username: Mapped[str] = mapped_column(String(255), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    prize: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(255), nullable=True)

    tournament: Mapped["Tournament"] = relationship("Tournament", back_populates="podiums")


class FormField(Base, TimestampMixin):
    """A question on a tournament's registration form.

    ``order`` is assigned per tournament, the same way rule orders are
    assigned per category.
    """

    __tablename__ = "form_fields"
    __table_args__ = (Index("idx_form_fields_tournament_order", "tournament_id", "order"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    tournament_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tournaments.id"), nullable=False
    )
    label: Mapped[str] = mapped_column(String(255), nullable=False)
    field_type: Mapped[str] = mapped_column(String(50), nullable=False)
    required: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    options: Mapped[str | None] = mapped_column(Text, nullable=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False)

    tournament: Mapped["Tournament"] = relationship("Tournament", back_populates="form_fields")


class TournamentRegistration(Base, TimestampMixin):
    """A player's sign-up for a tournament, pending operator review."""

    __tablename__ = "tournament_registrations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    tournament_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tournaments.id"), nullable=False
    )
    player_username: Mapped[str] = mapped_column(String(255), nullable=False)
    form_data: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    status: Mapped[str] = mapped_column(
        String(50), nullable=False, default=RegistrationStatus.PENDING.value
    )

    tournament: Mapped["Tournament"] = relationship("Tournament", back_populates="registrations")
