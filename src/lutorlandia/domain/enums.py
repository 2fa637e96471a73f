"""Enumerations for the site content collections.

Values are the literal strings stored in the database and sent over the
wire, so they stay in the site's language.
"""

from __future__ import annotations

from enum import StrEnum


class StaffRole(StrEnum):
    """Role badge shown next to a staff member."""

    OWNER = "OWNER"
    ADMIN = "ADMIN"
    SRMOD = "SRMOD"
    MOD = "MOD"
    BUILDER = "BUILDER"


class AnnouncementType(StrEnum):
    """Announcement kinds the panel offers. Storage accepts any label."""

    EVENT = "EVENTO"
    UPDATE = "ACTUALIZACIÓN"
    STORE = "TIENDA"


class GameMode(StrEnum):
    """Game modes hosted on the network."""

    SURVIVAL = "SURVIVAL"
    SKYBLOCK = "SKYBLOCK"
    PIXELMON = "PIXELMON"
    FACTIONS = "FACTIONS"
    OTHER = "OTRO"


class BugPriority(StrEnum):
    """Reporter-assigned bug priority."""

    HIGH = "ALTA"
    MEDIUM = "MEDIA"
    LOW = "BAJA"


class BugStatus(StrEnum):
    """Bug report lifecycle states."""

    PENDING = "PENDIENTE"
    VALIDATED = "VALIDADO"
    REJECTED = "RECHAZADO"
    RESOLVED = "RESUELTO"


class TournamentStatus(StrEnum):
    """Tournament schedule states."""

    UPCOMING = "PRÓXIMO"
    ACTIVE = "ACTIVO"
    COMPLETED = "COMPLETADO"


class RegistrationStatus(StrEnum):
    """Tournament registration review states."""

    PENDING = "PENDIENTE"
    APPROVED = "APROBADO"
    REJECTED = "RECHAZADO"
