"""Storage-agnostic rules shared by every backend."""

from lutorlandia.domain.enums import (
    AnnouncementType,
    BugPriority,
    BugStatus,
    GameMode,
    RegistrationStatus,
    StaffRole,
    TournamentStatus,
)
from lutorlandia.domain.errors import MissingParentError
from lutorlandia.domain.lifecycle import (
    BUG_TRANSITIONS,
    REGISTRATION_TRANSITIONS,
    InvalidTransitionError,
    ensure_transition,
)
from lutorlandia.domain.ordering import next_order

__all__ = [
    "BUG_TRANSITIONS",
    "REGISTRATION_TRANSITIONS",
    "AnnouncementType",
    "BugPriority",
    "BugStatus",
    "GameMode",
    "InvalidTransitionError",
    "MissingParentError",
    "RegistrationStatus",
    "StaffRole",
    "TournamentStatus",
    "ensure_transition",
    "next_order",
]
