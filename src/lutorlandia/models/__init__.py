"""SQLAlchemy models for the Lutorlandia content store.

This module exports all database models and the declarative base.
"""

from .announcement import Announcement
from .base import Base, TimestampMixin, utc_now
from .bug_report import BugReport
from .rules import Rule, RuleCategory
from .server_status import ServerStatus
from .staff import StaffMember
from .tournament import FormField, Tournament, TournamentPodium, TournamentRegistration
from .user import User

__all__ = [
    "Announcement",
    "Base",
    "BugReport",
    "FormField",
    "Rule",
    "RuleCategory",
    "ServerStatus",
    "StaffMember",
    "TimestampMixin",
    "Tournament",
    "TournamentPodium",
    "TournamentRegistration",
    "User",
    "utc_now",
]
