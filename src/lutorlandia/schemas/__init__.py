from .announcement import AnnouncementCreate, AnnouncementRead, AnnouncementUpdate
from .base import ApiModel, RecordModel, TimestampedRecord, UpdateModel
from .bug_report import BugReportCreate, BugReportRead, BugReportUpdate
from .rules import (
    RuleCategoryCreate,
    RuleCategoryRead,
    RuleCategoryUpdate,
    RuleCreate,
    RuleRead,
    RuleUpdate,
)
from .server_status import PlayerCount, ServerStatusCreate, ServerStatusRead
from .staff import StaffMemberCreate, StaffMemberRead, StaffMemberUpdate
from .tournament import (
    FormFieldCreate,
    FormFieldRead,
    FormFieldUpdate,
    PodiumCreate,
    PodiumRead,
    PodiumUpdate,
    RegistrationCreate,
    RegistrationRead,
    TournamentCreate,
    TournamentRead,
    TournamentUpdate,
)
from .user import LoginRequest, UserRead, UserRecord

__all__ = [
    "AnnouncementCreate",
    "AnnouncementRead",
    "AnnouncementUpdate",
    "ApiModel",
    "BugReportCreate",
    "BugReportRead",
    "BugReportUpdate",
    "FormFieldCreate",
    "FormFieldRead",
    "FormFieldUpdate",
    "LoginRequest",
    "PlayerCount",
    "PodiumCreate",
    "PodiumRead",
    "PodiumUpdate",
    "RecordModel",
    "RegistrationCreate",
    "RegistrationRead",
    "RuleCategoryCreate",
    "RuleCategoryRead",
    "RuleCategoryUpdate",
    "RuleCreate",
    "RuleRead",
    "RuleUpdate",
    "ServerStatusCreate",
    "ServerStatusRead",
    "StaffMemberCreate",
    "StaffMemberRead",
    "StaffMemberUpdate",
    "TimestampedRecord",
    "TournamentCreate",
    "TournamentRead",
    "TournamentUpdate",
    "UpdateModel",
    "UserRead",
    "UserRecord",
]
