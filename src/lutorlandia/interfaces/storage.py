"""Storage Protocol Interface.

This module defines the contract shared by the SQL and in-memory content
stores. Both implementations must agree on signatures and on the sentinel
results:

- reads, updates and status transitions of an unknown id return ``None``;
- deletes of an unknown id return ``False``;
- a transition the status machine forbids raises
  ``lutorlandia.domain.InvalidTransitionError``;
- creating a rule, podium, form field or registration under an unknown
  parent, or moving a rule to an unknown category, raises
  ``lutorlandia.domain.MissingParentError`` and stores nothing.
"""

from typing import Protocol

from lutorlandia.schemas import (
    AnnouncementCreate,
    AnnouncementRead,
    AnnouncementUpdate,
    BugReportCreate,
    BugReportRead,
    BugReportUpdate,
    FormFieldCreate,
    FormFieldRead,
    FormFieldUpdate,
    PodiumCreate,
    PodiumRead,
    PodiumUpdate,
    RegistrationCreate,
    RegistrationRead,
    RuleCategoryCreate,
    RuleCategoryRead,
    RuleCategoryUpdate,
    RuleCreate,
    RuleRead,
    RuleUpdate,
    ServerStatusCreate,
    ServerStatusRead,
    StaffMemberCreate,
    StaffMemberRead,
    StaffMemberUpdate,
    TournamentCreate,
    TournamentRead,
    TournamentUpdate,
    UserRecord,
)


class IStorage(Protocol):
    """Protocol defining every content-store operation used by the API."""

    backend_name: str

    def close(self) -> None:
        """Release connections or other resources held by the backend."""
        ...

    # Users

    def get_user(self, user_id: int) -> UserRecord | None: ...

    def get_user_by_username(self, username: str) -> UserRecord | None: ...

    def create_user(self, username: str, password_hash: str) -> UserRecord:
        """Store a new operator account.

        Raises:
            ValueError: If the username is already taken
        """
        ...

    # Staff members

    def list_staff_members(self) -> list[StaffMemberRead]: ...

    def get_staff_member(self, member_id: int) -> StaffMemberRead | None: ...

    def create_staff_member(self, data: StaffMemberCreate) -> StaffMemberRead: ...

    def update_staff_member(
        self, member_id: int, data: StaffMemberUpdate
    ) -> StaffMemberRead | None: ...

    def delete_staff_member(self, member_id: int) -> bool: ...

    # Rule categories

    def list_rule_categories(self) -> list[RuleCategoryRead]:
        """Return all categories ascending by ``order``."""
        ...

    def get_rule_category(self, category_id: int) -> RuleCategoryRead | None: ...

    def create_rule_category(self, data: RuleCategoryCreate) -> RuleCategoryRead:
        """Append a category after the current last one.

        Returns:
            The stored category with ``order`` set to 0 for the first
            category and ``max(order) + 1`` afterwards
        """
        ...

    def update_rule_category(
        self, category_id: int, data: RuleCategoryUpdate
    ) -> RuleCategoryRead | None: ...

    def delete_rule_category(self, category_id: int) -> bool:
        """Delete a category and every rule in it.

        Both deletions happen atomically. When the category does not exist
        nothing is deleted.

        Returns:
            True if the category existed
        """
        ...

    # Rules

    def list_rules(self, category_id: int) -> list[RuleRead]:
        """Return the rules of one category ascending by ``order``."""
        ...

    def get_rule(self, rule_id: int) -> RuleRead | None: ...

    def create_rule(self, data: RuleCreate) -> RuleRead:
        """Append a rule to its category, ordering within that category only."""
        ...

    def update_rule(self, rule_id: int, data: RuleUpdate) -> RuleRead | None:
        """Apply a partial update.

        Moving a rule to another category without an explicit ``order``
        appends it to the end of the target category.
        """
        ...

    def delete_rule(self, rule_id: int) -> bool: ...

    # Announcements

    def list_announcements(self) -> list[AnnouncementRead]: ...

    def get_announcement(self, announcement_id: int) -> AnnouncementRead | None: ...

    def create_announcement(self, data: AnnouncementCreate) -> AnnouncementRead: ...

    def update_announcement(
        self, announcement_id: int, data: AnnouncementUpdate
    ) -> AnnouncementRead | None: ...

    def delete_announcement(self, announcement_id: int) -> bool: ...

    # Bug reports

    def list_bug_reports(self) -> list[BugReportRead]: ...

    def list_pending_bug_reports(self) -> list[BugReportRead]: ...

    def list_validated_bug_reports(self) -> list[BugReportRead]: ...

    def get_bug_report(self, report_id: int) -> BugReportRead | None: ...

    def create_bug_report(self, data: BugReportCreate) -> BugReportRead:
        """Store a new report in ``PENDIENTE`` state."""
        ...

    def update_bug_report(
        self, report_id: int, data: BugReportUpdate
    ) -> BugReportRead | None: ...

    def delete_bug_report(self, report_id: int) -> bool: ...

    def validate_bug_report(self, report_id: int) -> BugReportRead | None:
        """Move a pending report to ``VALIDADO`` and stamp ``validated_at``."""
        ...

    def reject_bug_report(self, report_id: int) -> BugReportRead | None:
        """Move a pending report to ``RECHAZADO``."""
        ...

    def resolve_bug_report(self, report_id: int) -> BugReportRead | None:
        """Move a validated report to ``RESUELTO`` and stamp ``resolved_at``."""
        ...

    # Tournaments

    def list_tournaments(self) -> list[TournamentRead]: ...

    def get_tournament(self, tournament_id: int) -> TournamentRead | None: ...

    def create_tournament(self, data: TournamentCreate) -> TournamentRead: ...

    def update_tournament(
        self, tournament_id: int, data: TournamentUpdate
    ) -> TournamentRead | None: ...

    def delete_tournament(self, tournament_id: int) -> bool:
        """Delete a tournament with its podiums, form fields and registrations."""
        ...

    def list_podiums(self, tournament_id: int) -> list[PodiumRead]:
        """Return podium placements ascending by position."""
        ...

    def get_podium(self, podium_id: int) -> PodiumRead | None: ...

    def create_podium(self, tournament_id: int, data: PodiumCreate) -> PodiumRead: ...

    def update_podium(self, podium_id: int, data: PodiumUpdate) -> PodiumRead | None: ...

    def delete_podium(self, podium_id: int) -> bool: ...

    def list_form_fields(self, tournament_id: int) -> list[FormFieldRead]: ...

    def get_form_field(self, field_id: int) -> FormFieldRead | None: ...

    def create_form_field(self, tournament_id: int, data: FormFieldCreate) -> FormFieldRead: ...

    def update_form_field(
        self, field_id: int, data: FormFieldUpdate
    ) -> FormFieldRead | None: ...

    def delete_form_field(self, field_id: int) -> bool: ...

    def list_registrations(self, tournament_id: int) -> list[RegistrationRead]: ...

    def get_registration(self, registration_id: int) -> RegistrationRead | None: ...

    def create_registration(
        self, tournament_id: int, data: RegistrationCreate
    ) -> RegistrationRead: ...

    def approve_registration(self, registration_id: int) -> RegistrationRead | None: ...

    def reject_registration(self, registration_id: int) -> RegistrationRead | None: ...

    def delete_registration(self, registration_id: int) -> bool: ...

    # Server status

    def record_server_status(self, data: ServerStatusCreate) -> ServerStatusRead: ...

    def latest_server_status(self) -> ServerStatusRead | None: ...
