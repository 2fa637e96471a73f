"""In-memory content store.

Used when no database is configured or the configured one is unreachable at
startup. It honours the same contract as ``SqlStorage``; records are frozen
pydantic models, so callers never hold a mutable reference into the store.
"""

from __future__ import annotations

import itertools
import threading
from collections.abc import Callable, Iterable
from enum import StrEnum
from typing import Any, Generic, TypeVar

from lutorlandia.domain.enums import BugStatus, RegistrationStatus
from lutorlandia.domain.errors import MissingParentError
from lutorlandia.domain.lifecycle import (
    BUG_TRANSITIONS,
    REGISTRATION_TRANSITIONS,
    ensure_transition,
)
from lutorlandia.domain.ordering import next_order
from lutorlandia.models.base import utc_now
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
    RecordModel,
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

R = TypeVar("R", bound=RecordModel)


class _Collection(Generic[R]):
    """Records of one kind keyed by id, with their own id sequence.

    Reads take the owning store's lock so they never observe a collection
    mid-mutation.
    """

    def __init__(self, lock: threading.RLock) -> None:
        self._lock = lock
        self._rows: dict[int, R] = {}
        self._ids = itertools.count(1)

    def next_id(self) -> int:
        return next(self._ids)

    def get(self, record_id: int) -> R | None:
        with self._lock:
            return self._rows.get(record_id)

    def put(self, record: R) -> R:
        self._rows[record.id] = record
        return record

    def remove(self, record_id: int) -> bool:
        return self._rows.pop(record_id, None) is not None

    def remove_where(self, predicate: Callable[[R], bool]) -> int:
        doomed = [record_id for record_id, row in self._rows.items() if predicate(row)]
        for record_id in doomed:
            del self._rows[record_id]
        return len(doomed)

    def select(
        self,
        predicate: Callable[[R], bool] | None = None,
        *,
        key: Callable[[R], Any] | None = None,
    ) -> list[R]:
        with self._lock:
            rows: Iterable[R] = list(self._rows.values())
        if predicate is not None:
            rows = [row for row in rows if predicate(row)]
        return sorted(rows, key=key or (lambda row: row.id))


class MemoryStorage:
    """Process-local implementation of ``IStorage``."""

    backend_name = "memory"

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._users: _Collection[UserRecord] = _Collection(self._lock)
        self._staff: _Collection[StaffMemberRead] = _Collection(self._lock)
        self._categories: _Collection[RuleCategoryRead] = _Collection(self._lock)
        self._rules: _Collection[RuleRead] = _Collection(self._lock)
        self._announcements: _Collection[AnnouncementRead] = _Collection(self._lock)
        self._bug_reports: _Collection[BugReportRead] = _Collection(self._lock)
        self._tournaments: _Collection[TournamentRead] = _Collection(self._lock)
        self._podiums: _Collection[PodiumRead] = _Collection(self._lock)
        self._form_fields: _Collection[FormFieldRead] = _Collection(self._lock)
        self._registrations: _Collection[RegistrationRead] = _Collection(self._lock)
        self._server_status: _Collection[ServerStatusRead] = _Collection(self._lock)

    def close(self) -> None:
        """Nothing to release; data lives only as long as the process."""

    # -- generic helpers ---------------------------------------------------------

    def _insert(self, collection: _Collection[R], record_type: type[R], **fields: Any) -> R:
        with self._lock:
            now = utc_now()
            record = record_type(
                id=collection.next_id(), created_at=now, updated_at=now, **fields
            )
            return collection.put(record)

    def _update(
        self, collection: _Collection[R], record_id: int, changes: dict[str, Any]
    ) -> R | None:
        with self._lock:
            current = collection.get(record_id)
            if current is None:
                return None
            updated = current.model_copy(update={**changes, "updated_at": utc_now()})
            return collection.put(updated)

    def _delete(self, collection: _Collection[Any], record_id: int) -> bool:
        with self._lock:
            return collection.remove(record_id)

    def _transition(
        self,
        collection: _Collection[R],
        record_id: int,
        transitions: Any,
        target: StrEnum,
        *,
        entity: str,
        stamp: str | None = None,
    ) -> R | None:
        with self._lock:
            current = collection.get(record_id)
            if current is None:
                return None
            ensure_transition(
                transitions, current.status, target, entity=entity, entity_id=record_id
            )
            now = utc_now()
            changes: dict[str, Any] = {"status": target, "updated_at": now}
            if stamp is not None:
                changes[stamp] = now
            return collection.put(current.model_copy(update=changes))

    @staticmethod
    def _require_parent(collection: _Collection[Any], parent_id: int, parent: str) -> None:
        if collection.get(parent_id) is None:
            raise MissingParentError(parent, parent_id)

    @staticmethod
    def _by_order(row: RuleCategoryRead | RuleRead | FormFieldRead) -> tuple[int, int]:
        return (row.order, row.id)

    # -- users -------------------------------------------------------------------

    def get_user(self, user_id: int) -> UserRecord | None:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> UserRecord | None:
        matches = self._users.select(lambda user: user.username == username)
        return matches[0] if matches else None

    def create_user(self, username: str, password_hash: str) -> UserRecord:
        with self._lock:
            if self.get_user_by_username(username) is not None:
                raise ValueError(f"username {username!r} is already taken")
            user = UserRecord(
                id=self._users.next_id(), username=username, password_hash=password_hash
            )
            return self._users.put(user)

    # -- staff members -----------------------------------------------------------

    def list_staff_members(self) -> list[StaffMemberRead]:
        return self._staff.select()

    def get_staff_member(self, member_id: int) -> StaffMemberRead | None:
        return self._staff.get(member_id)

    def create_staff_member(self, data: StaffMemberCreate) -> StaffMemberRead:
        return self._insert(self._staff, StaffMemberRead, **data.model_dump())

    def update_staff_member(
        self, member_id: int, data: StaffMemberUpdate
    ) -> StaffMemberRead | None:
        return self._update(self._staff, member_id, data.changes())

    def delete_staff_member(self, member_id: int) -> bool:
        return self._delete(self._staff, member_id)

    # -- rule categories ---------------------------------------------------------

    def list_rule_categories(self) -> list[RuleCategoryRead]:
        return self._categories.select(key=self._by_order)

    def get_rule_category(self, category_id: int) -> RuleCategoryRead | None:
        return self._categories.get(category_id)

    def create_rule_category(self, data: RuleCategoryCreate) -> RuleCategoryRead:
        with self._lock:
            order = next_order(row.order for row in self._categories.select())
            return self._insert(
                self._categories, RuleCategoryRead, order=order, **data.model_dump()
            )

    def update_rule_category(
        self, category_id: int, data: RuleCategoryUpdate
    ) -> RuleCategoryRead | None:
        return self._update(self._categories, category_id, data.changes())

    def delete_rule_category(self, category_id: int) -> bool:
        with self._lock:
            if self._categories.get(category_id) is None:
                return False
            self._rules.remove_where(lambda rule: rule.category_id == category_id)
            return self._categories.remove(category_id)

    # -- rules -------------------------------------------------------------------

    def list_rules(self, category_id: int) -> list[RuleRead]:
        return self._rules.select(lambda rule: rule.category_id == category_id, key=self._by_order)

    def get_rule(self, rule_id: int) -> RuleRead | None:
        return self._rules.get(rule_id)

    def create_rule(self, data: RuleCreate) -> RuleRead:
        with self._lock:
            self._require_parent(self._categories, data.category_id, "rule category")
            order = next_order(rule.order for rule in self.list_rules(data.category_id))
            return self._insert(self._rules, RuleRead, order=order, **data.model_dump())

    def update_rule(self, rule_id: int, data: RuleUpdate) -> RuleRead | None:
        changes = data.changes()
        with self._lock:
            current = self._rules.get(rule_id)
            if current is None:
                return None
            target = changes.get("category_id", current.category_id)
            if target != current.category_id:
                self._require_parent(self._categories, target, "rule category")
                if "order" not in changes:
                    changes["order"] = next_order(rule.order for rule in self.list_rules(target))
            return self._update(self._rules, rule_id, changes)

    def delete_rule(self, rule_id: int) -> bool:
        return self._delete(self._rules, rule_id)

    # -- announcements -----------------------------------------------------------

    def list_announcements(self) -> list[AnnouncementRead]:
        return self._announcements.select()

    def get_announcement(self, announcement_id: int) -> AnnouncementRead | None:
        return self._announcements.get(announcement_id)

    def create_announcement(self, data: AnnouncementCreate) -> AnnouncementRead:
        return self._insert(self._announcements, AnnouncementRead, **data.model_dump())

    def update_announcement(
        self, announcement_id: int, data: AnnouncementUpdate
    ) -> AnnouncementRead | None:
        return self._update(self._announcements, announcement_id, data.changes())

    def delete_announcement(self, announcement_id: int) -> bool:
        return self._delete(self._announcements, announcement_id)

    # -- bug reports -------------------------------------------------------------

    def list_bug_reports(self) -> list[BugReportRead]:
        return self._bug_reports.select()

    def list_pending_bug_reports(self) -> list[BugReportRead]:
        return self._bug_reports.select(lambda report: report.status == BugStatus.PENDING)

    def list_validated_bug_reports(self) -> list[BugReportRead]:
        return self._bug_reports.select(lambda report: report.status == BugStatus.VALIDATED)

    def get_bug_report(self, report_id: int) -> BugReportRead | None:
        return self._bug_reports.get(report_id)

    def create_bug_report(self, data: BugReportCreate) -> BugReportRead:
        return self._insert(
            self._bug_reports,
            BugReportRead,
            status=BugStatus.PENDING,
            validated_at=None,
            resolved_at=None,
            **data.model_dump(),
        )

    def update_bug_report(
        self, report_id: int, data: BugReportUpdate
    ) -> BugReportRead | None:
        return self._update(self._bug_reports, report_id, data.changes())

    def delete_bug_report(self, report_id: int) -> bool:
        return self._delete(self._bug_reports, report_id)

    def validate_bug_report(self, report_id: int) -> BugReportRead | None:
        return self._transition(
            self._bug_reports,
            report_id,
            BUG_TRANSITIONS,
            BugStatus.VALIDATED,
            entity="bug report",
            stamp="validated_at",
        )

    def reject_bug_report(self, report_id: int) -> BugReportRead | None:
        return self._transition(
            self._bug_reports,
            report_id,
            BUG_TRANSITIONS,
            BugStatus.REJECTED,
            entity="bug report",
        )

    def resolve_bug_report(self, report_id: int) -> BugReportRead | None:
        return self._transition(
            self._bug_reports,
            report_id,
            BUG_TRANSITIONS,
            BugStatus.RESOLVED,
            entity="bug report",
            stamp="resolved_at",
        )

    # -- tournaments -------------------------------------------------------------

    def list_tournaments(self) -> list[TournamentRead]:
        return self._tournaments.select()

    def get_tournament(self, tournament_id: int) -> TournamentRead | None:
        return self._tournaments.get(tournament_id)

    def create_tournament(self, data: TournamentCreate) -> TournamentRead:
        return self._insert(self._tournaments, TournamentRead, **data.model_dump())

    def update_tournament(
        self, tournament_id: int, data: TournamentUpdate
    ) -> TournamentRead | None:
        return self._update(self._tournaments, tournament_id, data.changes())

    def delete_tournament(self, tournament_id: int) -> bool:
        with self._lock:
            if self._tournaments.get(tournament_id) is None:
                return False

            def belongs(row: PodiumRead | FormFieldRead | RegistrationRead) -> bool:
                return row.tournament_id == tournament_id

            self._podiums.remove_where(belongs)
            self._form_fields.remove_where(belongs)
            self._registrations.remove_where(belongs)
            return self._tournaments.remove(tournament_id)

    def list_podiums(self, tournament_id: int) -> list[PodiumRead]:
        return self._podiums.select(
            lambda podium: podium.tournament_id == tournament_id,
            key=lambda podium: (podium.position, podium.id),
        )

    def get_podium(self, podium_id: int) -> PodiumRead | None:
        return self._podiums.get(podium_id)

    def create_podium(self, tournament_id: int, data: PodiumCreate) -> PodiumRead:
        with self._lock:
            self._require_parent(self._tournaments, tournament_id, "tournament")
            return self._insert(
                self._podiums, PodiumRead, tournament_id=tournament_id, **data.model_dump()
            )

    def update_podium(self, podium_id: int, data: PodiumUpdate) -> PodiumRead | None:
        return self._update(self._podiums, podium_id, data.changes())

    def delete_podium(self, podium_id: int) -> bool:
        return self._delete(self._podiums, podium_id)

    def list_form_fields(self, tournament_id: int) -> list[FormFieldRead]:
        return self._form_fields.select(
            lambda field: field.tournament_id == tournament_id, key=self._by_order
        )

    def get_form_field(self, field_id: int) -> FormFieldRead | None:
        return self._form_fields.get(field_id)

    def create_form_field(self, tournament_id: int, data: FormFieldCreate) -> FormFieldRead:
        with self._lock:
            self._require_parent(self._tournaments, tournament_id, "tournament")
            order = next_order(field.order for field in self.list_form_fields(tournament_id))
            return self._insert(
                self._form_fields,
                FormFieldRead,
                tournament_id=tournament_id,
                order=order,
                **data.model_dump(),
            )

    def update_form_field(self, field_id: int, data: FormFieldUpdate) -> FormFieldRead | None:
        return self._update(self._form_fields, field_id, data.changes())

    def delete_form_field(self, field_id: int) -> bool:
        return self._delete(self._form_fields, field_id)

    def list_registrations(self, tournament_id: int) -> list[RegistrationRead]:
        return self._registrations.select(
            lambda registration: registration.tournament_id == tournament_id
        )

    def get_registration(self, registration_id: int) -> RegistrationRead | None:
        return self._registrations.get(registration_id)

    def create_registration(
        self, tournament_id: int, data: RegistrationCreate
    ) -> RegistrationRead:
        with self._lock:
            self._require_parent(self._tournaments, tournament_id, "tournament")
            return self._insert(
                self._registrations,
                RegistrationRead,
                tournament_id=tournament_id,
                status=RegistrationStatus.PENDING,
                **data.model_dump(),
            )

    def approve_registration(self, registration_id: int) -> RegistrationRead | None:
        return self._transition(
            self._registrations,
            registration_id,
            REGISTRATION_TRANSITIONS,
            RegistrationStatus.APPROVED,
            entity="registration",
        )

    def reject_registration(self, registration_id: int) -> RegistrationRead | None:
        return self._transition(
            self._registrations,
            registration_id,
            REGISTRATION_TRANSITIONS,
            RegistrationStatus.REJECTED,
            entity="registration",
        )

    def delete_registration(self, registration_id: int) -> bool:
        return self._delete(self._registrations, registration_id)

    # -- server status -----------------------------------------------------------

    def record_server_status(self, data: ServerStatusCreate) -> ServerStatusRead:
        with self._lock:
            snapshot = ServerStatusRead(
                id=self._server_status.next_id(),
                timestamp=data.timestamp or utc_now(),
                online=data.online,
                players=data.players,
                version=data.version,
            )
            return self._server_status.put(snapshot)

    def latest_server_status(self) -> ServerStatusRead | None:
        snapshots = self._server_status.select(key=lambda row: (row.timestamp, row.id))
        return snapshots[-1] if snapshots else None
