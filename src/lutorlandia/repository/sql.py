"""SQLAlchemy-backed content store.

Every public method runs in its own transaction (``sessionmaker.begin()``),
so a cascade delete either removes the parent and all of its children or
nothing at all. Rows are converted to frozen pydantic records before the
session closes.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from lutorlandia.domain.enums import BugStatus, RegistrationStatus
from lutorlandia.domain.errors import MissingParentError
from lutorlandia.domain.lifecycle import (
    BUG_TRANSITIONS,
    REGISTRATION_TRANSITIONS,
    ensure_transition,
)
from lutorlandia.domain.ordering import next_order
from lutorlandia.models import (
    Announcement,
    Base,
    BugReport,
    FormField,
    Rule,
    RuleCategory,
    ServerStatus,
    StaffMember,
    Tournament,
    TournamentPodium,
    TournamentRegistration,
    User,
    utc_now,
)
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
M = TypeVar("M", bound=Base)


class SqlStorage:
    """Relational implementation of ``IStorage``."""

    backend_name = "sql"

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def close(self) -> None:
        bind = self._session_factory.kw.get("bind")
        if bind is not None:
            bind.dispose()

    # -- generic helpers ---------------------------------------------------------

    def _get(self, model: type[M], record: type[R], row_id: int) -> R | None:
        with self._session_factory() as session:
            row = session.get(model, row_id)
            return record.model_validate(row) if row is not None else None

    def _list(self, record: type[R], statement: Any) -> list[R]:
        with self._session_factory() as session:
            return [record.model_validate(row) for row in session.scalars(statement)]

    def _insert(self, model: type[M], record: type[R], **values: Any) -> R:
        with self._session_factory.begin() as session:
            row = model(**values)
            session.add(row)
            session.flush()
            return record.model_validate(row)

    def _update(
        self, model: type[M], record: type[R], row_id: int, changes: dict[str, Any]
    ) -> R | None:
        with self._session_factory.begin() as session:
            row = session.get(model, row_id)
            if row is None:
                return None
            for key, value in changes.items():
                setattr(row, key, value)
            row.updated_at = utc_now()
            session.flush()
            return record.model_validate(row)

    def _delete(self, model: type[M], row_id: int) -> bool:
        with self._session_factory.begin() as session:
            row = session.get(model, row_id)
            if row is None:
                return False
            session.delete(row)
            return True

    def _transition(
        self,
        model: type[M],
        record: type[R],
        row_id: int,
        transitions: Any,
        target: StrEnum,
        *,
        entity: str,
        stamp: str | None = None,
    ) -> R | None:
        with self._session_factory.begin() as session:
            # Row lock so two operators cannot both move the same report
            row = session.get(model, row_id, with_for_update=True)
            if row is None:
                return None
            ensure_transition(transitions, row.status, target, entity=entity, entity_id=row_id)
            now = utc_now()
            row.status = target.value
            row.updated_at = now
            if stamp is not None:
                setattr(row, stamp, now)
            session.flush()
            return record.model_validate(row)

    @staticmethod
    def _max_order(session: Session, column: Any, *criteria: Any) -> int:
        current = session.scalar(select(func.max(column)).where(*criteria))
        return next_order([current])

    @staticmethod
    def _require_parent(session: Session, model: type[M], parent_id: int, parent: str) -> None:
        if session.get(model, parent_id) is None:
            raise MissingParentError(parent, parent_id)

    # -- users -------------------------------------------------------------------

    def get_user(self, user_id: int) -> UserRecord | None:
        return self._get(User, UserRecord, user_id)

    def get_user_by_username(self, username: str) -> UserRecord | None:
        users = self._list(UserRecord, select(User).where(User.username == username))
        return users[0] if users else None

    def create_user(self, username: str, password_hash: str) -> UserRecord:
        try:
            return self._insert(User, UserRecord, username=username, password_hash=password_hash)
        except IntegrityError as exc:
            raise ValueError(f"username {username!r} is already taken") from exc

    # -- staff members -----------------------------------------------------------

    def list_staff_members(self) -> list[StaffMemberRead]:
        return self._list(StaffMemberRead, select(StaffMember).order_by(StaffMember.id))

    def get_staff_member(self, member_id: int) -> StaffMemberRead | None:
        return self._get(StaffMember, StaffMemberRead, member_id)

    def create_staff_member(self, data: StaffMemberCreate) -> StaffMemberRead:
        return self._insert(StaffMember, StaffMemberRead, **data.model_dump())

    def update_staff_member(
        self, member_id: int, data: StaffMemberUpdate
    ) -> StaffMemberRead | None:
        return self._update(StaffMember, StaffMemberRead, member_id, data.changes())

    def delete_staff_member(self, member_id: int) -> bool:
        return self._delete(StaffMember, member_id)

    # -- rule categories ---------------------------------------------------------

    def list_rule_categories(self) -> list[RuleCategoryRead]:
        return self._list(
            RuleCategoryRead,
            select(RuleCategory).order_by(RuleCategory.order, RuleCategory.id),
        )

    def get_rule_category(self, category_id: int) -> RuleCategoryRead | None:
        return self._get(RuleCategory, RuleCategoryRead, category_id)

    def create_rule_category(self, data: RuleCategoryCreate) -> RuleCategoryRead:
        with self._session_factory.begin() as session:
            row = RuleCategory(
                order=self._max_order(session, RuleCategory.order), **data.model_dump()
            )
            session.add(row)
            session.flush()
            return RuleCategoryRead.model_validate(row)

    def update_rule_category(
        self, category_id: int, data: RuleCategoryUpdate
    ) -> RuleCategoryRead | None:
        return self._update(RuleCategory, RuleCategoryRead, category_id, data.changes())

    def delete_rule_category(self, category_id: int) -> bool:
        with self._session_factory.begin() as session:
            category = session.get(RuleCategory, category_id)
            if category is None:
                return False
            session.execute(delete(Rule).where(Rule.category_id == category_id))
            session.delete(category)
            return True

    # -- rules -------------------------------------------------------------------

    def list_rules(self, category_id: int) -> list[RuleRead]:
        return self._list(
            RuleRead,
            select(Rule).where(Rule.category_id == category_id).order_by(Rule.order, Rule.id),
        )

    def get_rule(self, rule_id: int) -> RuleRead | None:
        return self._get(Rule, RuleRead, rule_id)

    def create_rule(self, data: RuleCreate) -> RuleRead:
        with self._session_factory.begin() as session:
            self._require_parent(session, RuleCategory, data.category_id, "rule category")
            order = self._max_order(session, Rule.order, Rule.category_id == data.category_id)
            row = Rule(order=order, **data.model_dump())
            session.add(row)
            session.flush()
            return RuleRead.model_validate(row)

    def update_rule(self, rule_id: int, data: RuleUpdate) -> RuleRead | None:
        changes = data.changes()
        with self._session_factory.begin() as session:
            row = session.get(Rule, rule_id)
            if row is None:
                return None
            target = changes.get("category_id", row.category_id)
            if target != row.category_id:
                self._require_parent(session, RuleCategory, target, "rule category")
                if "order" not in changes:
                    changes["order"] = self._max_order(
                        session, Rule.order, Rule.category_id == target
                    )
            for key, value in changes.items():
                setattr(row, key, value)
            row.updated_at = utc_now()
            session.flush()
            return RuleRead.model_validate(row)

    def delete_rule(self, rule_id: int) -> bool:
        return self._delete(Rule, rule_id)

    # -- announcements -----------------------------------------------------------

    def list_announcements(self) -> list[AnnouncementRead]:
        return self._list(AnnouncementRead, select(Announcement).order_by(Announcement.id))

    def get_announcement(self, announcement_id: int) -> AnnouncementRead | None:
        return self._get(Announcement, AnnouncementRead, announcement_id)

    def create_announcement(self, data: AnnouncementCreate) -> AnnouncementRead:
        return self._insert(Announcement, AnnouncementRead, **data.model_dump())

    def update_announcement(
        self, announcement_id: int, data: AnnouncementUpdate
    ) -> AnnouncementRead | None:
        return self._update(Announcement, AnnouncementRead, announcement_id, data.changes())

    def delete_announcement(self, announcement_id: int) -> bool:
        return self._delete(Announcement, announcement_id)

    # -- bug reports -------------------------------------------------------------

    def list_bug_reports(self) -> list[BugReportRead]:
        return self._list(BugReportRead, select(BugReport).order_by(BugReport.id))

    def _list_bug_reports_in(self, status: BugStatus) -> list[BugReportRead]:
        return self._list(
            BugReportRead,
            select(BugReport).where(BugReport.status == status.value).order_by(BugReport.id),
        )

    def list_pending_bug_reports(self) -> list[BugReportRead]:
        return self._list_bug_reports_in(BugStatus.PENDING)

    def list_validated_bug_reports(self) -> list[BugReportRead]:
        return self._list_bug_reports_in(BugStatus.VALIDATED)

    def get_bug_report(self, report_id: int) -> BugReportRead | None:
        return self._get(BugReport, BugReportRead, report_id)

    def create_bug_report(self, data: BugReportCreate) -> BugReportRead:
        return self._insert(
            BugReport, BugReportRead, status=BugStatus.PENDING.value, **data.model_dump()
        )

    def update_bug_report(
        self, report_id: int, data: BugReportUpdate
    ) -> BugReportRead | None:
        return self._update(BugReport, BugReportRead, report_id, data.changes())

    def delete_bug_report(self, report_id: int) -> bool:
        return self._delete(BugReport, report_id)

    def validate_bug_report(self, report_id: int) -> BugReportRead | None:
        return self._transition(
            BugReport,
            BugReportRead,
            report_id,
            BUG_TRANSITIONS,
            BugStatus.VALIDATED,
            entity="bug report",
            stamp="validated_at",
        )

    def reject_bug_report(self, report_id: int) -> BugReportRead | None:
        return self._transition(
            BugReport,
            BugReportRead,
            report_id,
            BUG_TRANSITIONS,
            BugStatus.REJECTED,
            entity="bug report",
        )

    def resolve_bug_report(self, report_id: int) -> BugReportRead | None:
        return self._transition(
            BugReport,
            BugReportRead,
            report_id,
            BUG_TRANSITIONS,
            BugStatus.RESOLVED,
            entity="bug report",
            stamp="resolved_at",
        )

    # -- tournaments -------------------------------------------------------------

    def list_tournaments(self) -> list[TournamentRead]:
        return self._list(TournamentRead, select(Tournament).order_by(Tournament.id))

    def get_tournament(self, tournament_id: int) -> TournamentRead | None:
        return self._get(Tournament, TournamentRead, tournament_id)

    def create_tournament(self, data: TournamentCreate) -> TournamentRead:
        return self._insert(Tournament, TournamentRead, **data.model_dump())

    def update_tournament(
        self, tournament_id: int, data: TournamentUpdate
    ) -> TournamentRead | None:
        return self._update(Tournament, TournamentRead, tournament_id, data.changes())

    def delete_tournament(self, tournament_id: int) -> bool:
        with self._session_factory.begin() as session:
            tournament = session.get(Tournament, tournament_id)
            if tournament is None:
                return False
            for child in (TournamentPodium, FormField, TournamentRegistration):
                session.execute(delete(child).where(child.tournament_id == tournament_id))
            session.delete(tournament)
            return True

    def list_podiums(self, tournament_id: int) -> list[PodiumRead]:
        return self._list(
            PodiumRead,
            select(TournamentPodium)
            .where(TournamentPodium.tournament_id == tournament_id)
            .order_by(TournamentPodium.position, TournamentPodium.id),
        )

    def get_podium(self, podium_id: int) -> PodiumRead | None:
        return self._get(TournamentPodium, PodiumRead, podium_id)

    def create_podium(self, tournament_id: int, data: PodiumCreate) -> PodiumRead:
        with self._session_factory.begin() as session:
            self._require_parent(session, Tournament, tournament_id, "tournament")
            row = TournamentPodium(tournament_id=tournament_id, **data.model_dump())
            session.add(row)
            session.flush()
            return PodiumRead.model_validate(row)

    def update_podium(self, podium_id: int, data: PodiumUpdate) -> PodiumRead | None:
        return self._update(TournamentPodium, PodiumRead, podium_id, data.changes())

    def delete_podium(self, podium_id: int) -> bool:
        return self._delete(TournamentPodium, podium_id)

    def list_form_fields(self, tournament_id: int) -> list[FormFieldRead]:
        return self._list(
            FormFieldRead,
            select(FormField)
            .where(FormField.tournament_id == tournament_id)
            .order_by(FormField.order, FormField.id),
        )

    def get_form_field(self, field_id: int) -> FormFieldRead | None:
        return self._get(FormField, FormFieldRead, field_id)

    def create_form_field(self, tournament_id: int, data: FormFieldCreate) -> FormFieldRead:
        with self._session_factory.begin() as session:
            self._require_parent(session, Tournament, tournament_id, "tournament")
            order = self._max_order(
                session, FormField.order, FormField.tournament_id == tournament_id
            )
            row = FormField(tournament_id=tournament_id, order=order, **data.model_dump())
            session.add(row)
            session.flush()
            return FormFieldRead.model_validate(row)

    def update_form_field(self, field_id: int, data: FormFieldUpdate) -> FormFieldRead | None:
        return self._update(FormField, FormFieldRead, field_id, data.changes())

    def delete_form_field(self, field_id: int) -> bool:
        return self._delete(FormField, field_id)

    def list_registrations(self, tournament_id: int) -> list[RegistrationRead]:
        return self._list(
            RegistrationRead,
            select(TournamentRegistration)
            .where(TournamentRegistration.tournament_id == tournament_id)
            .order_by(TournamentRegistration.id),
        )

    def get_registration(self, registration_id: int) -> RegistrationRead | None:
        return self._get(TournamentRegistration, RegistrationRead, registration_id)

    def create_registration(
        self, tournament_id: int, data: RegistrationCreate
    ) -> RegistrationRead:
        with self._session_factory.begin() as session:
            self._require_parent(session, Tournament, tournament_id, "tournament")
            row = TournamentRegistration(
                tournament_id=tournament_id,
                status=RegistrationStatus.PENDING.value,
                **data.model_dump(),
            )
            session.add(row)
            session.flush()
            return RegistrationRead.model_validate(row)

    def approve_registration(self, registration_id: int) -> RegistrationRead | None:
        return self._transition(
            TournamentRegistration,
            RegistrationRead,
            registration_id,
            REGISTRATION_TRANSITIONS,
            RegistrationStatus.APPROVED,
            entity="registration",
        )

    def reject_registration(self, registration_id: int) -> RegistrationRead | None:
        return self._transition(
            TournamentRegistration,
            RegistrationRead,
            registration_id,
            REGISTRATION_TRANSITIONS,
            RegistrationStatus.REJECTED,
            entity="registration",
        )

    def delete_registration(self, registration_id: int) -> bool:
        return self._delete(TournamentRegistration, registration_id)

    # -- server status -----------------------------------------------------------

    def record_server_status(self, data: ServerStatusCreate) -> ServerStatusRead:
        return self._insert(
            ServerStatus,
            ServerStatusRead,
            timestamp=data.timestamp or utc_now(),
            online=data.online,
            players=data.players.model_dump(),
            version=data.version,
        )

    def latest_server_status(self) -> ServerStatusRead | None:
        snapshots = self._list(
            ServerStatusRead,
            select(ServerStatus)
            .order_by(ServerStatus.timestamp.desc(), ServerStatus.id.desc())
            .limit(1),
        )
        return snapshots[0] if snapshots else None
