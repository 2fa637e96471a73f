"""Tests for the bug report and registration status machines."""

import pytest

from lutorlandia.domain import (
    BUG_TRANSITIONS,
    REGISTRATION_TRANSITIONS,
    BugStatus,
    InvalidTransitionError,
    RegistrationStatus,
    ensure_transition,
)


class TestBugTransitions:
    @pytest.mark.parametrize(
        ("current", "target"),
        [
            (BugStatus.PENDING, BugStatus.VALIDATED),
            (BugStatus.PENDING, BugStatus.REJECTED),
            (BugStatus.VALIDATED, BugStatus.RESOLVED),
        ],
    )
    def test_allowed(self, current, target):
        ensure_transition(BUG_TRANSITIONS, current, target, entity="bug report", entity_id=1)

    @pytest.mark.parametrize(
        ("current", "target"),
        [
            (BugStatus.PENDING, BugStatus.RESOLVED),
            (BugStatus.VALIDATED, BugStatus.REJECTED),
            (BugStatus.VALIDATED, BugStatus.VALIDATED),
            (BugStatus.REJECTED, BugStatus.RESOLVED),
            (BugStatus.REJECTED, BugStatus.VALIDATED),
            (BugStatus.RESOLVED, BugStatus.PENDING),
        ],
    )
    def test_refused(self, current, target):
        with pytest.raises(InvalidTransitionError):
            ensure_transition(BUG_TRANSITIONS, current, target, entity="bug report", entity_id=1)

    def test_terminal_states_have_no_exits(self):
        assert BUG_TRANSITIONS[BugStatus.REJECTED] == frozenset()
        assert BUG_TRANSITIONS[BugStatus.RESOLVED] == frozenset()

    def test_plain_string_status_is_accepted(self):
        """SQL rows carry the raw column value rather than the enum."""
        ensure_transition(
            BUG_TRANSITIONS, "PENDIENTE", BugStatus.VALIDATED, entity="bug report", entity_id=3
        )


class TestRegistrationTransitions:
    def test_pending_can_be_approved_or_rejected(self):
        for target in (RegistrationStatus.APPROVED, RegistrationStatus.REJECTED):
            ensure_transition(
                REGISTRATION_TRANSITIONS,
                RegistrationStatus.PENDING,
                target,
                entity="registration",
                entity_id=1,
            )

    def test_decisions_are_final(self):
        with pytest.raises(InvalidTransitionError):
            ensure_transition(
                REGISTRATION_TRANSITIONS,
                RegistrationStatus.APPROVED,
                RegistrationStatus.REJECTED,
                entity="registration",
                entity_id=9,
            )


def test_error_describes_the_refused_move():
    with pytest.raises(InvalidTransitionError) as excinfo:
        ensure_transition(
            BUG_TRANSITIONS,
            BugStatus.REJECTED,
            BugStatus.RESOLVED,
            entity="bug report",
            entity_id=42,
        )
    err = excinfo.value
    assert str(err) == "bug report 42 cannot move from RECHAZADO to RESUELTO"
    assert err.entity_id == 42
    assert err.current == "RECHAZADO"
    assert isinstance(err, ValueError)
