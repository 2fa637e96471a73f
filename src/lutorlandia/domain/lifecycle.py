"""Status machines for bug reports and tournament registrations.

Both backends consult the same transition tables so that a report rejected
in memory behaves exactly like one rejected in the database.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import TypeVar

from .enums import BugStatus, RegistrationStatus

BUG_TRANSITIONS: Mapping[BugStatus, frozenset[BugStatus]] = {
    BugStatus.PENDING: frozenset({BugStatus.VALIDATED, BugStatus.REJECTED}),
    BugStatus.VALIDATED: frozenset({BugStatus.RESOLVED}),
    BugStatus.REJECTED: frozenset(),
    BugStatus.RESOLVED: frozenset(),
}

REGISTRATION_TRANSITIONS: Mapping[RegistrationStatus, frozenset[RegistrationStatus]] = {
    RegistrationStatus.PENDING: frozenset(
        {RegistrationStatus.APPROVED, RegistrationStatus.REJECTED}
    ),
    RegistrationStatus.APPROVED: frozenset(),
    RegistrationStatus.REJECTED: frozenset(),
}


S = TypeVar("S", bound=StrEnum)


class InvalidTransitionError(ValueError):
    """Raised when a status change is not allowed from the current state."""

    def __init__(self, entity: str, entity_id: int, current: str, target: str) -> None:
        super().__init__(f"{entity} {entity_id} cannot move from {current} to {target}")
        self.entity = entity
        self.entity_id = entity_id
        self.current = current
        self.target = target


def ensure_transition(
    transitions: Mapping[S, frozenset[S]],
    current: S | str,
    target: S,
    *,
    entity: str,
    entity_id: int,
) -> None:
    """Raise ``InvalidTransitionError`` unless ``current -> target`` is allowed."""

    if target not in transitions.get(current, frozenset()):
        raise InvalidTransitionError(entity, entity_id, str(current), str(target))
