"""Errors raised by both storage backends."""

from __future__ import annotations


class MissingParentError(LookupError):
    """Raised when a child row would point at a parent that does not exist."""

    def __init__(self, parent: str, parent_id: int) -> None:
        super().__init__(f"{parent} {parent_id} not found")
        self.parent = parent
        self.parent_id = parent_id
