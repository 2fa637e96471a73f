"""Display-order assignment for ordered collections."""

from __future__ import annotations

from collections.abc import Iterable

FIRST_ORDER = 0


def next_order(existing: Iterable[int | None]) -> int:
    """Return the order for an item appended to a scope.

    The first item of an empty scope gets ``FIRST_ORDER``; later items get
    one past the current maximum, so gaps left by deletions are never reused.

    Args:
        existing: Orders already present in the scope (one category, one
            tournament, or the whole collection). ``None`` entries are
            ignored, which lets SQL ``MAX()`` results pass straight through.

    Returns:
        int: The order to store on the new item
    """
    orders = [order for order in existing if order is not None]
    if not orders:
        return FIRST_ORDER
    return max(orders) + 1
