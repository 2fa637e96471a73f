"""Tests for display-order assignment."""

from hypothesis import given
from hypothesis import strategies as st

from lutorlandia.domain.ordering import FIRST_ORDER, next_order


class TestNextOrder:
    def test_empty_scope_starts_at_first_order(self):
        assert next_order([]) == FIRST_ORDER == 0

    def test_appends_after_current_maximum(self):
        assert next_order([0, 1, 2]) == 3

    def test_gaps_are_not_reused(self):
        """Deleting order 1 from [0, 1, 2] still yields 3 for the next item."""
        assert next_order([0, 2]) == 3

    def test_none_entries_are_ignored(self):
        # SQL MAX() over an empty scope comes back as NULL
        assert next_order([None]) == FIRST_ORDER
        assert next_order([None, 4]) == 5

    def test_accepts_generators(self):
        assert next_order(order for order in (5, 1, 3)) == 6

    @given(st.lists(st.integers(min_value=0, max_value=10_000), min_size=1))
    def test_result_exceeds_every_existing_order(self, orders):
        result = next_order(orders)
        assert all(result > order for order in orders)
        assert result == max(orders) + 1
