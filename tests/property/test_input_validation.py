"""Property-based tests for input validation.

Property: Search target exclusivity
*For any* pair of query and scoped id, validation passes exactly when one of
them is non-empty.

Property: Integer ranges
*For any* integer, range validation accepts it exactly when it lies within
the inclusive bounds.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from betahub_mcp.errors import ValidationError
from betahub_mcp.utils.input_validation import InputValidator

maybe_text = st.one_of(st.none(), st.just(""), st.text(min_size=1, max_size=20))


class TestSearchTargetProperty:
    """Property tests for validate_search_target."""

    @given(query=maybe_text, scoped_id=maybe_text)
    @settings(max_examples=200, deadline=None)
    def test_exactly_one_target_required(self, query, scoped_id):
        if bool(query) != bool(scoped_id):
            InputValidator.validate_search_target(query, scoped_id)
        else:
            with pytest.raises(ValidationError):
                InputValidator.validate_search_target(query, scoped_id)


class TestIntegerRangeProperty:
    """Property tests for validate_integer."""

    @given(value=st.integers(min_value=-1000, max_value=1000))
    @settings(max_examples=200, deadline=None)
    def test_per_page_bounds(self, value):
        if 1 <= value <= 100:
            assert InputValidator.validate_integer(value, "perPage", minimum=1, maximum=100) == value
        else:
            with pytest.raises(ValidationError):
                InputValidator.validate_integer(value, "perPage", minimum=1, maximum=100)


class TestIdListProperty:
    """Property tests for validate_id_list."""

    @given(ids=st.lists(st.integers(min_value=1, max_value=10_000), min_size=1, max_size=10))
    @settings(max_examples=100, deadline=None)
    def test_numeric_id_lists_round_trip(self, ids):
        raw = " , ".join(str(tag_id) for tag_id in ids)

        assert InputValidator.validate_id_list(raw, "tagIds") == ",".join(str(i) for i in ids)
