"""Tests for naming conventions."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from proptree import ConventionViolation
from proptree.core.naming import (
    matches_prefix,
    matches_suffix,
    prefixed_property_name,
    remove_prefix,
    remove_suffix,
    suffixed_property_name,
)

identifiers = st.from_regex(r"[a-z][a-z0-9_]{0,12}", fullmatch=True)


# Matching


def test_first_matching_prefix_wins():
    assert matches_prefix("get_count", ("get_", "g")) == "get_"
    assert matches_prefix("get_count", ("g", "get_")) == "g"


def test_prefix_must_be_strictly_shorter():
    """A name equal to the prefix is not a match."""
    assert matches_prefix("get_", ("get_",)) is None


def test_no_matching_prefix():
    assert matches_prefix("count", ("get_", "set_")) is None


def test_empty_prefix_matches_any_name():
    assert matches_prefix("count", ("_", "")) == ""
    assert matches_prefix("_count", ("_", "")) == "_"


def test_empty_prefix_does_not_match_empty_name():
    assert matches_prefix("", ("",)) is None


def test_first_matching_suffix_wins():
    assert matches_suffix("count_property", ("_property", "y")) == "_property"
    assert matches_suffix("_property", ("_property",)) is None


# Removal


def test_remove_prefix_lower_cases_first_character():
    assert remove_prefix("getCount", "get") == "count"
    assert remove_prefix("_Count", "_") == "count"
    assert remove_prefix("get_count", "get_") == "count"


def test_remove_empty_prefix_is_noop():
    assert remove_prefix("Count", "") == "Count"


def test_remove_suffix_truncates():
    assert remove_suffix("countProperty", "Property") == "count"
    assert remove_suffix("count_property", "_property") == "count"
    assert remove_suffix("count", "") == "count"


# Property names


def test_getter_prefixes_derive_property_name():
    assert prefixed_property_name("get_count", ("get_", "is_")) == "count"
    assert prefixed_property_name("is_active", ("get_", "is_")) == "active"
    assert prefixed_property_name("count", ("get_", "is_")) is None


def test_accessor_suffix_derives_property_name():
    assert suffixed_property_name("count_property", ("_property",)) == "count"
    assert suffixed_property_name("count", ("_property",)) is None


def test_empty_result_is_a_convention_violation():
    """Stripping `get_` from `get__` leaves only an underscore."""
    with pytest.raises(ConventionViolation) as exc_info:
        prefixed_property_name("get__", ("get_",))

    assert exc_info.value.member_name == "get__"
    assert exc_info.value.affix == "get_"


def test_empty_suffix_result_is_a_convention_violation():
    with pytest.raises(ConventionViolation, match="leaves an empty name"):
        suffixed_property_name("__property", ("_property",))


def test_convention_violation_is_a_value_error():
    with pytest.raises(ValueError):
        prefixed_property_name("set__", ("set_",))


@given(name=identifiers)
def test_prefix_round_trip(name):
    """PROPERTY: a snake_case name survives being prefixed and stripped."""
    assert prefixed_property_name(f"get_{name}", ("get_",)) == name
    assert prefixed_property_name(f"set_{name}", ("get_", "set_")) == name


@given(name=identifiers)
def test_suffix_round_trip(name):
    """PROPERTY: a snake_case name survives being suffixed and stripped."""
    assert suffixed_property_name(f"{name}_property", ("_property",)) == name


@given(name=identifiers)
def test_empty_prefix_keeps_name(name):
    """PROPERTY: the empty field prefix maps a field name to itself."""
    assert prefixed_property_name(name, ("",)) == name
