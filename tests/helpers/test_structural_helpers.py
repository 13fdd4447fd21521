# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests for the structural helpers handed to every parser."""
from __future__ import annotations

import dataclasses
from types import SimpleNamespace

import pytest

from shapeguard import (
    HELPERS,
    UNDEFINED,
    Helpers,
    has_optional_property,
    has_property,
    includes,
    is_null,
    is_number,
    is_string,
    tuple_has,
)


# ------------------------------------------------------------------
# has_property
# ------------------------------------------------------------------


def test_has_property_with_guard():
    assert has_property({"a": 1}, "a", is_number) is True
    assert has_property({"a": "1"}, "a", is_number) is False


def test_has_property_without_guard_only_checks_presence():
    assert has_property({}, "a") is False
    assert has_property({"a": None}, "a") is True


def test_has_property_reads_attributes_of_plain_objects():
    record = SimpleNamespace(name="alice")

    assert has_property(record, "name", is_string) is True
    assert has_property(record, "missing") is False


def test_has_property_is_total_on_odd_inputs():
    assert has_property({"a": 1}, ["unhashable"]) is False
    assert has_property(None, "a") is False
    assert has_property(42, 0) is False


def test_has_property_accepts_plain_predicates():
    assert has_property({"n": 5}, "n", lambda v: v > 3) is True


# ------------------------------------------------------------------
# has_optional_property
# ------------------------------------------------------------------


def test_has_optional_property_accepts_absent_key():
    assert has_optional_property({}, "a", is_string) is True


def test_has_optional_property_accepts_undefined_value():
    assert has_optional_property({"a": UNDEFINED}, "a", is_string) is True


def test_has_optional_property_validates_present_value():
    assert has_optional_property({"a": "x"}, "a", is_string) is True
    assert has_optional_property({"a": 1}, "a", is_string) is False


def test_has_optional_property_treats_none_as_present():
    assert has_optional_property({"a": None}, "a", is_string) is False
    assert has_optional_property({"a": None}, "a", is_null) is True


# ------------------------------------------------------------------
# tuple_has
# ------------------------------------------------------------------


@pytest.mark.parametrize(
    "sequence,index,expected",
    [
        (["x", 1], 0, True),
        (("x", 1), 0, True),
        (["x", 1], 1, False),
        (["x"], 1, False),
        (["x"], -1, False),
        ([], 0, False),
    ],
)
def test_tuple_has(sequence, index, expected):
    assert tuple_has(sequence, index, is_string) is expected


def test_tuple_has_rejects_non_sequences_and_bad_indexes():
    assert tuple_has("xy", 0, is_string) is False
    assert tuple_has({0: "x"}, 0, is_string) is False
    assert tuple_has(["x"], True, is_string) is False
    assert tuple_has(["x"], "0", is_string) is False


# ------------------------------------------------------------------
# includes
# ------------------------------------------------------------------


def test_includes_literal_membership():
    roles = ("admin", "viewer")

    assert includes(roles, "admin") is True
    assert includes(roles, "root") is False


def test_includes_is_type_strict():
    assert includes((1, 2), True) is False
    assert includes((True,), 1) is False
    assert includes((1,), 1.0) is False
    assert includes((None,), None) is True


def test_includes_handles_unhashable_values():
    assert includes(([1], [2]), [2]) is True


# ------------------------------------------------------------------
# Bundle
# ------------------------------------------------------------------


def test_helper_bundle_exposes_the_four_helpers():
    assert HELPERS.has is has_property
    assert HELPERS.has_optional is has_optional_property
    assert HELPERS.tuple_has is tuple_has
    assert HELPERS.includes is includes


def test_helper_bundle_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        HELPERS.has = lambda *a: True  # type: ignore[misc]


def test_helper_bundle_is_a_value():
    assert Helpers() == HELPERS


# ------------------------------------------------------------------
# Untrusted objects and builtin values
# ------------------------------------------------------------------


class _LazyRecord:
    """An object whose property fails when read, as a lazy-loading model might."""

    @property
    def name(self):
        raise ValueError("lazy load failed")


def test_raising_property_counts_as_absent():
    """
    GIVEN: An object whose property raises something other than AttributeError
    WHEN: The presence helpers look the property up
    THEN: They answer instead of letting the error escape the boolean channel
    """
    record = _LazyRecord()

    assert has_property(record, "name") is False
    assert has_property(record, "name", is_string) is False
    assert has_optional_property(record, "name", is_string) is True


@pytest.mark.parametrize(
    "container,key",
    [("abc", "upper"), ("hi", "title"), ([], "count"), ((), "index"), (3, "real"), (None, "__class__"), (b"x", "hex")],
)
def test_builtin_values_have_no_properties(container, key):
    assert has_property(container, key) is False


def test_includes_is_false_for_non_iterable_set():
    assert includes(None, 1) is False
    assert includes(5, 5) is False
