"""Tests for the validated slot count."""

import dataclasses

import pytest

from jumphash import MAX_SLOTS, Slots


def test_valid_construction():
    """Test that positive u32 values are accepted and readable."""
    assert Slots(1).value == 1
    assert Slots(1000).value == 1000
    assert Slots(MAX_SLOTS).value == MAX_SLOTS


@pytest.mark.parametrize("value", [0, -5, MAX_SLOTS + 1])
def test_out_of_range_rejected(value):
    """Test that zero, negative and > u32 counts fail fast."""
    with pytest.raises(ValueError):
        Slots(value)


def test_zero_message():
    """Test that zero slots gives a clear message."""
    with pytest.raises(ValueError, match="greater than 0"):
        Slots(0)


@pytest.mark.parametrize("value", [1.0, "10", True, None])
def test_non_integer_rejected(value):
    """Test that non-integer counts are rejected (bool included)."""
    with pytest.raises(ValueError):
        Slots(value)


def test_immutable():
    """Test that Slots is read-only after construction."""
    slots = Slots(10)
    with pytest.raises(dataclasses.FrozenInstanceError):
        slots.value = 20


def test_equality_and_ordering():
    """Test that equality and ordering follow the wrapped integer."""
    assert Slots(10) == Slots(10)
    assert Slots(10) != Slots(11)
    assert Slots(3) < Slots(4)
    assert max(Slots(7), Slots(2), Slots(5)) == Slots(7)
    assert hash(Slots(10)) == hash(Slots(10))


def test_int_conversion():
    """Test int() and index use."""
    slots = Slots(4)
    assert int(slots) == 4
    assert list(range(slots)) == [0, 1, 2, 3]


def test_coerce():
    """Test that coerce passes Slots through and validates ints."""
    slots = Slots(8)
    assert Slots.coerce(slots) is slots
    assert Slots.coerce(8) == slots
    with pytest.raises(ValueError):
        Slots.coerce(0)
