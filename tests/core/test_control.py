"""Tests for short-circuit values and saturating arithmetic."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lazyiter.core import (
    Break,
    Halt,
    PartialChunk,
    Remainder,
    ShortCircuit,
    check_count,
    checked_add,
    into_value,
    is_short_circuit,
    remainder,
    remainder_of,
    saturating_add,
    saturating_mul,
    saturating_sub,
    usize_max,
)

# Short-circuit values


def test_short_circuit_family():
    assert isinstance(Break(1), ShortCircuit)
    assert isinstance(Remainder(1), ShortCircuit)
    assert isinstance(PartialChunk([1], 2), ShortCircuit)
    assert isinstance(Halt(0), ShortCircuit)
    assert is_short_circuit(Break(None))
    assert not is_short_circuit(0)


def test_remainder_must_be_positive():
    """CRITICAL: Remainder(0) would be indistinguishable from success.

    Why: a successful advance returns None, never a zero remainder.
    """
    with pytest.raises(ValueError):
        Remainder(0)
    with pytest.raises(ValueError):
        Remainder(-3)


def test_remainder_helpers():
    assert remainder(0) is None
    assert remainder(4) == Remainder(4)
    assert remainder_of(None) == 0
    assert remainder_of(Remainder(2)) == 2


def test_partial_chunk_message():
    chunk = PartialChunk([1, 2], 5)

    assert chunk.message == (
        "'next_chunk' couldn't fill a container of 5 elements, "
        "but a container of 2 elements were found"
    )


def test_into_value_unwraps_break_only():
    assert into_value(Break(7)) == 7
    assert into_value(7) == 7


# Arithmetic


def test_saturating_sub_floors_at_zero():
    assert saturating_sub(3, 5) == 0
    assert saturating_sub(5, 3) == 2


def test_saturating_ops_clamp_to_usize_max():
    top = usize_max()

    assert saturating_add(top, 1) == top
    assert saturating_mul(top, 2) == top


def test_checked_ops_return_none_past_the_bound():
    top = usize_max()

    assert checked_add(top, 1) is None
    assert checked_add(None, 1) is None
    assert checked_add(1, 2) == 3


def test_check_count_rejects_negative():
    assert check_count(0) == 0
    with pytest.raises(ValueError, match="steps must be non-negative"):
        check_count(-1, "steps")


@given(a=st.integers(min_value=0, max_value=2**60), b=st.integers(min_value=0, max_value=2**60))
def test_saturating_add_never_exceeds_bound(a, b):
    """PROPERTY: saturating results stay within [0, usize_max]."""
    assert 0 <= saturating_add(a, b) <= usize_max()
    assert saturating_sub(a, b) >= 0
