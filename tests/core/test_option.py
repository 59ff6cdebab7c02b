"""Tests for the Step sentinel."""

import pickle

import pytest

from lazyiter import DONE, Done, Some, is_done, is_some


def test_some_is_truthy_even_for_falsy_values():
    """Some(0), Some(None), Some([]) still mean "an element was yielded"."""
    assert Some(0)
    assert Some(None)
    assert Some([])


def test_done_is_falsy_singleton():
    assert not DONE
    assert Done() is DONE
    assert repr(DONE) == "DONE"


def test_done_survives_pickling_as_singleton():
    assert pickle.loads(pickle.dumps(DONE)) is DONE


def test_some_is_frozen():
    step = Some(1)

    with pytest.raises(AttributeError):
        step.value = 2  # type: ignore[misc]


def test_unwrap_and_unwrap_or():
    assert Some(3).unwrap() == 3
    assert Some(3).unwrap_or(9) == 3
    assert DONE.unwrap_or(9) == 9

    with pytest.raises(ValueError, match="unwrap"):
        DONE.unwrap()


def test_map_keeps_shape():
    assert Some(2).map(lambda x: x * 10) == Some(20)
    assert DONE.map(lambda x: x * 10) is DONE


def test_steps_support_pattern_matching():
    def describe(step):
        match step:
            case Some(value):
                return f"got {value}"
            case Done():
                return "done"

    assert describe(Some(5)) == "got 5"
    assert describe(DONE) == "done"


def test_is_some_and_is_done():
    assert is_some(Some(None))
    assert not is_some(DONE)
    assert is_done(DONE)
    assert not is_done(Some(0))
