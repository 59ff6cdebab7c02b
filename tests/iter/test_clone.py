"""Tests for clone(): a fork that advances independently of its original."""

from hypothesis import given
from hypothesis import strategies as st

from lazyiter import DONE, Some, from_fn, iterate
from lazyiter.iter import GenIter, IterableIter


def test_clone_array_advances_independently():
    it = iterate([1, 2, 3, 4])
    it.next()
    fork = it.clone()

    assert fork.next() == Some(2)
    assert fork.next() == Some(3)
    assert it.next() == Some(2)
    assert it.next_back() == Some(4)
    assert fork.collect() == [4]
    assert it.collect() == [3]


def test_clone_pipeline_copies_counters():
    """CRITICAL: skip/take/step_by counters and filter state belong to the fork."""
    it = iterate(range(20)).filter(lambda x: x % 2 == 0).map(str).skip(1).step_by(2).take(4)
    assert it.next() == Some("2")
    fork = it.clone()

    assert fork.collect() == ["6", "10", "14"]
    assert it.next() == Some("6")
    assert it.collect() == ["10", "14"]


def test_clone_enumerate_keeps_index():
    it = iterate("abc").enumerate()
    it.next()
    fork = it.clone()

    assert fork.collect() == [(1, "b"), (2, "c")]
    assert it.next() == Some((1, "b"))


def test_clone_peekable_keeps_peeked_element():
    it = iterate([1, 2, 3]).peekable()
    assert it.peek() == Some(1)
    fork = it.clone()

    assert it.next() == Some(1)
    assert fork.peek() == Some(1)
    assert fork.collect() == [1, 2, 3]
    assert it.collect() == [2, 3]


def test_clone_flatten_mid_inner():
    it = iterate([[1, 2, 3], [4, 5]]).flatten()
    it.next()
    fork = it.clone()

    assert it.next() == Some(2)
    assert fork.collect() == [2, 3, 4, 5]
    assert it.collect() == [3, 4, 5]


def test_clone_double_ended_chain_and_zip():
    chain = iterate([1, 2]).chain([3, 4])
    chain.next_back()
    chain_fork = chain.clone()

    assert chain.next_back() == Some(3)
    assert chain_fork.rev().collect() == [3, 2, 1]

    zipped = iterate([1, 2, 3]).zip("ab")
    fork = zipped.clone()

    assert zipped.next_back() == Some((2, "b"))
    assert fork.next_back() == Some((2, "b"))
    assert fork.next() == Some((1, "a"))
    assert zipped.next() == Some((1, "a"))


def test_clone_generator_object_is_teed():
    it = iterate(x * 10 for x in range(4))
    assert isinstance(it, IterableIter)
    it.next()
    fork = it.clone()

    assert fork.collect() == [10, 20, 30]
    assert it.collect() == [10, 20, 30]


def test_clone_generator_function_is_teed():
    def gen():
        yield from "xyz"

    it = iterate(gen)
    assert isinstance(it, GenIter)
    it.next()
    fork = it.clone()

    assert it.next() == Some("y")
    assert fork.collect() == ["y", "z"]
    assert fork.into_iter().collect() == ["x", "y", "z"]


def test_clone_from_fn_shares_closure():
    """A from_fn clone calls the same closure, so the two share its state."""
    state = iter([1, 2, 3])

    def pull():
        value = next(state, None)
        return DONE if value is None else Some(value)

    it = from_fn(pull)
    fork = it.clone()

    assert it.next() == Some(1)
    assert fork.next() == Some(2)


def test_clone_does_not_touch_the_original():
    it = iterate([1, 2, 3]).skip(1)
    it.clone().collect()

    assert it.collect() == [2, 3]


def test_clone_split_keeps_finished_flag():
    it = iterate("a,b").split(",")
    it.next()
    it.next()
    fork = it.clone()

    assert fork.next() is DONE
    assert it.into_iter().collect() == ["a", "b"]


@given(xs=st.lists(st.integers(), max_size=20), at=st.integers(min_value=0, max_value=25))
def test_clone_collects_same_remainder(xs, at):
    it = iterate(xs).map(lambda x: x + 1).filter(lambda x: x % 3 != 0)
    it.advance_by(at)
    fork = it.clone()

    assert fork.collect() == it.collect()
