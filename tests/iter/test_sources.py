"""Tests for leaf iterators, free functions, the factory and drain."""

import pytest

from lazyiter import (
    DONE,
    ArrayIter,
    DoubleEndedIterator,
    Remainder,
    ReplayWarning,
    Some,
    SourceKind,
    classify,
    collect,
    drain,
    empty,
    from_fn,
    iterate,
    of,
    once,
    once_with,
    range_iter,
    repeat,
    repeat_with,
    successors,
)
from lazyiter.iter import GenIter, IterableIter

# ArrayIter


def test_array_iter_meets_in_the_middle():
    """CRITICAL: once the cursors meet, both ends stay DONE."""
    it = iterate([1, 2, 3])

    assert it.next() == Some(1)
    assert it.next_back() == Some(3)
    assert it.next() == Some(2)
    assert it.next_back() is DONE
    assert it.next() is DONE


def test_array_iter_positional_ops():
    it = ArrayIter(list(range(10)))

    assert it.nth(2) == Some(2)
    assert it.nth_back(2) == Some(7)
    assert it.len() == 4
    assert it.advance_by(10) == Remainder(6)
    assert it.next() is DONE


def test_array_iter_count_and_last_exhaust():
    it = iterate("abcd")

    assert it.last() == Some("d")
    assert it.next() is DONE
    assert it.into_iter().count() == 4
    assert it.next_back() is DONE


def test_array_iter_yields_none_elements():
    assert iterate([None, 0, None]).collect() == [None, 0, None]


# GenIter / IterableIter


def test_generator_function_replays():
    def gen():
        yield from (1, 2, 3)

    it = iterate(gen)

    assert isinstance(it, GenIter)
    assert it.collect() == [1, 2, 3]
    assert it.into_iter().collect() == [1, 2, 3]


def test_container_iterable_replays():
    it = iterate({"a": 1, "b": 2})

    assert isinstance(it, IterableIter)
    assert it.collect() == ["a", "b"]
    assert it.into_iter().collect() == ["a", "b"]


def test_one_shot_iterable_warns_on_replay():
    it = iterate(iter([1, 2]))
    it.collect()

    with pytest.warns(ReplayWarning):
        assert it.into_iter().collect() == []


def test_iterable_size_hint_uses_length_hint():
    assert iterate({1, 2, 3}).size_hint() == (3, None)


# Factory


@pytest.mark.parametrize(
    ("source", "kind"),
    [
        ([1, 2], SourceKind.SEQUENCE),
        ((1, 2), SourceKind.SEQUENCE),
        ("ab", SourceKind.SEQUENCE),
        (range(3), SourceKind.SEQUENCE),
        ({1, 2}, SourceKind.ITERABLE),
        ({"a": 1}, SourceKind.ITERABLE),
        (iter([1]), SourceKind.ITERABLE),
        (lambda: [1], SourceKind.FACTORY),
        (of(1), SourceKind.ITER),
    ],
)
def test_classify(source, kind):
    assert classify(source) is kind


def test_iterate_returns_engine_iterators_unchanged():
    it = of(1, 2)

    assert iterate(it) is it


def test_iterate_defaults_to_empty():
    assert iterate().collect() == []


def test_iterate_rejects_non_iterables():
    with pytest.raises(TypeError, match="Cannot iterate"):
        iterate(42)


def test_collect_free_function():
    assert collect((3, 1, 2), into=sorted) == [1, 2, 3]
    assert collect(x * 2 for x in range(3)) == [0, 2, 4]


# Free functions


def test_successors():
    powers = successors(1, lambda x: x * 2 if x < 8 else None)

    assert powers.size_hint() == (1, None)
    assert powers.collect() == [1, 2, 4, 8]
    assert powers.size_hint() == (0, 0)
    assert powers.into_iter().collect() == [1, 2, 4, 8]
    assert successors(None, lambda x: x).collect() == []


def test_repeat_is_infinite_from_both_ends():
    it = repeat("x")

    assert it.take(3).collect() == ["x", "x", "x"]
    assert it.next_back() == Some("x")
    assert it.nth(1_000_000) == Some("x")
    assert it.advance_by(10) is None


def test_repeat_cannot_be_fully_consumed():
    with pytest.raises(OverflowError):
        repeat(1).count()
    with pytest.raises(OverflowError):
        repeat(1).last()
    with pytest.raises(OverflowError):
        repeat_with(lambda: 1).count()


def test_repeat_with_calls_each_time(calls):
    it = repeat_with(lambda: calls.append(1) or len(calls))

    assert it.take(3).collect() == [1, 2, 3]


def test_once_and_once_with(calls):
    assert once(5).collect() == [5]
    assert once(5).next_back() == Some(5)

    lazy = once_with(lambda: calls.append("called") or 7)
    assert calls == []
    assert lazy.len() == 1
    assert lazy.next() == Some(7)
    assert lazy.len() == 0
    assert calls == ["called"]


def test_empty():
    it = empty()

    assert it.next() is DONE
    assert it.next_back() is DONE
    assert it.len() == 0


def test_range_iter():
    it = range_iter(2, 6)

    assert isinstance(it, DoubleEndedIterator)
    assert it.len() == 4
    assert it.rev().collect() == [5, 4, 3, 2]
    assert it.into_iter().collect() == [2, 3, 4, 5]
    assert range_iter(3, 3).collect() == []


def test_range_iter_rejects_reversed_bounds():
    with pytest.raises(ValueError, match="greater than end"):
        range_iter(5, 1)


def test_from_fn():
    state = {"n": 0}

    def count_to_three():
        state["n"] += 1
        return Some(state["n"]) if state["n"] <= 3 else DONE

    it = from_fn(count_to_three)

    assert it.collect() == [1, 2, 3]
    with pytest.warns(ReplayWarning, match="from_fn"):
        it.into_iter()


def test_of():
    assert of(1, 2, 3).rev().collect() == [3, 2, 1]
    assert of().collect() == []


# Drain


def test_drain_removes_up_front():
    items = [0, 1, 2, 3, 4, 5]

    removed = drain(items, 1, 4)

    assert items == [0, 4, 5]
    assert removed.len() == 3
    assert removed.next_back() == Some(3)
    assert removed.collect() == [1, 2]


def test_drain_keep_rest_restores_unyielded():
    items = [0, 1, 2, 3, 4, 5]
    removed = drain(items, 1, 5)

    assert removed.next() == Some(1)
    assert removed.next_back() == Some(4)
    removed.keep_rest()

    assert items == [0, 2, 3, 5]
    assert removed.next() is DONE


def test_drain_defaults_to_whole_list():
    items = [1, 2]

    assert drain(items).collect() == [1, 2]
    assert items == []


@pytest.mark.parametrize(("start", "end"), [(-1, 2), (2, 1), (0, 9)])
def test_drain_rejects_bad_bounds(start, end):
    with pytest.raises(ValueError, match="Invalid drain range"):
        drain([1, 2, 3], start, end)


def test_drain_cannot_replay():
    removed = drain([1, 2, 3])
    removed.collect()

    with pytest.warns(ReplayWarning, match="drain"):
        assert removed.into_iter().collect() == []
