"""Tests for Intersperse and IntersperseWith."""

import pytest

from lazyiter import iterate
from lazyiter.iter.adapters.intersperse import _IntersperseBase


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ([1, 2, 3], [1, 0, 2, 0, 3]),
        ([1], [1]),
        ([], []),
    ],
)
def test_no_leading_or_trailing_separator(source, expected):
    assert iterate(source).intersperse(0).collect() == expected


def test_size_hint_tracks_pending_separator():
    it = iterate([1, 2, 3]).intersperse(0)

    assert it.size_hint() == (5, 5)
    it.next()
    assert it.size_hint() == (4, 4)
    it.next()
    assert it.size_hint() == (3, 3)


def test_fold():
    assert iterate("abc").intersperse("-").fold("", lambda acc, x: acc + x) == "a-b-c"


def test_fold_after_partial_pull():
    it = iterate("abc").intersperse("-")
    it.next()

    assert it.fold("", lambda acc, x: acc + x) == "-b-c"


def test_intersperse_with_calls_factory_per_gap(calls):
    def separator():
        calls.append("sep")
        return 0

    assert iterate([1, 2, 3]).intersperse_with(separator).collect() == [1, 0, 2, 0, 3]
    assert calls == ["sep", "sep"]


def test_intersperse_replays():
    it = iterate([1, 2]).intersperse(0)
    it.collect()

    assert it.into_iter().collect() == [1, 0, 2]


def test_intersperse_base_requires_a_separator():
    """The shared base is abstract until a subclass says how to make a separator."""
    with pytest.raises(TypeError, match="_separator"):
        _IntersperseBase(iterate([1, 2]))
