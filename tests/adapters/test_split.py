"""Tests for split() and rsplit() over character iterators."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lazyiter import DONE, DoubleEndedIterator, Some, iterate


def test_split_words():
    assert iterate("hello world").split(" ").collect() == ["hello", "world"]


def test_rsplit_yields_segments_from_the_end():
    assert iterate("hello world").rsplit(" ").collect() == ["world", "hello"]


@pytest.mark.parametrize(
    "text",
    ["", ",", "a", "a,", ",a", "a,,b", ",,", "a,b,c", "no separators here"],
)
def test_split_matches_str_split(text):
    """CRITICAL: empty segments are yielded, including a trailing one."""
    assert iterate(text).split(",").collect() == text.split(",")
    assert iterate(text).rsplit(",").collect() == text.split(",")[::-1]


def test_split_from_both_ends_meets_in_the_middle():
    it = iterate("a,b,c,d").split(",")

    assert it.next() == Some("a")
    assert it.next_back() == Some("d")
    assert it.next_back() == Some("c")
    assert it.next() == Some("b")
    assert it.next() is DONE
    assert it.next_back() is DONE


def test_split_middle_segment_yielded_once():
    it = iterate("a,b").split(",")

    assert it.next_back() == Some("b")
    assert it.next_back() == Some("a")
    assert it.next() is DONE


def test_split_back_segments_read_left_to_right():
    assert iterate("ab,cd").split(",").next_back() == Some("cd")


def test_split_over_forward_only_source():
    it = iterate(ch for ch in "x;y")
    split = it.split(";")

    assert not isinstance(split, DoubleEndedIterator)
    assert split.collect() == ["x", "y"]


@pytest.mark.parametrize("sep", ["", "ab", 1])
def test_split_rejects_bad_separator(sep):
    with pytest.raises(ValueError, match="single character"):
        iterate("a,b").split(sep)


def test_split_size_hint():
    it = iterate("a,b").split(",")

    assert it.size_hint() == (1, 4)
    it.collect()
    assert it.size_hint() == (0, 0)


def test_split_replays():
    it = iterate("a,b").split(",")
    it.collect()

    assert it.into_iter().collect() == ["a", "b"]


@given(text=st.text(alphabet="ab,", max_size=20))
def test_split_agrees_with_str_split(text):
    assert iterate(text).split(",").collect() == text.split(",")
    assert iterate(text).rsplit(",").collect() == text.split(",")[::-1]
