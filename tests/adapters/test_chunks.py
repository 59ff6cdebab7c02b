"""Tests for ArrayChunks."""

import pytest

from lazyiter import DONE, iterate


def test_chunks_keep_short_tail_as_remainder():
    it = iterate(range(7)).array_chunks(3)

    assert it.collect() == [[0, 1, 2], [3, 4, 5]]
    assert it.into_remainder() == [6]
    assert it.next() is DONE
    assert it.into_remainder() == [6]


def test_exact_multiple_has_empty_remainder():
    it = iterate(range(6)).array_chunks(3)

    assert it.collect() == [[0, 1, 2], [3, 4, 5]]
    assert it.into_remainder() == []


def test_size_hint_counts_whole_chunks():
    assert iterate(range(7)).array_chunks(3).size_hint() == (2, 2)
    assert iterate(x for x in range(7)).array_chunks(3).size_hint() == (0, None)


def test_chunks_from_unsized_source():
    assert iterate(x for x in "abcde").array_chunks(2).collect() == [["a", "b"], ["c", "d"]]


def test_replay_clears_remainder():
    it = iterate(range(4)).array_chunks(3)
    it.collect()

    assert it.into_iter().next().value == [0, 1, 2]
    assert it.into_remainder() == []


@pytest.mark.parametrize("n", [0, -2])
def test_chunk_size_must_be_positive(n):
    with pytest.raises(ValueError, match="must be positive"):
        iterate(range(3)).array_chunks(n)
