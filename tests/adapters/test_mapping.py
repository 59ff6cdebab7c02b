"""Tests for Map, Inspect and Enumerate."""

from lazyiter import DONE, DoubleEndedIterator, Some, iterate

# Map


def test_map_both_directions():
    it = iterate([1, 2, 3]).map(lambda x: x * 10)

    assert it.next_back() == Some(30)
    assert it.collect() == [10, 20]


def test_map_fold_calls_f_once_per_element(calls):
    def f(x):
        calls.append(x)
        return x + 1

    assert iterate([1, 2, 3]).map(f).fold(0, lambda acc, x: acc + x) == 9
    assert calls == [1, 2, 3]


def test_map_preserves_size_hint():
    assert iterate(range(4)).map(str).size_hint() == (4, 4)


def test_map_replays():
    it = iterate([1, 2]).map(lambda x: -x)

    assert it.collect() == [-1, -2]
    assert it.into_iter().collect() == [-1, -2]


# Inspect


def test_inspect_sees_only_yielded_elements(calls):
    it = iterate([1, 2]).inspect(calls.append)

    assert it.next() == Some(1)
    assert it.next_back() == Some(2)
    assert it.next() is DONE
    assert calls == [1, 2]


def test_inspect_through_fold(calls):
    assert iterate([1, 2, 3]).inspect(calls.append).rfold(0, lambda acc, x: acc + x) == 6
    assert calls == [3, 2, 1]


# Enumerate


def test_enumerate_forward():
    assert iterate("abc").enumerate().collect() == [(0, "a"), (1, "b"), (2, "c")]


def test_enumerate_back_indices_are_forward_indices():
    """CRITICAL: enumerate().rev() pairs each element with its true index.

    Why: the back index is count + remaining length, not a second counter.
    """
    assert iterate("abc").enumerate().rev().collect() == [(2, "c"), (1, "b"), (0, "a")]


def test_enumerate_mixed_ends():
    it = iterate("abcd").enumerate()

    assert it.next() == Some((0, "a"))
    assert it.next_back() == Some((3, "d"))
    assert it.nth(1) == Some((2, "c"))
    assert it.next() is DONE


def test_enumerate_advance_by_moves_counter():
    it = iterate("abcd").enumerate()

    assert it.advance_by(2) is None
    assert it.next() == Some((2, "c"))


def test_enumerate_try_fold_keeps_count():
    from lazyiter import Break

    it = iterate("abcd").enumerate()

    assert it.try_fold(None, lambda _, pair: Break(pair) if pair[1] == "b" else None) == Break(
        (1, "b")
    )
    assert it.next() == Some((2, "c"))


def test_enumerate_rfold_and_reset():
    it = iterate("ab").enumerate()

    assert it.rfold([], lambda acc, pair: [*acc, pair]) == [(1, "b"), (0, "a")]
    assert it.into_iter().next() == Some((0, "a"))


def test_enumerate_needs_exact_size_for_back_cursor():
    assert isinstance(iterate([1, 2]).enumerate(), DoubleEndedIterator)
    assert not isinstance(iterate([1, 2]).filter(bool).enumerate(), DoubleEndedIterator)
