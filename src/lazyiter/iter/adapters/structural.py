"""Structural adapters: Chain, Zip, Cycle, Fuse, Rev."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Self

from lazyiter.core.arith import check_count, checked_add, saturating_add, usize_max
from lazyiter.core.control import Remainder, ShortCircuit, remainder
from lazyiter.core.option import DONE, Some, Step
from lazyiter.core.types import Folder, Predicate, SizeHint
from lazyiter.iter.base import DoubleEndedIterator, Iterator


class Chain[T](Iterator[T]):
    """Yields everything from a, then everything from b.

    Each half is dropped from consideration (but kept for into_iter()) as soon
    as it reports DONE on the side being pulled.
    """

    __slots__ = ("_a", "_b", "_a_done", "_b_done")

    def __init__(self, a: Iterator[T], b: Iterator[T]) -> None:
        self._a = a
        self._b = b
        self._a_done = False
        self._b_done = False

    def next(self) -> Step[T]:
        if not self._a_done:
            step = self._a.next()
            if step is not DONE:
                return step
            self._a_done = True
        if self._b_done:
            return DONE
        return self._b.next()

    def size_hint(self) -> SizeHint:
        if self._a_done and self._b_done:
            return (0, 0)
        if self._b_done:
            return self._a.size_hint()
        if self._a_done:
            return self._b.size_hint()
        a_lo, a_hi = self._a.size_hint()
        b_lo, b_hi = self._b.size_hint()
        return (saturating_add(a_lo, b_lo), checked_add(a_hi, b_hi))

    def count(self) -> int:
        a = 0 if self._a_done else self._a.count()
        b = 0 if self._b_done else self._b.count()
        return a + b

    def advance_by(self, n: int) -> Remainder | None:
        check_count(n)
        if not self._a_done:
            result = self._a.advance_by(n)
            if result is None:
                return None
            n = result.remaining
            self._a_done = True
        if not self._b_done:
            return self._b.advance_by(n)
        return remainder(n)

    def nth(self, n: int) -> Step[T]:
        if not self._a_done:
            result = self._a.advance_by(n)
            if result is None:
                step = self._a.next()
                if step is not DONE:
                    return step
                n = 0
            else:
                n = result.remaining
            self._a_done = True
        if self._b_done:
            return DONE
        return self._b.nth(n)

    def last(self) -> Step[T]:
        a_last = DONE if self._a_done else self._a.last()
        b_last = DONE if self._b_done else self._b.last()
        return b_last if b_last is not DONE else a_last

    def fold[B](self, initial: B, f: Folder[B, T]) -> B:
        acc = initial
        if not self._a_done:
            acc = self._a.fold(acc, f)
        if not self._b_done:
            acc = self._b.fold(acc, f)
        return acc

    def try_fold[B](self, initial: B, f: Callable[[B, T], Any]) -> Any:
        acc = initial
        if not self._a_done:
            acc = self._a.try_fold(acc, f)
            if isinstance(acc, ShortCircuit):
                return acc
            self._a_done = True
        if not self._b_done:
            acc = self._b.try_fold(acc, f)
        return acc

    def into_iter(self) -> Self:
        self._a.into_iter()
        self._b.into_iter()
        self._a_done = False
        self._b_done = False
        return self


class DoubleEndedChain[T](Chain[T], DoubleEndedIterator[T]):
    """Chain whose back drains b from its back before falling back to a."""

    __slots__ = ()

    _a: DoubleEndedIterator[T]
    _b: DoubleEndedIterator[T]

    def next_back(self) -> Step[T]:
        if not self._b_done:
            step = self._b.next_back()
            if step is not DONE:
                return step
            self._b_done = True
        if self._a_done:
            return DONE
        return self._a.next_back()

    def advance_back_by(self, n: int) -> Remainder | None:
        check_count(n)
        if not self._b_done:
            result = self._b.advance_back_by(n)
            if result is None:
                return None
            n = result.remaining
            self._b_done = True
        if not self._a_done:
            return self._a.advance_back_by(n)
        return remainder(n)

    def nth_back(self, n: int) -> Step[T]:
        if not self._b_done:
            result = self._b.advance_back_by(n)
            if result is None:
                step = self._b.next_back()
                if step is not DONE:
                    return step
                n = 0
            else:
                n = result.remaining
            self._b_done = True
        if self._a_done:
            return DONE
        return self._a.nth_back(n)

    def rfind(self, predicate: Predicate[T]) -> Step[T]:
        if not self._b_done:
            step = self._b.rfind(predicate)
            if step is not DONE:
                return step
            self._b_done = True
        if self._a_done:
            return DONE
        return self._a.rfind(predicate)

    def rfold[B](self, initial: B, f: Folder[B, T]) -> B:
        acc = initial
        if not self._b_done:
            acc = self._b.rfold(acc, f)
        if not self._a_done:
            acc = self._a.rfold(acc, f)
        return acc

    def try_rfold[B](self, initial: B, f: Callable[[B, T], Any]) -> Any:
        acc = initial
        if not self._b_done:
            acc = self._b.try_rfold(acc, f)
            if isinstance(acc, ShortCircuit):
                return acc
            self._b_done = True
        if not self._a_done:
            acc = self._a.try_rfold(acc, f)
        return acc


class Zip[A, B](Iterator[tuple[A, B]]):
    """Pairs elements of a and b, stopping as soon as either runs out.

    The left side is always pulled first; if it yields but the right side is
    exhausted, the left element is discarded.
    """

    __slots__ = ("_a", "_b")

    def __init__(self, a: Iterator[A], b: Iterator[B]) -> None:
        self._a = a
        self._b = b

    def next(self) -> Step[tuple[A, B]]:
        x = self._a.next()
        if x is DONE:
            return DONE
        y = self._b.next()
        if y is DONE:
            return DONE
        return Some((x.value, y.value))

    def size_hint(self) -> SizeHint:
        a_lo, a_hi = self._a.size_hint()
        b_lo, b_hi = self._b.size_hint()
        if a_hi is None:
            hi = b_hi
        elif b_hi is None:
            hi = a_hi
        else:
            hi = min(a_hi, b_hi)
        return (min(a_lo, b_lo), hi)

    def into_iter(self) -> Self:
        self._a.into_iter()
        self._b.into_iter()
        return self


class DoubleEndedZip[A, B](Zip[A, B], DoubleEndedIterator[tuple[A, B]]):
    """Zip of two exact-size sides, pulled from the back.

    The longer side is trimmed before the first back pull, so back pairs are
    the same pairs the front would have produced. Once trimmed, both sides
    shrink together and stay equal in length.
    """

    __slots__ = ("_trimmed",)

    _a: DoubleEndedIterator[A]
    _b: DoubleEndedIterator[B]

    def __init__(self, a: DoubleEndedIterator[A], b: DoubleEndedIterator[B]) -> None:
        super().__init__(a, b)
        self._trimmed = False

    def _trim(self) -> None:
        if self._trimmed:
            return
        self._trimmed = True
        a_len = self._a.len()
        b_len = self._b.len()
        if a_len > b_len:
            self._a.advance_back_by(a_len - b_len)
        elif b_len > a_len:
            self._b.advance_back_by(b_len - a_len)

    def next_back(self) -> Step[tuple[A, B]]:
        self._trim()
        x = self._a.next_back()
        if x is DONE:
            return DONE
        y = self._b.next_back()
        if y is DONE:
            return DONE
        return Some((x.value, y.value))

    def into_iter(self) -> Self:
        super().into_iter()
        self._trimmed = False
        return self


class Cycle[T](Iterator[T]):
    """Repeats the source forever by rewinding it with into_iter() on exhaustion.

    An empty source stays empty: the rewind is attempted once per pull, never
    in a loop.
    """

    __slots__ = ("_iter", "_nonempty")

    def __init__(self, iter: Iterator[T]) -> None:
        self._iter = iter
        self._nonempty = False

    def _seen(self, step: Step[T]) -> Step[T]:
        if step is not DONE:
            self._nonempty = True
        return step

    def next(self) -> Step[T]:
        step = self._iter.next()
        if step is DONE:
            step = self._iter.into_iter().next()
        return self._seen(step)

    def size_hint(self) -> SizeHint:
        if self._nonempty:
            return (usize_max(), None)
        lo, hi = self._iter.size_hint()
        if hi == 0:
            return (0, 0)
        if lo > 0:
            return (usize_max(), None)
        return (0, None)

    def into_iter(self) -> Self:
        self._iter.into_iter()
        self._nonempty = False
        return self


class DoubleEndedCycle[T](Cycle[T], DoubleEndedIterator[T]):
    __slots__ = ()

    _iter: DoubleEndedIterator[T]

    def next_back(self) -> Step[T]:
        step = self._iter.next_back()
        if step is DONE:
            step = self._iter.into_iter().next_back()
        return self._seen(step)


class Fuse[T](Iterator[T]):
    """Once DONE has been returned, always returns DONE."""

    __slots__ = ("_iter", "_done")

    def __init__(self, iter: Iterator[T]) -> None:
        self._iter = iter
        self._done = False

    def _fuse(self, step: Step[T]) -> Step[T]:
        if step is DONE:
            self._done = True
        return step

    def next(self) -> Step[T]:
        if self._done:
            return DONE
        return self._fuse(self._iter.next())

    def nth(self, n: int) -> Step[T]:
        if self._done:
            return DONE
        return self._fuse(self._iter.nth(n))

    def size_hint(self) -> SizeHint:
        if self._done:
            return (0, 0)
        return self._iter.size_hint()

    def fold[B](self, initial: B, f: Folder[B, T]) -> B:
        if self._done:
            return initial
        acc = self._iter.fold(initial, f)
        self._done = True
        return acc

    def try_fold[B](self, initial: B, f: Callable[[B, T], Any]) -> Any:
        if self._done:
            return initial
        acc = self._iter.try_fold(initial, f)
        if not isinstance(acc, ShortCircuit):
            self._done = True
        return acc

    def into_iter(self) -> Self:
        self._iter.into_iter()
        self._done = False
        return self


class DoubleEndedFuse[T](Fuse[T], DoubleEndedIterator[T]):
    __slots__ = ()

    _iter: DoubleEndedIterator[T]

    def next_back(self) -> Step[T]:
        if self._done:
            return DONE
        return self._fuse(self._iter.next_back())

    def nth_back(self, n: int) -> Step[T]:
        if self._done:
            return DONE
        return self._fuse(self._iter.nth_back(n))

    def rfold[B](self, initial: B, f: Folder[B, T]) -> B:
        if self._done:
            return initial
        acc = self._iter.rfold(initial, f)
        self._done = True
        return acc

    def try_rfold[B](self, initial: B, f: Callable[[B, T], Any]) -> Any:
        if self._done:
            return initial
        acc = self._iter.try_rfold(initial, f)
        if not isinstance(acc, ShortCircuit):
            self._done = True
        return acc


class Rev[T](DoubleEndedIterator[T]):
    """Swaps the front and back cursors of a double-ended iterator."""

    __slots__ = ("_iter",)

    def __init__(self, iter: DoubleEndedIterator[T]) -> None:
        self._iter = iter

    def next(self) -> Step[T]:
        return self._iter.next_back()

    def next_back(self) -> Step[T]:
        return self._iter.next()

    def nth(self, n: int) -> Step[T]:
        return self._iter.nth_back(n)

    def nth_back(self, n: int) -> Step[T]:
        return self._iter.nth(n)

    def advance_by(self, n: int) -> Remainder | None:
        return self._iter.advance_back_by(n)

    def advance_back_by(self, n: int) -> Remainder | None:
        return self._iter.advance_by(n)

    def size_hint(self) -> SizeHint:
        return self._iter.size_hint()

    def fold[B](self, initial: B, f: Folder[B, T]) -> B:
        return self._iter.rfold(initial, f)

    def rfold[B](self, initial: B, f: Folder[B, T]) -> B:
        return self._iter.fold(initial, f)

    def try_fold[B](self, initial: B, f: Callable[[B, T], Any]) -> Any:
        return self._iter.try_rfold(initial, f)

    def try_rfold[B](self, initial: B, f: Callable[[B, T], Any]) -> Any:
        return self._iter.try_fold(initial, f)

    def find(self, predicate: Predicate[T]) -> Step[T]:
        return self._iter.rfind(predicate)

    def rfind(self, predicate: Predicate[T]) -> Step[T]:
        return self._iter.find(predicate)

    def into_iter(self) -> Self:
        self._iter.into_iter()
        return self
