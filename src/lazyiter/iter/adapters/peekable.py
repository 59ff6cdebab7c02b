"""Peekable: one step of lookahead.

The buffer holds None (nothing peeked), Some(value), or DONE (the source was
found exhausted while peeking). Every consumer drains the buffer before it
touches the source, so a peeked element is never yielded or counted twice.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Self

from lazyiter.core.arith import checked_add, saturating_add
from lazyiter.core.control import ShortCircuit
from lazyiter.core.option import DONE, Some, Step
from lazyiter.core.types import Folder, Predicate, SizeHint
from lazyiter.iter.base import DoubleEndedIterator, Iterator


class Peekable[T](Iterator[T]):
    __slots__ = ("_iter", "_peeked")

    def __init__(self, iter: Iterator[T]) -> None:
        self._iter = iter
        self._peeked: Step[T] | None = None

    def _take_peeked(self) -> Step[T] | None:
        peeked, self._peeked = self._peeked, None
        return peeked

    def peek(self) -> Step[T]:
        """Return the next element without consuming it."""
        if self._peeked is None:
            self._peeked = self._iter.next()
        return self._peeked

    def next_if(self, predicate: Predicate[T]) -> Step[T]:
        """Consume and return the next element only if it satisfies predicate.

        Otherwise the element stays buffered and DONE is returned.
        """
        step = self.next()
        if step is not DONE and predicate(step.value):
            return step
        self._peeked = step
        return DONE

    def next_if_eq(self, expected: Any) -> Step[T]:
        return self.next_if(lambda x: x == expected)

    def next(self) -> Step[T]:
        peeked = self._take_peeked()
        if peeked is not None:
            return peeked
        return self._iter.next()

    def count(self) -> int:
        peeked = self._take_peeked()
        if peeked is DONE:
            return 0
        if peeked is None:
            return self._iter.count()
        return 1 + self._iter.count()

    def nth(self, n: int) -> Step[T]:
        peeked = self._take_peeked()
        if peeked is DONE:
            return DONE
        if peeked is None:
            return self._iter.nth(n)
        if n == 0:
            return peeked
        return self._iter.nth(n - 1)

    def last(self) -> Step[T]:
        peeked = self._take_peeked()
        if peeked is DONE:
            return DONE
        last = self._iter.last()
        if last is DONE and peeked is not None:
            return peeked
        return last

    def size_hint(self) -> SizeHint:
        if self._peeked is DONE:
            return (0, 0)
        peek_len = 0 if self._peeked is None else 1
        lo, hi = self._iter.size_hint()
        return (saturating_add(lo, peek_len), checked_add(hi, peek_len))

    def fold[B](self, initial: B, f: Folder[B, T]) -> B:
        peeked = self._take_peeked()
        if peeked is DONE:
            return initial
        acc = initial if peeked is None else f(initial, peeked.value)
        return self._iter.fold(acc, f)

    def try_fold[B](self, initial: B, f: Callable[[B, T], Any]) -> Any:
        peeked = self._take_peeked()
        if peeked is DONE:
            return initial
        acc = initial
        if peeked is not None:
            acc = f(acc, peeked.value)
            if isinstance(acc, ShortCircuit):
                return acc
        return self._iter.try_fold(acc, f)

    def into_iter(self) -> Self:
        self._iter.into_iter()
        self._peeked = None
        return self


class DoubleEndedPeekable[T](Peekable[T], DoubleEndedIterator[T]):
    """Peekable pulled from the back.

    A buffered front element is the first element of what remains, so the back
    only falls back to it once the source itself is exhausted.
    """

    __slots__ = ()

    _iter: DoubleEndedIterator[T]

    def next_back(self) -> Step[T]:
        if self._peeked is DONE:
            return DONE
        if self._peeked is None:
            return self._iter.next_back()
        step = self._iter.next_back()
        if step is DONE:
            return self._take_peeked()
        return step

    def rfold[B](self, initial: B, f: Folder[B, T]) -> B:
        peeked = self._take_peeked()
        if peeked is DONE:
            return initial
        acc = self._iter.rfold(initial, f)
        if peeked is not None:
            acc = f(acc, peeked.value)
        return acc

    def try_rfold[B](self, initial: B, f: Callable[[B, T], Any]) -> Any:
        peeked = self._take_peeked()
        if peeked is DONE:
            return initial
        acc = self._iter.try_rfold(initial, f)
        if peeked is None:
            return acc
        if isinstance(acc, ShortCircuit):
            self._peeked = peeked
            return acc
        return f(acc, peeked.value)
