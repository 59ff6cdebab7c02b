"""Flatten and FlatMap.

Flatten keeps one inner iterator per side. A side whose inner iterator runs
dry pulls the next inner value from the same side of the (fused) outer
iterator; once the outer is exhausted it falls back to the inner iterator
buffered on the opposite side. Inner values are turned into iterators with
iterate(), so lists, generator functions and engine iterators all flatten.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Self

from lazyiter.core.arith import checked_add, saturating_add
from lazyiter.core.control import ShortCircuit
from lazyiter.core.option import DONE, Step
from lazyiter.core.types import Folder, SizeHint
from lazyiter.iter.base import DoubleEndedIterator, Iterator
from lazyiter.iter.factory import iterate


def _back(inner: Iterator[Any]) -> DoubleEndedIterator[Any]:
    if not isinstance(inner, DoubleEndedIterator):
        raise TypeError(
            f"Cannot pull from the back of a flattened {type(inner).__name__}: "
            "inner iterators must be double-ended"
        )
    return inner


class Flatten[T](Iterator[T]):
    """Flattens an iterator of iterables by one level."""

    __slots__ = ("_iter", "_front", "_back_inner")

    def __init__(self, iter: Iterator[Any]) -> None:
        self._iter = iter.fuse()
        self._front: Iterator[T] | None = None
        self._back_inner: Iterator[T] | None = None

    def next(self) -> Step[T]:
        while True:
            if self._front is not None:
                step = self._front.next()
                if step is not DONE:
                    return step
                self._front = None
            outer = self._iter.next()
            if outer is DONE:
                return self._next_from_back_inner()
            self._front = iterate(outer.value)

    def _next_from_back_inner(self) -> Step[T]:
        if self._back_inner is None:
            return DONE
        step = self._back_inner.next()
        if step is DONE:
            self._back_inner = None
        return step

    def size_hint(self) -> SizeHint:
        f_lo, f_hi = (0, 0) if self._front is None else self._front.size_hint()
        b_lo, b_hi = (0, 0) if self._back_inner is None else self._back_inner.size_hint()
        lo = saturating_add(f_lo, b_lo)
        if self._iter.size_hint() == (0, 0):
            return (lo, checked_add(f_hi, b_hi))
        return (lo, None)

    def fold[B](self, initial: B, f: Folder[B, T]) -> B:
        acc = initial
        if self._front is not None:
            acc = self._front.fold(acc, f)
            self._front = None
        acc = self._iter.fold(acc, lambda acc, x: iterate(x).fold(acc, f))
        if self._back_inner is not None:
            acc = self._back_inner.fold(acc, f)
            self._back_inner = None
        return acc

    def try_fold[B](self, initial: B, f: Callable[[B, T], Any]) -> Any:
        acc = initial
        if self._front is not None:
            acc = self._front.try_fold(acc, f)
            if isinstance(acc, ShortCircuit):
                return acc
        self._front = None

        def flatten(acc: B, x: Any) -> Any:
            inner = iterate(x)
            self._front = inner
            return inner.try_fold(acc, f)

        acc = self._iter.try_fold(acc, flatten)
        if isinstance(acc, ShortCircuit):
            return acc
        self._front = None
        if self._back_inner is not None:
            acc = self._back_inner.try_fold(acc, f)
            if isinstance(acc, ShortCircuit):
                return acc
        self._back_inner = None
        return acc

    def into_iter(self) -> Self:
        self._iter.into_iter()
        self._front = None
        self._back_inner = None
        return self


class DoubleEndedFlatten[T](Flatten[T], DoubleEndedIterator[T]):
    """Flatten that can be pulled from both ends.

    Pulling from the back requires every inner iterator it touches to be
    double-ended; a forward-only inner raises TypeError.
    """

    __slots__ = ()

    _iter: DoubleEndedIterator[Any]

    def next_back(self) -> Step[T]:
        while True:
            if self._back_inner is not None:
                step = _back(self._back_inner).next_back()
                if step is not DONE:
                    return step
                self._back_inner = None
            outer = self._iter.next_back()
            if outer is DONE:
                return self._next_back_from_front()
            self._back_inner = iterate(outer.value)

    def _next_back_from_front(self) -> Step[T]:
        if self._front is None:
            return DONE
        step = _back(self._front).next_back()
        if step is DONE:
            self._front = None
        return step

    def rfold[B](self, initial: B, f: Folder[B, T]) -> B:
        acc = initial
        if self._back_inner is not None:
            acc = _back(self._back_inner).rfold(acc, f)
            self._back_inner = None
        acc = self._iter.rfold(acc, lambda acc, x: _back(iterate(x)).rfold(acc, f))
        if self._front is not None:
            acc = _back(self._front).rfold(acc, f)
            self._front = None
        return acc

    def try_rfold[B](self, initial: B, f: Callable[[B, T], Any]) -> Any:
        acc = initial
        if self._back_inner is not None:
            acc = _back(self._back_inner).try_rfold(acc, f)
            if isinstance(acc, ShortCircuit):
                return acc
        self._back_inner = None

        def flatten(acc: B, x: Any) -> Any:
            inner = _back(iterate(x))
            self._back_inner = inner
            return inner.try_rfold(acc, f)

        acc = self._iter.try_rfold(acc, flatten)
        if isinstance(acc, ShortCircuit):
            return acc
        self._back_inner = None
        if self._front is not None:
            acc = _back(self._front).try_rfold(acc, f)
            if isinstance(acc, ShortCircuit):
                return acc
        self._front = None
        return acc


class FlatMap[T, U](Flatten[U]):
    """Maps each element to an iterable and flattens the results."""

    __slots__ = ()

    def __init__(self, iter: Iterator[T], f: Callable[[T], Any]) -> None:
        super().__init__(iter.map(f))


class DoubleEndedFlatMap[T, U](FlatMap[T, U], DoubleEndedFlatten[U]):
    __slots__ = ()
