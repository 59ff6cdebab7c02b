"""Element-wise adapters: Map, Inspect, Enumerate."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Self

from lazyiter.core.control import Remainder, remainder_of
from lazyiter.core.option import DONE, Some, Step
from lazyiter.core.types import Folder, SizeHint
from lazyiter.iter.base import DoubleEndedIterator, Iterator


class Map[A, B](Iterator[B]):
    """Applies f to every element."""

    __slots__ = ("_iter", "_f")

    def __init__(self, iter: Iterator[A], f: Callable[[A], B]) -> None:
        self._iter = iter
        self._f = f

    def next(self) -> Step[B]:
        return self._iter.next().map(self._f)

    def size_hint(self) -> SizeHint:
        return self._iter.size_hint()

    def fold[C](self, initial: C, g: Folder[C, B]) -> C:
        f = self._f
        return self._iter.fold(initial, lambda acc, x: g(acc, f(x)))

    def try_fold[C](self, initial: C, g: Callable[[C, B], Any]) -> Any:
        f = self._f
        return self._iter.try_fold(initial, lambda acc, x: g(acc, f(x)))

    def into_iter(self) -> Self:
        self._iter.into_iter()
        return self


class DoubleEndedMap[A, B](Map[A, B], DoubleEndedIterator[B]):
    __slots__ = ()

    _iter: DoubleEndedIterator[A]

    def next_back(self) -> Step[B]:
        return self._iter.next_back().map(self._f)

    def rfold[C](self, initial: C, g: Folder[C, B]) -> C:
        f = self._f
        return self._iter.rfold(initial, lambda acc, x: g(acc, f(x)))

    def try_rfold[C](self, initial: C, g: Callable[[C, B], Any]) -> Any:
        f = self._f
        return self._iter.try_rfold(initial, lambda acc, x: g(acc, f(x)))


class Inspect[T](Iterator[T]):
    """Calls f on each element before passing it on unchanged."""

    __slots__ = ("_iter", "_f")

    def __init__(self, iter: Iterator[T], f: Callable[[T], Any]) -> None:
        self._iter = iter
        self._f = f

    def _inspect(self, step: Step[T]) -> Step[T]:
        if step is not DONE:
            self._f(step.value)
        return step

    def next(self) -> Step[T]:
        return self._inspect(self._iter.next())

    def size_hint(self) -> SizeHint:
        return self._iter.size_hint()

    def fold[B](self, initial: B, g: Folder[B, T]) -> B:
        f = self._f

        def inspect_fold(acc: B, x: T) -> B:
            f(x)
            return g(acc, x)

        return self._iter.fold(initial, inspect_fold)

    def try_fold[B](self, initial: B, g: Callable[[B, T], Any]) -> Any:
        f = self._f

        def inspect_try_fold(acc: B, x: T) -> Any:
            f(x)
            return g(acc, x)

        return self._iter.try_fold(initial, inspect_try_fold)

    def into_iter(self) -> Self:
        self._iter.into_iter()
        return self


class DoubleEndedInspect[T](Inspect[T], DoubleEndedIterator[T]):
    __slots__ = ()

    _iter: DoubleEndedIterator[T]

    def next_back(self) -> Step[T]:
        return self._inspect(self._iter.next_back())

    def rfold[B](self, initial: B, g: Folder[B, T]) -> B:
        f = self._f

        def inspect_rfold(acc: B, x: T) -> B:
            f(x)
            return g(acc, x)

        return self._iter.rfold(initial, inspect_rfold)


class Enumerate[T](Iterator[tuple[int, T]]):
    """Pairs each element with its forward index, starting at 0."""

    __slots__ = ("_iter", "_count")

    def __init__(self, iter: Iterator[T]) -> None:
        self._iter = iter
        self._count = 0

    def next(self) -> Step[tuple[int, T]]:
        step = self._iter.next()
        if step is DONE:
            return DONE
        index = self._count
        self._count += 1
        return Some((index, step.value))

    def nth(self, n: int) -> Step[tuple[int, T]]:
        step = self._iter.nth(n)
        if step is DONE:
            return DONE
        index = self._count + n
        self._count = index + 1
        return Some((index, step.value))

    def advance_by(self, n: int) -> Remainder | None:
        result = self._iter.advance_by(n)
        self._count += n - remainder_of(result)
        return result

    def size_hint(self) -> SizeHint:
        return self._iter.size_hint()

    def count(self) -> int:
        return self._iter.count()

    def fold[B](self, initial: B, f: Folder[B, tuple[int, T]]) -> B:
        def enumerate_fold(acc: B, x: T) -> B:
            index = self._count
            self._count += 1
            return f(acc, (index, x))

        return self._iter.fold(initial, enumerate_fold)

    def try_fold[B](self, initial: B, f: Callable[[B, tuple[int, T]], Any]) -> Any:
        def enumerate_try_fold(acc: B, x: T) -> Any:
            index = self._count
            self._count += 1
            return f(acc, (index, x))

        return self._iter.try_fold(initial, enumerate_try_fold)

    def into_iter(self) -> Self:
        self._iter.into_iter()
        self._count = 0
        return self


class DoubleEndedEnumerate[T](Enumerate[T], DoubleEndedIterator[tuple[int, T]]):
    """Back indices are computed from the exact remaining length of the source."""

    __slots__ = ()

    _iter: DoubleEndedIterator[T]

    def next_back(self) -> Step[tuple[int, T]]:
        step = self._iter.next_back()
        if step is DONE:
            return DONE
        return Some((self._count + self._iter.len(), step.value))

    def nth_back(self, n: int) -> Step[tuple[int, T]]:
        step = self._iter.nth_back(n)
        if step is DONE:
            return DONE
        return Some((self._count + self._iter.len(), step.value))

    def advance_back_by(self, n: int) -> Remainder | None:
        return self._iter.advance_back_by(n)

    def rfold[B](self, initial: B, f: Folder[B, tuple[int, T]]) -> B:
        index = self._count + self._iter.len()

        def enumerate_rfold(acc: B, x: T) -> B:
            nonlocal index
            index -= 1
            return f(acc, (index, x))

        return self._iter.rfold(initial, enumerate_rfold)

    def try_rfold[B](self, initial: B, f: Callable[[B, tuple[int, T]], Any]) -> Any:
        index = self._count + self._iter.len()

        def enumerate_try_rfold(acc: B, x: T) -> Any:
            nonlocal index
            index -= 1
            return f(acc, (index, x))

        return self._iter.try_rfold(initial, enumerate_try_rfold)
