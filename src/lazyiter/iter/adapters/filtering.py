"""Predicate-driven adapters: Filter, FilterMap, MapWhile, SkipWhile, TakeWhile.

Mapping callbacks (filter_map, map_while) signal "no value" by returning None.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Self

from lazyiter.core.control import Halt, ShortCircuit
from lazyiter.core.option import DONE, Some, Step
from lazyiter.core.types import Folder, Predicate, SizeHint
from lazyiter.iter.base import DoubleEndedIterator, Iterator


class Filter[T](Iterator[T]):
    """Yields only the elements satisfying predicate."""

    __slots__ = ("_iter", "_predicate")

    def __init__(self, iter: Iterator[T], predicate: Predicate[T]) -> None:
        self._iter = iter
        self._predicate = predicate

    def next(self) -> Step[T]:
        return self._iter.find(self._predicate)

    def size_hint(self) -> SizeHint:
        return (0, self._iter.size_hint()[1])

    def count(self) -> int:
        predicate = self._predicate
        return self._iter.fold(0, lambda acc, x: acc + bool(predicate(x)))

    def fold[B](self, initial: B, f: Folder[B, T]) -> B:
        predicate = self._predicate
        return self._iter.fold(initial, lambda acc, x: f(acc, x) if predicate(x) else acc)

    def try_fold[B](self, initial: B, f: Callable[[B, T], Any]) -> Any:
        predicate = self._predicate
        return self._iter.try_fold(initial, lambda acc, x: f(acc, x) if predicate(x) else acc)

    def into_iter(self) -> Self:
        self._iter.into_iter()
        return self


class DoubleEndedFilter[T](Filter[T], DoubleEndedIterator[T]):
    __slots__ = ()

    _iter: DoubleEndedIterator[T]

    def next_back(self) -> Step[T]:
        return self._iter.rfind(self._predicate)

    def rfold[B](self, initial: B, f: Folder[B, T]) -> B:
        predicate = self._predicate
        return self._iter.rfold(initial, lambda acc, x: f(acc, x) if predicate(x) else acc)

    def try_rfold[B](self, initial: B, f: Callable[[B, T], Any]) -> Any:
        predicate = self._predicate
        return self._iter.try_rfold(initial, lambda acc, x: f(acc, x) if predicate(x) else acc)


class FilterMap[T, B](Iterator[B]):
    """Maps each element with f and drops the None results."""

    __slots__ = ("_iter", "_f")

    def __init__(self, iter: Iterator[T], f: Callable[[T], B | None]) -> None:
        self._iter = iter
        self._f = f

    def next(self) -> Step[B]:
        return self._iter.find_map(self._f)

    def size_hint(self) -> SizeHint:
        return (0, self._iter.size_hint()[1])

    def fold[C](self, initial: C, g: Folder[C, B]) -> C:
        f = self._f

        def filter_map_fold(acc: C, x: T) -> C:
            mapped = f(x)
            return acc if mapped is None else g(acc, mapped)

        return self._iter.fold(initial, filter_map_fold)

    def try_fold[C](self, initial: C, g: Callable[[C, B], Any]) -> Any:
        f = self._f

        def filter_map_try_fold(acc: C, x: T) -> Any:
            mapped = f(x)
            return acc if mapped is None else g(acc, mapped)

        return self._iter.try_fold(initial, filter_map_try_fold)

    def into_iter(self) -> Self:
        self._iter.into_iter()
        return self


class DoubleEndedFilterMap[T, B](FilterMap[T, B], DoubleEndedIterator[B]):
    __slots__ = ()

    _iter: DoubleEndedIterator[T]

    def next_back(self) -> Step[B]:
        return self._iter.rfind_map(self._f)

    def rfold[C](self, initial: C, g: Folder[C, B]) -> C:
        f = self._f

        def filter_map_rfold(acc: C, x: T) -> C:
            mapped = f(x)
            return acc if mapped is None else g(acc, mapped)

        return self._iter.rfold(initial, filter_map_rfold)


class MapWhile[T, B](Iterator[B]):
    """Maps elements with f until it returns None.

    The element that produced None is consumed. MapWhile is not fused: pulling
    again after DONE resumes mapping. Use fuse() to stop for good.
    """

    __slots__ = ("_iter", "_f")

    def __init__(self, iter: Iterator[T], f: Callable[[T], B | None]) -> None:
        self._iter = iter
        self._f = f

    def next(self) -> Step[B]:
        step = self._iter.next()
        if step is DONE:
            return DONE
        mapped = self._f(step.value)
        return DONE if mapped is None else Some(mapped)

    def size_hint(self) -> SizeHint:
        return (0, self._iter.size_hint()[1])

    def try_fold[C](self, initial: C, g: Callable[[C, B], Any]) -> Any:
        f = self._f

        def map_while_try_fold(acc: C, x: T) -> Any:
            mapped = f(x)
            return Halt(acc) if mapped is None else g(acc, mapped)

        result = self._iter.try_fold(initial, map_while_try_fold)
        if isinstance(result, Halt):
            return result.value
        return result

    def into_iter(self) -> Self:
        self._iter.into_iter()
        return self


class TakeWhile[T](Iterator[T]):
    """Yields elements while predicate holds.

    The first failing element is consumed and discarded; afterwards the
    adapter stays exhausted until into_iter().
    """

    __slots__ = ("_iter", "_predicate", "_done")

    def __init__(self, iter: Iterator[T], predicate: Predicate[T]) -> None:
        self._iter = iter
        self._predicate = predicate
        self._done = False

    def next(self) -> Step[T]:
        if self._done:
            return DONE
        step = self._iter.next()
        if step is DONE:
            return DONE
        if self._predicate(step.value):
            return step
        self._done = True
        return DONE

    def size_hint(self) -> SizeHint:
        if self._done:
            return (0, 0)
        return (0, self._iter.size_hint()[1])

    def into_iter(self) -> Self:
        self._iter.into_iter()
        self._done = False
        return self


class SkipWhile[T](Iterator[T]):
    """Skips the leading elements satisfying predicate, then yields the rest."""

    __slots__ = ("_iter", "_predicate", "_skipped")

    def __init__(self, iter: Iterator[T], predicate: Predicate[T]) -> None:
        self._iter = iter
        self._predicate = predicate
        self._skipped = False

    def _first_kept(self) -> Step[T]:
        predicate = self._predicate
        step = self._iter.find(lambda x: not predicate(x))
        self._skipped = True
        return step

    def next(self) -> Step[T]:
        if self._skipped:
            return self._iter.next()
        return self._first_kept()

    def size_hint(self) -> SizeHint:
        if self._skipped:
            return self._iter.size_hint()
        return (0, self._iter.size_hint()[1])

    def fold[B](self, initial: B, f: Folder[B, T]) -> B:
        acc = initial
        if not self._skipped:
            step = self._first_kept()
            if step is DONE:
                return acc
            acc = f(acc, step.value)
        return self._iter.fold(acc, f)

    def try_fold[B](self, initial: B, f: Callable[[B, T], Any]) -> Any:
        acc = initial
        if not self._skipped:
            step = self._first_kept()
            if step is DONE:
                return acc
            acc = f(acc, step.value)
            if isinstance(acc, ShortCircuit):
                return acc
        return self._iter.try_fold(acc, f)

    def into_iter(self) -> Self:
        self._iter.into_iter()
        self._skipped = False
        return self


class DoubleEndedSkipWhile[T](SkipWhile[T], DoubleEndedIterator[T]):
    """SkipWhile that can also be pulled from the back.

    The front prefix is always skipped first, whichever end is pulled first.
    The first kept element is buffered so a back pull never yields an element
    that belongs to the skipped prefix.
    """

    __slots__ = ("_pending",)

    _iter: DoubleEndedIterator[T]

    def __init__(self, iter: DoubleEndedIterator[T], predicate: Predicate[T]) -> None:
        super().__init__(iter, predicate)
        self._pending: Step[T] = DONE

    def _ensure_skipped(self) -> None:
        if not self._skipped:
            self._pending = self._first_kept()

    def _take_pending(self) -> Step[T]:
        step, self._pending = self._pending, DONE
        return step

    def next(self) -> Step[T]:
        self._ensure_skipped()
        if self._pending is not DONE:
            return self._take_pending()
        return self._iter.next()

    def next_back(self) -> Step[T]:
        self._ensure_skipped()
        step = self._iter.next_back()
        if step is DONE:
            return self._take_pending()
        return step

    def size_hint(self) -> SizeHint:
        if not self._skipped:
            return (0, self._iter.size_hint()[1])
        lo, hi = self._iter.size_hint()
        extra = 0 if self._pending is DONE else 1
        return (lo + extra, None if hi is None else hi + extra)

    def fold[B](self, initial: B, f: Folder[B, T]) -> B:
        self._ensure_skipped()
        acc = initial
        if self._pending is not DONE:
            acc = f(acc, self._take_pending().value)
        return self._iter.fold(acc, f)

    def try_fold[B](self, initial: B, f: Callable[[B, T], Any]) -> Any:
        self._ensure_skipped()
        acc = initial
        if self._pending is not DONE:
            acc = f(acc, self._take_pending().value)
            if isinstance(acc, ShortCircuit):
                return acc
        return self._iter.try_fold(acc, f)

    def rfold[B](self, initial: B, f: Folder[B, T]) -> B:
        self._ensure_skipped()
        acc = self._iter.rfold(initial, f)
        if self._pending is not DONE:
            acc = f(acc, self._take_pending().value)
        return acc

    def into_iter(self) -> Self:
        super().into_iter()
        self._pending = DONE
        return self
