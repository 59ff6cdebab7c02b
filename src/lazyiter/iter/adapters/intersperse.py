"""Intersperse and IntersperseWith: separators between elements, never at the ends."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from typing import Self

from lazyiter.core.arith import checked_add, saturating_add, saturating_sub
from lazyiter.core.option import DONE, Some, Step
from lazyiter.core.types import Folder, SizeHint
from lazyiter.iter.adapters.peekable import Peekable
from lazyiter.iter.base import Iterator


class _IntersperseBase[T](Iterator[T]):
    """Shared state: a peekable source and a "separator due next" flag.

    A separator is only emitted when the source still has an element, which
    rules out a trailing separator.
    """

    __slots__ = ("_iter", "_needs_sep")

    def __init__(self, iter: Iterator[T]) -> None:
        self._iter = Peekable(iter)
        self._needs_sep = False

    @abstractmethod
    def _separator(self) -> T: ...

    def next(self) -> Step[T]:
        if self._needs_sep and self._iter.peek() is not DONE:
            self._needs_sep = False
            return Some(self._separator())
        self._needs_sep = True
        return self._iter.next()

    def size_hint(self) -> SizeHint:
        lo, hi = self._iter.size_hint()
        next_is_elem = 0 if self._needs_sep else 1
        return (
            saturating_add(saturating_sub(lo, next_is_elem), lo),
            None if hi is None else checked_add(saturating_sub(hi, next_is_elem), hi),
        )

    def fold[B](self, initial: B, f: Folder[B, T]) -> B:
        acc = initial
        if not self._needs_sep:
            first = self._iter.next()
            if first is DONE:
                return acc
            acc = f(acc, first.value)
            self._needs_sep = True

        def intersperse_fold(acc: B, x: T) -> B:
            return f(f(acc, self._separator()), x)

        return self._iter.fold(acc, intersperse_fold)

    def into_iter(self) -> Self:
        self._iter.into_iter()
        self._needs_sep = False
        return self


class Intersperse[T](_IntersperseBase[T]):
    """Places a copy of separator between adjacent elements."""

    __slots__ = ("_sep",)

    def __init__(self, iter: Iterator[T], separator: T) -> None:
        super().__init__(iter)
        self._sep = separator

    def _separator(self) -> T:
        return self._sep


class IntersperseWith[T](_IntersperseBase[T]):
    """Places the result of calling separator() between adjacent elements."""

    __slots__ = ("_make_sep",)

    def __init__(self, iter: Iterator[T], separator: Callable[[], T]) -> None:
        super().__init__(iter)
        self._make_sep = separator

    def _separator(self) -> T:
        return self._make_sep()
