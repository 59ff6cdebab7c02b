"""Counting adapters: Skip, Take, StepBy.

Each keeps a counter that only ever decreases. The double-ended variants are
only built over exact-size sources, since the back cursor is located with
arithmetic on the source's remaining length instead of by scanning.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Self

from lazyiter.core.arith import (
    check_count,
    checked_add,
    saturating_add,
    saturating_mul,
    saturating_sub,
)
from lazyiter.core.control import Halt, Remainder, ShortCircuit, remainder, remainder_of
from lazyiter.core.option import DONE, Step
from lazyiter.core.types import Folder, SizeHint
from lazyiter.iter.base import DoubleEndedIterator, Iterator
from lazyiter.iter.functions import from_fn


def _countdown[B, T](n: int, f: Callable[[B, T], Any]) -> Callable[[B, T], Any]:
    """Wrap a try-fold closure so the fold halts after n elements."""

    def check(acc: B, x: T) -> Any:
        nonlocal n
        n -= 1
        result = f(acc, x)
        if n == 0 and not isinstance(result, ShortCircuit):
            return Halt(result)
        return result

    return check


def _unhalt(result: Any) -> Any:
    return result.value if isinstance(result, Halt) else result


class Skip[T](Iterator[T]):
    """Skips the first n elements, lazily, on the first pull."""

    __slots__ = ("_iter", "_n", "_initial")

    def __init__(self, iter: Iterator[T], n: int) -> None:
        check_count(n)
        self._iter = iter
        self._n = n
        self._initial = n

    def _skip_prefix(self) -> bool:
        """Consume the pending prefix. False if the source ran out doing so."""
        n, self._n = self._n, 0
        return n == 0 or self._iter.nth(n - 1) is not DONE

    def next(self) -> Step[T]:
        if self._n > 0:
            n, self._n = self._n, 0
            return self._iter.nth(n)
        return self._iter.next()

    def nth(self, n: int) -> Step[T]:
        if self._n > 0:
            skip, self._n = self._n, 0
            total = checked_add(skip, n)
            if total is None:
                if self._iter.nth(skip - 1) is DONE:
                    return DONE
                total = n
            return self._iter.nth(total)
        return self._iter.nth(n)

    def size_hint(self) -> SizeHint:
        lo, hi = self._iter.size_hint()
        return (saturating_sub(lo, self._n), None if hi is None else saturating_sub(hi, self._n))

    def advance_by(self, n: int) -> Remainder | None:
        check_count(n)
        skip_inner = self._n
        skip_and_advance = saturating_add(skip_inner, n)
        short = remainder_of(self._iter.advance_by(skip_and_advance))
        advanced_inner = skip_and_advance - short
        n -= saturating_sub(advanced_inner, skip_inner)
        self._n = saturating_sub(self._n, advanced_inner)
        # skip_and_advance may have saturated
        if short == 0 and n > 0:
            n = remainder_of(self._iter.advance_by(n))
        return remainder(n)

    def count(self) -> int:
        if not self._skip_prefix():
            return 0
        return self._iter.count()

    def last(self) -> Step[T]:
        if not self._skip_prefix():
            return DONE
        return self._iter.last()

    def fold[B](self, initial: B, f: Folder[B, T]) -> B:
        if not self._skip_prefix():
            return initial
        return self._iter.fold(initial, f)

    def try_fold[B](self, initial: B, f: Callable[[B, T], Any]) -> Any:
        if not self._skip_prefix():
            return initial
        return self._iter.try_fold(initial, f)

    def into_iter(self) -> Self:
        self._iter.into_iter()
        self._n = self._initial
        return self


class DoubleEndedSkip[T](Skip[T], DoubleEndedIterator[T]):
    """Skip over an exact-size source.

    Pulling from the back stops once len() reaches zero, which is exactly
    when the remaining source elements are all part of the skipped prefix.
    """

    __slots__ = ()

    _iter: DoubleEndedIterator[T]

    def next_back(self) -> Step[T]:
        if self.len() > 0:
            return self._iter.next_back()
        return DONE

    def nth_back(self, n: int) -> Step[T]:
        length = self.len()
        if n < length:
            return self._iter.nth_back(n)
        if length > 0:
            self._iter.nth_back(length - 1)
        return DONE

    def advance_back_by(self, n: int) -> Remainder | None:
        check_count(n)
        step = min(self.len(), n)
        if self._iter.advance_back_by(step) is not None:
            raise RuntimeError(f"{type(self._iter).__name__} reported a wrong exact size")
        return remainder(n - step)

    def try_rfold[B](self, initial: B, f: Callable[[B, T], Any]) -> Any:
        n = self.len()
        if n == 0:
            return initial
        return _unhalt(self._iter.try_rfold(initial, _countdown(n, f)))

    def rfold[B](self, initial: B, f: Folder[B, T]) -> B:
        return self.try_rfold(initial, f)


class Take[T](Iterator[T]):
    """Yields at most n elements."""

    __slots__ = ("_iter", "_n", "_initial")

    def __init__(self, iter: Iterator[T], n: int) -> None:
        check_count(n)
        self._iter = iter
        self._n = n
        self._initial = n

    def next(self) -> Step[T]:
        if self._n == 0:
            return DONE
        self._n -= 1
        return self._iter.next()

    def nth(self, n: int) -> Step[T]:
        if self._n > n:
            self._n -= n + 1
            return self._iter.nth(n)
        if self._n > 0:
            self._iter.nth(self._n - 1)
            self._n = 0
        return DONE

    def size_hint(self) -> SizeHint:
        if self._n == 0:
            return (0, 0)
        lo, hi = self._iter.size_hint()
        return (min(lo, self._n), hi if hi is not None and hi < self._n else self._n)

    def advance_by(self, n: int) -> Remainder | None:
        check_count(n)
        step = min(self._n, n)
        advanced = step - remainder_of(self._iter.advance_by(step))
        self._n -= advanced
        return remainder(n - advanced)

    def try_fold[B](self, initial: B, f: Callable[[B, T], Any]) -> Any:
        if self._n == 0:
            return initial

        def check(acc: B, x: T) -> Any:
            self._n -= 1
            result = f(acc, x)
            if self._n == 0 and not isinstance(result, ShortCircuit):
                return Halt(result)
            return result

        return _unhalt(self._iter.try_fold(initial, check))

    def fold[B](self, initial: B, f: Folder[B, T]) -> B:
        return self.try_fold(initial, f)

    def into_iter(self) -> Self:
        self._iter.into_iter()
        self._n = self._initial
        return self


class DoubleEndedTake[T](Take[T], DoubleEndedIterator[T]):
    """Take over an exact-size source.

    The back cursor lives in the source's index space: the element to yield
    from the back is the one `source_len - remaining` positions from its end.
    """

    __slots__ = ()

    _iter: DoubleEndedIterator[T]

    def next_back(self) -> Step[T]:
        if self._n == 0:
            return DONE
        n = self._n
        self._n -= 1
        return self._iter.nth_back(saturating_sub(self._iter.len(), n))

    def nth_back(self, n: int) -> Step[T]:
        length = self._iter.len()
        if self._n > n:
            m = saturating_sub(length, self._n) + n
            self._n -= n + 1
            return self._iter.nth_back(m)
        if length > 0:
            self._iter.nth_back(length - 1)
        return DONE

    def advance_back_by(self, n: int) -> Remainder | None:
        check_count(n)
        trim_inner = saturating_sub(self._iter.len(), self._n)
        advance = saturating_add(trim_inner, n)
        advanced_inner = advance - remainder_of(self._iter.advance_back_by(advance))
        advanced = advanced_inner - trim_inner
        self._n -= advanced
        return remainder(n - advanced)

    def _trim_back(self) -> bool:
        """Drop source elements beyond the take window. False if nothing is left."""
        if self._n == 0:
            return False
        length = self._iter.len()
        return not (length > self._n and self._iter.nth_back(length - self._n - 1) is DONE)

    def try_rfold[B](self, initial: B, f: Callable[[B, T], Any]) -> Any:
        if not self._trim_back():
            return initial
        return self._iter.try_rfold(initial, f)

    def rfold[B](self, initial: B, f: Folder[B, T]) -> B:
        if not self._trim_back():
            return initial
        return self._iter.rfold(initial, f)


class StepBy[T](Iterator[T]):
    """Yields the first element, then every step-th element after it.

    Internally the stride is stored as `step - 1`: the number of elements to
    discard between two yielded ones.
    """

    __slots__ = ("_iter", "_step", "_first_take")

    def __init__(self, iter: Iterator[T], step: int) -> None:
        if step < 1:
            raise ValueError(f"step must be at least 1, got {step}")
        self._iter = iter
        self._step = step - 1
        self._first_take = True

    def next(self) -> Step[T]:
        skip = 0 if self._first_take else self._step
        self._first_take = False
        return self._iter.nth(skip)

    def nth(self, n: int) -> Step[T]:
        check_count(n)
        if self._first_take:
            self._first_take = False
            first = self._iter.next()
            if n == 0:
                return first
            n -= 1
        return self._iter.nth((n + 1) * (self._step + 1) - 1)

    def size_hint(self) -> SizeHint:
        stride = self._step + 1

        def first_size(n: int) -> int:
            return 0 if n == 0 else 1 + (n - 1) // stride

        def other_size(n: int) -> int:
            return n // stride

        size = first_size if self._first_take else other_size
        lo, hi = self._iter.size_hint()
        return (size(lo), None if hi is None else size(hi))

    def try_fold[B](self, initial: B, f: Callable[[B, T], Any]) -> Any:
        acc = initial
        if self._first_take:
            self._first_take = False
            first = self._iter.next()
            if first is DONE:
                return acc
            acc = f(acc, first.value)
            if isinstance(acc, ShortCircuit):
                return acc
        iter, step = self._iter, self._step
        return from_fn(lambda: iter.nth(step)).try_fold(acc, f)

    def fold[B](self, initial: B, f: Folder[B, T]) -> B:
        acc = initial
        if self._first_take:
            self._first_take = False
            first = self._iter.next()
            if first is DONE:
                return acc
            acc = f(acc, first.value)
        iter, step = self._iter, self._step
        return from_fn(lambda: iter.nth(step)).fold(acc, f)

    def into_iter(self) -> Self:
        self._iter.into_iter()
        self._first_take = True
        return self


class DoubleEndedStepBy[T](StepBy[T], DoubleEndedIterator[T]):
    """StepBy over an exact-size source.

    The back cursor is aligned to the same lattice the front would visit, so
    next() and next_back() yield the same elements in opposite orders.
    """

    __slots__ = ()

    _iter: DoubleEndedIterator[T]

    def _next_back_index(self) -> int:
        rem = self._iter.len() % (self._step + 1)
        if self._first_take:
            return self._step if rem == 0 else rem - 1
        return rem

    def next_back(self) -> Step[T]:
        return self._iter.nth_back(self._next_back_index())

    def nth_back(self, n: int) -> Step[T]:
        check_count(n)
        offset = saturating_add(saturating_mul(n, self._step + 1), self._next_back_index())
        return self._iter.nth_back(offset)

    def try_rfold[B](self, initial: B, f: Callable[[B, T], Any]) -> Any:
        last = self.next_back()
        if last is DONE:
            return initial
        acc = f(initial, last.value)
        if isinstance(acc, ShortCircuit):
            return acc
        iter, step = self._iter, self._step
        return from_fn(lambda: iter.nth_back(step)).try_fold(acc, f)

    def rfold[B](self, initial: B, f: Folder[B, T]) -> B:
        last = self.next_back()
        if last is DONE:
            return initial
        iter, step = self._iter, self._step
        return from_fn(lambda: iter.nth_back(step)).fold(f(initial, last.value), f)
