"""Leaf iterators: the sources every adapter chain starts from.

ArrayIter, GenIter and IterableIter wrap Python values (see factory.iterate);
the rest back the free functions in functions.py.
"""

from __future__ import annotations

import copy
import itertools
import operator
from collections.abc import Callable, Iterable, Sequence
from typing import NoReturn, Self

from lazyiter.core.arith import check_count, usize_max
from lazyiter.core.control import Remainder, remainder
from lazyiter.core.errors import warn_replay
from lazyiter.core.option import DONE, Some, Step
from lazyiter.core.types import SizeHint
from lazyiter.iter.base import DoubleEndedIterator, ExactSizeIterator, Iterator

# Wrappers around Python iterables


class ArrayIter[T](ExactSizeIterator[T], DoubleEndedIterator[T]):
    """Double-ended cursor pair over a sequence.

    Positional operations (nth, advance_by, count, last and their back
    counterparts) move the cursors arithmetically instead of stepping.

    Args:
        items: Any sequence. It is indexed, not copied; mutating it while
            iterating is undefined.
    """

    __slots__ = ("_items", "_front", "_back")

    def __init__(self, items: Sequence[T]) -> None:
        self._items = items
        self._front = 0
        self._back = len(items)

    def next(self) -> Step[T]:
        if self._front >= self._back:
            return DONE
        value = self._items[self._front]
        self._front += 1
        return Some(value)

    def next_back(self) -> Step[T]:
        if self._front >= self._back:
            return DONE
        self._back -= 1
        return Some(self._items[self._back])

    def size_hint(self) -> SizeHint:
        n = self._back - self._front
        return (n, n)

    def advance_by(self, n: int) -> Remainder | None:
        check_count(n)
        step = min(n, self._back - self._front)
        self._front += step
        return remainder(n - step)

    def advance_back_by(self, n: int) -> Remainder | None:
        check_count(n)
        step = min(n, self._back - self._front)
        self._back -= step
        return remainder(n - step)

    def count(self) -> int:
        n = self._back - self._front
        self._front = self._back
        return n

    def last(self) -> Step[T]:
        if self._front >= self._back:
            return DONE
        self._front = self._back
        return Some(self._items[self._back - 1])

    def into_iter(self) -> Self:
        self._front = 0
        self._back = len(self._items)
        return self


class GenIter[T](Iterator[T]):
    """Wraps a zero-argument factory returning an iterable (e.g. a generator function).

    into_iter() calls the factory again, so generator-backed chains replay.
    """

    __slots__ = ("_factory", "_it")

    def __init__(self, factory: Callable[[], Iterable[T]]) -> None:
        self._factory = factory
        self._it = iter(factory())

    def next(self) -> Step[T]:
        try:
            return Some(next(self._it))
        except StopIteration:
            return DONE

    def size_hint(self) -> SizeHint:
        return (operator.length_hint(self._it), None)

    def clone(self) -> Self:
        twin = copy.copy(self)
        self._it, twin._it = itertools.tee(self._it)
        return twin

    def into_iter(self) -> Self:
        self._it = iter(self._factory())
        return self


class IterableIter[T](Iterator[T]):
    """Wraps any other Python iterable.

    Containers (sets, dicts, deques...) are iterated afresh on into_iter().
    One-shot iterators such as generator objects or file handles cannot be
    rewound; into_iter() leaves them as they are and warns.
    """

    __slots__ = ("_source", "_it", "_one_shot")

    def __init__(self, source: Iterable[T]) -> None:
        self._source = source
        self._it = iter(source)
        self._one_shot = self._it is source

    def next(self) -> Step[T]:
        try:
            return Some(next(self._it))
        except StopIteration:
            return DONE

    def size_hint(self) -> SizeHint:
        return (operator.length_hint(self._it), None)

    def clone(self) -> Self:
        """Fork the underlying Python iterator with itertools.tee()."""
        twin = copy.copy(self)
        self._it, twin._it = itertools.tee(self._it)
        return twin

    def into_iter(self) -> Self:
        if self._one_shot:
            warn_replay(type(self._source).__name__, "one-shot iterators cannot be rewound")
        else:
            self._it = iter(self._source)
        return self


# Backing types for the free functions


class Range(ArrayIter[int]):
    """Integers in [start, end), backed by a built-in range."""

    __slots__ = ()

    def __init__(self, start: int, end: int) -> None:
        if start > end:
            raise ValueError(f"Range start {start} is greater than end {end}")
        super().__init__(range(start, end))


class Empty[T](ExactSizeIterator[T], DoubleEndedIterator[T]):
    __slots__ = ()

    def next(self) -> Step[T]:
        return DONE

    def next_back(self) -> Step[T]:
        return DONE

    def size_hint(self) -> SizeHint:
        return (0, 0)

    def into_iter(self) -> Self:
        return self


class Once[T](ExactSizeIterator[T], DoubleEndedIterator[T]):
    """Yields a single value."""

    __slots__ = ("_value", "_taken")

    def __init__(self, value: T) -> None:
        self._value = value
        self._taken = False

    def next(self) -> Step[T]:
        if self._taken:
            return DONE
        self._taken = True
        return Some(self._value)

    def next_back(self) -> Step[T]:
        return self.next()

    def size_hint(self) -> SizeHint:
        return (0, 0) if self._taken else (1, 1)

    def into_iter(self) -> Self:
        self._taken = False
        return self


class OnceWith[T](ExactSizeIterator[T], DoubleEndedIterator[T]):
    """Yields the result of calling f once, lazily."""

    __slots__ = ("_f", "_taken")

    def __init__(self, f: Callable[[], T]) -> None:
        self._f = f
        self._taken = False

    def next(self) -> Step[T]:
        if self._taken:
            return DONE
        self._taken = True
        return Some(self._f())

    def next_back(self) -> Step[T]:
        return self.next()

    def size_hint(self) -> SizeHint:
        return (0, 0) if self._taken else (1, 1)

    def into_iter(self) -> Self:
        self._taken = False
        return self


class Repeat[T](DoubleEndedIterator[T]):
    """Yields the same value forever, from either end."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    def next(self) -> Step[T]:
        return Some(self._value)

    def next_back(self) -> Step[T]:
        return Some(self._value)

    def nth(self, n: int) -> Step[T]:
        check_count(n)
        return Some(self._value)

    def nth_back(self, n: int) -> Step[T]:
        check_count(n)
        return Some(self._value)

    def advance_by(self, n: int) -> Remainder | None:
        check_count(n)
        return None

    def advance_back_by(self, n: int) -> Remainder | None:
        check_count(n)
        return None

    def size_hint(self) -> SizeHint:
        return (usize_max(), None)

    def count(self) -> NoReturn:
        raise OverflowError("Cannot count the elements of an infinite repeat()")

    def last(self) -> NoReturn:
        raise OverflowError("An infinite repeat() has no last element")

    def into_iter(self) -> Self:
        return self


class RepeatWith[T](Iterator[T]):
    """Yields the result of calling f, forever."""

    __slots__ = ("_f",)

    def __init__(self, f: Callable[[], T]) -> None:
        self._f = f

    def next(self) -> Step[T]:
        return Some(self._f())

    def size_hint(self) -> SizeHint:
        return (usize_max(), None)

    def count(self) -> NoReturn:
        raise OverflowError("Cannot count the elements of an infinite repeat_with()")

    def last(self) -> NoReturn:
        raise OverflowError("An infinite repeat_with() has no last element")

    def into_iter(self) -> Self:
        return self


class Successors[T](Iterator[T]):
    """Yields first, then succ(first), succ(succ(first))... until succ returns None."""

    __slots__ = ("_first", "_succ", "_next")

    def __init__(self, first: T | None, succ: Callable[[T], T | None]) -> None:
        self._first = first
        self._succ = succ
        self._next: Step[T] = DONE if first is None else Some(first)

    def next(self) -> Step[T]:
        step = self._next
        if step is DONE:
            return DONE
        following = self._succ(step.value)
        self._next = DONE if following is None else Some(following)
        return step

    def size_hint(self) -> SizeHint:
        return (0, 0) if self._next is DONE else (1, None)

    def into_iter(self) -> Self:
        self._next = DONE if self._first is None else Some(self._first)
        return self


class FromFn[T](Iterator[T]):
    """Yields whatever Step the closure returns on each call.

    A clone shares the closure, and with it any state the closure keeps.
    """

    __slots__ = ("_f",)

    def __init__(self, f: Callable[[], Step[T]]) -> None:
        self._f = f

    def next(self) -> Step[T]:
        return self._f()

    def into_iter(self) -> Self:
        warn_replay("from_fn()", "closure state cannot be rewound")
        return self
