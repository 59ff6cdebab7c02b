"""Free functions that start an iterator chain without an input collection.

Usage:
    from lazyiter import successors, repeat, once, from_fn

    powers = successors(1, lambda x: x * 2 if x < 1000 else None)
    zeros = repeat(0).take(3)
    counter = from_fn(make_counter())
"""

from __future__ import annotations

from collections.abc import Callable

from lazyiter.core.option import Step
from lazyiter.iter.sources import (
    ArrayIter,
    Empty,
    FromFn,
    Once,
    OnceWith,
    Range,
    Repeat,
    RepeatWith,
    Successors,
)


def successors[T](first: T | None, succ: Callable[[T], T | None]) -> Successors[T]:
    """Yield first, then each successor computed from the previous element.

    Args:
        first: Initial element. None gives an empty iterator.
        succ: Computes the next element from the current one; None ends the
            sequence.
    """
    return Successors(first, succ)


def repeat[T](value: T) -> Repeat[T]:
    """Yield value endlessly, from either end."""
    return Repeat(value)


def repeat_with[T](f: Callable[[], T]) -> RepeatWith[T]:
    """Yield the result of calling f, endlessly."""
    return RepeatWith(f)


def once[T](value: T) -> Once[T]:
    return Once(value)


def once_with[T](f: Callable[[], T]) -> OnceWith[T]:
    """Yield f() exactly once; f is not called until the first pull."""
    return OnceWith(f)


def from_fn[T](f: Callable[[], Step[T]]) -> FromFn[T]:
    """Yield whatever Step f returns on each call.

    The closure owns all iteration state, so into_iter() cannot rewind it.
    """
    return FromFn(f)


def empty[T]() -> Empty[T]:
    return Empty()


def range_iter(start: int, end: int) -> Range:
    """Integers in [start, end). Raises ValueError if start > end."""
    return Range(start, end)


def of[T](*values: T) -> ArrayIter[T]:
    """Iterate over the positional arguments."""
    return ArrayIter(values)
