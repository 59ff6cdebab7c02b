"""Turning Python values into engine iterators.

Inputs are classified once into a SourceKind; iterate() dispatches on the tag
and never inspects the value again.

Usage:
    from lazyiter import iterate, collect

    iterate([1, 2, 3]).map(str).collect()     # ['1', '2', '3']
    iterate(my_generator_function)            # replayable via into_iter()
    collect(iterate({3, 1, 2}).map(abs), into=sorted)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from enum import Enum, auto
from typing import Any

from lazyiter.iter.base import Iterator
from lazyiter.iter.sources import ArrayIter, GenIter, IterableIter


class SourceKind(Enum):
    """How a value becomes an iterator."""

    ITER = auto()
    """Already an engine iterator; used as-is."""

    SEQUENCE = auto()
    """Sized and indexable (list, tuple, str, range...); wrapped in ArrayIter."""

    FACTORY = auto()
    """Zero-argument callable returning an iterable; wrapped in GenIter."""

    ITERABLE = auto()
    """Any other iterable, including mappings and one-shot iterators."""


def _is_sequence(source: Any) -> bool:
    if isinstance(source, Mapping):
        return False
    if isinstance(source, Sequence):
        return True
    kind = type(source)
    return hasattr(kind, "__len__") and hasattr(kind, "__getitem__") and hasattr(kind, "__iter__")


def classify(source: Any) -> SourceKind:
    """Classify a value for iterate().

    Raises:
        TypeError: If the value is neither an iterator, iterable nor callable.
    """
    if isinstance(source, Iterator):
        return SourceKind.ITER
    if _is_sequence(source):
        return SourceKind.SEQUENCE
    if isinstance(source, Iterable):
        return SourceKind.ITERABLE
    if callable(source):
        return SourceKind.FACTORY
    raise TypeError(f"Cannot iterate over {type(source).__name__!r}: not iterable or callable")


def iterate(source: Any = ()) -> Iterator[Any]:
    """Wrap a value in the engine's iterator contract.

    Args:
        source: A sequence, iterable, zero-argument factory (such as a
            generator function) or an existing engine iterator. Defaults to an
            empty tuple.

    Returns:
        The matching source iterator. Engine iterators are returned unchanged.
    """
    match classify(source):
        case SourceKind.ITER:
            return source
        case SourceKind.SEQUENCE:
            return ArrayIter(source)
        case SourceKind.FACTORY:
            return GenIter(source)
        case SourceKind.ITERABLE:
            return IterableIter(source)


def collect(source: Any, into: Callable[[Iterable[Any]], Any] | None = None) -> Any:
    """Materialize any iterable source; see Iterator.collect()."""
    return iterate(source).collect(into)
