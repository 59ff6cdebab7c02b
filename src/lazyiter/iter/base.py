"""Iterator contracts: forward, double-ended and exact-size.

Every iterator implements `next()` returning a Step (Some(value) or DONE) and
`into_iter()` which rewinds it to its construction-time state. Everything
else (consumers, adapter constructors, the Python iterator protocol) is
provided here on top of those two methods.

Usage:
    from lazyiter import iterate

    evens = iterate([1, 2, 3, 4]).filter(lambda x: x % 2 == 0).collect()
    for x in iterate(range(10)).step_by(3).rev():
        print(x)
"""

from __future__ import annotations

import copy
import operator
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Self

from lazyiter.core.arith import check_count
from lazyiter.core.control import Break, PartialChunk, Remainder, ShortCircuit
from lazyiter.core.option import DONE, Some, Step
from lazyiter.core.types import Folder, Predicate, SizeHint

if TYPE_CHECKING:
    from lazyiter.iter.adapters import (
        ArrayChunks,
        Chain,
        Cycle,
        Enumerate,
        Filter,
        FilterMap,
        FlatMap,
        Flatten,
        Fuse,
        Inspect,
        Intersperse,
        IntersperseWith,
        Map,
        MapWhile,
        Peekable,
        Rev,
        Skip,
        SkipWhile,
        Split,
        StepBy,
        Take,
        TakeWhile,
        Zip,
    )


def _identity(x: Any) -> Any:
    return x


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        names.extend((slots,) if isinstance(slots, str) else slots)
    return names


class Iterator[T](ABC):
    """Forward, pull-based iterator.

    Subclasses implement `next()` and `into_iter()`. Iterators are single-owner:
    once wrapped by an adapter, a source must only be driven through that
    adapter.
    """

    __slots__ = ()

    @abstractmethod
    def next(self) -> Step[T]:
        """Advance and return the next element, or DONE when exhausted."""

    @abstractmethod
    def into_iter(self) -> Self:
        """Rewind to the construction-time state and return self.

        Resets every private counter and buffer, not just the source. Always
        succeeds; sources that cannot be rewound are left unchanged.
        """

    def clone(self) -> Self:
        """Fork the iterator at its current position.

        The copy has its own cursors, counters and buffers, and every iterator
        it wraps is cloned in turn, so advancing one never moves the other.
        Callables and indexed sequences are shared, not copied.

        Usage:
            it = iterate("abc").enumerate()
            it.next()
            fork = it.clone()
            fork.collect()  # [(1, 'b'), (2, 'c')]
            it.next()       # Some(value=(1, 'b'))
        """
        twin = copy.copy(self)
        for name in _slot_names(type(self)):
            value = getattr(self, name, None)
            if isinstance(value, Iterator):
                setattr(twin, name, value.clone())
        return twin

    # Python iterator protocol

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> T:
        step = self.next()
        if step is DONE:
            raise StopIteration
        return step.value

    def __length_hint__(self) -> int:
        return self.size_hint()[0]

    # Sizing

    def size_hint(self) -> SizeHint:
        """Bounds on the remaining length as (lower, upper or None)."""
        return (0, None)

    def len(self) -> int:
        """Exact remaining length.

        Raises:
            TypeError: If size_hint() bounds are not exact.
        """
        lo, hi = self.size_hint()
        if hi != lo:
            raise TypeError(f"{type(self).__name__} does not have an exact size (hint {lo}, {hi})")
        return lo

    def is_empty(self) -> bool:
        return self.len() == 0

    # Advancing

    def advance_by(self, n: int) -> Remainder | None:
        """Consume up to n elements.

        Args:
            n: Number of elements to skip. Must be non-negative.

        Returns:
            None if exactly n elements were consumed, otherwise a Remainder
            carrying how many were still needed.
        """
        check_count(n)
        for i in range(n):
            if self.next() is DONE:
                return Remainder(n - i)
        return None

    def nth(self, n: int) -> Step[T]:
        """Return the element at offset n, consuming it and everything before it."""
        if self.advance_by(n) is not None:
            return DONE
        return self.next()

    def next_chunk(self, n: int) -> list[T] | PartialChunk[T]:
        """Pull exactly n elements.

        Returns:
            A list of n elements, or a PartialChunk carrying the elements that
            were available when the iterator ran out.
        """
        check_count(n)
        items: list[T] = []
        for _ in range(n):
            step = self.next()
            if step is DONE:
                return PartialChunk(items, n)
            items.append(step.value)
        return items

    # Folding consumers

    def fold[B](self, initial: B, f: Folder[B, T]) -> B:
        """Reduce every remaining element into an accumulator, left to right."""
        acc = initial
        while (step := self.next()) is not DONE:
            acc = f(acc, step.value)
        return acc

    def try_fold[B](self, initial: B, f: Callable[[B, T], Any]) -> Any:
        """Fold until f returns a ShortCircuit value.

        The ShortCircuit (usually a Break) is returned as-is. The element that
        triggered it has already been consumed, so the next pull yields the
        element after it.

        Args:
            initial: Starting accumulator.
            f: Folding function returning the new accumulator or a ShortCircuit.

        Returns:
            The final accumulator, or the ShortCircuit that stopped the fold.
        """
        acc = initial
        while (step := self.next()) is not DONE:
            acc = f(acc, step.value)
            if isinstance(acc, ShortCircuit):
                return acc
        return acc

    def count(self) -> int:
        return self.fold(0, lambda acc, _: acc + 1)

    def last(self) -> Step[T]:
        return self.fold(DONE, lambda _, x: Some(x))

    def for_each(self, f: Callable[[T], Any]) -> None:
        self.fold(None, lambda _, x: f(x))

    def reduce(self, f: Folder[T, T]) -> Step[T]:
        """Fold using the first element as the initial accumulator."""
        first = self.next()
        if first is DONE:
            return DONE
        return Some(self.fold(first.value, f))

    def find(self, predicate: Predicate[T]) -> Step[T]:
        """Return the first element satisfying predicate, stopping right after it."""
        result = self.try_fold(None, lambda _, x: Break(x) if predicate(x) else None)
        return Some(result.value) if isinstance(result, Break) else DONE

    def find_map[B](self, f: Callable[[T], B | None]) -> Step[B]:
        """Return the first non-None result of f."""

        def check(_: None, x: T) -> Break[B] | None:
            mapped = f(x)
            return Break(mapped) if mapped is not None else None

        result = self.try_fold(None, check)
        return Some(result.value) if isinstance(result, Break) else DONE

    def position(self, predicate: Predicate[T]) -> Step[int]:
        """Index of the first element satisfying predicate."""

        def check(index: int, x: T) -> int | Break[int]:
            return Break(index) if predicate(x) else index + 1

        result = self.try_fold(0, check)
        return Some(result.value) if isinstance(result, Break) else DONE

    def any(self, predicate: Predicate[T]) -> bool:
        return isinstance(self.try_fold(None, lambda _, x: Break(True) if predicate(x) else None), Break)

    def all(self, predicate: Predicate[T]) -> bool:
        return not isinstance(
            self.try_fold(None, lambda _, x: None if predicate(x) else Break(False)), Break
        )

    def partition(self, predicate: Predicate[T]) -> tuple[list[T], list[T]]:
        """Split into (matching, non-matching) lists."""
        trues: list[T] = []
        falses: list[T] = []
        for x in self:
            (trues if predicate(x) else falses).append(x)
        return trues, falses

    def unzip[K, V](self: Iterator[tuple[K, V]]) -> tuple[list[K], list[V]]:
        keys: list[K] = []
        values: list[V] = []
        for key, value in self:
            keys.append(key)
            values.append(value)
        return keys, values

    def collect(self, into: Callable[[Iterable[T]], Any] | None = None) -> Any:
        """Materialize the remaining elements.

        Args:
            into: Optional constructor accepting an iterable (set, dict, tuple...).
                Defaults to list.
        """
        if into is None or into is list:
            return list(self)
        return into(self)

    def sum(self, start: Any = 0) -> Any:
        return self.fold(start, operator.add)

    def max(self, key: Callable[[T], Any] | None = None) -> Step[T]:
        """Largest element; the last one wins ties."""
        k = key or _identity
        return self.reduce(lambda a, b: b if k(b) >= k(a) else a)

    def min(self, key: Callable[[T], Any] | None = None) -> Step[T]:
        """Smallest element; the first one wins ties."""
        k = key or _identity
        return self.reduce(lambda a, b: b if k(b) < k(a) else a)

    def is_sorted(self, key: Callable[[T], Any] | None = None) -> bool:
        k = key or _identity
        first = self.next()
        if first is DONE:
            return True
        prev = k(first.value)
        while (step := self.next()) is not DONE:
            current = k(step.value)
            if current < prev:
                return False
            prev = current
        return True

    def eq(self, other: Any) -> bool:
        """Element-wise equality with another iterable, including length."""
        return self.eq_by(other, operator.eq)

    def eq_by[U](self, other: Any, eq: Callable[[T, U], bool]) -> bool:
        from lazyiter.iter.factory import iterate

        rhs: Iterator[U] = iterate(other)
        while True:
            a = self.next()
            b = rhs.next()
            if a is DONE:
                return b is DONE
            if b is DONE or not eq(a.value, b.value):
                return False

    # Adapter constructors

    def array_chunks(self, n: int) -> ArrayChunks[T]:
        from lazyiter.iter.adapters import ArrayChunks

        return ArrayChunks(self, n)

    def chain(self, other: Any) -> Chain[T]:
        from lazyiter.iter.adapters import Chain
        from lazyiter.iter.factory import iterate

        return Chain(self, iterate(other))

    def cycle(self) -> Cycle[T]:
        from lazyiter.iter.adapters import Cycle

        return Cycle(self)

    def enumerate(self) -> Enumerate[T]:
        from lazyiter.iter.adapters import Enumerate

        return Enumerate(self)

    def filter(self, predicate: Predicate[T]) -> Filter[T]:
        from lazyiter.iter.adapters import Filter

        return Filter(self, predicate)

    def filter_map[B](self, f: Callable[[T], B | None]) -> FilterMap[T, B]:
        from lazyiter.iter.adapters import FilterMap

        return FilterMap(self, f)

    def flatten(self) -> Flatten[Any]:
        from lazyiter.iter.adapters import Flatten

        return Flatten(self)

    def flat_map[B](self, f: Callable[[T], Any]) -> FlatMap[T, B]:
        from lazyiter.iter.adapters import FlatMap

        return FlatMap(self, f)

    def fuse(self) -> Fuse[T]:
        from lazyiter.iter.adapters import Fuse

        return Fuse(self)

    def inspect(self, f: Callable[[T], Any]) -> Inspect[T]:
        from lazyiter.iter.adapters import Inspect

        return Inspect(self, f)

    def intersperse(self, separator: T) -> Intersperse[T]:
        from lazyiter.iter.adapters import Intersperse

        return Intersperse(self, separator)

    def intersperse_with(self, separator: Callable[[], T]) -> IntersperseWith[T]:
        from lazyiter.iter.adapters import IntersperseWith

        return IntersperseWith(self, separator)

    def map[B](self, f: Callable[[T], B]) -> Map[T, B]:
        from lazyiter.iter.adapters import Map

        return Map(self, f)

    def map_while[B](self, f: Callable[[T], B | None]) -> MapWhile[T, B]:
        from lazyiter.iter.adapters import MapWhile

        return MapWhile(self, f)

    def peekable(self) -> Peekable[T]:
        from lazyiter.iter.adapters import Peekable

        return Peekable(self)

    def skip(self, n: int) -> Skip[T]:
        from lazyiter.iter.adapters import Skip

        return Skip(self, n)

    def skip_while(self, predicate: Predicate[T]) -> SkipWhile[T]:
        from lazyiter.iter.adapters import SkipWhile

        return SkipWhile(self, predicate)

    def split(self, sep: str) -> Split:
        from lazyiter.iter.adapters import Split

        return Split(self, sep)

    def step_by(self, step: int) -> StepBy[T]:
        from lazyiter.iter.adapters import StepBy

        return StepBy(self, step)

    def take(self, n: int) -> Take[T]:
        from lazyiter.iter.adapters import Take

        return Take(self, n)

    def take_while(self, predicate: Predicate[T]) -> TakeWhile[T]:
        from lazyiter.iter.adapters import TakeWhile

        return TakeWhile(self, predicate)

    def zip[U](self, other: Any) -> Zip[T, U]:
        from lazyiter.iter.adapters import Zip
        from lazyiter.iter.factory import iterate

        return Zip(self, iterate(other))


class ExactSizeIterator[T](Iterator[T]):
    """Iterator whose size_hint() bounds are always equal and exact."""

    __slots__ = ()

    def len(self) -> int:
        return self.size_hint()[0]


def is_exact_size(it: Iterator[Any]) -> bool:
    """Check whether an iterator currently reports an exact size."""
    if isinstance(it, ExactSizeIterator):
        return True
    lo, hi = it.size_hint()
    return hi == lo


class DoubleEndedIterator[T](Iterator[T]):
    """Iterator with a second cursor anchored at the back.

    Invariant: the front cursor never passes the back cursor. Once they meet,
    both next() and next_back() return DONE for the rest of the iterator's
    life (until into_iter()).
    """

    __slots__ = ()

    @abstractmethod
    def next_back(self) -> Step[T]:
        """Take the element at the back cursor, or DONE when the cursors have met."""

    def __reversed__(self) -> Rev[T]:
        return self.rev()

    def advance_back_by(self, n: int) -> Remainder | None:
        """Consume up to n elements from the back. See advance_by()."""
        check_count(n)
        for i in range(n):
            if self.next_back() is DONE:
                return Remainder(n - i)
        return None

    def nth_back(self, n: int) -> Step[T]:
        if self.advance_back_by(n) is not None:
            return DONE
        return self.next_back()

    def rfold[B](self, initial: B, f: Folder[B, T]) -> B:
        """Reduce every remaining element into an accumulator, right to left."""
        acc = initial
        while (step := self.next_back()) is not DONE:
            acc = f(acc, step.value)
        return acc

    def try_rfold[B](self, initial: B, f: Callable[[B, T], Any]) -> Any:
        """Right-to-left try_fold(); same short-circuit and cursor rules."""
        acc = initial
        while (step := self.next_back()) is not DONE:
            acc = f(acc, step.value)
            if isinstance(acc, ShortCircuit):
                return acc
        return acc

    def rfind(self, predicate: Predicate[T]) -> Step[T]:
        result = self.try_rfold(None, lambda _, x: Break(x) if predicate(x) else None)
        return Some(result.value) if isinstance(result, Break) else DONE

    def rfind_map[B](self, f: Callable[[T], B | None]) -> Step[B]:
        def check(_: None, x: T) -> Break[B] | None:
            mapped = f(x)
            return Break(mapped) if mapped is not None else None

        result = self.try_rfold(None, check)
        return Some(result.value) if isinstance(result, Break) else DONE

    def rposition(self, predicate: Predicate[T]) -> Step[int]:
        """Forward index of the last element satisfying predicate. Needs an exact size."""

        def check(index: int, x: T) -> int | Break[int]:
            index -= 1
            return Break(index) if predicate(x) else index

        result = self.try_rfold(self.len(), check)
        return Some(result.value) if isinstance(result, Break) else DONE

    def rev(self) -> Rev[T]:
        from lazyiter.iter.adapters import Rev

        return Rev(self)

    def rsplit(self, sep: str) -> Rev[str]:
        """Split on sep, yielding the segments from the end of the text first."""
        return self.split(sep).rev()

    # Adapter constructors returning double-ended variants where possible

    def chain(self, other: Any) -> Chain[T]:
        from lazyiter.iter.adapters import Chain, DoubleEndedChain
        from lazyiter.iter.factory import iterate

        rhs = iterate(other)
        if isinstance(rhs, DoubleEndedIterator):
            return DoubleEndedChain(self, rhs)
        return Chain(self, rhs)

    def cycle(self) -> Cycle[T]:
        from lazyiter.iter.adapters import DoubleEndedCycle

        return DoubleEndedCycle(self)

    def enumerate(self) -> Enumerate[T]:
        from lazyiter.iter.adapters import DoubleEndedEnumerate, Enumerate

        if is_exact_size(self):
            return DoubleEndedEnumerate(self)
        return Enumerate(self)

    def filter(self, predicate: Predicate[T]) -> Filter[T]:
        from lazyiter.iter.adapters import DoubleEndedFilter

        return DoubleEndedFilter(self, predicate)

    def filter_map[B](self, f: Callable[[T], B | None]) -> FilterMap[T, B]:
        from lazyiter.iter.adapters import DoubleEndedFilterMap

        return DoubleEndedFilterMap(self, f)

    def flatten(self) -> Flatten[Any]:
        from lazyiter.iter.adapters import DoubleEndedFlatten

        return DoubleEndedFlatten(self)

    def flat_map[B](self, f: Callable[[T], Any]) -> FlatMap[T, B]:
        from lazyiter.iter.adapters import DoubleEndedFlatMap

        return DoubleEndedFlatMap(self, f)

    def fuse(self) -> Fuse[T]:
        from lazyiter.iter.adapters import DoubleEndedFuse

        return DoubleEndedFuse(self)

    def inspect(self, f: Callable[[T], Any]) -> Inspect[T]:
        from lazyiter.iter.adapters import DoubleEndedInspect

        return DoubleEndedInspect(self, f)

    def map[B](self, f: Callable[[T], B]) -> Map[T, B]:
        from lazyiter.iter.adapters import DoubleEndedMap

        return DoubleEndedMap(self, f)

    def peekable(self) -> Peekable[T]:
        from lazyiter.iter.adapters import DoubleEndedPeekable

        return DoubleEndedPeekable(self)

    def skip(self, n: int) -> Skip[T]:
        from lazyiter.iter.adapters import DoubleEndedSkip, Skip

        if is_exact_size(self):
            return DoubleEndedSkip(self, n)
        return Skip(self, n)

    def skip_while(self, predicate: Predicate[T]) -> SkipWhile[T]:
        from lazyiter.iter.adapters import DoubleEndedSkipWhile

        return DoubleEndedSkipWhile(self, predicate)

    def split(self, sep: str) -> Split:
        from lazyiter.iter.adapters import DoubleEndedSplit

        return DoubleEndedSplit(self, sep)

    def step_by(self, step: int) -> StepBy[T]:
        from lazyiter.iter.adapters import DoubleEndedStepBy, StepBy

        if is_exact_size(self):
            return DoubleEndedStepBy(self, step)
        return StepBy(self, step)

    def take(self, n: int) -> Take[T]:
        from lazyiter.iter.adapters import DoubleEndedTake, Take

        if is_exact_size(self):
            return DoubleEndedTake(self, n)
        return Take(self, n)

    def zip[U](self, other: Any) -> Zip[T, U]:
        from lazyiter.iter.adapters import DoubleEndedZip, Zip
        from lazyiter.iter.factory import iterate

        rhs = iterate(other)
        if isinstance(rhs, DoubleEndedIterator) and is_exact_size(self) and is_exact_size(rhs):
            return DoubleEndedZip(self, rhs)
        return Zip(self, rhs)
