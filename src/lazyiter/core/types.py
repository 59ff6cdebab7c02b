"""Core type definitions for lazyiter."""

from collections.abc import Callable

type SizeHint = tuple[int, int | None]
"""Lower bound and optional upper bound on the number of remaining elements.

An upper bound of None means unknown or unbounded. When both bounds are equal
the iterator has an exact size and `len()` is available.
"""

type Predicate[T] = Callable[[T], bool]
"""Element test used by filter, find, take_while and friends."""

type Folder[B, T] = Callable[[B, T], B]
"""Accumulator step `f(acc, element) -> acc` used by fold and rfold."""
