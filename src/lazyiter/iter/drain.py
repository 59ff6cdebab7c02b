"""Draining a slice out of a list.

Usage:
    items = [0, 1, 2, 3, 4, 5]
    removed = drain(items, 1, 4)
    removed.next()       # Some(1)
    removed.keep_rest()  # items == [0, 2, 3, 4, 5]
"""

from __future__ import annotations

from typing import Self

from lazyiter.core.errors import warn_replay
from lazyiter.iter.sources import ArrayIter


class Drain[T](ArrayIter[T]):
    """Exact-size, double-ended iterator over elements removed from a list.

    The removal happens up front; the target list is already shorter when the
    Drain is returned.
    A clone shares the target list; call keep_rest() on at most one of them.
    """

    __slots__ = ("_target", "_start")

    def __init__(self, target: list[T], start: int, end: int) -> None:
        super().__init__(target[start:end])
        del target[start:end]
        self._target = target
        self._start = start

    def keep_rest(self) -> None:
        """Put the elements not yet yielded back into the list where they were removed."""
        self._target[self._start : self._start] = self._items[self._front : self._back]
        self._front = self._back

    def into_iter(self) -> Self:
        warn_replay("drain()", "drained elements have already been removed from the list")
        return self


def drain[T](items: list[T], start: int = 0, end: int | None = None) -> Drain[T]:
    """Remove items[start:end] from a list and iterate over the removed elements.

    Args:
        items: The list to remove elements from. Mutated immediately.
        start: First index to remove.
        end: One past the last index to remove. Defaults to len(items).

    Returns:
        A Drain over the removed elements.

    Raises:
        ValueError: If the bounds are not 0 <= start <= end <= len(items).
    """
    stop = len(items) if end is None else end
    if not 0 <= start <= stop <= len(items):
        raise ValueError(f"Invalid drain range {start}..{stop} for a list of length {len(items)}")
    return Drain(items, start, stop)
