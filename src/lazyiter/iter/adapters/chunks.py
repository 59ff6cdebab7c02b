"""ArrayChunks: fixed-size, non-overlapping chunks."""

from __future__ import annotations

from typing import Self

from lazyiter.core.control import PartialChunk
from lazyiter.core.option import DONE, Some, Step
from lazyiter.core.types import SizeHint
from lazyiter.iter.base import Iterator


class ArrayChunks[T](Iterator[list[T]]):
    """Yields lists of exactly n elements.

    A short tail is not yielded; it is kept and returned by into_remainder().

    Usage:
        chunks = iterate(range(7)).array_chunks(3)
        chunks.collect()         # [[0, 1, 2], [3, 4, 5]]
        chunks.into_remainder()  # [6]
    """

    __slots__ = ("_iter", "_n", "_remainder")

    def __init__(self, iter: Iterator[T], n: int) -> None:
        if n <= 0:
            raise ValueError(f"Chunk size must be positive, got {n}")
        self._iter = iter
        self._n = n
        self._remainder: list[T] = []

    def next(self) -> Step[list[T]]:
        chunk = self._iter.next_chunk(self._n)
        if isinstance(chunk, PartialChunk):
            if chunk.items:
                self._remainder = chunk.items
            return DONE
        return Some(chunk)

    def into_remainder(self) -> list[T]:
        """The trailing elements that didn't fill a whole chunk."""
        return list(self._remainder)

    def size_hint(self) -> SizeHint:
        lo, hi = self._iter.size_hint()
        return (lo // self._n, None if hi is None else hi // self._n)

    def into_iter(self) -> Self:
        self._iter.into_iter()
        self._remainder = []
        return self
