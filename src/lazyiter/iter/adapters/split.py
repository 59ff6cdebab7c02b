"""Split: segments of a character iterator between separator characters."""

from __future__ import annotations

from typing import Self

from lazyiter.core.control import Break
from lazyiter.core.option import DONE, Some, Step
from lazyiter.core.types import SizeHint
from lazyiter.iter.base import DoubleEndedIterator, Iterator


class Split(Iterator[str]):
    """Yields the runs of characters between occurrences of sep.

    Matches str.split(sep): every segment is yielded, empty ones included, so
    n separators always give n + 1 segments. Separators are consumed and never
    yielded.

    Usage:
        iterate("a,b,,c").split(",").collect()  # ['a', 'b', '', 'c']
        iterate("").split(",").collect()        # ['']
    """

    __slots__ = ("_iter", "_sep", "_finished")

    def __init__(self, iter: Iterator[str], sep: str) -> None:
        if not isinstance(sep, str) or len(sep) != 1:
            raise ValueError(f"Separator must be a single character, got {sep!r}")
        self._iter = iter
        self._sep = sep
        self._finished = False

    def _collect(self, chars: list[str], ch: str) -> list[str] | Break[list[str]]:
        if ch == self._sep:
            return Break(chars)
        chars.append(ch)
        return chars

    def next(self) -> Step[str]:
        if self._finished:
            return DONE
        result = self._iter.try_fold([], self._collect)
        if isinstance(result, Break):
            return Some("".join(result.value))
        self._finished = True
        return Some("".join(result))

    def size_hint(self) -> SizeHint:
        if self._finished:
            return (0, 0)
        _, hi = self._iter.size_hint()
        return (1, None if hi is None else hi + 1)

    def into_iter(self) -> Self:
        self._iter.into_iter()
        self._finished = False
        return self


class DoubleEndedSplit(Split, DoubleEndedIterator[str]):
    """Split that also yields segments from the end of the text.

    Both ends consume the same source, so the segment left between them when
    it runs dry is yielded exactly once, by whichever end reaches it.
    """

    __slots__ = ()

    _iter: DoubleEndedIterator[str]

    def next_back(self) -> Step[str]:
        if self._finished:
            return DONE
        result = self._iter.try_rfold([], self._collect)
        if isinstance(result, Break):
            return Some("".join(reversed(result.value)))
        self._finished = True
        return Some("".join(reversed(result)))
