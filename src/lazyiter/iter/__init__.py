"""Stateful iteration engine: contracts, sources, adapters, factory.

Architecture Note:
    base.py defines the contracts and every default consumer.
    adapters/ holds the wrapper types; sources.py and functions.py the leaves.
    factory.py turns Python values into leaves. For stateless helpers, see core/.
"""

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
from lazyiter.iter.base import DoubleEndedIterator, ExactSizeIterator, Iterator, is_exact_size
from lazyiter.iter.drain import Drain, drain
from lazyiter.iter.factory import SourceKind, classify, collect, iterate
from lazyiter.iter.functions import (
    empty,
    from_fn,
    of,
    once,
    once_with,
    range_iter,
    repeat,
    repeat_with,
    successors,
)
from lazyiter.iter.sources import (
    ArrayIter,
    Empty,
    FromFn,
    GenIter,
    IterableIter,
    Once,
    OnceWith,
    Range,
    Repeat,
    RepeatWith,
    Successors,
)

__all__ = [
    # Contracts
    "Iterator",
    "DoubleEndedIterator",
    "ExactSizeIterator",
    "is_exact_size",
    # Factory
    "SourceKind",
    "classify",
    "iterate",
    "collect",
    # Sources
    "ArrayIter",
    "GenIter",
    "IterableIter",
    "Range",
    "Empty",
    "Once",
    "OnceWith",
    "Repeat",
    "RepeatWith",
    "Successors",
    "FromFn",
    # Free functions
    "successors",
    "repeat",
    "repeat_with",
    "once",
    "once_with",
    "from_fn",
    "empty",
    "range_iter",
    "of",
    # Drain
    "Drain",
    "drain",
    # Adapters
    "ArrayChunks",
    "Chain",
    "Cycle",
    "Enumerate",
    "Filter",
    "FilterMap",
    "FlatMap",
    "Flatten",
    "Fuse",
    "Inspect",
    "Intersperse",
    "IntersperseWith",
    "Map",
    "MapWhile",
    "Peekable",
    "Rev",
    "Skip",
    "SkipWhile",
    "Split",
    "StepBy",
    "Take",
    "TakeWhile",
    "Zip",
]
