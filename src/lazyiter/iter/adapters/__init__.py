"""Adapter library.

Each adapter exclusively owns its source iterator(s) and keeps O(1) private
state. Forward classes are named after the operation that builds them;
`DoubleEnded<Name>` subclasses add the back cursor where the sources allow it.
Adapters are normally built through the chainable methods on Iterator rather
than instantiated directly.
"""

from lazyiter.iter.adapters.chunks import ArrayChunks
from lazyiter.iter.adapters.counted import (
    DoubleEndedSkip,
    DoubleEndedStepBy,
    DoubleEndedTake,
    Skip,
    StepBy,
    Take,
)
from lazyiter.iter.adapters.filtering import (
    DoubleEndedFilter,
    DoubleEndedFilterMap,
    DoubleEndedSkipWhile,
    Filter,
    FilterMap,
    MapWhile,
    SkipWhile,
    TakeWhile,
)
from lazyiter.iter.adapters.flatten import (
    DoubleEndedFlatMap,
    DoubleEndedFlatten,
    FlatMap,
    Flatten,
)
from lazyiter.iter.adapters.intersperse import Intersperse, IntersperseWith
from lazyiter.iter.adapters.mapping import (
    DoubleEndedEnumerate,
    DoubleEndedInspect,
    DoubleEndedMap,
    Enumerate,
    Inspect,
    Map,
)
from lazyiter.iter.adapters.peekable import DoubleEndedPeekable, Peekable
from lazyiter.iter.adapters.split import DoubleEndedSplit, Split
from lazyiter.iter.adapters.structural import (
    Chain,
    Cycle,
    DoubleEndedChain,
    DoubleEndedCycle,
    DoubleEndedFuse,
    DoubleEndedZip,
    Fuse,
    Rev,
    Zip,
)

__all__ = [
    # Element-wise
    "Map",
    "DoubleEndedMap",
    "Inspect",
    "DoubleEndedInspect",
    "Enumerate",
    "DoubleEndedEnumerate",
    # Predicate-driven
    "Filter",
    "DoubleEndedFilter",
    "FilterMap",
    "DoubleEndedFilterMap",
    "MapWhile",
    "SkipWhile",
    "DoubleEndedSkipWhile",
    "TakeWhile",
    # Counting
    "Skip",
    "DoubleEndedSkip",
    "Take",
    "DoubleEndedTake",
    "StepBy",
    "DoubleEndedStepBy",
    # Structural
    "Chain",
    "DoubleEndedChain",
    "Zip",
    "DoubleEndedZip",
    "Cycle",
    "DoubleEndedCycle",
    "Fuse",
    "DoubleEndedFuse",
    "Rev",
    # Nesting
    "Flatten",
    "DoubleEndedFlatten",
    "FlatMap",
    "DoubleEndedFlatMap",
    # Buffering
    "Peekable",
    "DoubleEndedPeekable",
    "Intersperse",
    "IntersperseWith",
    "ArrayChunks",
    # Text
    "Split",
    "DoubleEndedSplit",
]
