"""lazyiter: lazy, pull-based sequence combinators with double-ended traversal.

Usage:
    from lazyiter import iterate, Some, DONE

    it = iterate([[1, 2, 3], [4, 5, 6]]).flatten()
    it.next()        # Some(value=1)
    it.next_back()   # Some(value=6)

    squares = iterate(range(10)).map(lambda x: x * x).filter(lambda x: x % 2 == 0)
    squares.collect()                 # [0, 4, 16, 36, 64]
    squares.into_iter().collect(set)  # replays from the start

    for i, word in iterate(["a", "b", "c"]).enumerate().rev():
        print(i, word)               # 2 c, 1 b, 0 a
"""

__version__ = "0.1.0"

# Core primitives
from lazyiter.core import (
    DONE,
    Break,
    Done,
    PartialChunk,
    Remainder,
    ReplayWarning,
    ShortCircuit,
    SizeHint,
    Some,
    Step,
    into_value,
    is_done,
    is_some,
    remainder_of,
)

# Configuration
from lazyiter.config import IterSettings, get_settings

# Engine
from lazyiter.iter import (
    ArrayIter,
    DoubleEndedIterator,
    Drain,
    ExactSizeIterator,
    Iterator,
    SourceKind,
    classify,
    collect,
    drain,
    empty,
    from_fn,
    is_exact_size,
    iterate,
    of,
    once,
    once_with,
    range_iter,
    repeat,
    repeat_with,
    successors,
)

__all__ = [
    # Version
    "__version__",
    # Sentinel
    "Some",
    "Done",
    "DONE",
    "Step",
    "is_some",
    "is_done",
    # Short-circuit
    "ShortCircuit",
    "Break",
    "Remainder",
    "PartialChunk",
    "remainder_of",
    "into_value",
    # Contracts
    "Iterator",
    "DoubleEndedIterator",
    "ExactSizeIterator",
    "is_exact_size",
    "SizeHint",
    # Factory
    "SourceKind",
    "classify",
    "iterate",
    "collect",
    "ArrayIter",
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
    "drain",
    "Drain",
    # Configuration
    "IterSettings",
    "get_settings",
    # Warnings
    "ReplayWarning",
]
