"""Core primitives: stateless sentinel, short-circuit and arithmetic helpers.

Architecture Note:
    core/ contains pure, stateless building blocks shared by every iterator.
    For the stateful engine (cursors, adapters, sources), see iter/.
"""

from lazyiter.core.arith import (
    check_count,
    checked_add,
    saturating_add,
    saturating_mul,
    saturating_sub,
    usize_max,
)
from lazyiter.core.control import (
    Break,
    Halt,
    PartialChunk,
    Remainder,
    ShortCircuit,
    into_value,
    is_short_circuit,
    remainder,
    remainder_of,
)
from lazyiter.core.errors import ReplayWarning, warn_replay
from lazyiter.core.option import DONE, Done, Some, Step, is_done, is_some
from lazyiter.core.types import Folder, Predicate, SizeHint

__all__ = [
    # Types
    "SizeHint",
    "Predicate",
    "Folder",
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
    "Halt",
    "Remainder",
    "PartialChunk",
    "is_short_circuit",
    "remainder",
    "remainder_of",
    "into_value",
    # Warnings
    "ReplayWarning",
    "warn_replay",
    # Arithmetic
    "usize_max",
    "saturating_add",
    "saturating_sub",
    "saturating_mul",
    "checked_add",
    "check_count",
]
