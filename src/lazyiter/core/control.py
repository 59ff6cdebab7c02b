"""Short-circuit values.

Folds and advances stop early by *returning* one of these values, never by
raising. Callers inspect the return value.

Usage:
    result = it.try_fold(0, lambda acc, x: Break(acc) if x < 0 else acc + x)
    if isinstance(result, Break):
        ...

    if (rem := it.advance_by(5)) is not None:
        print(f"{rem.remaining} elements short")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class ShortCircuit:
    """Marker base for values that stop a fold or advance early."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class Break[B](ShortCircuit):
    """Returned from a try_fold/try_rfold closure to stop folding with a value."""

    value: B


@dataclass(frozen=True, slots=True)
class Remainder(ShortCircuit):
    """How many steps an advance_by/advance_back_by call could not take.

    Always at least 1; a fully successful advance returns None instead.
    """

    remaining: int

    def __post_init__(self) -> None:
        if self.remaining <= 0:
            raise ValueError(f"Expected {self.remaining} to be a non-zero count")


@dataclass(frozen=True, slots=True)
class PartialChunk[T](ShortCircuit):
    """Returned by next_chunk when fewer than `requested` elements remained."""

    items: list[T] = field(default_factory=list)
    requested: int = 0

    @property
    def message(self) -> str:
        return (
            f"'next_chunk' couldn't fill a container of {self.requested} elements, "
            f"but a container of {len(self.items)} elements were found"
        )


def is_short_circuit(value: object) -> bool:
    """Check whether a fold result stopped early."""
    return isinstance(value, ShortCircuit)


def remainder_of(result: Remainder | None) -> int:
    """Number of steps an advance fell short by (0 when it succeeded)."""
    return 0 if result is None else result.remaining


def remainder(n: int) -> Remainder | None:
    """Build an advance result from a possibly-zero shortfall."""
    return Remainder(n) if n > 0 else None


def into_value(result: Any) -> Any:
    """Unwrap a Break, passing any other fold result through unchanged."""
    if isinstance(result, Break):
        return result.value
    return result


@dataclass(frozen=True, slots=True)
class Halt[B](ShortCircuit):
    """Stops an adapter's internal fold with a finished accumulator.

    Adapters that bound a fold (take, skip from the back, map_while) wrap their
    own stop in Halt so it can't be confused with a caller's Break. A Halt is
    always unwrapped before the adapter returns.
    """

    value: B
