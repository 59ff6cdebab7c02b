"""Step sentinel returned by every pull on an iterator.

Usage:
    match it.next():
        case Some(value):
            print(value)
        case Done():
            print("exhausted")

    while step := it.next():  # DONE is falsy, Some is truthy
        print(step.value)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final, NoReturn, TypeGuard, final


@dataclass(frozen=True, slots=True)
class Some[T]:
    """A yielded element."""

    value: T

    def unwrap(self) -> T:
        return self.value

    def unwrap_or[D](self, default: D) -> T:
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply f to the carried value, keeping the Some shape."""
        return Some(f(self.value))


@final
class Done:
    """End-of-sequence marker. Use the DONE singleton, never construct directly."""

    __slots__ = ()
    _instance: Done | None = None

    def __new__(cls) -> Done:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "DONE"

    def __reduce__(self) -> tuple[type[Done], tuple[()]]:
        return (Done, ())

    def unwrap(self) -> NoReturn:
        raise ValueError("called unwrap() on DONE")

    def unwrap_or[D](self, default: D) -> D:
        return default

    def map(self, f: Callable[[Any], Any]) -> Done:
        return self


DONE: Final[Done] = Done()

type Step[T] = Some[T] | Done
"""Result of a pull: either Some(value) or DONE."""


def is_some[T](step: Step[T]) -> TypeGuard[Some[T]]:
    """Check whether a step carries a value."""
    return step is not DONE


def is_done(step: Step[Any]) -> bool:
    """Check whether a step is the end sentinel."""
    return step is DONE
