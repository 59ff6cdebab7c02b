"""Saturating count arithmetic bounded by the configured usize_max."""

from __future__ import annotations

from lazyiter.config import get_settings


def usize_max() -> int:
    return get_settings().usize_max


def saturating_add(a: int, b: int) -> int:
    return min(a + b, usize_max())


def saturating_sub(a: int, b: int) -> int:
    """Subtract, flooring at zero."""
    return max(a - b, 0)


def saturating_mul(a: int, b: int) -> int:
    return min(a * b, usize_max())


def checked_add(a: int | None, b: int | None) -> int | None:
    """Add two optional bounds; None if either is unknown or the sum overflows."""
    if a is None or b is None:
        return None
    total = a + b
    return total if total <= usize_max() else None


def check_count(n: int, what: str = "n") -> int:
    """Validate a non-negative element count.

    Raises:
        ValueError: If n is negative.
    """
    if n < 0:
        raise ValueError(f"{what} must be non-negative, got {n}")
    return n
