"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from typing import Self

from lazyiter import DONE, Iterator, Some, get_settings


class Resurrecting(Iterator[int]):
    """Yields its values, reports DONE once, then starts yielding again.

    Misbehaving on purpose: used to check that fused adapters ignore it.
    """

    __slots__ = ("_values", "_pos", "_gap_reported")

    def __init__(self, values: list[int]) -> None:
        self._values = values
        self._pos = 0
        self._gap_reported = False

    def next(self):
        if self._pos == len(self._values) and not self._gap_reported:
            self._gap_reported = True
            return DONE
        value = self._values[self._pos % len(self._values)]
        self._pos += 1
        return Some(value)

    def into_iter(self) -> Self:
        self._pos = 0
        self._gap_reported = False
        return self


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings for every test so env overrides don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def resurrecting_cls():
    return Resurrecting


@pytest.fixture
def nested():
    """The two-level input used by the flatten alternation scenario."""
    return [[1, 2, 3], [4, 5, 6]]


@pytest.fixture
def calls():
    """List that side-effecting callbacks append to."""
    return []
