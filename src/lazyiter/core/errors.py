"""Warnings for non-fatal iterator misuse.

Programmer errors (negative counts, zero steps, bad ranges) raise built-in
exceptions at the call site; replaying a source that cannot be rewound is
only warned about, since into_iter() must always succeed.
"""

from __future__ import annotations

import warnings

from lazyiter.config import get_settings


class ReplayWarning(UserWarning):
    """into_iter() was called on a source whose state cannot be restored."""


def warn_replay(source: str, reason: str) -> None:
    """Warn that into_iter() left a source unchanged, unless disabled in settings."""
    if not get_settings().warn_on_replay_noop:
        return
    warnings.warn(
        f"into_iter() will do nothing on {source}: {reason}",
        ReplayWarning,
        stacklevel=3,
    )
