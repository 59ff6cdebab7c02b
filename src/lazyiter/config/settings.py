"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the
iteration engine.

Usage:
    from lazyiter.config import IterSettings, get_settings

    # Load from environment variables (LAZYITER_*)
    settings = get_settings()

    # Or override with explicit values
    settings = IterSettings(usize_max=2**32 - 1)
"""

from __future__ import annotations

from functools import lru_cache

try:
    from pydantic import Field
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install pydantic-settings"
    ) from e


class IterSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the iteration engine.

    Attributes:
        usize_max: Largest count the engine reports. Saturating arithmetic in
            size hints clamps here and infinite sources report it as their
            lower bound.
        warn_on_replay_noop: Emit a ReplayWarning when into_iter() is called
            on a source that cannot be rewound (one-shot iterables, from_fn,
            drain).

    Environment Variables:
        LAZYITER_USIZE_MAX
        LAZYITER_WARN_ON_REPLAY_NOOP
    """

    model_config = SettingsConfigDict(
        env_prefix="LAZYITER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    usize_max: int = Field(default=2**53 - 1, gt=0)
    warn_on_replay_noop: bool = True


@lru_cache(maxsize=1)
def get_settings() -> IterSettings:
    """Return the process-wide settings, loaded once from the environment."""
    return IterSettings()
