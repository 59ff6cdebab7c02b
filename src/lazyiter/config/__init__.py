"""Configuration module using Pydantic Settings.

Provides typed configuration for the engine with environment variable support.

Usage:
    from lazyiter.config import IterSettings, get_settings

    settings = get_settings()
    strict = IterSettings(warn_on_replay_noop=False)
"""

from lazyiter.config.settings import IterSettings, get_settings

__all__ = [
    "IterSettings",
    "get_settings",
]
