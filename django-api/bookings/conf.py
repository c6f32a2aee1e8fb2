"""Typed configuration for the bookings app.

Reads a single ``BOOKINGS`` dict from Django settings and exposes it as a
frozen dataclass with sensible defaults.

Usage::

    from bookings.conf import get_config

    config = get_config()
    config.default_page_size
"""

import functools
from collections.abc import Mapping
from dataclasses import dataclass

from django.conf import settings
from django.test.signals import setting_changed


@dataclass(frozen=True, slots=True)
class BookingsSettings:
    """Top-level bookings configuration."""

    default_page_size: int = 10
    max_page_size: int = 100
    catalog_cache_timeout: int = 300
    cache_key_prefix: str = "bookings"


@functools.lru_cache(maxsize=1)
def get_config() -> BookingsSettings:
    """Build and return the bookings configuration.

    The result is cached; the cache is cleared when Django's
    ``setting_changed`` signal fires for ``BOOKINGS`` (e.g. inside
    ``override_settings``).
    """
    raw = getattr(settings, "BOOKINGS", {})
    if not isinstance(raw, Mapping):
        msg = "BOOKINGS must be a mapping (dict-like object)"
        raise TypeError(msg)

    config = BookingsSettings(**dict(raw))
    _validate_config(config)
    return config


def _validate_config(config: BookingsSettings) -> None:
    for name in ("default_page_size", "max_page_size"):
        value = getattr(config, name)
        if not isinstance(value, int) or value <= 0:
            msg = f"BOOKINGS['{name}'] must be a positive integer"
            raise ValueError(msg)
    if config.default_page_size > config.max_page_size:
        msg = "BOOKINGS['default_page_size'] cannot exceed BOOKINGS['max_page_size']"
        raise ValueError(msg)
    if not isinstance(config.catalog_cache_timeout, int) or config.catalog_cache_timeout < 0:
        msg = "BOOKINGS['catalog_cache_timeout'] must be a non-negative integer"
        raise ValueError(msg)
    if not config.cache_key_prefix:
        msg = "BOOKINGS['cache_key_prefix'] cannot be empty"
        raise ValueError(msg)


def _clear_config_cache(*, setting: str, **kwargs: object) -> None:  # noqa: ARG001
    """Clear the cached config when Django settings change during tests."""
    if setting == "BOOKINGS":
        get_config.cache_clear()


setting_changed.connect(_clear_config_cache, dispatch_uid="bookings.conf.clear_config_cache")
