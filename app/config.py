"""
app/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from db.config import load_env_files, resolve_database_url

_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


@dataclass(frozen=True)
class CatalogSettings:
    """
    Catalog backend, paging defaults and logging level.

    `database_url` is None when the catalog runs in memory.
    """

    database_url: str | None
    default_page_size: int
    max_page_size: int
    log_level: str


@lru_cache(maxsize=1)
def get_catalog_settings() -> CatalogSettings:
    """
    Return cached catalog settings.
    """

    _load_env_once()
    max_page_size = max(1, _get_int_env("CATALOG_MAX_PAGE_SIZE", 100))
    log_level = _get_str_env("LOG_LEVEL", "INFO").upper()
    return CatalogSettings(
        database_url=resolve_database_url(),
        default_page_size=min(
            max_page_size,
            max(1, _get_int_env("CATALOG_DEFAULT_PAGE_SIZE", 10)),
        ),
        max_page_size=max_page_size,
        log_level=log_level if log_level in _ALLOWED_LOG_LEVELS else "INFO",
    )
