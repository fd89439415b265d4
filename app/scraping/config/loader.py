"""
Environment + JSON config loader for provider scraping.
"""

from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from urllib.parse import urljoin

from db.config import load_env_files

from app.scraping.config.models import ActorScrapingSettings, ProviderConfig
from app.scraping.logging_utils import log_event

logger = logging.getLogger(__name__)

SELECTOR_KEYS = ("list", "name", "rank", "details", "type")


def _get_float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    stripped = raw.strip()
    return stripped if stripped else default


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def _resolve_config_path(raw_path: str) -> Path:
    candidate = Path(raw_path)
    if candidate.is_absolute():
        return candidate
    return (_project_root() / candidate).resolve()


@lru_cache(maxsize=1)
def get_actor_scraping_settings() -> ActorScrapingSettings:
    """
    Return cached scraper settings from environment variables.
    """

    load_env_files()
    config_path = _get_str_env(
        "ACTOR_SCRAPE_CONFIG_PATH",
        "app/scraping/config/providers.json",
    )
    return ActorScrapingSettings(
        config_path=str(_resolve_config_path(config_path)),
        default_user_agent=_get_str_env(
            "ACTOR_SCRAPE_USER_AGENT",
            "ActorCatalogBot/1.0 (+https://example.com/bot)",
        ),
        timeout_seconds=max(
            1.0,
            _get_float_env("ACTOR_SCRAPE_TIMEOUT_SECONDS", 15.0),
        ),
    )


def load_provider_configs(*, config_path: str) -> list[ProviderConfig]:
    """
    Load provider configurations from a JSON file.

    Entries without a name, a listing URL, a list selector or a name selector
    cannot be used and are skipped.
    """

    path = _resolve_config_path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Provider config file not found: {path}")

    raw_data = json.loads(path.read_text(encoding="utf-8"))
    providers = raw_data.get("providers", [])
    if not isinstance(providers, list):
        raise ValueError("Invalid provider config: 'providers' must be a list.")

    parsed: list[ProviderConfig] = []
    for entry in providers:
        if not isinstance(entry, dict):
            continue

        name = str(entry.get("name", "")).strip()
        listing_url = _resolve_listing_url(
            base_url=_optional_str(entry.get("base_url")),
            listing_url=_optional_str(entry.get("listing_url")),
        )
        selectors = _normalize_selectors(entry.get("selectors", {}))
        if not name or not listing_url or not selectors["list"] or not selectors["name"]:
            log_event(
                logger,
                logging.WARNING,
                "provider_config_skipped",
                provider=name or None,
                config_path=str(path),
            )
            continue

        parsed.append(
            ProviderConfig(
                name=name,
                listing_url=listing_url,
                list_selector=selectors["list"],
                name_selector=selectors["name"],
                rank_selector=selectors["rank"],
                details_selector=selectors["details"],
                type_selector=selectors["type"],
                enabled=_optional_bool(entry.get("enabled"), True),
                user_agent=_optional_str(entry.get("user_agent")),
                headers=_normalize_headers(entry.get("headers", {})),
            )
        )

    return parsed


def _resolve_listing_url(*, base_url: str | None, listing_url: str | None) -> str | None:
    if not listing_url:
        return None
    if listing_url.startswith(("http://", "https://")) or not base_url:
        return listing_url
    return urljoin(f"{base_url.rstrip('/')}/", listing_url.lstrip("/"))


def _normalize_selectors(selectors: object) -> dict[str, str]:
    normalized = {key: "" for key in SELECTOR_KEYS}
    if not isinstance(selectors, dict):
        return normalized

    for key, value in selectors.items():
        if not isinstance(key, str) or not isinstance(value, str):
            continue
        selector_key = key.strip().lower()
        if selector_key in normalized:
            normalized[selector_key] = value.strip()
    return normalized


def _normalize_headers(headers: object) -> dict[str, str]:
    if not isinstance(headers, dict):
        return {}

    normalized: dict[str, str] = {}
    for key, value in headers.items():
        if not isinstance(key, str) or not isinstance(value, str):
            continue
        if key.strip() and value.strip():
            normalized[key.strip()] = value.strip()
    return normalized


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


def _optional_bool(value: object, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    return default
