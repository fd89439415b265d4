"""
Config helpers for provider scraping.
"""

from app.scraping.config.loader import get_actor_scraping_settings, load_provider_configs
from app.scraping.config.models import ActorScrapingSettings, ProviderConfig

__all__ = [
    "ActorScrapingSettings",
    "ProviderConfig",
    "get_actor_scraping_settings",
    "load_provider_configs",
]
