"""
app/services/actor_scraping_service.py

Service orchestration for provider scraping into the actor catalog.
"""

from __future__ import annotations

from functools import lru_cache

from app.domain.actor_scraping import ScrapeSummary
from app.scraping.config import get_actor_scraping_settings
from app.scraping.engine import ActorExtractionEngine
from app.services.actor_catalog import ActorCatalog, get_actor_catalog


class ActorScrapingService:
    """
    Runs provider extractions against the shared catalog.

    The engine, with its provider registry and HTTP session, is built once
    and reused for every scrape.
    """

    def __init__(self, catalog: ActorCatalog | None = None) -> None:
        self._engine = ActorExtractionEngine(
            settings=get_actor_scraping_settings(),
            catalog=catalog or get_actor_catalog(),
        )

    def scrape(self, *, provider: str) -> ScrapeSummary:
        return self._engine.extract_all(provider)


@lru_cache(maxsize=1)
def get_actor_scraping_service() -> ActorScrapingService:
    """
    Build and cache actor scraping service.
    """

    return ActorScrapingService()
