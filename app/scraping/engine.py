"""
Actor extraction engine.
"""

from __future__ import annotations

import logging

from app.domain.actor import CandidateRecord
from app.domain.actor_scraping import ScrapeSummary
from app.scraping.config.models import ActorScrapingSettings
from app.scraping.fetcher import DocumentFetcher, RequestsDocumentFetcher
from app.scraping.logging_utils import log_event, timed_event
from app.scraping.navigation import CSSSelectorNavigator, NodeNavigator
from app.scraping.parsing import FieldExtractor, RecordBuilder
from app.scraping.registry import ProviderRegistry
from app.services.actor_catalog import ActorCatalog

logger = logging.getLogger(__name__)


class ActorExtractionEngine:
    """
    Orchestrates provider resolution, fetching, record building and ingestion.
    """

    def __init__(
        self,
        *,
        settings: ActorScrapingSettings,
        catalog: ActorCatalog,
        registry: ProviderRegistry | None = None,
        fetcher: DocumentFetcher | None = None,
        navigator: NodeNavigator | None = None,
    ) -> None:
        self._settings = settings
        self._catalog = catalog
        self._registry = registry or ProviderRegistry.from_config_file(settings.config_path)
        self._fetcher = fetcher or RequestsDocumentFetcher(
            user_agent=settings.default_user_agent,
            timeout_seconds=settings.timeout_seconds,
        )
        self._navigator = navigator or CSSSelectorNavigator()
        self._builder = RecordBuilder(FieldExtractor(self._navigator))

    def extract_all(self, provider: str) -> ScrapeSummary:
        """
        Scrape one provider's listing page into the catalog.

        Raises ProviderNotFoundError before any network access when the
        provider is unknown, and FetchError when the listing page cannot be
        retrieved; nothing is ingested in either case.
        """

        config = self._registry.resolve(provider)
        log_event(
            logger,
            logging.INFO,
            "provider_resolved",
            provider=config.name,
            listing_url=config.listing_url,
        )

        with timed_event(
            logger,
            "extraction_completed",
            failure_event="extraction_failed",
            provider=config.name,
        ) as stats:
            headers = dict(config.headers)
            if config.user_agent:
                headers["User-Agent"] = config.user_agent
            document = self._fetcher.fetch(config.listing_url, headers=headers)
            log_event(
                logger,
                logging.INFO,
                "listing_fetched",
                provider=config.name,
                listing_url=config.listing_url,
            )

            nodes = self._navigator.select_all(document, config.list_selector)
            candidates: list[CandidateRecord] = []
            discarded = 0
            for node in nodes:
                candidate = self._builder.build(node, config)
                if not candidate.name:
                    discarded += 1
                    continue
                candidates.append(candidate)

            result = self._catalog.ingest(candidates)
            summary = ScrapeSummary(
                provider=config.name,
                listing_url=config.listing_url,
                candidates_found=len(nodes),
                records_ingested=len(result.ingested),
                records_discarded=discarded,
                records_skipped=result.skipped_rank_conflicts,
            )
            stats.update(
                candidates_found=summary.candidates_found,
                records_ingested=summary.records_ingested,
                records_discarded=summary.records_discarded,
                records_skipped=summary.records_skipped,
            )

        return summary
