"""
tests/test_extraction_engine.py

Extraction engine tests against an in-memory catalog and a fake fetcher.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping

import pytest
from bs4 import BeautifulSoup

from app.domain.actor import ActorInput
from app.errors import FetchError, ProviderNotFoundError
from app.repositories import MemoryActorStore
from app.scraping.config.models import ActorScrapingSettings, ProviderConfig
from app.scraping.engine import ActorExtractionEngine
from app.scraping.fetcher import DocumentFetcher
from app.scraping.registry import ProviderRegistry
from app.services.actor_catalog import ActorCatalog

LISTING_HTML = """
<html><body>
<ol class="actors">
  <li class="actor">
    <span class="rank">1.</span>
    <h3 class="name"> Tom Hanks </h3>
    <p class="bio">Two-time Oscar winner.</p>
    <span class="roles">Actor | Producer</span>
  </li>
  <li class="actor">
    <span class="rank">2.</span>
    <h3 class="name">Meryl Streep</h3>
    <span class="roles">Actress</span>
  </li>
  <li class="actor">
    <span class="rank">3.</span>
    <p class="bio">Entry without a name.</p>
  </li>
  <li class="actor">
    <span class="rank">n/a</span>
    <h3 class="name">Denzel Washington</h3>
  </li>
</ol>
</body></html>
"""

SETTINGS = ActorScrapingSettings(
    config_path="unused.json",
    default_user_agent="test-agent/1.0",
    timeout_seconds=1.0,
)

PROVIDER = ProviderConfig(
    name="imdb",
    listing_url="https://www.imdb.com/list/ls1/",
    list_selector="li.actor",
    name_selector="h3.name",
    rank_selector=".rank",
    details_selector="p.bio",
    type_selector=".roles",
    user_agent="imdb-agent/2.0",
    headers={"Accept-Language": "en-US"},
)


class FakeFetcher(DocumentFetcher):
    def __init__(self, html: str = LISTING_HTML, error: Exception | None = None) -> None:
        self.html = html
        self.error = error
        self.calls: list[tuple[str, dict[str, str]]] = []

    def fetch(self, url: str, *, headers: Mapping[str, str] | None = None) -> BeautifulSoup:
        self.calls.append((url, dict(headers or {})))
        if self.error is not None:
            raise self.error
        return BeautifulSoup(self.html, "html.parser")


@pytest.fixture()
def catalog() -> ActorCatalog:
    return ActorCatalog(MemoryActorStore())


def _engine(catalog: ActorCatalog, fetcher: FakeFetcher) -> ActorExtractionEngine:
    return ActorExtractionEngine(
        settings=SETTINGS,
        catalog=catalog,
        registry=ProviderRegistry([PROVIDER]),
        fetcher=fetcher,
    )


def test_ingests_named_candidates(catalog: ActorCatalog) -> None:
    fetcher = FakeFetcher()

    summary = _engine(catalog, fetcher).extract_all("imdb")

    assert summary.candidates_found == 4
    assert summary.records_ingested == 3
    assert summary.records_discarded == 1
    assert summary.records_skipped == 0

    records = catalog.list().items
    assert [(r.id, r.name, r.rank, r.type) for r in records] == [
        (1, "Tom Hanks", 1, "Actor"),
        (2, "Meryl Streep", 2, "Actress"),
        (3, "Denzel Washington", 0, ""),
    ]
    assert records[0].details == "Two-time Oscar winner."
    assert records[1].details is None


def test_provider_name_is_case_insensitive(catalog: ActorCatalog) -> None:
    summary = _engine(catalog, FakeFetcher()).extract_all("IMDB")
    assert summary.provider == "imdb"


def test_fetch_uses_listing_url_and_provider_headers(catalog: ActorCatalog) -> None:
    fetcher = FakeFetcher()

    _engine(catalog, fetcher).extract_all("imdb")

    assert fetcher.calls == [
        (
            "https://www.imdb.com/list/ls1/",
            {"Accept-Language": "en-US", "User-Agent": "imdb-agent/2.0"},
        )
    ]


def test_unknown_provider_fails_without_fetching(catalog: ActorCatalog) -> None:
    fetcher = FakeFetcher()

    with pytest.raises(ProviderNotFoundError) as ctx:
        _engine(catalog, fetcher).extract_all("rottentomatoes")

    assert ctx.value.provider == "rottentomatoes"
    assert fetcher.calls == []
    assert catalog.list().total_count == 0


def test_no_matching_nodes_is_an_empty_success(catalog: ActorCatalog) -> None:
    fetcher = FakeFetcher(html="<html><body><p>No listings today.</p></body></html>")

    summary = _engine(catalog, fetcher).extract_all("imdb")

    assert summary.candidates_found == 0
    assert summary.records_ingested == 0
    assert catalog.list().total_count == 0


def test_fetch_failure_propagates_and_ingests_nothing(catalog: ActorCatalog) -> None:
    fetcher = FakeFetcher(error=FetchError(PROVIDER.listing_url, "connection refused"))

    with pytest.raises(FetchError):
        _engine(catalog, fetcher).extract_all("imdb")

    assert catalog.list().total_count == 0


def test_rerun_skips_ranks_already_in_catalog(catalog: ActorCatalog) -> None:
    engine = _engine(catalog, FakeFetcher())

    engine.extract_all("imdb")
    second = engine.extract_all("imdb")

    # Ranked rows collide with the first run; the unranked row is ingested again.
    assert second.records_skipped == 2
    assert second.records_ingested == 1
    ids = [record.id for record in catalog.list().items]
    assert ids == [1, 2, 3, 4]


def test_ids_continue_after_interactive_creates(catalog: ActorCatalog) -> None:
    catalog.create(ActorInput(name="Viola Davis", rank=10))

    _engine(catalog, FakeFetcher()).extract_all("imdb")

    assert [record.id for record in catalog.list().items] == [1, 2, 3, 4]


def test_run_is_logged_as_structured_events(
    catalog: ActorCatalog, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger="app.scraping.engine")

    _engine(catalog, FakeFetcher()).extract_all("imdb")

    events = [
        json.loads(record.getMessage())
        for record in caplog.records
        if record.name == "app.scraping.engine"
    ]
    assert [event["event"] for event in events] == [
        "provider_resolved",
        "listing_fetched",
        "extraction_completed",
    ]
    assert events[-1]["records_ingested"] == 3
    assert "duration_ms" in events[-1]


def test_failed_run_logs_extraction_failed(
    catalog: ActorCatalog, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger="app.scraping.engine")
    fetcher = FakeFetcher(error=FetchError(PROVIDER.listing_url, "timed out"))

    with pytest.raises(FetchError):
        _engine(catalog, fetcher).extract_all("imdb")

    engine_records = [record for record in caplog.records if record.name == "app.scraping.engine"]
    failed = json.loads(engine_records[-1].getMessage())
    assert failed["event"] == "extraction_failed"
    assert failed["error_type"] == "FetchError"
