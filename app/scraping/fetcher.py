"""
Document fetchers for provider listing pages.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping

import requests
from bs4 import BeautifulSoup

from app.errors import FetchError
from app.scraping.logging_utils import log_event

logger = logging.getLogger(__name__)


class DocumentFetcher(ABC):
    """
    Retrieves a URL and returns its parsed document tree.
    """

    @abstractmethod
    def fetch(self, url: str, *, headers: Mapping[str, str] | None = None) -> BeautifulSoup:
        """
        Fetch and parse `url`, raising FetchError on any failure.
        """


class RequestsDocumentFetcher(DocumentFetcher):
    """
    Single-attempt HTTP fetcher parsing responses with BeautifulSoup.
    """

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        user_agent: str,
        timeout_seconds: float,
    ) -> None:
        self._session = session or requests.Session()
        self._user_agent = user_agent
        self._timeout_seconds = timeout_seconds

    def fetch(self, url: str, *, headers: Mapping[str, str] | None = None) -> BeautifulSoup:
        request_headers = {"User-Agent": self._user_agent, **(headers or {})}
        try:
            response = self._session.get(
                url,
                headers=request_headers,
                timeout=self._timeout_seconds,
                allow_redirects=True,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            log_event(
                logger,
                logging.ERROR,
                "listing_fetch_failed",
                url=url,
                error=str(exc),
            )
            raise FetchError(url, str(exc)) from exc

        try:
            return BeautifulSoup(response.text, "html.parser")
        except Exception as exc:
            raise FetchError(url, f"unparseable document: {exc}") from exc
