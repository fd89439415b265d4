"""
app/domain/actor_scraping.py

Domain models for provider extraction runs.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScrapeSummary:
    """
    Summary for one provider extraction run.
    """

    provider: str
    listing_url: str
    candidates_found: int
    records_ingested: int
    records_discarded: int
    records_skipped: int
