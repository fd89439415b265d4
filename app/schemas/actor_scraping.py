"""
app/schemas/actor_scraping.py

Response schemas for provider scraping operations.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ScrapeSummaryResponse(BaseModel):
    """
    API response model for one provider scrape summary.
    """

    provider: str
    listing_url: str
    candidates_found: int = Field(..., ge=0)
    records_ingested: int = Field(..., ge=0)
    records_discarded: int = Field(..., ge=0)
    records_skipped: int = Field(..., ge=0)
