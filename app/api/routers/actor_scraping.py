"""
app/api/routers/actor_scraping.py

Provider scraping ingestion endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path, status

from app.errors import FetchError, ProviderNotFoundError
from app.schemas.actor_scraping import ScrapeSummaryResponse
from app.services.actor_scraping_service import (
    ActorScrapingService,
    get_actor_scraping_service,
)

router = APIRouter(prefix="/scrape", tags=["scraping"])


@router.post("/{provider}", response_model=ScrapeSummaryResponse)
def scrape_provider(
    provider: str = Path(..., description="Provider name from the provider config file"),
    scraping_service: ActorScrapingService = Depends(get_actor_scraping_service),
) -> ScrapeSummaryResponse:
    """
    Scrape one provider's listing page into the actor catalog.
    """

    try:
        summary = scraping_service.scrape(provider=provider)
    except ProviderNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    except FetchError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(exc),
        ) from exc

    return ScrapeSummaryResponse(
        provider=summary.provider,
        listing_url=summary.listing_url,
        candidates_found=summary.candidates_found,
        records_ingested=summary.records_ingested,
        records_discarded=summary.records_discarded,
        records_skipped=summary.records_skipped,
    )
