"""
app/schemas package marker.
"""

from app.schemas.actor import (
    ActorCreateRequest,
    ActorListResponse,
    ActorResponse,
    ActorSummaryResponse,
    ActorUpdateRequest,
)
from app.schemas.actor_scraping import ScrapeSummaryResponse

__all__ = [
    "ActorCreateRequest",
    "ActorListResponse",
    "ActorResponse",
    "ActorSummaryResponse",
    "ActorUpdateRequest",
    "ScrapeSummaryResponse",
]
