"""
app/domain package marker.
"""

from app.domain.actor import ActorInput, ActorPage, ActorRecord, CandidateRecord, IngestResult
from app.domain.actor_scraping import ScrapeSummary

__all__ = [
    "ActorInput",
    "ActorPage",
    "ActorRecord",
    "CandidateRecord",
    "IngestResult",
    "ScrapeSummary",
]
