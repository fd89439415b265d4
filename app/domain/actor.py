"""
app/domain/actor.py

Domain models for the actor catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Ranks are stored in a 32-bit INTEGER column.
RANK_MIN = -(2**31)
RANK_MAX = 2**31 - 1


@dataclass(frozen=True)
class ActorRecord:
    """
    One persisted catalog entry.

    Instances are immutable values; the catalog hands out records, never
    handles into its storage.
    """

    id: int
    name: str
    rank: int
    details: str | None = None
    type: str | None = None


@dataclass(frozen=True)
class ActorInput:
    """
    Caller-supplied payload for create and update.

    `id` is ignored on create and required on update.
    """

    name: str | None
    rank: int
    details: str | None = None
    type: str | None = None
    id: int | None = None


@dataclass(frozen=True)
class CandidateRecord:
    """
    Record materialized from one scraped node, before ingestion.
    """

    name: str | None
    rank: int = 0
    details: str | None = None
    type: str = ""


@dataclass(frozen=True)
class ActorPage:
    """
    One page of a filtered catalog listing.
    """

    items: list[ActorRecord]
    total_count: int
    total_pages: int
    page: int
    page_size: int


@dataclass(frozen=True)
class IngestResult:
    """
    Outcome of one permissive bulk ingestion.
    """

    ingested: list[ActorRecord] = field(default_factory=list)
    skipped_rank_conflicts: int = 0
