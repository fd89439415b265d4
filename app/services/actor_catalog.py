"""
app/services/actor_catalog.py

Actor catalog: identifier assignment, rank uniqueness and listing.
"""

from __future__ import annotations

import logging
import math
import threading
from collections.abc import Iterable
from functools import lru_cache

from app.config import get_catalog_settings
from app.domain.actor import (
    RANK_MAX,
    RANK_MIN,
    ActorInput,
    ActorPage,
    ActorRecord,
    CandidateRecord,
    IngestResult,
)
from app.errors import ActorNotFoundError, InvalidInputError, RankConflictError
from app.repositories import ActorStore, MemoryActorStore, SQLAlchemyActorStore

logger = logging.getLogger(__name__)


class ActorCatalog:
    """
    Owns the actor collection and every invariant over it.

    - Positive ranks are unique across the catalog. Rank 0 marks an
      unranked scraped record and is exempt.
    - Ids are assigned here, strictly increasing, and never reused while
      the catalog lives, even after the highest id is deleted.

    One re-entrant lock covers reads and writes, so a uniqueness check, the
    id assignment and the write it guards happen as a single step.
    """

    def __init__(self, store: ActorStore) -> None:
        self._store = store
        self._lock = threading.RLock()
        self._last_id = store.max_id()

    def list(
        self,
        *,
        name_filter: str | None = None,
        min_rank: int | None = None,
        max_rank: int | None = None,
        page: int = 1,
        page_size: int = 10,
    ) -> ActorPage:
        """
        Filter by name substring and inclusive rank bounds, then paginate by id.
        """

        if page < 1:
            raise InvalidInputError("Page must be 1 or greater.")
        if page_size < 1:
            raise InvalidInputError("Page size must be 1 or greater.")

        with self._lock:
            records = self._store.all()

        if name_filter:
            records = [record for record in records if name_filter in record.name]
        if min_rank is not None:
            records = [record for record in records if record.rank >= min_rank]
        if max_rank is not None:
            records = [record for record in records if record.rank <= max_rank]

        total = len(records)
        start = (page - 1) * page_size
        return ActorPage(
            items=records[start : start + page_size],
            total_count=total,
            total_pages=math.ceil(total / page_size),
            page=page,
            page_size=page_size,
        )

    def get(self, actor_id: int) -> ActorRecord:
        with self._lock:
            record = self._store.get(actor_id)
        if record is None:
            raise ActorNotFoundError(actor_id)
        return record

    def create(self, actor: ActorInput) -> ActorRecord:
        """
        Insert a validated actor under a fresh id. Any caller-supplied id is ignored.
        """

        name = _require_valid(actor)
        with self._lock:
            self._ensure_rank_free(actor.rank)
            record = ActorRecord(
                id=self._next_id(),
                name=name,
                rank=actor.rank,
                details=actor.details,
                type=actor.type,
            )
            self._store.add(record)

        logger.info("Created actor id=%s rank=%s", record.id, record.rank)
        return record

    def update(self, actor: ActorInput) -> ActorRecord:
        """
        Overwrite rank, details and type of an existing actor. Name and id never change.
        """

        _require_valid(actor)
        if actor.id is None:
            raise InvalidInputError("Missing actor id. Can't update the actor.")

        with self._lock:
            existing = self._store.get(actor.id)
            if existing is None:
                raise ActorNotFoundError(actor.id)
            self._ensure_rank_free(actor.rank, exclude_id=existing.id)
            record = ActorRecord(
                id=existing.id,
                name=existing.name,
                rank=actor.rank,
                details=actor.details,
                type=actor.type,
            )
            self._store.replace(record)

        logger.info("Updated actor id=%s rank=%s", record.id, record.rank)
        return record

    def delete(self, actor_id: int) -> None:
        with self._lock:
            if not self._store.remove(actor_id):
                raise ActorNotFoundError(actor_id)
        logger.info("Deleted actor id=%s", actor_id)

    def ingest(self, candidates: Iterable[CandidateRecord]) -> IngestResult:
        """
        Permissive bulk insert used by scraping.

        Rank 0 is accepted. A candidate whose positive rank is already taken,
        by the catalog or by an earlier candidate of the batch, is skipped
        rather than failing the batch. A rank too large to store is treated as
        unranked. Records written here are not rolled back.
        """

        ingested: list[ActorRecord] = []
        skipped = 0
        with self._lock:
            taken = {record.rank for record in self._store.all() if record.rank > 0}
            for candidate in candidates:
                if not candidate.name:
                    continue
                rank = candidate.rank if RANK_MIN <= candidate.rank <= RANK_MAX else 0
                if rank > 0 and rank in taken:
                    skipped += 1
                    continue
                record = ActorRecord(
                    id=self._next_id(),
                    name=candidate.name,
                    rank=rank,
                    details=candidate.details,
                    type=candidate.type,
                )
                self._store.add(record)
                if record.rank > 0:
                    taken.add(record.rank)
                ingested.append(record)

        return IngestResult(ingested=ingested, skipped_rank_conflicts=skipped)

    def _next_id(self) -> int:
        self._last_id = max(self._last_id, self._store.max_id()) + 1
        return self._last_id

    def _ensure_rank_free(self, rank: int, *, exclude_id: int | None = None) -> None:
        for record in self._store.all():
            if record.rank == rank and record.id != exclude_id:
                raise RankConflictError(rank)


def _require_valid(actor: ActorInput) -> str:
    name = (actor.name or "").strip()
    if not name or actor.rank <= 0:
        raise InvalidInputError("Missing data for Name or Rank.")
    if actor.rank > RANK_MAX:
        raise InvalidInputError(f"Rank must not exceed {RANK_MAX}.")
    return name


def build_actor_store() -> ActorStore:
    """
    Pick the SQLAlchemy store when a database URL is configured, else memory.
    """

    settings = get_catalog_settings()
    if settings.database_url is None:
        return MemoryActorStore()

    from db.base import init_schema
    from db.session import create_db_engine, create_session_factory

    engine = create_db_engine(settings.database_url)
    init_schema(engine)
    return SQLAlchemyActorStore(create_session_factory(engine))


@lru_cache(maxsize=1)
def get_actor_catalog() -> ActorCatalog:
    """
    Build and cache the process-wide actor catalog.
    """

    return ActorCatalog(build_actor_store())
