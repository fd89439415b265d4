"""
app/repositories/actor_repository.py

SQLAlchemy-backed actor store.
"""

from __future__ import annotations

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session, sessionmaker

from app.domain.actor import ActorRecord
from app.repositories.actor_store import ActorStore
from db.models.actor import Actor


class SQLAlchemyActorStore(ActorStore):
    """
    Persist actor records through short-lived sessions, one transaction per call.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def add(self, record: ActorRecord) -> None:
        with self._session_factory() as session, session.begin():
            session.add(
                Actor(
                    id=record.id,
                    name=record.name,
                    rank=record.rank,
                    details=record.details,
                    type=record.type,
                )
            )

    def get(self, actor_id: int) -> ActorRecord | None:
        with self._session_factory() as session:
            row = session.get(Actor, actor_id)
            return _to_record(row) if row is not None else None

    def replace(self, record: ActorRecord) -> None:
        with self._session_factory() as session, session.begin():
            row = session.get(Actor, record.id)
            if row is None:
                raise LookupError(f"Actor row {record.id} disappeared before update.")
            row.rank = record.rank
            row.details = record.details
            row.type = record.type

    def remove(self, actor_id: int) -> bool:
        with self._session_factory() as session, session.begin():
            result = session.execute(delete(Actor).where(Actor.id == actor_id))
            return result.rowcount > 0

    def all(self) -> list[ActorRecord]:
        with self._session_factory() as session:
            rows = session.scalars(select(Actor).order_by(Actor.id)).all()
            return [_to_record(row) for row in rows]

    def max_id(self) -> int:
        with self._session_factory() as session:
            return session.scalar(select(func.max(Actor.id))) or 0


def _to_record(row: Actor) -> ActorRecord:
    return ActorRecord(
        id=row.id,
        name=row.name,
        rank=row.rank,
        details=row.details,
        type=row.type,
    )
