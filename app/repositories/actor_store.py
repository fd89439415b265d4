"""
app/repositories/actor_store.py

Storage abstraction behind the actor catalog, plus an in-memory backend.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.actor import ActorRecord


class ActorStore(ABC):
    """
    Keyed persistence for actor records.

    Stores do no validation and no locking; the catalog serializes access
    and enforces every invariant before calling in.
    """

    @abstractmethod
    def add(self, record: ActorRecord) -> None:
        """
        Insert a record under its id.
        """

    @abstractmethod
    def get(self, actor_id: int) -> ActorRecord | None:
        """
        Return the record stored under `actor_id`, if any.
        """

    @abstractmethod
    def replace(self, record: ActorRecord) -> None:
        """
        Overwrite the stored record with the same id.
        """

    @abstractmethod
    def remove(self, actor_id: int) -> bool:
        """
        Delete a record and report whether it existed.
        """

    @abstractmethod
    def all(self) -> list[ActorRecord]:
        """
        Return every record ordered by ascending id.
        """

    def max_id(self) -> int:
        return max((record.id for record in self.all()), default=0)


class MemoryActorStore(ActorStore):
    """
    Process-local store keeping records in a dict keyed by id.
    """

    def __init__(self) -> None:
        self._records: dict[int, ActorRecord] = {}

    def add(self, record: ActorRecord) -> None:
        self._records[record.id] = record

    def get(self, actor_id: int) -> ActorRecord | None:
        return self._records.get(actor_id)

    def replace(self, record: ActorRecord) -> None:
        self._records[record.id] = record

    def remove(self, actor_id: int) -> bool:
        return self._records.pop(actor_id, None) is not None

    def all(self) -> list[ActorRecord]:
        return [self._records[key] for key in sorted(self._records)]

    def max_id(self) -> int:
        return max(self._records, default=0)
