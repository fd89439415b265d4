"""
app/repositories package marker.
"""

from app.repositories.actor_repository import SQLAlchemyActorStore
from app.repositories.actor_store import ActorStore, MemoryActorStore

__all__ = [
    "ActorStore",
    "MemoryActorStore",
    "SQLAlchemyActorStore",
]
