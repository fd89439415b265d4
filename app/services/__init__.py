"""
app/services package marker.
"""

from app.services.actor_catalog import ActorCatalog, build_actor_store, get_actor_catalog

__all__ = [
    "ActorCatalog",
    "build_actor_store",
    "get_actor_catalog",
]
