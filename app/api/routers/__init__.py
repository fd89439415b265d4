"""
app/api/routers package marker.
"""

from app.api.routers.actor_router import router as actor_router
from app.api.routers.actor_scraping import router as actor_scraping_router

__all__ = [
    "actor_router",
    "actor_scraping_router",
]
