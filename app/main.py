from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import get_catalog_settings
from app.scraping.config import get_actor_scraping_settings


def _validate_env() -> None:
    """
    Validate catalog and scraping configuration at startup.

    Raises RuntimeError listing every problem so the operator can fix them
    in one restart cycle.
    """

    errors: list[str] = []

    try:
        get_catalog_settings()
    except RuntimeError as exc:
        errors.append(str(exc))

    scraping_settings = get_actor_scraping_settings()
    if not os.path.exists(scraping_settings.config_path):
        errors.append(
            f"Provider config file not found at {scraping_settings.config_path}. "
            "Set ACTOR_SCRAPE_CONFIG_PATH to a valid JSON file."
        )

    if errors:
        raise RuntimeError(
            "Startup validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        )


def _configure_logging() -> None:
    """
    Configure root logging once for the API process.
    """

    logging.basicConfig(
        level=getattr(logging, get_catalog_settings().log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Build the catalog (creating tables for database backends) before serving."""
    from app.services.actor_catalog import get_actor_catalog

    get_actor_catalog()
    backend = "database" if get_catalog_settings().database_url else "memory"
    logging.getLogger(__name__).info("Actor catalog ready (backend=%s)", backend)
    yield


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """

    _validate_env()
    _configure_logging()

    application = FastAPI(
        title="Actor Catalog API",
        version="1.0.0",
        lifespan=_lifespan,
    )

    from app.api.routers import actor_router, actor_scraping_router

    application.include_router(actor_router)
    application.include_router(actor_scraping_router)

    @application.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    return application


app = create_app()
