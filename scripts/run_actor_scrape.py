"""
Run one provider scrape from the CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict

from app.config import get_catalog_settings
from app.errors import FetchError, ProviderNotFoundError
from app.scraping.config import get_actor_scraping_settings
from app.scraping.registry import ProviderRegistry
from app.services.actor_scraping_service import ActorScrapingService


logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Scrape actors from a configured provider.")
    parser.add_argument(
        "--provider",
        dest="provider",
        default=None,
        help="Provider name from the provider config file (case-insensitive).",
    )
    parser.add_argument(
        "--list-providers",
        dest="list_providers",
        action="store_true",
        help="Print enabled provider names and exit.",
    )
    args = parser.parse_args(argv)

    settings = get_catalog_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if args.list_providers:
        registry = ProviderRegistry.from_config_file(get_actor_scraping_settings().config_path)
        print(json.dumps(registry.names(), indent=2))
        return 0

    if not args.provider:
        parser.error("--provider is required unless --list-providers is given")

    if settings.database_url is None:
        logger.warning(
            "No database URL configured; scraped actors are kept in memory and "
            "discarded when this process exits. Set CATALOG_DATABASE_URL to persist them."
        )

    try:
        summary = ActorScrapingService().scrape(provider=args.provider)
    except (ProviderNotFoundError, FetchError) as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(json.dumps(asdict(summary), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
