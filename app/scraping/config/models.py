"""
Scraping configuration models.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProviderConfig:
    """
    Extraction rules for one provider listing page.

    Field selectors are evaluated relative to each node matched by
    `list_selector`. An empty selector never matches.
    """

    name: str
    listing_url: str
    list_selector: str
    name_selector: str
    rank_selector: str = ""
    details_selector: str = ""
    type_selector: str = ""
    enabled: bool = True
    user_agent: str | None = None
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ActorScrapingSettings:
    """
    Runtime settings for actor scraping.
    """

    config_path: str
    default_user_agent: str
    timeout_seconds: float
