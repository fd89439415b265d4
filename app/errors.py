"""
Domain exceptions for actor catalog and scraping flows.
"""

from __future__ import annotations


class ActorCatalogError(Exception):
    """Base exception for catalog and extraction failures."""


class ProviderNotFoundError(ActorCatalogError):
    """Raised when a provider name has no usable configuration."""

    def __init__(self, provider: str) -> None:
        super().__init__(f"Can't find the provider in configuration: {provider!r}")
        self.provider = provider


class FetchError(ActorCatalogError):
    """Raised when a listing page cannot be retrieved or parsed."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class InvalidInputError(ActorCatalogError):
    """Raised when a create/update payload is missing a name or a positive rank."""


class RankConflictError(ActorCatalogError):
    """Raised when another actor already holds the requested rank."""

    def __init__(self, rank: int) -> None:
        super().__init__(f"Another actor with rank {rank} already exists.")
        self.rank = rank


class ActorNotFoundError(ActorCatalogError):
    """Raised when an operation targets an unknown actor id."""

    def __init__(self, actor_id: int) -> None:
        super().__init__(f"Actor with ID {actor_id} not found.")
        self.actor_id = actor_id
