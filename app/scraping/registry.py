"""
Provider configuration registry.
"""

from __future__ import annotations

from collections.abc import Iterable

from app.errors import ProviderNotFoundError
from app.scraping.config import load_provider_configs
from app.scraping.config.models import ProviderConfig


class ProviderRegistry:
    """
    Case-insensitive lookup of enabled provider configurations.
    """

    def __init__(self, configs: Iterable[ProviderConfig] = ()) -> None:
        self._configs: dict[str, ProviderConfig] = {}
        for config in configs:
            self.register(config)

    @classmethod
    def from_config_file(cls, config_path: str) -> "ProviderRegistry":
        return cls(load_provider_configs(config_path=config_path))

    def register(self, config: ProviderConfig) -> None:
        self._configs[config.name.strip().lower()] = config

    def names(self) -> list[str]:
        return sorted(
            key
            for key, config in self._configs.items()
            if config.enabled and _is_usable(config)
        )

    def resolve(self, provider: str) -> ProviderConfig:
        """
        Return the enabled config for `provider` or raise ProviderNotFoundError.
        """

        config = self._configs.get(provider.strip().lower())
        if config is None or not config.enabled or not _is_usable(config):
            raise ProviderNotFoundError(provider)
        return config


def _is_usable(config: ProviderConfig) -> bool:
    return bool(config.listing_url and config.list_selector and config.name_selector)
