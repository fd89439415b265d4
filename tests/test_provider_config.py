from __future__ import annotations

import json
from pathlib import Path

import pytest

from app.errors import ProviderNotFoundError
from app.scraping.config import get_actor_scraping_settings, load_provider_configs
from app.scraping.config.models import ProviderConfig
from app.scraping.registry import ProviderRegistry

BUNDLED_CONFIG = Path(__file__).resolve().parents[1] / "app" / "scraping" / "config" / "providers.json"


def _write_config(tmp_path: Path, payload: object) -> str:
    path = tmp_path / "providers.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def _provider(**overrides: object) -> dict:
    entry: dict = {
        "name": "imdb",
        "listing_url": "https://www.imdb.com/list/ls054840033/",
        "selectors": {
            "list": "li.item",
            "name": "h3",
            "rank": ".rank",
            "details": "p",
            "type": ".roles",
        },
    }
    entry.update(overrides)
    return entry


def test_loads_complete_provider(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        {"providers": [_provider(headers={"Accept-Language": " en-US "}, user_agent="bot/2")]},
    )

    configs = load_provider_configs(config_path=path)

    assert configs == [
        ProviderConfig(
            name="imdb",
            listing_url="https://www.imdb.com/list/ls054840033/",
            list_selector="li.item",
            name_selector="h3",
            rank_selector=".rank",
            details_selector="p",
            type_selector=".roles",
            user_agent="bot/2",
            headers={"Accept-Language": "en-US"},
        )
    ]


def test_relative_listing_url_is_joined_with_base_url(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        {"providers": [_provider(base_url="https://example.com/", listing_url="/actors/top")]},
    )

    (config,) = load_provider_configs(config_path=path)

    assert config.listing_url == "https://example.com/actors/top"


def test_unusable_entries_are_skipped(tmp_path: Path) -> None:
    no_name_selector = _provider(name="no-name-selector", selectors={"list": "li"})
    no_list_selector = _provider(name="no-list-selector", selectors={"name": "h3"})
    no_url = _provider(name="no-url", listing_url="  ")
    path = _write_config(
        tmp_path,
        {"providers": ["not-a-dict", no_name_selector, no_list_selector, no_url, _provider()]},
    )

    configs = load_provider_configs(config_path=path)

    assert [config.name for config in configs] == ["imdb"]


def test_missing_optional_selectors_default_to_empty(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        {"providers": [_provider(selectors={"LIST": "li", "Name": "h3"})]},
    )

    (config,) = load_provider_configs(config_path=path)

    assert config.list_selector == "li"
    assert config.name_selector == "h3"
    assert config.rank_selector == ""
    assert config.type_selector == ""


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_provider_configs(config_path=str(tmp_path / "absent.json"))


def test_providers_must_be_a_list(tmp_path: Path) -> None:
    path = _write_config(tmp_path, {"providers": {"imdb": {}}})
    with pytest.raises(ValueError):
        load_provider_configs(config_path=path)


def test_bundled_provider_file_defines_imdb() -> None:
    configs = load_provider_configs(config_path=str(BUNDLED_CONFIG))
    registry = ProviderRegistry(configs)

    assert registry.names() == ["imdb"]
    assert registry.resolve("imdb").listing_url.startswith("https://www.imdb.com/")


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("ACTOR_SCRAPE_CONFIG_PATH", str(tmp_path / "custom.json"))
    monkeypatch.setenv("ACTOR_SCRAPE_TIMEOUT_SECONDS", "0.2")
    monkeypatch.setenv("ACTOR_SCRAPE_USER_AGENT", "  ")
    get_actor_scraping_settings.cache_clear()
    try:
        settings = get_actor_scraping_settings()
    finally:
        get_actor_scraping_settings.cache_clear()

    assert settings.config_path == str(tmp_path / "custom.json")
    assert settings.timeout_seconds == 1.0
    assert settings.default_user_agent.startswith("ActorCatalogBot/")


class TestProviderRegistry:
    @pytest.fixture()
    def registry(self) -> ProviderRegistry:
        return ProviderRegistry(
            [
                ProviderConfig(
                    name="IMDb",
                    listing_url="https://www.imdb.com/list/ls1/",
                    list_selector="li",
                    name_selector="h3",
                ),
                ProviderConfig(
                    name="other",
                    listing_url="https://example.com",
                    list_selector="li",
                    name_selector="h3",
                    enabled=False,
                ),
                ProviderConfig(
                    name="broken",
                    listing_url="https://example.com",
                    list_selector="li",
                    name_selector="",
                ),
            ]
        )

    @pytest.mark.parametrize("name", ["imdb", "IMDB", " ImDb "])
    def test_resolution_is_case_insensitive(self, registry: ProviderRegistry, name: str) -> None:
        assert registry.resolve(name).name == "IMDb"

    @pytest.mark.parametrize("name", ["unknown", "other", "broken", ""])
    def test_unknown_disabled_or_unusable_providers_raise(
        self, registry: ProviderRegistry, name: str
    ) -> None:
        with pytest.raises(ProviderNotFoundError) as ctx:
            registry.resolve(name)
        assert ctx.value.provider == name
        assert repr(name) in str(ctx.value)

    def test_names_lists_only_usable_providers(self, registry: ProviderRegistry) -> None:
        assert registry.names() == ["imdb"]
