"""Tests for authormap.config: local config file and env overrides."""

from __future__ import annotations

import json
import stat

import pytest

from authormap import config


@pytest.fixture
def config_home(monkeypatch, tmp_path):
    monkeypatch.setattr(config.Path, "home", lambda: tmp_path)
    monkeypatch.delenv(config.CATALOG_ENV_VAR, raising=False)
    return tmp_path


class TestLoadConfig:
    def test_missing_file(self, config_home) -> None:
        assert config.load_config() == {}

    def test_invalid_json(self, config_home) -> None:
        path = config_home / ".authormap" / "config.json"
        path.parent.mkdir()
        path.write_text("{oops")
        assert config.load_config() == {}

    def test_non_object(self, config_home) -> None:
        path = config_home / ".authormap" / "config.json"
        path.parent.mkdir()
        path.write_text("[1, 2]")
        assert config.load_config() == {}

    def test_save_then_load(self, config_home) -> None:
        config.save_config({"catalog": "/data/catalog"})
        path = config_home / ".authormap" / "config.json"
        assert json.loads(path.read_text()) == {"catalog": "/data/catalog"}
        assert stat.S_IMODE(path.stat().st_mode) == 0o600
        assert config.load_config() == {"catalog": "/data/catalog"}


class TestGetCatalogSource:
    def test_none_by_default(self, config_home) -> None:
        assert config.get_catalog_source() is None

    def test_from_config(self, config_home) -> None:
        config.save_config({"catalog": "https://example.com/catalog.json"})
        assert config.get_catalog_source() == "https://example.com/catalog.json"

    def test_env_takes_priority(self, config_home, monkeypatch) -> None:
        config.save_config({"catalog": "/from/config"})
        monkeypatch.setenv(config.CATALOG_ENV_VAR, "/from/env")
        assert config.get_catalog_source() == "/from/env"
