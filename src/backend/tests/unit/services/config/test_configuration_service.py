"""
Unit tests for ConfigurationService
Tests configuration loading, caching and error handling
"""

import json

import pytest

from flowsearch.services.config import configuration_service
from flowsearch.services.config.configuration_service import (
    ConfigurationService,
    get_config_service,
    init_config_service
)


@pytest.mark.unit
@pytest.mark.config
class TestConfigurationService:
    """Test suite for ConfigurationService"""

    def test_load_matcher_config(self, test_config_dir):
        service = ConfigurationService(str(test_config_dir))

        config = service.get_matcher_config()

        assert config["version"] == "1.0"
        assert "connection" in config["component_kinds"]

    def test_kind_matchers(self, test_config_dir):
        service = ConfigurationService(str(test_config_dir))

        assert service.get_component_kind_matchers("label") == ["basic", "label"]
        assert service.get_component_kind_matchers("widget") == []

    def test_load_config_is_cached(self, test_config_dir):
        service = ConfigurationService(str(test_config_dir))

        assert service.load_config("matchers") is service.load_config("matchers")

    def test_reload_picks_up_changes(self, test_config_dir):
        service = ConfigurationService(str(test_config_dir))
        service.load_config("matchers")

        (test_config_dir / "matchers.json").write_text(
            json.dumps({"version": "2.0", "component_kinds": {"funnel": ["basic"]}})
        )

        assert service.reload_config("matchers")["version"] == "2.0"

    def test_missing_config_raises(self, tmp_path):
        service = ConfigurationService(str(tmp_path))

        with pytest.raises(FileNotFoundError):
            service.load_config("matchers")

    def test_invalid_json_raises(self, tmp_path):
        (tmp_path / "matchers.json").write_text("{not json")
        service = ConfigurationService(str(tmp_path))

        with pytest.raises(json.JSONDecodeError):
            service.load_config("matchers")

    def test_env_override(self, test_config_dir, monkeypatch):
        monkeypatch.setenv("FLOWSEARCH_CONFIG_DIR", str(test_config_dir))

        assert ConfigurationService().config_dir == test_config_dir

    def test_packaged_default(self, monkeypatch):
        monkeypatch.delenv("FLOWSEARCH_CONFIG_DIR", raising=False)

        service = ConfigurationService()

        assert service.config_dir.name == "config"
        assert "connectivity" in service.get_component_kind_matchers("connection")


@pytest.mark.unit
@pytest.mark.config
class TestConfigServiceSingleton:
    """Test global singleton helpers"""

    def test_init_replaces_global(self, test_config_dir, monkeypatch):
        monkeypatch.setattr(configuration_service, "_config_service", None)

        service = init_config_service(str(test_config_dir))

        assert get_config_service() is service

    def test_get_creates_default(self, monkeypatch):
        monkeypatch.setattr(configuration_service, "_config_service", None)

        assert get_config_service() is get_config_service()
