"""Tests for utils/config.py — Config base class and AppConfig."""
import json

import pytest

from utils.config import DEFAULT_PUBLISHING_API_URL, AppConfig, Config

_ENV_VARS = (
    "PUBLISHING_API_URL",
    "PUBLISHING_API_BEARER_TOKEN",
    "PUBLISHING_API_TIMEOUT",
    "PUBLISHING_API_MAX_RETRIES",
    "ORGANISATION_CACHE_TTL",
    "NEEDS_PER_PAGE",
    "MASLOW_LOG_LEVEL",
    "MASLOW_LOG_FORMAT",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestAppConfig:
    def test_defaults(self, clean_env):
        config = AppConfig.from_env()
        assert config.publishing_api_url == DEFAULT_PUBLISHING_API_URL
        assert config.publishing_api_bearer_token == ""
        assert config.publishing_api_timeout == 15.0
        assert config.publishing_api_max_retries == 3
        assert config.organisation_cache_ttl == 3600.0
        assert config.needs_per_page == 50
        assert config.log_level == "INFO"
        assert config.log_format == "text"

    def test_environment_overrides(self, clean_env):
        clean_env.setenv("PUBLISHING_API_URL", "https://publishing-api.example/")
        clean_env.setenv("PUBLISHING_API_BEARER_TOKEN", "token")
        clean_env.setenv("PUBLISHING_API_TIMEOUT", "2.5")
        clean_env.setenv("PUBLISHING_API_MAX_RETRIES", "0")
        clean_env.setenv("ORGANISATION_CACHE_TTL", "60")
        clean_env.setenv("NEEDS_PER_PAGE", "20")
        clean_env.setenv("MASLOW_LOG_LEVEL", "debug")
        clean_env.setenv("MASLOW_LOG_FORMAT", "json")
        config = AppConfig.from_env()
        assert config.publishing_api_url == "https://publishing-api.example"
        assert config.publishing_api_bearer_token == "token"
        assert config.publishing_api_timeout == 2.5
        assert config.publishing_api_max_retries == 0
        assert config.organisation_cache_ttl == 60.0
        assert config.needs_per_page == 20
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_bad_number_raises(self, clean_env):
        clean_env.setenv("NEEDS_PER_PAGE", "many")
        with pytest.raises(ValueError):
            AppConfig.from_env()


class TestConfigSerialisation:
    def test_to_dict_skips_private(self, clean_env):
        config = AppConfig.from_env()
        config._secret = "x"
        data = config.to_dict()
        assert "_secret" not in data
        assert data["needs_per_page"] == 50

    def test_json_round_trip(self, clean_env, tmp_path):
        path = tmp_path / "nested" / "config.json"
        AppConfig.from_env().save_json(path)
        assert json.loads(path.read_text())["log_format"] == "text"
        loaded = Config.load_json(path)
        assert loaded.publishing_api_url == DEFAULT_PUBLISHING_API_URL

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config.load_json(tmp_path / "absent.json")
