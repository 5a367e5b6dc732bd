"""
Тесты конфигурации: значения по умолчанию, env-переопределения, Redis DSN.
"""

from __future__ import annotations

import pytest

from catalog.utils.cache import build_redis_config
from config.settings import AppSettings


class TestAppSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CACHE__TVL_TTL_SECONDS", raising=False)
        settings = AppSettings()
        assert settings.cache.backend == "memory"
        assert settings.cache.tvl_ttl_seconds == 5.0
        assert settings.catalog.default_page_size == 10
        assert settings.catalog.max_page_size == 100
        assert settings.database.dsn.startswith("sqlite+aiosqlite")
        assert settings.is_production is False

    def test_nested_env_override(self, monkeypatch):
        monkeypatch.setenv("CACHE__TVL_TTL_SECONDS", "12.5")
        monkeypatch.setenv("CATALOG__NATIVE_TOKEN_ADDRESS", "0xDEADBEEF")
        monkeypatch.setenv("ENVIRONMENT", "prod")
        settings = AppSettings()
        assert settings.cache.tvl_ttl_seconds == 12.5
        assert settings.catalog.native_token_address == "0xdeadbeef"
        assert settings.is_production is True


class TestRedisConfig:

    def test_parses_dsn(self):
        config = build_redis_config("redis://:secret@cache.local:6380/3")
        assert config == {
            "endpoint": "cache.local",
            "port": 6380,
            "password": "secret",
            "db": 3,
            "ssl": False,
        }

    def test_tls_scheme_enables_ssl(self):
        config = build_redis_config("rediss://cache.local")
        assert config["ssl"] is True
        assert config["port"] == 6379
        assert config["db"] == 0

    def test_missing_dsn(self):
        with pytest.raises(RuntimeError):
            build_redis_config(None)

    def test_unsupported_scheme(self):
        with pytest.raises(ValueError):
            build_redis_config("http://cache.local")
