"""
Тесты сборки сервисов, entry point, логирования и инициализации базы.
"""

from __future__ import annotations

import json
import sys

import pytest
from loguru import logger

from catalog.db import ensure_sqlite_dir
from catalog.logging_config import setup_logging
from catalog.models import build_tvl_record
from catalog.services import CatalogService, TvlCache, TvlService
from config.settings import AppSettings, DatabaseSettings, LoggingSettings


@pytest.fixture
def restore_logger():
    yield
    logger.complete()
    logger.remove()
    logger.add(sys.__stderr__)


def test_context_wires_services():
    from catalog import context

    assert isinstance(context.catalog_service, CatalogService)
    assert isinstance(context.tvl_service, TvlService)
    assert isinstance(context.tvl_cache, TvlCache)
    assert context.tvl_cache.ttl == context.settings.cache.tvl_ttl_seconds


@pytest.mark.asyncio
async def test_main_reports_tvl(monkeypatch):
    from catalog import main as entry

    calls = []

    async def fake_init_db():
        calls.append("init_db")

    class FakeTvlService:
        async def calculate_tvl(self, only_total: bool = True):
            calls.append(("calculate_tvl", only_total))
            return [build_tvl_record(10)]

    monkeypatch.setattr(entry, "init_db", fake_init_db)
    monkeypatch.setattr(entry, "ensure_sqlite_dir", lambda dsn: calls.append("ensure_sqlite_dir"))
    monkeypatch.setattr(entry, "tvl_service", FakeTvlService())
    monkeypatch.setattr(entry, "setup_logging", lambda *args, **kwargs: None)
    await entry.main()
    assert calls == ["ensure_sqlite_dir", "init_db", ("calculate_tvl", False)]


class TestSetupLogging:

    def test_level_filters_records(self, restore_logger):
        records: list[str] = []
        setup_logging(LoggingSettings(level="warning"), sink=records.append)
        logger.info("не попадёт")
        logger.warning("каталог недоступен")
        logger.complete()
        assert len(records) == 1
        assert "каталог недоступен" in records[0]

    def test_json_format(self, restore_logger):
        records: list[str] = []
        setup_logging(LoggingSettings(level="DEBUG", json_format=True), sink=records.append)
        logger.debug("TVL пересчитан")
        logger.complete()
        payload = json.loads(records[0])
        assert payload["level"] == "DEBUG"
        assert payload["message"] == "TVL пересчитан"


class TestInitDb:

    def test_creates_sqlite_directory(self, tmp_path):
        target = tmp_path / "nested" / "data"
        created = ensure_sqlite_dir(f"sqlite+aiosqlite:///{target / 'catalog.db'}")
        assert created == target
        assert target.is_dir()

    @pytest.mark.parametrize(
        "dsn",
        ["sqlite+aiosqlite:///:memory:", "postgresql+asyncpg://user@db.local/catalog"],
    )
    def test_skips_non_file_databases(self, dsn):
        assert ensure_sqlite_dir(dsn) is None

    @pytest.mark.asyncio
    async def test_script_prepares_database(self, monkeypatch, tmp_path):
        from catalog.scripts import init_db as script

        dsn = f"sqlite+aiosqlite:///{tmp_path / 'db' / 'catalog.db'}"
        calls = []

        async def fake_init_db():
            calls.append("init_db")

        monkeypatch.setattr(script, "get_settings", lambda: AppSettings(database=DatabaseSettings(dsn=dsn)))
        monkeypatch.setattr(script, "init_db", fake_init_db)
        await script.run()
        assert calls == ["init_db"]
        assert (tmp_path / "db").is_dir()
