"""Создаёт таблицы каталога в базе из настроек (локальная разработка, тесты)."""

from __future__ import annotations

import asyncio

from loguru import logger

from catalog.db import ensure_sqlite_dir, init_db
from catalog.logging_config import setup_logging
from config.settings import get_settings


async def run() -> None:
    settings = get_settings()
    ensure_sqlite_dir(settings.database.dsn)
    await init_db()
    logger.info("Таблицы каталога созданы в {dsn}", dsn=settings.database.dsn)


def main() -> None:
    setup_logging(get_settings().logging)
    asyncio.run(run())


if __name__ == "__main__":
    main()
