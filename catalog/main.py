"""Entry point: считает TVL каталога и пишет отчёт в лог."""

from __future__ import annotations

import asyncio

from loguru import logger

from .context import settings, tvl_service
from .db import ensure_sqlite_dir, init_db
from .logging_config import setup_logging


async def main() -> None:
    setup_logging(settings.logging)
    logger.info("Каталог стартует в окружении {env}", env=settings.environment)
    ensure_sqlite_dir(settings.database.dsn)
    await init_db()
    tokens = await tvl_service.calculate_tvl(only_total=False)
    for token in tokens[:-1]:
        logger.info("{symbol} ({addr}): {tvl}", symbol=token.symbol, addr=token.l2_address, tvl=token.tvl)
    logger.info("Итоговый TVL: {total}", total=tokens[-1].tvl)


if __name__ == "__main__":
    asyncio.run(main())
