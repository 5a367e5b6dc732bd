"""Расчёт TVL по всем токенам каталога.

Цена сначала переводится в целые микродоллары (``floor(price * 10**6)``),
дальше вся арифметика идёт в целых числах Python, чтобы float не портил
uint256-балансы. Вклад каждого токена остаётся в его собственном масштабе,
итог просто суммирует вклады без пересчёта между разными ``decimals``.
"""

from __future__ import annotations

import asyncio
import math
import time
from typing import Sequence

from loguru import logger
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.db import store_session
from catalog.models import Token, TokenTvl, build_tvl_record
from catalog.repositories import list_all_tokens
from .tvl_cache import TvlCache

PRICE_PRECISION = 10**6


def token_tvl(token: Token) -> int:
    """Вклад токена: total_supply * floor(price * 1e6) / 1e6 / 10**decimals."""

    scaled_price = math.floor((token.usd_price or 0) * PRICE_PRECISION)
    return token.total_supply * scaled_price // PRICE_PRECISION // 10**token.decimals


def aggregate_tvl(tokens: Sequence[Token]) -> list[TokenTvl]:
    """Список TokenTvl, последним идёт итоговая запись."""

    result: list[TokenTvl] = []
    total = 0
    for token in tokens:
        value = token_tvl(token)
        total += value
        result.append(TokenTvl.model_validate({**token.model_dump(), "tvl": str(value)}))
    result.append(build_tvl_record(total))
    return result


class TvlService:
    """Отдаёт TVL из кеша, при промахе пересчитывает ровно один раз."""

    def __init__(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        cache: TvlCache,
    ) -> None:
        self._session_maker = session_maker
        self._cache = cache
        self._lock = asyncio.Lock()

    async def calculate_tvl(self, only_total: bool = True) -> list[TokenTvl]:
        """Полный список с итогом в конце или только итоговая запись.

        Оба варианта обслуживаются одной записью кеша. Параллельные промахи
        ждут на замке, и после него кеш проверяется повторно.
        """

        tokens = await self._cache.get()
        if tokens is None:
            async with self._lock:
                tokens = await self._cache.get()
                if tokens is None:
                    tokens = await self._recalculate()
        if only_total:
            return [tokens[-1]]
        return tokens

    async def _recalculate(self) -> list[TokenTvl]:
        logger.info("Пересчёт TVL")
        started = time.perf_counter()
        async with store_session(self._session_maker, "calculate_tvl") as session:
            tokens = await list_all_tokens(session)
        result = aggregate_tvl(tokens)
        await self._cache.put(result)
        logger.info(
            "TVL пересчитан: {count} токенов, итог {total} за {elapsed:.3f} c",
            count=len(tokens),
            total=result[-1].tvl,
            elapsed=time.perf_counter() - started,
        )
        return result


__all__ = ["PRICE_PRECISION", "TvlService", "aggregate_tvl", "token_tvl"]
