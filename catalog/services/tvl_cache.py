"""Одноместный кеш результата TVL."""

from __future__ import annotations

import time
from typing import Any, Callable, Sequence

from aiocache.base import BaseCache
from loguru import logger

from catalog.models import TokenTvl
from catalog.utils.cache import get_cache
from config.settings import get_settings

Clock = Callable[[], float]


class TvlCache:
    """Хранит последний расчёт TVL под одним ключом.

    Запись кладётся в backend с TTL, поэтому aiocache удаляет её сам по
    таймеру (memory) или по expire (redis). Дополнительно в записи лежит
    ``expires_at``: ``get`` сверяет его с часами и отдаёт промах, даже если
    таймер очистки ещё не сработал.
    """

    KEY = "tvl"

    def __init__(
        self,
        cache: BaseCache | None = None,
        *,
        ttl: float | None = None,
        clock: Clock = time.time,
    ) -> None:
        self._cache = cache if cache is not None else get_cache()
        self._ttl = ttl if ttl is not None else get_settings().cache.tvl_ttl_seconds
        self._clock = clock

    @property
    def ttl(self) -> float:
        return self._ttl

    async def get(self) -> list[TokenTvl] | None:
        """Возвращает свежую копию закешированного списка или ``None``."""

        entry: dict[str, Any] | None = await self._cache.get(self.KEY)
        if entry is None:
            return None
        if self._clock() >= entry["expires_at"]:
            logger.debug("TVL кеш просрочен, освобождаем слот")
            await self._cache.delete(self.KEY)
            return None
        return [TokenTvl.model_validate(item) for item in entry["tokens"]]

    async def put(self, tokens: Sequence[TokenTvl]) -> None:
        entry = {
            "expires_at": self._clock() + self._ttl,
            "tokens": [token.model_dump(mode="json") for token in tokens],
        }
        await self._cache.set(self.KEY, entry, ttl=self._ttl)


__all__ = ["Clock", "TvlCache"]
