"""Глобальные сервисы и зависимости каталога."""

from __future__ import annotations

from config.settings import get_settings
from .db import get_session_maker
from .services import CatalogService, TvlCache, TvlService
from .utils.cache import configure_cache

settings = get_settings()

configure_cache()
session_maker = get_session_maker()

tvl_cache = TvlCache(ttl=settings.cache.tvl_ttl_seconds)
catalog_service = CatalogService(session_maker, settings.catalog)
tvl_service = TvlService(session_maker, tvl_cache)

__all__ = [
    "catalog_service",
    "session_maker",
    "settings",
    "tvl_cache",
    "tvl_service",
]
