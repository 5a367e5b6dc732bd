"""Сервисы каталога: выдача токенов и TVL."""

from .catalog_service import CatalogService
from .tvl_cache import TvlCache
from .tvl_service import TvlService, aggregate_tvl, token_tvl

__all__ = ["CatalogService", "TvlCache", "TvlService", "aggregate_tvl", "token_tvl"]
