"""Поиск и постраничная выдача токенов."""

from __future__ import annotations

from loguru import logger
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.db import store_session
from catalog.errors import InvalidFilterError, TokenNotFoundError
from catalog.models import Token, resolve_native_token
from catalog.repositories import (
    build_tokens_query,
    get_token_by_address,
    paginate_tokens,
    token_exists,
)
from catalog.schemas import FilterTokensOptions, Page, PaginationOptions
from config.settings import CatalogSettings, get_settings


class CatalogService:
    """Запросы к каталогу только на чтение."""

    def __init__(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        settings: CatalogSettings | None = None,
    ) -> None:
        self._session_maker = session_maker
        self._settings = settings or get_settings().catalog

    async def find_one(self, address: str) -> Token | None:
        """Токен из хранилища, иначе нативный актив (если адрес совпал), иначе None."""

        async with store_session(self._session_maker, "find_one") as session:
            token = await get_token_by_address(session, address)
        if token is not None:
            return token
        return resolve_native_token(address, self._settings)

    async def get_one(self, address: str) -> Token:
        token = await self.find_one(address)
        if token is None:
            raise TokenNotFoundError(address)
        return token

    async def exists(self, address: str) -> bool:
        async with store_session(self._session_maker, "exists") as session:
            found = await token_exists(session, address)
        if found:
            return True
        return resolve_native_token(address, self._settings) is not None

    async def find_page(
        self,
        filters: FilterTokensOptions | None = None,
        pagination: PaginationOptions | None = None,
    ) -> Page[Token]:
        filters = filters or FilterTokensOptions()
        pagination = pagination or PaginationOptions(limit=self._settings.default_page_size)
        self._validate_pagination(pagination)
        stmt = build_tokens_query(filters)
        async with store_session(self._session_maker, "find_page") as session:
            page = await paginate_tokens(session, stmt, pagination)
        logger.debug(
            "Каталог: страница {page} ({count} из {total}), фильтр {filters}",
            page=pagination.page,
            count=page.meta.item_count,
            total=page.meta.total_items,
            filters=filters,
        )
        return page

    def _validate_pagination(self, pagination: PaginationOptions) -> None:
        if pagination.page < 1:
            raise InvalidFilterError(f"page должен быть >= 1, получено {pagination.page}")
        if not 1 <= pagination.limit <= self._settings.max_page_size:
            raise InvalidFilterError(
                f"limit должен быть в диапазоне 1..{self._settings.max_page_size}, "
                f"получено {pagination.limit}"
            )


__all__ = ["CatalogService"]
