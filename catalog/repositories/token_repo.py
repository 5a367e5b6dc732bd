"""Чтение таблицы токенов."""

from __future__ import annotations

from sqlalchemy import func, nulls_last, or_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel.sql.expression import SelectOfScalar

from catalog.models import Token, normalize_address
from catalog.schemas import FilterTokensOptions, Page, PaginationOptions


def _address_matches(address: str):
    # индексатор может хранить checksum-адреса, сравниваем без учёта регистра
    return func.lower(col(Token.l2_address)) == normalize_address(address)


async def get_token_by_address(session: AsyncSession, address: str) -> Token | None:
    stmt = select(Token).where(_address_matches(address))
    result = await session.exec(stmt)
    return result.first()


async def token_exists(session: AsyncSession, address: str) -> bool:
    stmt = select(Token.l2_address).where(_address_matches(address))
    result = await session.exec(stmt)
    return result.first() is not None


async def list_all_tokens(session: AsyncSession) -> list[Token]:
    result = await session.exec(select(Token))
    return list(result.all())


def build_tokens_query(filters: FilterTokensOptions) -> SelectOfScalar[Token]:
    """Фильтр + детерминированная сортировка для постраничной выдачи.

    Порядок: liquidity DESC NULLS LAST, block_number DESC, log_index DESC.
    """

    stmt = select(Token)
    if filters.network_key:
        stmt = stmt.where(
            or_(
                col(Token.network_key).is_(None),
                col(Token.network_key) == filters.network_key,
            )
        )
    if filters.min_liquidity is not None and filters.min_liquidity >= 0:
        stmt = stmt.where(col(Token.liquidity) >= filters.min_liquidity)
    return stmt.order_by(
        nulls_last(col(Token.liquidity).desc()),
        col(Token.block_number).desc(),
        col(Token.log_index).desc(),
    )


async def paginate_tokens(
    session: AsyncSession,
    stmt: SelectOfScalar[Token],
    pagination: PaginationOptions,
) -> Page[Token]:
    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total_items = (await session.exec(count_stmt)).one()
    page_stmt = stmt.offset(pagination.offset).limit(pagination.limit)
    items = list((await session.exec(page_stmt)).all())
    return Page[Token].build(items, total_items=total_items, pagination=pagination)


__all__ = [
    "build_tokens_query",
    "get_token_by_address",
    "list_all_tokens",
    "paginate_tokens",
    "token_exists",
]
