"""Параметры запросов к каталогу и форма страницы результата."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from pydantic import BaseModel

ItemT = TypeVar("ItemT")


@dataclass(slots=True, frozen=True)
class FilterTokensOptions:
    """Фильтр списка токенов.

    ``network_key`` оставляет токены этой сети и токены без сети (NULL),
    ``min_liquidity`` отсекает всё, что ниже порога, включая NULL.
    Отрицательный порог игнорируется.
    """

    min_liquidity: float | None = None
    network_key: str | None = None


@dataclass(slots=True, frozen=True)
class PaginationOptions:
    page: int = 1
    limit: int = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class PageMeta(BaseModel):
    total_items: int
    item_count: int
    items_per_page: int
    total_pages: int
    current_page: int


class Page(BaseModel, Generic[ItemT]):
    items: list[ItemT]
    meta: PageMeta

    @classmethod
    def build(
        cls,
        items: Sequence[ItemT],
        *,
        total_items: int,
        pagination: PaginationOptions,
    ) -> "Page[ItemT]":
        return cls(
            items=list(items),
            meta=PageMeta(
                total_items=total_items,
                item_count=len(items),
                items_per_page=pagination.limit,
                total_pages=math.ceil(total_items / pagination.limit),
                current_page=pagination.page,
            ),
        )


__all__ = ["FilterTokensOptions", "Page", "PageMeta", "PaginationOptions"]
