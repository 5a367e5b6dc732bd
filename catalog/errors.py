"""Исключения каталога."""

from __future__ import annotations


class CatalogError(Exception):
    """Базовое исключение каталога."""


class TokenNotFoundError(CatalogError, LookupError):
    """Токен не найден ни в хранилище, ни среди синтетических записей."""

    def __init__(self, address: str) -> None:
        super().__init__(f"Токен {address} не найден")
        self.address = address


class CatalogUnavailableError(CatalogError):
    """Хранилище токенов недоступно или запрос к нему упал."""


class InvalidFilterError(CatalogError, ValueError):
    """Некорректные параметры фильтра или пагинации."""


__all__ = [
    "CatalogError",
    "CatalogUnavailableError",
    "InvalidFilterError",
    "TokenNotFoundError",
]
