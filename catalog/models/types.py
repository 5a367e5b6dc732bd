"""Пользовательские типы колонок."""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator


class BigIntString(TypeDecorator):
    """uint256 в виде десятичной строки.

    SQLite не умеет целые шире 64 бит, поэтому сырые балансы храним строкой
    и наружу отдаём обычный ``int``.
    """

    impl = String(78)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(int(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return int(value)


__all__ = ["BigIntString"]
