"""Движок и фабрика SQLModel сессий."""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from loguru import logger
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config.settings import get_settings
from catalog import models  # noqa: F401  импортируем модели для регистрации метаданных
from catalog.errors import CatalogUnavailableError

settings = get_settings()


def build_engine(dsn: str, *, echo: bool = False) -> AsyncEngine:
    return create_async_engine(dsn, echo=echo, poolclass=NullPool)


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


engine = build_engine(settings.database.dsn, echo=settings.database.echo)
session_maker: async_sessionmaker[AsyncSession] = build_session_maker(engine)


def ensure_sqlite_dir(dsn: str) -> Path | None:
    """Для файловой SQLite создаёт каталог под файл базы."""

    url = make_url(dsn)
    if url.get_backend_name() != "sqlite" or not url.database or url.database == ":memory:":
        return None
    directory = Path(url.database).parent
    directory.mkdir(parents=True, exist_ok=True)
    return directory


async def init_db(target: AsyncEngine | None = None) -> None:
    """Создаёт таблицы (схемой в проде управляет индексатор)."""

    async with (target or engine).begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return session_maker


@asynccontextmanager
async def store_session(
    maker: async_sessionmaker[AsyncSession],
    operation: str,
) -> AsyncIterator[AsyncSession]:
    """Сессия только для чтения; сбой хранилища превращается в CatalogUnavailableError."""

    try:
        async with maker() as session:
            yield session
    except (SQLAlchemyError, OSError) as exc:
        logger.warning("Хранилище токенов недоступно ({op}): {error}", op=operation, error=exc)
        raise CatalogUnavailableError(f"Хранилище токенов недоступно: {operation}") from exc


__all__ = [
    "build_engine",
    "build_session_maker",
    "engine",
    "ensure_sqlite_dir",
    "get_session_maker",
    "init_db",
    "store_session",
]
