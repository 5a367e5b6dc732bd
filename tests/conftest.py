"""Общие фикстуры: временная SQLite база, фабрика токенов, ручные часы."""

from __future__ import annotations

import uuid

import pytest
import pytest_asyncio
from aiocache import SimpleMemoryCache

from catalog.db import build_engine, build_session_maker, init_db
from catalog.models import Token
from catalog.services import TvlCache
from tests.factories import FakeClock


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def broken_session_maker(tmp_path):
    """База без таблиц: любой запрос падает OperationalError."""

    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
    yield build_session_maker(engine)
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return build_session_maker(engine)


@pytest.fixture
def add_tokens(session_maker):
    async def _add(*tokens: Token) -> None:
        async with session_maker() as session:
            session.add_all(tokens)
            await session.commit()

    return _add


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_backend() -> SimpleMemoryCache:
    return SimpleMemoryCache(namespace=f"test-{uuid.uuid4().hex}")


@pytest.fixture
def tvl_cache(memory_backend, clock) -> TvlCache:
    return TvlCache(memory_backend, ttl=5.0, clock=clock)
