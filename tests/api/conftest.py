"""Shared fixtures for API tests.

Each test gets its own SQLite file under tmp_path. NullPool keeps no
connections alive between event loops, so the same engine serves both
asyncio.run() setup code and the TestClient's loop.
"""

from __future__ import annotations

import asyncio

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.pool import NullPool

from minemap.database import close_db, create_session_factory, get_db, init_db
from minemap.main import _seed_sample_data
from minemap.routers import companies_router, deposits_router, map_router


@pytest.fixture
def session_factory(tmp_path):
    factory = create_session_factory(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool
    )
    engine = factory.kw["bind"]
    asyncio.run(init_db(engine))
    yield factory
    asyncio.run(close_db(engine))


def _make_app(session_factory) -> FastAPI:
    app = FastAPI()
    app.include_router(deposits_router)
    app.include_router(companies_router)
    app.include_router(map_router)

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
def empty_client(session_factory):
    """Client over an empty deposits table."""
    return TestClient(_make_app(session_factory))


@pytest.fixture
def client(session_factory):
    """Client over a table seeded with the six sample deposits."""
    asyncio.run(_seed_sample_data(session_factory))
    return TestClient(_make_app(session_factory))
