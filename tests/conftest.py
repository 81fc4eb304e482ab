"""Shared fixtures: a throwaway SQLite file per test, for the service and the HTTP app."""

import asyncio
import os
import tempfile

# Keep the application's own engine out of the working directory
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(tempfile.mkdtemp(), 'app.db')}"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import NullPool

from database.repository import ProductRepository
from database.session import build_engine, build_sessionmaker, create_tables, get_db
from main import app
from services.product_service import ProductService


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}"


@pytest.fixture
async def session(database_url):
    """Async session on a freshly created schema."""
    engine = build_engine(database_url, poolclass=NullPool)
    await create_tables(engine)
    async with build_sessionmaker(engine)() as db:
        yield db
    await engine.dispose()


@pytest.fixture
def service(session):
    return ProductService(ProductRepository(session))


@pytest.fixture
def client(database_url):
    """TestClient whose get_db dependency points at the per-test database."""
    engine = build_engine(database_url, poolclass=NullPool)
    asyncio.run(create_tables(engine))
    session_factory = build_sessionmaker(engine)

    async def override_get_db():
        async with session_factory() as db:
            yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
