from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine

from app.db.data_service import DataServiceClient, get_data_service
from app.db.init_db import create_tables
from app.db.seed_demo import seed_demo
from app.db.session import build_engine, build_sessionmaker
from app.main import app


@pytest.fixture()
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Per-test SQLite file, so concurrent calls on separate connections see the same data."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'campus.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture()
def data_service(engine: AsyncEngine) -> DataServiceClient:
    return DataServiceClient(build_sessionmaker(engine))


@pytest.fixture()
async def demo_campus(data_service: DataServiceClient) -> DataServiceClient:
    """Demo catalogs: 2 areas, 2 careers, 2 teachers, 2 courses, 3 students."""
    await seed_demo(data_service)
    return data_service


@pytest.fixture()
async def client(data_service: DataServiceClient) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the FastAPI app and the per-test database."""
    app.dependency_overrides[get_data_service] = lambda: data_service
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
