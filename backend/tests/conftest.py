"""Shared test fixtures.

Messages are stored in an in-memory SQLite database; object storage is a
MagicMock standing in for S3Service.
"""

from collections.abc import AsyncGenerator
from unittest.mock import MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from app.api.deps import get_s3_service
from app.db import models  # noqa: F401 - registers tables on the metadata
from app.db.session import get_db_session
from app.main import app
from app.services.s3 import get_s3_client


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clear_s3_client_cache():
    """Start every test without a cached boto3 client."""
    get_s3_client.cache_clear()
    yield
    get_s3_client.cache_clear()


@pytest.fixture
async def db_engine():
    """Fresh in-memory database with the board tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
def mock_s3_service() -> MagicMock:
    """Create a mock S3 service."""
    service = MagicMock()
    service.generate_presigned_upload_url = MagicMock(
        return_value="https://r2.example.com/bucket/upload?X-Amz-Signature=put"
    )
    service.generate_presigned_download_url = MagicMock(
        return_value="https://r2.example.com/bucket/download?X-Amz-Signature=get"
    )
    return service


@pytest.fixture
async def client(
    session_maker: async_sessionmaker[AsyncSession],
    mock_s3_service: MagicMock,
) -> AsyncGenerator[AsyncClient, None]:
    """Client wired to the in-memory database and the mocked object store."""

    async def _get_test_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = _get_test_session
    app.dependency_overrides[get_s3_service] = lambda: mock_s3_service

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as async_client:
        yield async_client

    app.dependency_overrides.clear()
