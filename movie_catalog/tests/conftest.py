from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from movie_catalog.app import app
from movie_catalog.applications.services.submission_gate import SubmissionGate
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.domain.services.movie_service import MovieService
from movie_catalog.infrastructure.persistence.database import create_tables, get_session
from movie_catalog.infrastructure.persistence.models import table_registry

CURRENT_YEAR = 2024


@pytest.fixture
def mock_movie_repository():
    """Mock movie repository for service and use case testing"""
    return AsyncMock(spec=MovieRepository)


@pytest.fixture
def mock_logger():
    return MagicMock(spec=LoggerPort)


@pytest.fixture
def movie_service(mock_movie_repository, mock_logger):
    """Movie service pinned to a fixed current year"""
    return MovieService(mock_movie_repository, mock_logger, current_year=lambda: CURRENT_YEAR)


@pytest.fixture
def submission_gate():
    return SubmissionGate("movie creation")


class BaseIntegrationTest:
    """Base class for integration tests against an in-memory SQLite database"""

    @pytest_asyncio.fixture
    async def sqlite_engine(self):
        """Create test database engine"""
        engine = create_async_engine(
            "sqlite+aiosqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        await create_tables(engine)

        yield engine

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.drop_all)
        await engine.dispose()

    @pytest_asyncio.fixture
    async def test_session(self, sqlite_engine):
        """Create test database session"""
        async with AsyncSession(sqlite_engine, expire_on_commit=False) as session:
            yield session

    @pytest_asyncio.fixture
    async def client(self, test_session):
        """Create test HTTP client with database override"""

        async def override_get_session():
            yield test_session

        app.dependency_overrides[get_session] = override_get_session

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

        app.dependency_overrides.clear()
