"""
Pytest configuration and fixtures.
Provides the test app client and an in-memory async DB replacing the real one.
"""

from datetime import date

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

import infiniti_cms.models  # noqa: F401
from infiniti_cms.main import app
from infiniti_cms.api.v1.middleware import require_authentication
from infiniti_cms.db.base import Base
from infiniti_cms.db.session import get_db
from infiniti_cms.models.client import Client, ClientStatus, Industry
from infiniti_cms.models.user import User, UserRole, UserStatus


# Test database URL (in-memory SQLite for testing)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def test_engine():
    """In-memory SQLite engine shared by every connection of one test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # SQLite leaves ON DELETE CASCADE off unless asked
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture(scope="function")
def test_session_maker(test_engine):
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture(scope="function")
async def test_db_session(test_session_maker):
    """
    Create a test database session.
    Uses in-memory SQLite for fast tests.
    """
    async with test_session_maker() as session:
        yield session


async def _add_user(session: AsyncSession, email: str, role: UserRole, first_name: str, last_name: str) -> User:
    user = User(
        email=email,
        first_name=first_name,
        last_name=last_name,
        role=role,
        status=UserStatus.ACTIVE,
    )
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


@pytest.fixture
async def admin_user(test_db_session) -> User:
    return await _add_user(test_db_session, "admin@example.com", UserRole.ADMIN, "Ada", "Admin")


@pytest.fixture
async def csm_user(test_db_session) -> User:
    return await _add_user(test_db_session, "csm@example.com", UserRole.CSM, "Casey", "Manager")


@pytest.fixture
async def finance_user(test_db_session) -> User:
    return await _add_user(test_db_session, "finance@example.com", UserRole.FINANCE, "Fin", "Ance")


@pytest.fixture
async def viewer_user(test_db_session) -> User:
    return await _add_user(test_db_session, "viewer@example.com", UserRole.VIEWER, "Vic", "Viewer")


@pytest.fixture
async def sample_client(test_db_session, csm_user) -> Client:
    """Client 'Sample Airlines Ltd' managed by the CSM fixture user."""
    client = Client(
        name="Sample Airlines Ltd",
        email="contact@sampleairlines.com",
        industry=Industry.AIRLINES,
        status=ClientStatus.ACTIVE,
        assigned_csm_id=csm_user.id,
    )
    test_db_session.add(client)
    await test_db_session.commit()
    await test_db_session.refresh(client)
    return client


@pytest.fixture
def login_as():
    """Switch the authenticated user for subsequent requests."""
    def _login_as(user: User) -> None:
        app.dependency_overrides[require_authentication] = lambda: user
    return _login_as


@pytest.fixture(scope="function")
async def test_client(test_session_maker, admin_user, login_as):
    """
    Create a test HTTP client authenticated as the admin fixture user.
    """
    async def override_get_db():
        async with test_session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    login_as(admin_user)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def today() -> date:
    return date.today()
