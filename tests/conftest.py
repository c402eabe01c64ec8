import pytest
import httpx
from sqlalchemy.pool import StaticPool

from app.application import App
from app.core.config import settings
from app.db.init_db import init_db
from app.models.user import User


@pytest.fixture
async def application():
    """Create an App backed by a fresh test database with the users table in place."""
    application = App()
    application.initialize_with_url(
        settings.TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False}
    )
    await init_db(application.engine)

    yield application

    await application.engine.dispose()


@pytest.fixture
async def db_session(application):
    """Create test database session."""
    async with application.session_maker() as session:
        yield session


@pytest.fixture
async def client(application):
    """HTTP client that sends requests straight to the router."""
    transport = httpx.ASGITransport(app=application.router)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def add_users(db_session):
    """Insert `count` users named "User i" with age i*10."""
    async def _add_users(count: int = 1):
        count = max(count, 1)
        db_session.add_all([User(name=f"User {i + 1}", age=(i + 1) * 10) for i in range(count)])
        await db_session.commit()

    return _add_users
