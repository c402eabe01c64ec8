from typing import AsyncIterator
from fastapi import Request
from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncEngine, AsyncSession
from sqlalchemy.orm import DeclarativeBase
import logging

from app.core.config import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


# Driverless URLs are rewritten to the async driver for that dialect
ASYNC_DRIVERS = {
    "postgresql://": "postgresql+asyncpg://",
    "mysql://": "mysql+aiomysql://",
    "sqlite://": "sqlite+aiosqlite://",
}


def normalize_database_url(raw_database_url: str) -> str:
    """Ensure an async driver is specified in the database URL"""
    for prefix, async_prefix in ASYNC_DRIVERS.items():
        if raw_database_url.startswith(prefix):
            return raw_database_url.replace(prefix, async_prefix, 1)
    return raw_database_url


def build_database_url(user: str, password: str, dbname: str) -> str:
    """Build the MySQL URL for the given credentials, or DATABASE_URL if one is configured"""
    if settings.DATABASE_URL:
        return normalize_database_url(settings.DATABASE_URL)

    url = URL.create(
        "mysql+aiomysql",
        username=user,
        password=password or None,
        host=settings.DB_HOST,
        port=settings.DB_PORT,
        database=dbname,
    )
    return url.render_as_string(hide_password=False)


def create_engine(database_url: str, **engine_kwargs) -> AsyncEngine:
    database_url = normalize_database_url(database_url)
    logger.info(f"Using database {redact_database_url(database_url)}")
    engine_kwargs.setdefault("echo", settings.DEBUG)
    return create_async_engine(database_url, **engine_kwargs)


def redact_database_url(database_url: str) -> str:
    return make_url(database_url).render_as_string(hide_password=True)


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Yield a session from the session maker of the application serving the request"""
    async with request.app.state.session_maker() as session:
        try:
            yield session
        finally:
            await session.close()
