from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncEngine
import logging

from app.db.database import Base
from app.models import *  # Import all models

logger = logging.getLogger(__name__)


async def init_db(engine: AsyncEngine) -> None:
    """Create the users table if it does not exist"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")


async def clear_db(engine: AsyncEngine) -> None:
    """Delete every row and restart id assignment at 1"""
    async with engine.begin() as conn:
        await conn.execute(delete(User))
        if engine.dialect.name == "mysql":
            await conn.exec_driver_sql("ALTER TABLE users AUTO_INCREMENT = 1")
        elif engine.dialect.name == "postgresql":
            await conn.exec_driver_sql("ALTER SEQUENCE users_id_seq RESTART WITH 1")
