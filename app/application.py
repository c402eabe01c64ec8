from contextlib import asynccontextmanager
from typing import Optional, Tuple
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from app.api.api import api_router
from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.db.database import build_database_url, create_engine, create_session_maker
from app.db.init_db import init_db

logger = logging.getLogger(__name__)


def parse_listen_address(addr: str) -> Tuple[str, int]:
    """Split a ``host:port`` listen address; an empty host means all interfaces."""
    host, sep, port = addr.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"Invalid listen address: {addr!r}")
    host = host.strip("[]") or "0.0.0.0"
    return host, int(port)


class App:
    """Holds the router and the database handle of the users service."""

    def __init__(self) -> None:
        self.router: Optional[FastAPI] = None
        self.engine: Optional[AsyncEngine] = None
        self.session_maker: Optional[async_sessionmaker] = None

    def initialize(self, user: str, password: str, dbname: str) -> None:
        """Create the database connection and wire up the routes"""
        self.initialize_with_url(build_database_url(user, password, dbname))

    def initialize_with_url(self, database_url: str, **engine_kwargs) -> None:
        self.engine = create_engine(database_url, **engine_kwargs)
        self.session_maker = create_session_maker(self.engine)
        self.router = self._create_router()

    def _create_router(self) -> FastAPI:
        engine = self.engine

        @asynccontextmanager
        async def lifespan(app: FastAPI):
            await init_db(engine)
            yield
            await engine.dispose()

        router = FastAPI(
            title=settings.PROJECT_NAME,
            lifespan=lifespan,
            docs_url="/docs",
            redoc_url="/redoc"
        )
        router.state.session_maker = self.session_maker

        if settings.BACKEND_CORS_ORIGINS:
            router.add_middleware(
                CORSMiddleware,
                allow_origins=[str(origin).rstrip("/") for origin in settings.BACKEND_CORS_ORIGINS],
                allow_credentials=True,
                allow_methods=["*"],
                allow_headers=["*"],
            )

        register_exception_handlers(router)
        router.include_router(api_router)
        return router

    def run(self, addr: str) -> None:
        """Serve the router on ``addr`` until interrupted"""
        if self.router is None:
            raise RuntimeError("App.initialize must be called before App.run")
        host, port = parse_listen_address(addr)
        logger.info(f"Listening on {host}:{port}")
        uvicorn.run(self.router, host=host, port=port, log_level=settings.LOG_LEVEL.lower())
