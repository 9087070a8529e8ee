"""SQLAlchemy engine and session factory.

When DATABASE_URL is configured, provides:
- an engine (PostgreSQL via psycopg in production; SQLite works locally)
- a session factory for request-scoped sessions
- a FastAPI lifespan hook for startup/shutdown

When DATABASE_URL is None (no database configured), engine and
session_factory are None and the app falls back to in-memory repositories.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator, Generator
from contextlib import asynccontextmanager, contextmanager

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.core.config import SETTINGS

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """SQLAlchemy declarative base for all table models."""


def build_engine(url: str, *, echo: bool = False) -> Engine:
    """Create an engine, sizing the connection pool for server databases only."""
    if url.startswith("sqlite"):
        return create_engine(
            url, echo=echo, connect_args={"check_same_thread": False}
        )
    return create_engine(
        url,
        echo=echo,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
    )


def build_session_factory(bind: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind, class_=Session, expire_on_commit=False)


# --- Engine and session factory (None when no DATABASE_URL) ---

if SETTINGS.database_url:
    engine: Engine | None = build_engine(
        SETTINGS.database_url, echo=SETTINGS.is_dev  # log SQL in dev only
    )
    session_factory: sessionmaker[Session] | None = build_session_factory(engine)
else:
    engine = None
    session_factory = None


@contextmanager
def session_scope() -> Generator[Session, None, None]:
    """Yield a request-scoped session.

    Commits on success, rolls back on exception.
    """
    if session_factory is None:
        raise RuntimeError(
            "DATABASE_URL is not configured — cannot create database session"
        )
    with session_factory() as session:
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise


def ping_database() -> str:
    """Return "ok", "degraded", or "not_configured" for the health endpoint."""
    if engine is None:
        return "not_configured"
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception:
        logger.warning("Database ping failed", exc_info=True)
        return "degraded"
    return "ok"


@asynccontextmanager
async def lifespan_db() -> AsyncGenerator[None, None]:
    """Startup/shutdown hook for the database engine.

    Call from FastAPI's lifespan context manager.
    """
    if engine is None:
        logger.info("No DATABASE_URL configured — using in-memory repositories")
        yield
        return

    logger.info("Database engine created: %s", engine.url)
    yield
    engine.dispose()
    logger.info("Database engine disposed")
