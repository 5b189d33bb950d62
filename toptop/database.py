"""Database layer utilities for SQLAlchemy-backed persistence."""
from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Generator, Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .config import get_settings

settings = get_settings()

engine: Engine = create_engine(settings.database_url, pool_pre_ping=True, future=True)

SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    future=True,
    expire_on_commit=False,
)

Base = declarative_base()


if engine.dialect.name == "sqlite":

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, _record) -> None:
        # Cascading deletes on likes/follows/comments rely on FK enforcement.
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def utcnow() -> datetime:
    """Row timestamp with microsecond precision; sqlite's CURRENT_TIMESTAMP only has seconds."""
    return datetime.now(timezone.utc)


def get_session() -> Generator[Session, None, None]:
    """FastAPI dependency that yields a SQLAlchemy session per request."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@contextmanager
def sibling_session(db: Session) -> Iterator[Session]:
    """Open a short-lived session on the same bind as ``db``.

    Sessions are not thread-safe, so work offloaded to a worker thread gets its
    own session rather than sharing the request's.
    """

    bind: Engine | Connection = db.get_bind()
    session = Session(bind=bind, autoflush=False, future=True)
    try:
        yield session
    finally:
        session.close()


def init_db() -> None:
    """Initialise database schema by creating tables when missing."""
    # Import models to ensure they are registered on the metadata before create_all runs.
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


__all__ = [
    "Base",
    "SessionLocal",
    "engine",
    "get_session",
    "sibling_session",
    "utcnow",
    "init_db",
]
