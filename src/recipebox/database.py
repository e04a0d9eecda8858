"""Database configuration and session management."""

from collections.abc import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from recipebox.config import get_settings

_settings = get_settings()
DATABASE_URL = _settings.database_url


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


def build_engine(url: str, echo: bool = False):
    """Create an engine; in-memory SQLite shares one connection across threads."""
    if url.startswith("sqlite") and ":memory:" in url:
        return create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if url.startswith("sqlite"):
        return create_engine(url, echo=echo, connect_args={"check_same_thread": False})
    return create_engine(url, echo=echo)


engine = build_engine(DATABASE_URL, echo=False)
SessionLocal = sessionmaker(engine, class_=Session, expire_on_commit=False)


def init_db() -> None:
    """Create tables if they don't exist."""
    # Import models so they register with Base.metadata
    from recipebox import models  # noqa: F401

    Base.metadata.create_all(engine)


def get_db() -> Iterator[Session]:
    """Dependency for FastAPI endpoints."""
    with SessionLocal() as session:
        yield session
