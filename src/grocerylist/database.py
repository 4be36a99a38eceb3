"""Database configuration and session management."""

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from grocerylist.config import get_settings


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


def create_session_factory(database_url: str | None = None, echo: bool = False) -> sessionmaker[Session]:
    """Create a sync session factory for the read-only lookup adapters."""
    url = database_url or get_settings().database_url
    if url in ("sqlite://", "sqlite:///:memory:"):
        # One shared connection, otherwise every session sees an empty database
        engine = create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(url, echo=echo)
    return sessionmaker(engine, expire_on_commit=False)
