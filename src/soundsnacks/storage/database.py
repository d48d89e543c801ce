"""Database engine and session factory."""

import logging
from pathlib import Path
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

DATABASE_FILENAME = "soundsnacks.db"
MEMORY_URL = "sqlite://"

Base: Any = declarative_base()


def database_url(data_dir: Path) -> str:
    """Return the SQLite URL for the database inside ``data_dir``."""
    return f"sqlite:///{data_dir / DATABASE_FILENAME}"


def create_db_engine(url: str) -> Engine:
    """Create an engine and make sure all tables exist.

    In-memory databases share one connection so every session sees the
    same data.
    """
    if url == MEMORY_URL:
        engine = create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(url)

    # Import records here so they are registered with Base.metadata
    from soundsnacks.storage import records  # noqa: F401, PLC0415

    Base.metadata.create_all(bind=engine)
    logger.debug("Database ready at %s", url)
    return engine


def create_session(engine: Engine) -> Session:
    """Open a session bound to ``engine``."""
    factory = sessionmaker(autoflush=False, bind=engine)
    return factory()
