from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

# Create Base class for models
Base = declarative_base()


def make_engine(database_url: str) -> Engine:
    """Build an engine for the given URL.

    In-memory SQLite uses a single shared connection so tables created on
    one connection are visible to every session bound to the engine.
    """
    is_sqlite_memory = database_url.startswith("sqlite") and ":memory:" in database_url
    if is_sqlite_memory:
        return create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url, echo=False)


def make_sessionmaker(engine: Engine) -> sessionmaker:
    """Return a sessionmaker bound to the engine, creating missing tables."""
    # Import models so Base.metadata is populated
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    return sessionmaker(autoflush=False, bind=engine)
