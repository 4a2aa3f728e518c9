"""
Database utilities and engine management.

Only used when STORE_BACKEND=sql. Provides the engine the SQLStore opens
its sessions on.

No dependencies on higher-level modules (api, services, repositories).
"""

from functools import lru_cache

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from config.settings import settings


def create_db_engine(database_url: str) -> Engine:
    """
    Build an engine for a database URL and create missing tables.

    Args:
        database_url: SQLAlchemy URL ("sqlite://", "sqlite:///career.db",
            "postgresql://...")

    Returns:
        SQLAlchemy engine

    Note:
        In-memory sqlite uses a StaticPool so every session sees the same
        database. postgresql:// is rewritten to the psycopg (v3) driver.
    """
    # Imported for their side effect of registering tables on SQLModel.metadata
    import models  # noqa: F401

    if database_url.startswith("sqlite"):
        in_memory = database_url in ("sqlite://", "sqlite:///:memory:")
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool if in_memory else None,
        )
    else:
        # Convert postgresql:// to postgresql+psycopg:// for psycopg3 driver
        if database_url.startswith("postgresql://"):
            database_url = database_url.replace("postgresql://", "postgresql+psycopg://", 1)

        engine = create_engine(
            database_url,
            connect_args={"connect_timeout": 10},  # Fail fast if the database is slow
            pool_pre_ping=True,  # Verify connection before use
            pool_recycle=300,
            pool_size=3,
            max_overflow=2,
            pool_timeout=30,
        )

    SQLModel.metadata.create_all(engine)
    return engine


@lru_cache()
def get_engine() -> Engine:
    """
    Get cached database engine for settings.DATABASE_URL.

    Returns:
        SQLAlchemy engine singleton
    """
    return create_db_engine(settings.DATABASE_URL)
