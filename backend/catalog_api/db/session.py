"""Engine and session factory configuration."""

from collections.abc import Generator
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool

from catalog_api.core.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


def connect_args_for(database_url: str) -> dict:
    """Driver options understood by the target dialect.

    Keepalive and connect timeout options are libpq settings, so only
    PostgreSQL URLs receive them.
    """
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    if database_url.startswith("postgres"):
        return {
            "connect_timeout": 10,
            "keepalives": 1,
            "keepalives_idle": 30,
            "keepalives_interval": 10,
            "keepalives_count": 5,
        }
    return {}


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine tuned for the target dialect.

    SQLite (local runs and tests) gets a thread-agnostic connection; every
    other backend gets a pre-pinged QueuePool.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            echo=echo,
            future=True,
            connect_args=connect_args_for(database_url),
        )

    # pool_pre_ping: Test connections before using (handles stale connections)
    # pool_recycle: Recycle connections after 30 minutes (prevents timeout)
    return create_engine(
        database_url,
        echo=echo,
        future=True,
        poolclass=QueuePool,
        pool_pre_ping=True,
        pool_recycle=1800,
        pool_size=5,
        max_overflow=10,
        connect_args=connect_args_for(database_url),
    )


engine = build_engine(settings.database_url, echo=settings.database_echo)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db() -> Generator[Session, None, None]:
    """Yield a transactional session for the request lifecycle."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
