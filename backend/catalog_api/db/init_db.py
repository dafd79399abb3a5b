"""Database initialization helpers."""

import logging

from sqlalchemy.engine import Engine

from catalog_api.db import models  # noqa: F401  registers tables on Base.metadata
from catalog_api.db.base import Base

logger = logging.getLogger(__name__)


def init_db(bind: Engine) -> None:
    """Create all database tables that do not exist yet."""
    logger.info("Creating database tables if missing")
    Base.metadata.create_all(bind=bind)


if __name__ == "__main__":
    from catalog_api.db.session import engine

    init_db(engine)
