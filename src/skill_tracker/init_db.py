"""Database initialization script."""

import logging
from pathlib import Path

from skill_tracker.config import settings
from skill_tracker.database import Base, engine
from skill_tracker.models import LogEntry, Skill  # noqa: F401  (registers tables)

logger = logging.getLogger(__name__)


def init_database(bind=engine):
    """
    Initialize the database by creating all tables.

    Creates the data directory for the default SQLite file, then any missing
    tables. Safe to run multiple times as existing tables are left untouched.

    Args:
        bind: Engine to create the tables on (defaults to the configured one)
    """
    if bind is engine:
        Path(settings.data_root).mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind=bind)
    logger.debug("Tables ready: %s", ", ".join(Base.metadata.tables.keys()))


def main():
    """Create the tables for the configured database and report them."""
    logging.basicConfig(level=settings.log_level)
    init_database()
    logger.info("Database tables created: %s", ", ".join(Base.metadata.tables.keys()))


if __name__ == "__main__":
    main()
