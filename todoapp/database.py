# todoapp/database.py
"""Database engine, session factory, and table creation using SQLModel."""

import logging
import os
from pathlib import Path

from sqlmodel import Session, SQLModel, create_engine

from todoapp.models import Task  # noqa: F401  (registers the table on SQLModel.metadata)

logger = logging.getLogger(__name__)

DB_PATH = Path(__file__).parent / "data.db"
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DB_PATH}")
DATABASE_ECHO = os.getenv("DATABASE_ECHO", "false").lower() in ("1", "true", "yes")

# SQLite connections are shared across the server's worker threads.
_connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, echo=DATABASE_ECHO, connect_args=_connect_args)


def create_db_and_tables() -> None:
    """Create all tables from SQLModel metadata."""
    logger.info("Creating tables on %s", engine.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(engine)


def get_session():
    """Yield a database session for FastAPI dependency injection."""
    with Session(engine) as session:
        yield session
