"""Database engine, sessions and per-user storage paths."""

import logging
import os
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .schema import initialize_schema

logger = logging.getLogger(__name__)

DATABASE_FILENAME = "jobsearch.sqlite"
LOG_FILENAME = "jobsearch.log"


def get_data_directory() -> Path:
    """
    Get the per-user application data directory, creating it if needed.

    Windows uses %LOCALAPPDATA%, macOS ~/Library/Application Support, and
    everything else $XDG_DATA_HOME (default ~/.local/share).
    """
    if sys.platform == "win32":
        base = os.environ.get("LOCALAPPDATA") or str(Path.home() / "AppData" / "Local")
    elif sys.platform == "darwin":
        base = str(Path.home() / "Library" / "Application Support")
    else:
        base = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")

    data_dir = Path(base)
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_database_path() -> Path:
    """Path of the SQLite database file."""
    return get_data_directory() / DATABASE_FILENAME


def get_log_path() -> Path:
    """Path of the application log file."""
    return get_data_directory() / LOG_FILENAME


def _enable_foreign_keys(dbapi_connection, connection_record):
    """SQLite leaves foreign key enforcement off unless asked per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the engine and hands out sessions."""

    def __init__(self, url: Optional[str] = None, echo: bool = False, **engine_kwargs):
        if url is None:
            url = f"sqlite:///{get_database_path()}"
        self.url = url
        self.engine: Engine = create_engine(url, echo=echo, **engine_kwargs)
        event.listen(self.engine, "connect", _enable_foreign_keys)
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    def initialize(self):
        """Create tables and seed statuses."""
        with self.engine.begin() as connection:
            initialize_schema(connection)

    def get_session(self) -> Session:
        """Get a new session. The caller is responsible for closing it."""
        return self._session_factory()

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Provide a session for one unit of work, committing on success."""
        session = self.get_session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self):
        """Release pooled connections."""
        self.engine.dispose()


_db: Optional[Database] = None


def get_db() -> Database:
    """Get the process-wide database, creating and initializing it on first use."""
    global _db
    if _db is None:
        _db = Database()
        logger.info(f"Using database at {_db.url}")
        _db.initialize()
    return _db
