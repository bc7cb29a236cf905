"""Database engine setup for SQLite with WAL mode.

SQLAlchemy Core (not ORM) is used: records are frozen pydantic models and
the stores map rows to them directly, so identity maps and sessions add
nothing.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from inventoryctl.infrastructure.database.schema import metadata

DEFAULT_DB_PATH = Path(".inventoryctl") / "inventory.db"


def create_db_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with WAL mode enabled.

    The HTTP server handles requests on worker threads, so pooled
    connections must be usable from any thread.
    """
    engine = create_engine(
        f"sqlite:///{db_path}",
        echo=False,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    return engine


def init_database(data_root: Path, db_path: Path = DEFAULT_DB_PATH) -> Engine:
    """Initialize the inventory database at ``{data_root}/{db_path}``.

    Creates parent directories and all tables from :data:`schema.metadata`.
    Idempotent — safe to call on an existing database.

    Returns the engine ready for use.
    """
    full_path = db_path if db_path.is_absolute() else data_root / db_path
    full_path.parent.mkdir(parents=True, exist_ok=True)

    engine = create_db_engine(full_path)
    metadata.create_all(engine)
    return engine
