"""SQLite database engine and schema via SQLAlchemy Core."""

from inventoryctl.infrastructure.database.engine import create_db_engine, init_database
from inventoryctl.infrastructure.database.schema import (
    TABLES,
    employees,
    metadata,
    products,
    sections,
)

__all__ = [
    "TABLES",
    "create_db_engine",
    "employees",
    "init_database",
    "metadata",
    "products",
    "sections",
]
