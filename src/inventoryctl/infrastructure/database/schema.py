"""SQLAlchemy Core table definitions for the inventory database.

One table per entity type. Column names match the record model fields so
rows round-trip through ``model_validate`` without a mapping layer. The
uniqueness field of each entity carries a UNIQUE constraint, which acts as
the store-level consistency check behind the service's own check.
"""

from __future__ import annotations

from sqlalchemy import REAL, Column, Integer, MetaData, Table, Text

metadata = MetaData()

employees = Table(
    "employees",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("card_number_id", Text, nullable=False, unique=True),
    Column("first_name", Text, nullable=False),
    Column("last_name", Text, nullable=False),
    Column("warehouse_id", Integer, nullable=False),
)

sections = Table(
    "sections",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("section_number", Integer, nullable=False, unique=True),
    Column("current_temperature", REAL, nullable=False),
    Column("minimum_temperature", REAL, nullable=False),
    Column("current_capacity", Integer, nullable=False),
    Column("minimum_capacity", Integer, nullable=False),
    Column("maximum_capacity", Integer, nullable=False),
    Column("warehouse_id", Integer, nullable=False),
    Column("product_type_id", Integer, nullable=False),
)

products = Table(
    "products",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("product_code", Text, nullable=False, unique=True),
    Column("description", Text, nullable=False),
    Column("expiration_rate", Integer, nullable=False),
    Column("freezing_rate", Integer, nullable=False),
    Column("height", REAL, nullable=False),
    Column("length", REAL, nullable=False),
    Column("net_weight", REAL, nullable=False),
    Column("recommended_freezing_temperature", REAL, nullable=False),
    Column("width", REAL, nullable=False),
    Column("product_type_id", Integer, nullable=False),
    Column("seller_id", Integer, nullable=False),
)

# Keyed by EntityKind value.
TABLES: dict[str, Table] = {
    "employee": employees,
    "section": sections,
    "product": products,
}
