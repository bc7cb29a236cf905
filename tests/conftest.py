"""Shared pytest fixtures and test helpers for inventoryctl tests."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from inventoryctl.config.settings import InventorySettings
from inventoryctl.domain.entities import Employee, Product, Section
from inventoryctl.infrastructure.database.engine import init_database
from inventoryctl.infrastructure.storage.memory import InMemoryStore
from inventoryctl.infrastructure.warehouse import Warehouse
from inventoryctl.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Iterator[None]:
    """The CLI enables telemetry with -v; keep it from leaking between tests."""
    yield
    disable_telemetry()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's INVENTORYCTL_* environment out of the tests."""
    for key in list(os.environ):
        if key.startswith("INVENTORYCTL_"):
            monkeypatch.delenv(key)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def warehouse(tmp_path: Path) -> Iterator[Warehouse]:
    """SQLite-backed warehouse rooted in a temp directory."""
    settings = InventorySettings.from_cli(data_root=tmp_path)
    w = Warehouse(settings)
    try:
        yield w
    finally:
        w.close()


@pytest.fixture
def _isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI creates an isolated database.

    Use via ``@pytest.mark.usefixtures("_isolated_dir")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Record builders
# ---------------------------------------------------------------------------


def make_employee(record_id: int, card_number_id: str, **overrides: Any) -> Employee:
    fields: dict[str, Any] = {
        "first_name": "Ana",
        "last_name": "Souza",
        "warehouse_id": 1,
    }
    fields.update(overrides)
    return Employee(id=record_id, card_number_id=card_number_id, **fields)


def make_section(record_id: int, section_number: int, **overrides: Any) -> Section:
    fields: dict[str, Any] = {
        "current_temperature": 2.0,
        "minimum_temperature": -5.0,
        "current_capacity": 10,
        "minimum_capacity": 5,
        "maximum_capacity": 50,
        "warehouse_id": 1,
        "product_type_id": 1,
    }
    fields.update(overrides)
    return Section(id=record_id, section_number=section_number, **fields)


def make_product(record_id: int, product_code: str, **overrides: Any) -> Product:
    fields: dict[str, Any] = {
        "description": "Frozen peas",
        "expiration_rate": 30,
        "freezing_rate": 2,
        "height": 10.0,
        "length": 20.0,
        "net_weight": 1.5,
        "recommended_freezing_temperature": -18.0,
        "width": 15.0,
        "product_type_id": 3,
        "seller_id": 7,
    }
    fields.update(overrides)
    return Product(id=record_id, product_code=product_code, **fields)


EMPLOYEE_PAYLOAD: dict[str, Any] = {
    "card_number_id": "BBB333444",
    "first_name": "Joana",
    "last_name": "Lima",
    "warehouse_id": 2,
}

SECTION_PAYLOAD: dict[str, Any] = {
    "section_number": 2,
    "current_temperature": 1.5,
    "minimum_temperature": -10.0,
    "current_capacity": 0,
    "minimum_capacity": 10,
    "maximum_capacity": 100,
    "warehouse_id": 1,
    "product_type_id": 4,
}

PRODUCT_PAYLOAD: dict[str, Any] = {
    "product_code": "PRD-002",
    "description": "Ice cream",
    "expiration_rate": 90,
    "freezing_rate": 3,
    "height": 12.5,
    "length": 8.0,
    "net_weight": 0.9,
    "recommended_freezing_temperature": -20.0,
    "width": 8.0,
    "product_type_id": 2,
    "seller_id": 5,
}


@pytest.fixture
def employee_store() -> InMemoryStore[Employee]:
    """In-memory employee store seeded with (1, "AAA111222")."""
    return InMemoryStore("employee", [make_employee(1, "AAA111222")])
