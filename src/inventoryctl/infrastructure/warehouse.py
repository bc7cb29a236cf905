"""Warehouse — owns the storage backend and hands out per-entity services.

The Warehouse is the single dependency adapters receive. It chooses the
store implementation from settings (SQLite or in-memory), creates one
StoragePort per entity type, and builds one EntityService per port. The
database engine is created lazily on first store access so ``--help`` and
``--version`` never touch the disk.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from inventoryctl.domain.catalog import DEFINITIONS, get_definition
from inventoryctl.infrastructure.database.engine import init_database
from inventoryctl.infrastructure.database.schema import TABLES
from inventoryctl.infrastructure.storage.memory import InMemoryStore
from inventoryctl.infrastructure.storage.sql import SqlStore

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from inventoryctl.config.settings import InventorySettings
    from inventoryctl.infrastructure.storage.ports import StoragePort
    from inventoryctl.services.entity import EntityService

logger = logging.getLogger(__name__)


class Warehouse:
    """Storage backend plus the services built on it."""

    def __init__(self, settings: InventorySettings) -> None:
        self._settings = settings
        self._engine: Engine | None = None
        self._stores: dict[str, StoragePort[Any]] = {}
        self._services: dict[str, EntityService[Any, Any, Any]] = {}

    @property
    def settings(self) -> InventorySettings:
        return self._settings

    @property
    def backend(self) -> str:
        return self._settings.store.backend

    @property
    def engine(self) -> Engine:
        """The SQLite engine (created and initialized on first access).

        Raises:
            RuntimeError: If the warehouse uses the in-memory backend.
        """
        if self.backend != "sqlite":
            msg = f"No database engine for the {self.backend!r} backend"
            raise RuntimeError(msg)
        if self._engine is None:
            db_path = self._settings.db_path
            logger.debug("Opening database at %s", db_path)
            self._engine = init_database(self._settings.data_root, db_path)
        return self._engine

    def store(self, kind: str) -> StoragePort[Any]:
        """Return the StoragePort for *kind*, creating it on first use.

        Raises:
            KeyError: If *kind* is not a managed entity type.
        """
        definition = get_definition(kind)
        key = definition.kind.value
        if key not in self._stores:
            if self.backend == "memory":
                self._stores[key] = InMemoryStore(key)
            else:
                self._stores[key] = SqlStore(
                    self.engine, TABLES[key], definition.model, kind=key
                )
        return self._stores[key]

    def service(self, kind: str) -> EntityService[Any, Any, Any]:
        """Return the EntityService for *kind*, creating it on first use."""
        from inventoryctl.services.entity import EntityService

        definition = get_definition(kind)
        key = definition.kind.value
        if key not in self._services:
            self._services[key] = EntityService(
                definition,
                self.store(key),
                serialize_writes=self._settings.service.serialize_writes,
            )
        return self._services[key]

    def services(self) -> list[EntityService[Any, Any, Any]]:
        """One service per managed entity type, in catalog order."""
        return [self.service(kind) for kind in DEFINITIONS]

    def close(self) -> None:
        """Dispose of the database engine, if one was opened."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            # SQL stores are bound to the disposed engine.
            self._stores.clear()
            self._services.clear()
