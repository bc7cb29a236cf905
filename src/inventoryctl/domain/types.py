"""Entity kinds managed by the inventory backend."""

from __future__ import annotations

from enum import StrEnum


class EntityKind(StrEnum):
    """The three managed record types."""

    EMPLOYEE = "employee"
    SECTION = "section"
    PRODUCT = "product"

    @property
    def plural(self) -> str:
        """Collection name used in op names and URL prefixes."""
        return f"{self.value}s"
