"""Command group: warehouse sections."""

from __future__ import annotations

from inventoryctl.commands._entity import build_entity_group
from inventoryctl.domain.catalog import SECTION

section = build_entity_group(
    SECTION,
    help_text="Manage warehouse sections (section_number must be unique).",
    examples="""\
  inventoryctl section list
  inventoryctl section create --section-number 4 --current-temperature 2.5 \\
      --minimum-temperature -5 --current-capacity 40 --minimum-capacity 10 \\
      --maximum-capacity 100 --warehouse-id 1 --product-type-id 3
  inventoryctl section update 4 --current-capacity 55
  inventoryctl --quiet section list""",
)
