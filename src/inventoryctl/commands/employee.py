"""Command group: employee records."""

from __future__ import annotations

from inventoryctl.commands._entity import build_entity_group
from inventoryctl.domain.catalog import EMPLOYEE

employee = build_entity_group(
    EMPLOYEE,
    help_text="Manage warehouse employees (card_number_id must be unique).",
    examples="""\
  inventoryctl employee list
  inventoryctl employee create --card-number-id AAA111222 --first-name Ana \\
      --last-name Souza --warehouse-id 1
  inventoryctl employee update 1 --first-name Joana
  inventoryctl --json employee get 1
  inventoryctl employee delete 1""",
)
