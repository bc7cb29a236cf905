"""Command group: products."""

from __future__ import annotations

from inventoryctl.commands._entity import build_entity_group
from inventoryctl.domain.catalog import PRODUCT

product = build_entity_group(
    PRODUCT,
    help_text="Manage products (product_code must be unique).",
    examples="""\
  inventoryctl product list
  inventoryctl product create --product-code PRD-001 --description "Frozen peas" \\
      --expiration-rate 1 --freezing-rate 2 --height 3.3 --length 4.3 \\
      --net-weight 5.5 --recommended-freezing-temperature -18 --width 7.7 \\
      --product-type-id 8 --seller-id 9
  inventoryctl product update 1 --net-weight 9.9
  inventoryctl --json product get 1""",
)
