"""Subcommand modules for inventoryctl.

Provides register_commands() which uses deferred imports to keep
``inventoryctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the entity groups and the standalone commands on the root group."""
    # --- Entity groups ---
    from inventoryctl.commands.employee import employee
    from inventoryctl.commands.product import product
    from inventoryctl.commands.section import section

    cli.add_command(employee)
    cli.add_command(section)
    cli.add_command(product)

    # --- Standalone commands ---
    from inventoryctl.commands.init_cmd import init_cmd
    from inventoryctl.commands.serve import serve

    cli.add_command(init_cmd)
    cli.add_command(serve)
