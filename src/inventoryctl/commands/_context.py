"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns the lazily-built Warehouse and the single place
where results are printed and exit codes decided.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from inventoryctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from inventoryctl.config.settings import InventorySettings
    from inventoryctl.infrastructure.warehouse import Warehouse
    from inventoryctl.services.result import ServiceResult


class AppContext:
    """Settings plus a Warehouse created on first use."""

    def __init__(self, settings: InventorySettings) -> None:
        self.settings = settings
        self._warehouse: Warehouse | None = None

        from inventoryctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from inventoryctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def warehouse(self) -> Warehouse:
        if self._warehouse is None:
            from inventoryctl.infrastructure.warehouse import Warehouse

            self._warehouse = Warehouse(self.settings)
        return self._warehouse

    def close(self) -> None:
        """Release the warehouse's database engine, if one was opened."""
        if self._warehouse is not None:
            self._warehouse.close()

    def emit(self, result: ServiceResult) -> None:
        """Print a ServiceResult and set the exit status.

        * Success: stdout, exit 0. Warnings go to stderr outside JSON mode.
        * Failure: stderr, exit 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
