"""serve — run the HTTP API over the configured warehouse."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from inventoryctl.commands._base import InvCommand

if TYPE_CHECKING:
    from inventoryctl.commands._context import AppContext


@click.command(
    cls=InvCommand,
    examples="""\
  # Serve on the host/port from inventoryctl.toml (default 127.0.0.1:8080)
  inventoryctl serve

  # Bind all interfaces on a custom port
  inventoryctl serve --host 0.0.0.0 --port 9000

  # Throwaway in-memory data, JSON logs
  INVENTORYCTL_STORE__BACKEND=memory inventoryctl --log-json serve""",
)
@click.option("--host", default=None, help="Bind address (overrides [server] host).")
@click.option("--port", default=None, type=int, help="Listen port (overrides [server] port).")
@click.pass_obj
def serve(app: AppContext, host: str | None, port: int | None) -> None:
    """Start the HTTP API (/api/v1/employees, /sections, /products)."""
    from inventoryctl.api.app import create_app

    server = app.settings.server
    flask_app = create_app(app.warehouse)
    flask_app.run(
        host=host or server.host,
        port=port or server.port,
        debug=server.debug,
        threaded=True,
        use_reloader=False,
    )
