"""init — write inventoryctl.toml and create the database (module named to avoid shadowing)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from inventoryctl.commands._base import InvCommand
from inventoryctl.config.discovery import CONFIG_FILENAME
from inventoryctl.config.models import ServerConfig, StoreConfig
from inventoryctl.services.result import ServiceResult

if TYPE_CHECKING:
    from inventoryctl.commands._context import AppContext

_INIT_EXAMPLES = """\
  inventoryctl init
  inventoryctl init /srv/inventory --port 9000
  inventoryctl init . --backend memory
  inventoryctl init . --force"""

_CONFIG_TEMPLATE = """\
# inventoryctl configuration. Only overrides are needed; see defaults in the docs.

[store]
backend = "{backend}"
path = "{path}"

[server]
host = "{host}"
port = {port}

[service]
serialize_writes = {serialize_writes}
"""


@click.command("init", cls=InvCommand, examples=_INIT_EXAMPLES)
@click.argument("path", required=False, default=".")
@click.option(
    "--backend",
    type=click.Choice(["sqlite", "memory"]),
    default=StoreConfig().backend,
    show_default=True,
    help="Storage backend.",
)
@click.option("--port", type=int, default=ServerConfig().port, show_default=True, help="HTTP port.")
@click.option("--serialize-writes", is_flag=True, help="Hold a per-entity lock during writes.")
@click.option("--force", is_flag=True, help="Overwrite an existing inventoryctl.toml.")
@click.pass_obj
def init_cmd(
    app: AppContext,
    path: str,
    backend: str,
    port: int,
    serialize_writes: bool,
    force: bool,
) -> None:
    """Initialize an inventory data directory."""
    from inventoryctl.infrastructure.database.engine import init_database

    root = Path(path).resolve()
    config_file = root / CONFIG_FILENAME
    if config_file.exists() and not force:
        app.emit(
            ServiceResult.failure(
                "init",
                "ALREADY_INITIALIZED",
                f"{config_file} already exists (use --force to overwrite)",
                path=str(config_file),
            )
        )
        return

    store = StoreConfig(backend=backend)  # type: ignore[arg-type]
    root.mkdir(parents=True, exist_ok=True)
    config_file.write_text(
        _CONFIG_TEMPLATE.format(
            backend=store.backend,
            path=store.path,
            host=ServerConfig().host,
            port=port,
            serialize_writes=str(serialize_writes).lower(),
        ),
        encoding="utf-8",
    )

    data: dict[str, str] = {"config_path": str(config_file), "backend": store.backend}
    if store.backend == "sqlite":
        engine = init_database(root, Path(store.path))
        engine.dispose()
        data["db_path"] = str(root / store.path)

    app.emit(ServiceResult(ok=True, op="init", data=data))
