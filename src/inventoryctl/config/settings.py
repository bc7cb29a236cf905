"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``INVENTORYCTL_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``inventoryctl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from inventoryctl.config.discovery import find_config
from inventoryctl.config.models import ServerConfig, ServiceConfig, StoreConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from an ``inventoryctl.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for the TOML path during construction.
_tls = threading.local()


class InventorySettings(BaseSettings):
    """Unified settings for the CLI and the HTTP server.

    Attributes:
        data_root: Directory relative paths resolve against (parent of
            ``inventoryctl.toml``, or CWD if no config found).
        config_path: The config file in effect, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "INVENTORYCTL_",
        "env_nested_delimiter": "__",
    }

    data_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    store: StoreConfig = Field(default_factory=StoreConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    service: ServiceConfig = Field(default_factory=ServiceConfig)

    @property
    def db_path(self) -> Path:
        """Absolute path of the SQLite database file."""
        path = Path(self.store.path)
        return path if path.is_absolute() else self.data_root / path

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        data_root: Path | None = None,
        **cli_flags: Any,
    ) -> InventorySettings:
        """Construct settings from a CLI invocation.

        The data root is, in order: *data_root* if given, the directory of
        the config file in effect, or the working directory. CLI flags are
        the highest-priority overrides.

        Raises:
            click.ClickException: If *config_path* names a missing file.
        """
        toml_path = _locate_config(config_path, data_root)
        if data_root is None:
            data_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(data_root=data_root, config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None


def _locate_config(config_path: str | None, data_root: Path | None) -> Path | None:
    """Explicit *config_path* if given, else walk up from *data_root* or the CWD."""
    if not config_path:
        return find_config(data_root)
    explicit = Path(config_path)
    if not explicit.is_file():
        msg = f"Config file not found: {explicit}"
        raise click.ClickException(msg)
    return explicit
