"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, inventoryctl.toml only contains
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    backend: Literal["sqlite", "memory"] = "sqlite"
    path: str = ".inventoryctl/inventory.db"


class ServerConfig(BaseModel):
    """[server] section."""

    model_config = {"frozen": True}

    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)
    debug: bool = False


class ServiceConfig(BaseModel):
    """[service] section."""

    model_config = {"frozen": True}

    serialize_writes: bool = False
