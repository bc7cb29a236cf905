"""Tests for InventorySettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from inventoryctl.config.settings import InventorySettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = InventorySettings.from_cli(data_root=tmp_path)
        assert settings.data_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.store.backend == "sqlite"
        assert settings.server.port == 8080
        assert settings.server.host == "127.0.0.1"
        assert settings.service.serialize_writes is False

    def test_db_path_relative_to_root(self, tmp_path: Path) -> None:
        settings = InventorySettings.from_cli(data_root=tmp_path)
        assert settings.db_path == tmp_path / ".inventoryctl" / "inventory.db"

    def test_db_path_absolute(self, tmp_path: Path) -> None:
        target = tmp_path / "abs.db"
        settings = InventorySettings.from_cli(data_root=tmp_path, store={"path": str(target)})
        assert settings.db_path == target

    def test_frozen(self, tmp_path: Path) -> None:
        settings = InventorySettings.from_cli(data_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_sections(self, tmp_path: Path) -> None:
        (tmp_path / "inventoryctl.toml").write_text(
            '[store]\nbackend = "memory"\n[server]\nport = 9000\n'
        )
        settings = InventorySettings.from_cli(data_root=tmp_path)
        assert settings.store.backend == "memory"
        assert settings.server.port == 9000
        assert settings.server.host == "127.0.0.1"

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "inventoryctl.toml").write_text("")
        settings = InventorySettings.from_cli(data_root=tmp_path)
        assert settings.store.backend == "sqlite"

    def test_data_root_from_config_location(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "inventoryctl.toml").write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = InventorySettings.from_cli()
        assert settings.data_root == tmp_path
        assert settings.config_path == tmp_path / "inventoryctl.toml"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "wh.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[service]\nserialize_writes = true\n")
        settings = InventorySettings.from_cli(config_path=str(custom))
        assert settings.service.serialize_writes is True
        assert settings.config_path == custom
        assert settings.data_root == custom.parent

    def test_missing_explicit_config(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="Config file not found"):
            InventorySettings.from_cli(config_path=str(tmp_path / "absent.toml"))

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "inventoryctl.toml").write_text("[store\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            InventorySettings.from_cli(data_root=tmp_path)

    def test_invalid_value(self, tmp_path: Path) -> None:
        (tmp_path / "inventoryctl.toml").write_text('[store]\nbackend = "postgres"\n')
        with pytest.raises(Exception, match="backend"):
            InventorySettings.from_cli(data_root=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "inventoryctl.toml").write_text('[store]\nbackend = "sqlite"\n')
        monkeypatch.setenv("INVENTORYCTL_STORE__BACKEND", "memory")
        settings = InventorySettings.from_cli(data_root=tmp_path)
        assert settings.store.backend == "memory"

    def test_cli_flags_override_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INVENTORYCTL_JSON_OUTPUT", "false")
        settings = InventorySettings.from_cli(data_root=tmp_path, json_output=True)
        assert settings.json_output is True

    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = InventorySettings.from_cli(
            data_root=tmp_path, json_output=True, quiet=True, verbose=True, log_json=True
        )
        assert (settings.json_output, settings.quiet, settings.verbose, settings.log_json) == (
            True,
            True,
            True,
            True,
        )
