"""Tests for FluentSettings — unified settings with TOML source."""

from __future__ import annotations

from pathlib import Path

import pytest

from fluentlink.config.discovery import CONFIG_FILENAME
from fluentlink.config.models import FluentConfig
from fluentlink.config.settings import FluentSettings
from tests.conftest import TOML_CONFIG


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = FluentSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.config == FluentConfig()

    def test_frozen(self, tmp_path: Path) -> None:
        settings = FluentSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.verbose = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text(TOML_CONFIG)
        settings = FluentSettings.from_cli(start=tmp_path)
        assert settings.config_path == tmp_path / CONFIG_FILENAME
        assert settings.routing.default_host == "mocked"
        assert settings.routing.query_param == "l"
        assert len(settings.locales) == 4
        assert settings.config.locales[1].url_segment == "german"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "site.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[routing]\nscheme = "https"\n')
        settings = FluentSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.routing.scheme == "https"
        assert settings.config_path == custom

    def test_explicit_missing_path_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text('[routing]\nscheme = "https"\n')
        settings = FluentSettings.from_cli(
            config_path=str(tmp_path / "missing.toml"), start=tmp_path
        )
        assert settings.config_path is None
        assert settings.routing.scheme == "http"


class TestOverrides:
    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = FluentSettings.from_cli(
            start=tmp_path, json_output=True, verbose=True, log_json=True
        )
        assert settings.json_output is True
        assert settings.verbose is True
        assert settings.log_json is True

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text(TOML_CONFIG)
        monkeypatch.setenv("FLUENTLINK_ROUTING__DISABLE_DEFAULT_PREFIX", "true")
        settings = FluentSettings.from_cli(start=tmp_path)
        assert settings.routing.disable_default_prefix is True

    def test_init_merges_over_toml(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text(TOML_CONFIG)
        settings = FluentSettings.from_cli(start=tmp_path, routing={"scheme": "https"})
        assert settings.routing.scheme == "https"
        assert settings.routing.default_host == "mocked"
