"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click, or explicit overrides in code
  2. Env vars     — ``FLUENTLINK_*`` prefix, ``__`` for nesting
  3. TOML file    — ``fluentlink.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the walk-up discovery from :mod:`fluentlink.config.discovery`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from fluentlink.config.discovery import find_config, read_config_data
from fluentlink.config.models import (
    DomainConfig,
    FluentConfig,
    LocaleConfig,
    RoutingConfig,
    StatusConfig,
)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a discovered ``fluentlink.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_config_data(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class FluentSettings(BaseSettings):
    """Frozen settings for a localisation runtime.

    Attributes:
        config_path: The TOML file the sections were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FLUENTLINK_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    status: StatusConfig = Field(default_factory=StatusConfig)
    locales: list[LocaleConfig] = Field(default_factory=list)
    domains: list[DomainConfig] = Field(default_factory=list)

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
        start: Path | None = None,
        **overrides: Any,
    ) -> FluentSettings:
        """Construct settings, discovering the TOML file unless *config_path* is given."""
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None

    @property
    def config(self) -> FluentConfig:
        """The TOML-shaped sections as a :class:`FluentConfig`."""
        return FluentConfig(
            routing=self.routing,
            status=self.status,
            locales=self.locales,
            domains=self.domains,
        )
