"""Config file discovery and loading.

Walk-up finder locates ``fluentlink.toml`` (or a ``pyproject.toml`` carrying
a ``[tool.fluentlink]`` table), similar to how git finds .git/.
Supports FLUENTLINK_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from fluentlink.config.models import FluentConfig
from fluentlink.domain.errors import InvalidConfigurationError

CONFIG_FILENAME = "fluentlink.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "FLUENTLINK_CONFIG"


def _pyproject_has_section(path: Path) -> bool:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        return False
    return "fluentlink" in data.get("tool", {})


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for a config file.

    At each level ``fluentlink.toml`` wins over ``pyproject.toml``; the
    latter only counts when it has a ``[tool.fluentlink]`` table.
    Checks FLUENTLINK_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = current / PYPROJECT_FILENAME
        if pyproject.is_file() and _pyproject_has_section(pyproject):
            return pyproject
        if current.parent == current:
            return None
        current = current.parent


def read_config_data(path: Path) -> dict[str, Any]:
    """Parse *path* and return the fluentlink table as a plain dict.

    Raises:
        InvalidConfigurationError: If the file is not valid TOML.
    """
    try:
        data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise InvalidConfigurationError(msg) from exc
    if path.name == PYPROJECT_FILENAME:
        return dict(data.get("tool", {}).get("fluentlink", {}))
    return data


def load_config(path: Path | None = None, cwd: Path | None = None) -> FluentConfig:
    """Load and validate config from a TOML file.

    If *path* is None, uses find_config(*cwd*) to discover the file.
    Returns default FluentConfig if no file is found.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return FluentConfig()
    return FluentConfig.model_validate(read_config_data(path))
