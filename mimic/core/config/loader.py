"""
Configuration loader: reads mimic.yml into a GeneratorConfig.

Sources, lowest to highest precedence:
    mimic.yml  <  MIMIC_* env vars  <  explicit overrides (CLI flags)

The file is optional. When no path is given it is searched for from
the working directory upward.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from mimic.core.errors import ConfigError
from mimic.core.models.config import GeneratorConfig

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "mimic.yml"

# env var → config field
_ENV_VARS = {
    "MIMIC_OUTPUT_DIR": "output_dir",
    "MIMIC_LOG_LEVEL": "log_level",
    "MIMIC_LOG_FILE": "log_file",
}


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for mimic.yml starting from ``start_dir`` (default: cwd), walking up.

    Returns:
        Path to mimic.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def _read_file(path: Path) -> dict[str, Any]:
    logger.debug("Loading generator config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # Allow everything to sit under a "mimic" key
    return data.get("mimic", data) if isinstance(data.get("mimic"), dict) else data


def load_config(
    path: Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> GeneratorConfig:
    """Build the effective configuration.

    Args:
        path: Explicit config file. Must exist if given. If None, searches upward.
        overrides: Values from the CLI. ``None`` values are ignored.
        environ: Environment mapping (default: ``os.environ``).

    Raises:
        ConfigError: If the file is unreadable or the result is invalid.
    """
    data: dict[str, Any] = {}

    if path is not None:
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        data.update(_read_file(path))
    else:
        found = find_config_file()
        if found is not None:
            data.update(_read_file(found))

    env = os.environ if environ is None else environ
    for var, field in _ENV_VARS.items():
        if env.get(var):
            data[field] = env[var]

    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value

    try:
        config = GeneratorConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid generator configuration: {e}") from e

    logger.debug("Effective config: %s", config.model_dump())
    return config
