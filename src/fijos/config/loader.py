"""Config loading and validation for ``fijos.yaml``."""

from __future__ import annotations

import difflib
import logging
from pathlib import Path
from typing import Any

import yaml

from fijos.config.model import FijosConfig
from fijos.constants.config import (
    ALLOWED_CONFIG_KEYS,
    BOOL_CONFIG_KEYS,
    CONFIG_FILENAME,
    INT_CONFIG_KEYS,
    STRING_CONFIG_KEYS,
    STRING_LIST_CONFIG_KEYS,
)
from fijos.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> FijosConfig:
    """Load and validate discovery config from ``fijos.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return FijosConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        key = unknown[0]
        hint = _suggest_key(key)
        suffix = f" (did you mean {hint!r}?)" if hint else ""
        raise ConfigError(f"Unknown config key {key!r} in {path}{suffix}")

    values: dict[str, Any] = {}
    for key, value in raw.items():
        if key in INT_CONFIG_KEYS:
            values[key] = _ensure_positive_int(value, key)
        elif key in STRING_LIST_CONFIG_KEYS:
            items = tuple(item.strip() for item in _ensure_string_list(value, key) if item.strip())
            values[key] = frozenset(items) if key == "skip_dirs" else items
        elif key in BOOL_CONFIG_KEYS:
            if not isinstance(value, bool):
                raise ConfigError(f"{key} must be a boolean")
            values[key] = value
        elif key in STRING_CONFIG_KEYS:
            if not isinstance(value, str) or not value.strip() or "/" in value:
                raise ConfigError(f"{key} must be a non-empty directory name")
            values[key] = value.strip()

    logger.debug("Loaded fijos config from %s: %s", path, sorted(values))
    return FijosConfig(**values)


def _ensure_positive_int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{key} must be a positive integer")
    return value


def _ensure_string_list(value: Any, key: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key} must be a list of strings")
    return value


def _suggest_key(key: str) -> str | None:
    """Return the closest allowed config key, if any is similar enough."""
    matches = difflib.get_close_matches(key, sorted(ALLOWED_CONFIG_KEYS), n=1, cutoff=0.6)
    return matches[0] if matches else None
