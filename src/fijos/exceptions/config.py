"""Configuration-related exceptions."""

from __future__ import annotations

from fijos.exceptions.base import ErrorKind, FijosError


class ConfigError(FijosError, ValueError):
    """Raised when a fijos configuration file is invalid."""

    kind = ErrorKind.CONFIG_INVALID
