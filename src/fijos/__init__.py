"""Fixture discovery and coordinated access for test suites."""

from __future__ import annotations

from fijos.config import FijosConfig, load_config
from fijos.coordinator import AccessCoordinator
from fijos.exceptions import (
    ConfigError,
    ErrorKind,
    FijosError,
    FixtureNotFoundError,
    FixturesDirectoryNotFoundError,
)
from fijos.model import Fixture
from fijos.resolver import FixtureResolver

__version__ = "0.3.0"

__all__ = [
    "AccessCoordinator",
    "ConfigError",
    "ErrorKind",
    "FijosConfig",
    "FijosError",
    "Fixture",
    "FixtureNotFoundError",
    "FixtureResolver",
    "FixturesDirectoryNotFoundError",
    "__version__",
    "load_config",
]
