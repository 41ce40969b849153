"""Shared exception hierarchy for fijos."""

from __future__ import annotations

from .base import ErrorKind, FijosError
from .config import ConfigError
from .discovery import FixtureNotFoundError, FixturesDirectoryNotFoundError
from .io import DirectoryCreationError, FixtureReadError, FixtureWriteError, TemporaryFixtureError

__all__ = [
    "ConfigError",
    "DirectoryCreationError",
    "ErrorKind",
    "FijosError",
    "FixtureNotFoundError",
    "FixtureReadError",
    "FixtureWriteError",
    "FixturesDirectoryNotFoundError",
    "TemporaryFixtureError",
]
