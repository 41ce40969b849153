"""Base exception and error kinds."""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Stable discriminator carried by every :class:`FijosError`."""

    FIXTURES_DIRECTORY_NOT_FOUND = "fixtures_directory_not_found"
    FIXTURE_NOT_FOUND = "fixture_not_found"
    CONFIG_INVALID = "config_invalid"
    DIRECTORY_CREATION_FAILED = "directory_creation_failed"
    FIXTURE_READ_FAILED = "fixture_read_failed"
    FIXTURE_WRITE_FAILED = "fixture_write_failed"
    TEMPORARY_FIXTURE_FAILED = "temporary_fixture_failed"


class FijosError(Exception):
    """Base class for all fijos errors."""

    kind: ErrorKind
