"""Reserved exceptions for write-side fixture operations.

Nothing in fijos raises these yet; they complete the taxonomy so callers can
match on them ahead of fixture creation support.
"""

from __future__ import annotations

from fijos.exceptions.base import ErrorKind, FijosError


class DirectoryCreationError(FijosError, OSError):
    kind = ErrorKind.DIRECTORY_CREATION_FAILED


class FixtureReadError(FijosError, OSError):
    kind = ErrorKind.FIXTURE_READ_FAILED


class FixtureWriteError(FijosError, OSError):
    kind = ErrorKind.FIXTURE_WRITE_FAILED


class TemporaryFixtureError(FijosError, OSError):
    kind = ErrorKind.TEMPORARY_FIXTURE_FAILED
