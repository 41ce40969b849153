"""Fixture lookup, listing and search over a discovered Fixtures directory."""

from __future__ import annotations

import logging
from pathlib import Path

from fijos.config import FijosConfig
from fijos.discovery import resolve_fixtures_directory
from fijos.exceptions import FixtureNotFoundError
from fijos.model import Fixture, normalize_extension
from fijos.types import Environment

logger = logging.getLogger(__name__)


class FixtureResolver:
    """Resolve fixtures for the project that contains ``start``.

    ``start`` is usually the calling test module (``Path(__file__)``) or its
    directory. Discovery runs on every call; wrap the resolver in an
    :class:`~fijos.coordinator.AccessCoordinator` to memoize resolved paths.
    """

    def __init__(
        self,
        start: Path | str,
        *,
        config: FijosConfig | None = None,
        environ: Environment | None = None,
    ) -> None:
        self.start = Path(start)
        self.config = config or FijosConfig()
        self._environ = environ

    def __repr__(self) -> str:
        return f"{type(self).__name__}(start={str(self.start)!r})"

    def fixtures_directory(self) -> Path:
        return resolve_fixtures_directory(self.start, config=self.config, environ=self._environ)

    def get_fixture(self, name: str, extension: str | None = None) -> Path:
        """Return the path of a fixture by full filename or by name plus extension.

        Raises:
            FixturesDirectoryNotFoundError: when discovery fails.
            FixtureNotFoundError: when the file does not exist.
        """
        filename = f"{name}.{extension.lstrip('.')}" if extension else name
        path = self.fixtures_directory() / filename
        if not path.exists():
            raise FixtureNotFoundError(path)
        return path

    def read_bytes(self, name: str, extension: str | None = None) -> bytes:
        return self.get_fixture(name, extension).read_bytes()

    def read_text(self, name: str, extension: str | None = None, *, encoding: str = "utf-8") -> str:
        return self.get_fixture(name, extension).read_text(encoding=encoding)

    def list_fixtures(self, extension: str | None = None) -> list[Fixture]:
        """List regular files in the Fixtures directory, sorted by name.

        Subdirectories, symlinks and hidden files are left out. With
        *extension*, only fixtures whose extension matches it
        case-insensitively are kept (``"json"``, ``"JSON"`` and ``".json"``
        are equivalent).
        """
        directory = self.fixtures_directory()
        fixtures = [
            Fixture.from_path(child)
            for child in directory.iterdir()
            if not child.name.startswith(".") and not child.is_symlink() and child.is_file()
        ]
        fixtures.sort(key=lambda fixture: (fixture.name, fixture.id))
        logger.debug("Listed %d fixtures in %s", len(fixtures), directory)

        if extension is None:
            return fixtures
        return [fixture for fixture in fixtures if fixture.matches_extension(extension)]

    def find_fixtures(self, pattern: str) -> list[Fixture]:
        """Return fixtures whose name contains *pattern*, ignoring case."""
        needle = pattern.lower()
        return [fixture for fixture in self.list_fixtures() if needle in fixture.name.lower()]

    def available_extensions(self) -> list[str]:
        return sorted({normalize_extension(fixture.extension) for fixture in self.list_fixtures()})
