"""Lookup failures raised by discovery and fixture resolution."""

from __future__ import annotations

from pathlib import Path

from fijos.exceptions.base import ErrorKind, FijosError


class FixturesDirectoryNotFoundError(FijosError, LookupError):
    """Raised when no Fixtures directory can be located from a starting path.

    ``root`` is set when a project root was found but neither it nor any of its
    descendants holds a Fixtures directory.
    """

    kind = ErrorKind.FIXTURES_DIRECTORY_NOT_FOUND

    def __init__(
        self,
        start: Path,
        *,
        search_depth: int,
        strategies: tuple[str, ...],
        root: Path | None = None,
    ) -> None:
        self.start = start
        self.search_depth = search_depth
        self.strategies = strategies
        self.root = root
        super().__init__(self._format())

    def _format(self) -> str:
        tried = ", ".join(self.strategies) or "none"
        if self.root is not None:
            return (
                f"Fixtures directory not found at project root {self.root} "
                f"(started from {self.start}; tried: {tried}). "
                "Create a 'Fixtures' directory at your project root."
            )
        return (
            f"Could not locate Fixtures directory or project root after searching "
            f"{self.search_depth} levels up from {self.start} (tried: {tried})"
        )


class FixtureNotFoundError(FijosError, LookupError):
    """Raised when the Fixtures directory exists but the requested file does not."""

    kind = ErrorKind.FIXTURE_NOT_FOUND

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Fixture {path.name} not found at {path}")
