"""Fixture value record."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fijos.types import FixtureEntry


def split_filename(filename: str) -> tuple[str, str]:
    """Split *filename* into ``(name, extension)`` at its last dot.

    Dotfiles, names without a dot and names ending in a dot have no extension.
    """
    stem, dot, extension = filename.rpartition(".")
    if not dot or not stem or not extension:
        return filename, ""
    return stem, extension


@dataclass(frozen=True)
class Fixture:
    """A single file found in the Fixtures directory."""

    id: str
    name: str
    extension: str
    path: Path

    @classmethod
    def from_path(cls, path: Path) -> Fixture:
        name, extension = split_filename(path.name)
        return cls(id=path.name, name=name, extension=extension, path=path)

    def matches_extension(self, extension: str) -> bool:
        """Case-insensitive extension match; a leading dot on *extension* is ignored."""
        return self.extension.lower() == normalize_extension(extension)

    def to_dict(self) -> FixtureEntry:
        return {
            "id": self.id,
            "name": self.name,
            "extension": self.extension,
            "path": str(self.path),
        }


def normalize_extension(extension: str) -> str:
    """Lowercase *extension* and strip surrounding dots."""
    return extension.strip(".").lower()
