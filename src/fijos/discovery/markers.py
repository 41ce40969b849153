"""Project-root marker checks and Fixtures child lookup.

Both checks accept the directory's child names when the caller has already
listed it, so one ascent step costs a single ``iterdir``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence, Set
from pathlib import Path

from fijos.constants.discovery import FIXTURES_DIRNAME, MANIFEST_FILENAMES, PROJECT_SUFFIXES

logger = logging.getLogger(__name__)


def list_child_names(directory: Path) -> frozenset[str]:
    """Return the entry names of *directory*, or nothing when it cannot be listed."""
    try:
        return frozenset(child.name for child in directory.iterdir())
    except OSError as exc:
        logger.debug("Cannot list %s: %s", directory, exc)
        return frozenset()


def find_fixtures_subdirectory(
    directory: Path,
    dirname: str = FIXTURES_DIRNAME,
    *,
    names: Set[str] | None = None,
) -> Path | None:
    """Return the child of *directory* named *dirname*, compared case-insensitively.

    An exact-case match wins over other spellings.
    """
    if names is None:
        names = list_child_names(directory)

    if dirname in names and (directory / dirname).is_dir():
        return directory / dirname

    wanted = dirname.lower()
    for name in sorted(names):
        if name.lower() == wanted and (directory / name).is_dir():
            return directory / name
    return None


def has_project_root_marker(
    directory: Path,
    *,
    project_suffixes: Sequence[str] = PROJECT_SUFFIXES,
    manifest_filenames: Sequence[str] = MANIFEST_FILENAMES,
    names: Set[str] | None = None,
) -> bool:
    """Return True when *directory* holds an IDE project bundle or a package manifest."""
    if names is None:
        names = list_child_names(directory)

    for name in names:
        if name.startswith("."):
            continue
        if any(name.endswith(suffix) for suffix in project_suffixes):
            return True
    return any(manifest in names for manifest in manifest_filenames)
