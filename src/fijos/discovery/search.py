"""Breadth-first fallback search for a Fixtures directory below a root."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Collection
from pathlib import Path

from fijos.constants.discovery import FIXTURES_DIRNAME, MAX_SEARCH_DEPTH, SKIP_DIRS

logger = logging.getLogger(__name__)


def search_fixtures_directory(
    root: Path,
    *,
    dirname: str = FIXTURES_DIRNAME,
    skip_dirs: Collection[str] = SKIP_DIRS,
    max_depth: int = MAX_SEARCH_DEPTH,
) -> Path | None:
    """Return the shallowest directory below *root* named *dirname* (case-insensitive).

    Hidden entries, names in *skip_dirs* and symlinked directories are never
    entered. Siblings are visited in sorted order so the result is stable.
    """
    wanted = dirname.lower()
    queue: deque[tuple[Path, int]] = deque([(root, 0)])

    while queue:
        directory, depth = queue.popleft()
        if depth >= max_depth:
            continue
        try:
            children = sorted(directory.iterdir())
        except OSError as exc:
            logger.debug("Skipping unreadable directory %s: %s", directory, exc)
            continue

        for child in children:
            if child.name.startswith(".") or child.name in skip_dirs:
                continue
            if child.is_symlink() or not child.is_dir():
                continue
            if child.name.lower() == wanted:
                logger.debug("Recursive search found %s below %s", child, root)
                return child
            queue.append((child, depth + 1))

    return None
