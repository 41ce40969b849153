"""Fixtures directory resolution from a starting path.

Strategies run in order of decreasing confidence:

1. the repository root published by a CI system (``GITHUB_WORKSPACE`` etc.),
2. a bounded walk up the ancestors of the starting path, stopping at the first
   directory that carries a project-root marker,
3. a breadth-first search below that project root when it has no Fixtures
   child of its own.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fijos.config import FijosConfig
from fijos.constants.discovery import (
    STRATEGY_ANCESTOR_WALK,
    STRATEGY_CI_ENVIRONMENT,
    STRATEGY_RECURSIVE_SEARCH,
)
from fijos.discovery.environment import ci_repository_path, ci_repository_variable
from fijos.discovery.markers import find_fixtures_subdirectory, has_project_root_marker, list_child_names
from fijos.discovery.search import search_fixtures_directory
from fijos.exceptions import FixturesDirectoryNotFoundError
from fijos.types import Environment

logger = logging.getLogger(__name__)


def resolve_fixtures_directory(
    start: Path | str,
    *,
    config: FijosConfig | None = None,
    environ: Environment | None = None,
) -> Path:
    """Return the Fixtures directory for the project containing *start*.

    Raises:
        FixturesDirectoryNotFoundError: when every strategy comes up empty.
    """
    config = config or FijosConfig()
    start = Path(start).expanduser().absolute()
    strategies: list[str] = []

    if config.use_ci_environment:
        found = _from_ci_environment(config, environ, strategies)
        if found is not None:
            return found

    strategies.append(STRATEGY_ANCESTOR_WALK)
    current = _start_directory(start)
    for _ in range(config.max_ascent_depth):
        names = list_child_names(current)
        fixtures = find_fixtures_subdirectory(current, config.fixtures_dirname, names=names)
        is_root = _is_project_root(current, config, names)
        if is_root and fixtures is not None:
            logger.debug("Found %s at project root %s", fixtures.name, current)
            return fixtures
        if is_root:
            strategies.append(f"{STRATEGY_RECURSIVE_SEARCH}:{current}")
            found = _search(current, config)
            if found is not None:
                return found
            raise FixturesDirectoryNotFoundError(
                start,
                search_depth=config.max_ascent_depth,
                strategies=tuple(strategies),
                root=current,
            )
        if current.parent == current:
            break
        current = current.parent

    raise FixturesDirectoryNotFoundError(
        start,
        search_depth=config.max_ascent_depth,
        strategies=tuple(strategies),
    )


def find_project_root(start: Path | str, *, config: FijosConfig | None = None) -> Path | None:
    """Return the nearest ancestor of *start* carrying a project-root marker.

    The walk is bounded by ``max_ascent_depth`` and ignores CI variables.
    """
    config = config or FijosConfig()
    current = _start_directory(Path(start).expanduser().absolute())
    for _ in range(config.max_ascent_depth):
        if _is_project_root(current, config, list_child_names(current)):
            return current
        if current.parent == current:
            break
        current = current.parent
    return None


def _start_directory(start: Path) -> Path:
    return start if start.is_dir() else start.parent


def _is_project_root(directory: Path, config: FijosConfig, names: frozenset[str]) -> bool:
    return has_project_root_marker(
        directory,
        project_suffixes=config.project_suffixes,
        manifest_filenames=config.manifest_filenames,
        names=names,
    )


def _from_ci_environment(
    config: FijosConfig,
    environ: Environment | None,
    strategies: list[str],
) -> Path | None:
    ci_root = ci_repository_path(environ, config.ci_path_variables)
    if ci_root is None:
        return None

    variable = ci_repository_variable(environ, config.ci_path_variables)
    strategies.append(f"{STRATEGY_CI_ENVIRONMENT}:{variable}")
    if not ci_root.is_dir():
        logger.debug("%s points at %s, which is not a directory", variable, ci_root)
        return None

    fixtures = find_fixtures_subdirectory(ci_root, config.fixtures_dirname)
    if fixtures is not None:
        logger.debug("Found %s via %s", fixtures, variable)
        return fixtures

    strategies.append(f"{STRATEGY_RECURSIVE_SEARCH}:{ci_root}")
    return _search(ci_root, config)


def _search(root: Path, config: FijosConfig) -> Path | None:
    return search_fixtures_directory(
        root,
        dirname=config.fixtures_dirname,
        skip_dirs=config.skip_dirs,
        max_depth=config.max_search_depth,
    )
