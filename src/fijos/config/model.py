"""Config data model for fixture discovery."""

from __future__ import annotations

from dataclasses import dataclass

from fijos.constants.discovery import (
    CI_REPOSITORY_PATH_VARIABLES,
    FIXTURES_DIRNAME,
    MANIFEST_FILENAMES,
    MAX_ASCENT_DEPTH,
    MAX_SEARCH_DEPTH,
    PROJECT_SUFFIXES,
    SKIP_DIRS,
)


@dataclass(frozen=True)
class FijosConfig:
    """Resolved discovery config."""

    fixtures_dirname: str = FIXTURES_DIRNAME
    max_ascent_depth: int = MAX_ASCENT_DEPTH
    max_search_depth: int = MAX_SEARCH_DEPTH
    project_suffixes: tuple[str, ...] = PROJECT_SUFFIXES
    manifest_filenames: tuple[str, ...] = MANIFEST_FILENAMES
    skip_dirs: frozenset[str] = SKIP_DIRS
    ci_path_variables: tuple[str, ...] = CI_REPOSITORY_PATH_VARIABLES
    use_ci_environment: bool = True
