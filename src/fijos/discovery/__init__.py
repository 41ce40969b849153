"""Fixtures directory discovery."""

from __future__ import annotations

from .environment import ci_repository_path, ci_repository_variable, is_ci, is_running_tests
from .locate import find_project_root, resolve_fixtures_directory
from .markers import find_fixtures_subdirectory, has_project_root_marker, list_child_names
from .search import search_fixtures_directory

__all__ = [
    "ci_repository_path",
    "ci_repository_variable",
    "find_fixtures_subdirectory",
    "find_project_root",
    "has_project_root_marker",
    "is_ci",
    "is_running_tests",
    "list_child_names",
    "resolve_fixtures_directory",
    "search_fixtures_directory",
]
