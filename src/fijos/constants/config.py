"""Configuration filename and allowed keys."""

from __future__ import annotations

CONFIG_FILENAME: str = "fijos.yaml"

INT_CONFIG_KEYS: frozenset[str] = frozenset({"max_ascent_depth", "max_search_depth"})
STRING_LIST_CONFIG_KEYS: frozenset[str] = frozenset(
    {"project_suffixes", "manifest_filenames", "skip_dirs", "ci_path_variables"}
)
BOOL_CONFIG_KEYS: frozenset[str] = frozenset({"use_ci_environment"})
STRING_CONFIG_KEYS: frozenset[str] = frozenset({"fixtures_dirname"})

ALLOWED_CONFIG_KEYS: frozenset[str] = INT_CONFIG_KEYS | STRING_LIST_CONFIG_KEYS | BOOL_CONFIG_KEYS | STRING_CONFIG_KEYS
