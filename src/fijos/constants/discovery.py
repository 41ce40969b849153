"""Constants for Fixtures directory discovery and CI environment probing."""

from __future__ import annotations

FIXTURES_DIRNAME: str = "Fixtures"
MAX_ASCENT_DEPTH: int = 10
MAX_SEARCH_DEPTH: int = 8

# IDE project bundles are directories whose names end with one of these suffixes.
PROJECT_SUFFIXES: tuple[str, ...] = (".xcodeproj", ".xcworkspace")
MANIFEST_FILENAMES: tuple[str, ...] = (
    "Package.swift",
    "pyproject.toml",
    "setup.py",
    "setup.cfg",
)

SKIP_DIRS: frozenset[str] = frozenset(
    {
        ".build",
        ".git",
        ".hg",
        ".mypy_cache",
        ".pytest_cache",
        ".svn",
        ".swiftpm",
        ".tox",
        ".venv",
        "Carthage",
        "DerivedData",
        "Pods",
        "__pycache__",
        "build",
        "dist",
        "node_modules",
        "site-packages",
        "venv",
    }
)

# Checked in priority order; the first non-empty value wins.
CI_REPOSITORY_PATH_VARIABLES: tuple[str, ...] = (
    "CI_PRIMARY_REPOSITORY_PATH",
    "GITHUB_WORKSPACE",
    "CI_PROJECT_DIR",
    "CIRCLE_WORKING_DIRECTORY",
    "WORKSPACE",
    "BUILDKITE_BUILD_CHECKOUT_PATH",
    "TRAVIS_BUILD_DIR",
)

CI_FLAG_VARIABLE: str = "CI"
CI_FLAG_TRUE_VALUES: frozenset[str] = frozenset({"true", "1"})
CI_PRESENCE_VARIABLES: tuple[str, ...] = (
    "GITHUB_ACTIONS",
    "CIRCLECI",
    "JENKINS_HOME",
    "BUILDKITE",
    "TRAVIS",
    "GITLAB_CI",
)

TEST_RUNNER_VARIABLES: tuple[str, ...] = ("PYTEST_CURRENT_TEST", "PYTEST_XDIST_WORKER")

STRATEGY_CI_ENVIRONMENT: str = "ci-environment"
STRATEGY_ANCESTOR_WALK: str = "ancestor-walk"
STRATEGY_RECURSIVE_SEARCH: str = "recursive-search"
