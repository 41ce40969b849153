"""Shared pytest fixtures for building throwaway project trees."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TypeAlias

import pytest

from fijos.constants.discovery import CI_PRESENCE_VARIABLES, CI_REPOSITORY_PATH_VARIABLES

pytest_plugins = ["fijos.pytest_plugin", "pytester"]

ProjectFactory: TypeAlias = Callable[..., Path]


@pytest.fixture(autouse=True)
def _scrub_ci_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host CI's checkout variables out of discovery."""
    for name in (*CI_REPOSITORY_PATH_VARIABLES, *CI_PRESENCE_VARIABLES, "CI"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def make_project(tmp_path: Path) -> ProjectFactory:
    """Return a factory that lays out a project with a manifest and fixture files."""

    def _make(
        name: str = "project",
        *,
        manifest: str | None = "pyproject.toml",
        fixtures_dirname: str | None = "Fixtures",
        files: dict[str, str] | None = None,
        dirs: Iterable[str] = (),
    ) -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        if manifest is not None:
            (root / manifest).write_text("", encoding="utf-8")
        if fixtures_dirname is not None:
            fixtures = root / fixtures_dirname
            fixtures.mkdir(exist_ok=True)
            for filename, content in (files or {}).items():
                (fixtures / filename).write_text(content, encoding="utf-8")
        for directory in dirs:
            (root / directory).mkdir(parents=True, exist_ok=True)
        return root

    return _make
