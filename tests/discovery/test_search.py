"""Tests for the breadth-first Fixtures search."""

from __future__ import annotations

from pathlib import Path

from fijos.discovery import search_fixtures_directory


def test_search_finds_nested_fixtures(tmp_path: Path) -> None:
    target = tmp_path / "Tests" / "AppTests" / "Fixtures"
    target.mkdir(parents=True)

    assert search_fixtures_directory(tmp_path) == target


def test_search_prefers_shallowest_match(tmp_path: Path) -> None:
    deep = tmp_path / "a" / "b" / "Fixtures"
    shallow = tmp_path / "z" / "fixtures"
    deep.mkdir(parents=True)
    shallow.mkdir(parents=True)

    assert search_fixtures_directory(tmp_path) == shallow


def test_search_is_stable_between_siblings(tmp_path: Path) -> None:
    (tmp_path / "b" / "Fixtures").mkdir(parents=True)
    (tmp_path / "a" / "Fixtures").mkdir(parents=True)

    assert search_fixtures_directory(tmp_path) == tmp_path / "a" / "Fixtures"


def test_search_skips_hidden_and_dependency_directories(tmp_path: Path) -> None:
    for skipped in (".git", "node_modules", ".build", "DerivedData", "__pycache__"):
        (tmp_path / skipped / "Fixtures").mkdir(parents=True)

    assert search_fixtures_directory(tmp_path) is None


def test_search_honours_custom_skip_list(tmp_path: Path) -> None:
    (tmp_path / "vendor" / "Fixtures").mkdir(parents=True)

    assert search_fixtures_directory(tmp_path) == tmp_path / "vendor" / "Fixtures"
    assert search_fixtures_directory(tmp_path, skip_dirs={"vendor"}) is None


def test_search_does_not_follow_symlinks(tmp_path: Path) -> None:
    outside = tmp_path / "outside"
    (outside / "Fixtures").mkdir(parents=True)
    root = tmp_path / "root"
    root.mkdir()
    (root / "linked").symlink_to(outside, target_is_directory=True)

    assert search_fixtures_directory(root) is None


def test_search_respects_depth_bound(tmp_path: Path) -> None:
    (tmp_path / "a" / "b" / "c" / "Fixtures").mkdir(parents=True)

    assert search_fixtures_directory(tmp_path, max_depth=3) is None
    assert search_fixtures_directory(tmp_path, max_depth=4) == tmp_path / "a" / "b" / "c" / "Fixtures"


def test_search_never_returns_root(tmp_path: Path) -> None:
    root = tmp_path / "Fixtures"
    root.mkdir()

    assert search_fixtures_directory(root) is None
