"""Tests for fixture lookup, listing and search."""

from __future__ import annotations

from pathlib import Path

import pytest

from fijos.exceptions import ErrorKind, FixtureNotFoundError, FixturesDirectoryNotFoundError
from fijos.resolver import FixtureResolver

FILES: dict[str, str] = {
    "sample.json": '{"a":1}',
    "config.JSON": "{}",
    "bigfish.fountain": "INT. POND",
    "bigfish.fdx": "<xml/>",
    "BigFish-notes.txt": "notes",
    "README": "no extension",
}


@pytest.fixture()
def project(make_project) -> Path:
    root = make_project(files=FILES)
    fixtures = root / "Fixtures"
    (fixtures / "nested").mkdir()
    (fixtures / "nested" / "inner.json").write_text("{}", encoding="utf-8")
    (fixtures / ".hidden.json").write_text("{}", encoding="utf-8")
    (fixtures / "link.json").symlink_to(fixtures / "sample.json")
    return root


@pytest.fixture()
def resolver(project: Path) -> FixtureResolver:
    test_file = project / "tests" / "unit" / "test_thing.py"
    test_file.parent.mkdir(parents=True)
    test_file.write_text("", encoding="utf-8")
    return FixtureResolver(test_file, environ={})


def test_fixtures_directory(resolver: FixtureResolver, project: Path) -> None:
    assert resolver.fixtures_directory() == project / "Fixtures"


def test_get_fixture_by_name_and_extension(resolver: FixtureResolver, project: Path) -> None:
    path = resolver.get_fixture("sample", "json")

    assert path == project / "Fixtures" / "sample.json"
    assert path.read_bytes() == b'{"a":1}'


def test_get_fixture_by_filename(resolver: FixtureResolver) -> None:
    assert resolver.get_fixture("bigfish.fountain").name == "bigfish.fountain"


def test_get_fixture_tolerates_dotted_extension(resolver: FixtureResolver) -> None:
    assert resolver.get_fixture("sample", ".json").name == "sample.json"


def test_get_fixture_resolves_directories_and_links_by_exact_name(resolver: FixtureResolver) -> None:
    assert resolver.get_fixture("nested").is_dir()
    assert resolver.get_fixture("link.json").is_symlink()


def test_get_missing_fixture_raises(resolver: FixtureResolver, project: Path) -> None:
    with pytest.raises(FixtureNotFoundError) as excinfo:
        resolver.get_fixture("nonexistent", "xyz")

    assert excinfo.value.path == project / "Fixtures" / "nonexistent.xyz"
    assert excinfo.value.kind is ErrorKind.FIXTURE_NOT_FOUND
    assert "not found" in str(excinfo.value)


def test_read_helpers(resolver: FixtureResolver) -> None:
    assert resolver.read_bytes("sample", "json") == b'{"a":1}'
    assert resolver.read_text("README") == "no extension"


def test_list_fixtures_excludes_directories_links_and_hidden(resolver: FixtureResolver) -> None:
    ids = [fixture.id for fixture in resolver.list_fixtures()]

    assert sorted(ids) == sorted(FILES)
    assert "nested" not in ids
    assert "link.json" not in ids
    assert ".hidden.json" not in ids


def test_list_fixtures_sorted_by_name(resolver: FixtureResolver) -> None:
    names = [fixture.name for fixture in resolver.list_fixtures()]

    assert names == sorted(names)


def test_list_fixtures_id_invariant(resolver: FixtureResolver) -> None:
    for fixture in resolver.list_fixtures():
        expected = f"{fixture.name}.{fixture.extension}" if fixture.extension else fixture.name
        assert fixture.id == expected
        assert fixture.path.is_file()


def test_extension_filter_is_case_and_dot_insensitive(resolver: FixtureResolver) -> None:
    upper = resolver.list_fixtures("JSON")
    lower = resolver.list_fixtures("json")
    dotted = resolver.list_fixtures(".json")

    assert upper == lower == dotted
    assert [fixture.id for fixture in lower] == ["config.JSON", "sample.json"]


def test_extension_filter_no_match(resolver: FixtureResolver) -> None:
    assert resolver.list_fixtures("pdf") == []


@pytest.mark.parametrize(
    ("pattern", "expected"),
    [
        pytest.param("bigfish", ["BigFish-notes.txt", "bigfish.fdx", "bigfish.fountain"], id="mixed-case-names"),
        pytest.param("FISH", ["BigFish-notes.txt", "bigfish.fdx", "bigfish.fountain"], id="upper-pattern"),
        pytest.param("zzz-no-match", [], id="no-match"),
    ],
)
def test_find_fixtures(resolver: FixtureResolver, pattern: str, expected: list[str]) -> None:
    assert [fixture.id for fixture in resolver.find_fixtures(pattern)] == expected


def test_find_fixtures_empty_pattern_matches_all(resolver: FixtureResolver) -> None:
    assert resolver.find_fixtures("") == resolver.list_fixtures()


def test_find_fixtures_is_subset_of_listing(resolver: FixtureResolver) -> None:
    everything = resolver.list_fixtures()
    for pattern in ("s", "NOTE", "con"):
        expected = [fixture for fixture in everything if pattern.lower() in fixture.name.lower()]
        assert resolver.find_fixtures(pattern) == expected


def test_available_extensions(resolver: FixtureResolver) -> None:
    extensions = resolver.available_extensions()

    assert extensions == ["", "fdx", "fountain", "json", "txt"]
    assert extensions == sorted(set(extensions))


def test_listing_example_with_mixed_case_extensions(make_project, tmp_path: Path) -> None:
    root = make_project("mixed", files={"a.txt": "a", "b.TXT": "b", "c.md": "c"})
    resolver = FixtureResolver(root, environ={})

    assert [fixture.id for fixture in resolver.list_fixtures("txt")] == ["a.txt", "b.TXT"]


def test_operations_propagate_discovery_failure(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("", encoding="utf-8")
    resolver = FixtureResolver(tmp_path, environ={})

    for operation in (
        resolver.fixtures_directory,
        resolver.list_fixtures,
        resolver.available_extensions,
        lambda: resolver.get_fixture("sample.json"),
        lambda: resolver.find_fixtures("x"),
    ):
        with pytest.raises(FixturesDirectoryNotFoundError):
            operation()


def test_repr_names_start(tmp_path: Path) -> None:
    assert str(tmp_path) in repr(FixtureResolver(tmp_path))
