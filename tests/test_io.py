"""Tests for listing serialization and atomic listing writes."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from fijos.io import dump_listing, write_listing
from fijos.model import Fixture
from fijos.reporting import build_listing_payload


@pytest.fixture()
def payload(tmp_path: Path):
    fixtures = [Fixture.from_path(tmp_path / "b.json"), Fixture.from_path(tmp_path / "a.txt")]
    return build_listing_payload(tmp_path, fixtures)


def test_dump_listing_is_sorted_and_newline_terminated(payload) -> None:
    text = dump_listing(payload)

    assert text.endswith("}\n")
    assert text.startswith('{\n  "count": 2')
    assert json.loads(text) == payload


def test_write_listing_creates_parent_directories(tmp_path: Path, payload) -> None:
    out_path = tmp_path / "nested" / "listing.json"

    write_listing(out_path, payload)

    assert out_path.read_text(encoding="utf-8") == dump_listing(payload)
    assert [item.name for item in out_path.parent.iterdir()] == ["listing.json"]


def test_unencodable_listing_keeps_previous_file(tmp_path: Path, payload) -> None:
    out_path = tmp_path / "listing.json"
    write_listing(out_path, payload)
    previous = out_path.read_text(encoding="utf-8")

    broken = dict(payload, fixtures=[{"bad": object()}])
    with pytest.raises(TypeError):
        write_listing(out_path, broken)

    assert out_path.read_text(encoding="utf-8") == previous
    assert not [item for item in tmp_path.iterdir() if item.name.startswith(".tmp-")]


def test_failed_rename_removes_temp_file(tmp_path: Path, payload, monkeypatch: pytest.MonkeyPatch) -> None:
    out_path = tmp_path / "listing.json"

    def refuse(src: str, dst: Path) -> None:
        raise PermissionError(dst)

    monkeypatch.setattr("fijos.io.listing_io.os.replace", refuse)

    with pytest.raises(PermissionError):
        write_listing(out_path, payload)

    assert list(tmp_path.iterdir()) == []
