"""Fixture listings as JSON payloads and plain-text tables."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from fijos.constants.reporting import LISTING_SCHEMA_VERSION
from fijos.model import Fixture
from fijos.types import FixtureListingPayload


def build_listing_payload(directory: Path, fixtures: Sequence[Fixture]) -> FixtureListingPayload:
    return {
        "schema_version": LISTING_SCHEMA_VERSION,
        "fixtures_directory": str(directory),
        "count": len(fixtures),
        "fixtures": [fixture.to_dict() for fixture in fixtures],
    }


def render_fixture_table(fixtures: Sequence[Fixture]) -> str:
    """Render one fixture per line as ``id`` padded to the widest id, then the extension."""
    if not fixtures:
        return "No fixtures found."
    width = max(len(fixture.id) for fixture in fixtures)
    lines = [f"{fixture.id:<{width}}  {fixture.extension or '-'}" for fixture in fixtures]
    lines.append(f"{len(fixtures)} fixture(s)")
    return "\n".join(lines)
