"""Typed JSON payload structures for fixture listings."""

from __future__ import annotations

from typing import TypedDict


class FixtureEntry(TypedDict):
    """One fixture in a JSON listing."""

    id: str
    name: str
    extension: str
    path: str


class FixtureListingPayload(TypedDict):
    """Top-level JSON listing written by ``fijos list --json``."""

    schema_version: str
    fixtures_directory: str
    count: int
    fixtures: list[FixtureEntry]
