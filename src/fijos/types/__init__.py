"""Shared type aliases for fijos."""

from .common import AccessCounts, Environment, FixtureOperation
from .reporting import FixtureEntry, FixtureListingPayload

__all__ = [
    "AccessCounts",
    "Environment",
    "FixtureEntry",
    "FixtureListingPayload",
    "FixtureOperation",
]
