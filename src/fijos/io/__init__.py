"""Listing file IO."""

from __future__ import annotations

from .listing_io import dump_listing, write_listing

__all__ = ["dump_listing", "write_listing"]
