"""Human-readable and JSON output for fixture data."""

from .access_report import render_access_report
from .listing import build_listing_payload, render_fixture_table

__all__ = ["build_listing_payload", "render_access_report", "render_fixture_table"]
