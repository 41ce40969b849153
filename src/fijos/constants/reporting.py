"""Constants for the access report table and JSON listings."""

from __future__ import annotations

ACCESS_REPORT_TITLE: str = "Fixture Access Report"
ACCESS_REPORT_EMPTY: str = f"{ACCESS_REPORT_TITLE}: No fixtures accessed"
FIXTURE_COLUMN_WIDTH: int = 40
ACCESSES_COLUMN_WIDTH: int = 10
ELLIPSIS_SUFFIX: str = "..."
RULE_CHAR: str = "━"
RULE_WIDTH: int = 50

LISTING_SCHEMA_VERSION: str = "1.0.0"
LISTING_TEMP_PREFIX: str = ".tmp-"
LISTING_TEMP_SUFFIX: str = ".json"
