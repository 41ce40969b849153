"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "fijos"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: locate and inspect test fixture files"
