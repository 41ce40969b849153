"""Configuration loading and normalization for fixture discovery."""

from __future__ import annotations

from fijos.config.loader import load_config
from fijos.config.model import FijosConfig

__all__ = ["FijosConfig", "load_config"]
