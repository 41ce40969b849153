"""Core data models for fijos."""

from .fixture import Fixture, normalize_extension, split_filename

__all__ = ["Fixture", "normalize_extension", "split_filename"]
