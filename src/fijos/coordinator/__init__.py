"""Serialized, cached access to fixtures for concurrent tests."""

from __future__ import annotations

from .access import AccessCoordinator
from .locks import KeyedLock
from .scope import ResourceScope, null_resource_scope

__all__ = ["AccessCoordinator", "KeyedLock", "ResourceScope", "null_resource_scope"]
