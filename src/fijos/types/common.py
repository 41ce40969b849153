"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from pathlib import Path
from typing import TypeAlias, TypeVar

T = TypeVar("T")

Environment: TypeAlias = Mapping[str, str]
AccessCounts: TypeAlias = dict[str, int]
FixtureOperation: TypeAlias = Callable[[Path], Awaitable[T] | T]
