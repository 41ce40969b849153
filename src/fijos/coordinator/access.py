"""Exclusive, cached and counted fixture access for concurrent async tests."""

from __future__ import annotations

import inspect
import logging
import threading
from collections import Counter
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TextIO, TypeVar

from fijos.coordinator.locks import KeyedLock
from fijos.coordinator.scope import ResourceScope, null_resource_scope
from fijos.reporting import render_access_report
from fijos.resolver import FixtureResolver
from fijos.types import AccessCounts, FixtureOperation

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AccessCoordinator:
    """Serialize access to same-named fixtures and memoize their paths.

    Build one coordinator per test session and hand it to the tests that need
    it. It may be shared between threads that each run their own event loop;
    the path cache and counters sit behind one mutex, and the per-fixture
    locks wake waiters on whichever loop they are parked on.

    Exclusivity is an in-process convention: only callers going through the
    same coordinator are kept apart, and no OS-level file locks are taken.
    """

    def __init__(
        self,
        resolver: FixtureResolver,
        *,
        resource_scope: ResourceScope = null_resource_scope,
    ) -> None:
        self.resolver = resolver
        self._resource_scope = resource_scope
        self._locks = KeyedLock()
        self._state_lock = threading.Lock()
        self._resolved: dict[str, Path] = {}
        self._access_counts: Counter[str] = Counter()

    @asynccontextmanager
    async def exclusive_access(self, fixture: str) -> AsyncIterator[Path]:
        """Hold the lock for *fixture* and yield its resolved path.

        The lock is released on exit whether the body, or path resolution
        itself, raised.
        """
        await self._locks.acquire(fixture)
        try:
            with self._state_lock:
                self._access_counts[fixture] += 1
            path = self._cached_path(fixture)
            yield path
        finally:
            self._locks.release(fixture)

    async def with_exclusive_access(self, fixture: str, operation: FixtureOperation[T]) -> T:
        """Run ``operation(path)`` while holding the lock for *fixture*.

        *operation* may be a plain function or a coroutine function.
        """
        async with self.exclusive_access(fixture) as path:
            return await _call(operation, path)

    async def with_scoped_access(self, fixture: str, operation: FixtureOperation[T]) -> T:
        """Like :meth:`with_exclusive_access`, inside the configured resource scope."""
        async with self.exclusive_access(fixture) as path:
            with self._resource_scope(path):
                return await _call(operation, path)

    def is_locked(self, fixture: str) -> bool:
        return self._locks.locked(fixture)

    def release_all_locks(self) -> None:
        """Forget every held lock.

        Meant for cleanup between suites; a body still running keeps going
        without exclusivity.
        """
        held = self._locks.held()
        if held:
            logger.warning("Force-releasing %d fixture locks: %s", len(held), ", ".join(sorted(held)))
        self._locks.release_all()

    def clear_cache(self) -> None:
        with self._state_lock:
            self._resolved.clear()

    def preload_fixtures(self, names: Iterable[str]) -> None:
        """Resolve and cache each fixture filename in *names*.

        Raises:
            FixtureNotFoundError: for the first name that does not exist.
        """
        for name in names:
            self._cached_path(name)

    def preload_all_fixtures(self) -> None:
        fixtures = self.resolver.list_fixtures()
        with self._state_lock:
            self._resolved.update((fixture.id, fixture.path) for fixture in fixtures)
        logger.debug("Preloaded %d fixture paths", len(fixtures))

    def access_count(self, fixture: str) -> int:
        with self._state_lock:
            return self._access_counts[fixture]

    def access_counts(self) -> AccessCounts:
        with self._state_lock:
            return dict(self._access_counts)

    def reset_statistics(self) -> None:
        with self._state_lock:
            self._access_counts.clear()

    def access_report(self) -> str:
        return render_access_report(self.access_counts())

    def print_access_report(self, file: TextIO | None = None) -> None:
        print(self.access_report(), file=file)

    def _cached_path(self, fixture: str) -> Path:
        with self._state_lock:
            cached = self._resolved.get(fixture)
        if cached is not None:
            return cached
        path = self.resolver.get_fixture(fixture)
        with self._state_lock:
            self._resolved[fixture] = path
        return path


async def _call(operation: FixtureOperation[T], path: Path) -> T:
    result = operation(path)
    if inspect.isawaitable(result):
        return await result
    return result
