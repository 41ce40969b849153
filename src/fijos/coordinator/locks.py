"""Per-key mutex for asyncio tasks, usable from several event loops."""

from __future__ import annotations

import asyncio
import threading
from collections import deque


class KeyedLock:
    """A set of named mutexes shared by tasks on one or more event loops.

    Waiters for a key queue up in arrival order. On release the key passes
    straight to the oldest waiter, which is woken on its own loop, so threads
    each driving ``asyncio.run`` can share one lock. Keys that are neither
    held nor awaited cost nothing. There is no timeout; wrap ``acquire`` in
    ``asyncio.timeout`` if needed.
    """

    def __init__(self) -> None:
        self._mutex = threading.Lock()
        self._held: set[str] = set()
        self._waiters: dict[str, deque[asyncio.Future[None]]] = {}

    def locked(self, key: str) -> bool:
        with self._mutex:
            return key in self._held

    def held(self) -> frozenset[str]:
        with self._mutex:
            return frozenset(self._held)

    async def acquire(self, key: str) -> None:
        with self._mutex:
            if key not in self._held:
                self._held.add(key)
                return
            future: asyncio.Future[None] = asyncio.get_running_loop().create_future()
            self._waiters.setdefault(key, deque()).append(future)

        try:
            await future
        except asyncio.CancelledError:
            with self._mutex:
                waiters = self._waiters.get(key)
                owned = waiters is None or future not in waiters
                if not owned:
                    waiters.remove(future)
                    if not waiters:
                        del self._waiters[key]
            # Ownership arrived just before cancellation; pass it on.
            if owned:
                self.release(key)
            raise

    def release(self, key: str) -> None:
        with self._mutex:
            future = self._next_waiter(key)
            if future is None:
                self._held.discard(key)
                return
        self._hand_over(key, future)

    def release_all(self) -> None:
        """Drop every held key and hand each contended key to its next waiter."""
        with self._mutex:
            self._held.clear()
            handoffs: list[tuple[str, asyncio.Future[None]]] = []
            for key in list(self._waiters):
                future = self._next_waiter(key)
                if future is not None:
                    self._held.add(key)
                    handoffs.append((key, future))
        for key, future in handoffs:
            self._hand_over(key, future)

    def _next_waiter(self, key: str) -> asyncio.Future[None] | None:
        # Caller holds the mutex; the key stays held for the returned waiter.
        waiters = self._waiters.get(key)
        if not waiters:
            return None
        future = waiters.popleft()
        if not waiters:
            del self._waiters[key]
        return future

    def _hand_over(self, key: str, future: asyncio.Future[None]) -> None:
        try:
            future.get_loop().call_soon_threadsafe(_wake, future)
        except RuntimeError:
            # The waiter's loop is closed and will never resume it.
            self.release(key)


def _wake(future: asyncio.Future[None]) -> None:
    if not future.done():
        future.set_result(None)
