"""
RequestDeduplicator - Collapses concurrent identical reads into one request.

While a request for a key is in flight, every other caller for that key
awaits the same task. The key is dropped as soon as the task settles, so
the next call always goes to the network again.
"""

import asyncio
from typing import Any, Awaitable, Callable, TypeVar

from loguru import logger

T = TypeVar("T")


class RequestDeduplicator:
    """
    Deduplicates concurrent async requests.

    Lookup and insertion happen without awaiting, so on a single event loop
    no two callers can both miss the same key.

    Usage:
        dedup = RequestDeduplicator()

        async def fetch_user(uid: str):
            return await dedup.dedupe(
                key=f"getUserByUid:{uid}",
                request_fn=lambda: client.get(f"/users/uid/{uid}"),
            )
    """

    def __init__(self, debug: bool = False):
        self._in_flight: dict[str, asyncio.Task[Any]] = {}
        self._debug = debug
        self._stats = DeduplicatorStats()

    async def dedupe(
        self,
        key: str,
        request_fn: Callable[[], Awaitable[T]],
    ) -> T:
        """
        Execute request with deduplication.

        If a request with the same key is already in flight, wait for and
        return its result (or raise its error) instead of making a new one.

        Args:
            key: Deduplication key, e.g. "getUserByUid:abc123"
            request_fn: Async function to execute if no duplicate exists

        Returns:
            Result from request_fn (either fresh or from in-flight request)
        """
        task = self._in_flight.get(key)
        if task is not None:
            self._stats.deduplicated += 1
            self._log(f"DEDUPE: Waiting for in-flight request: {key[:50]}")
        else:
            self._stats.total += 1
            self._log(f"NEW: Starting request: {key[:50]}")
            task = asyncio.create_task(self._execute_and_cleanup(key, request_fn))
            self._in_flight[key] = task

        # A cancelled waiter must not cancel the request other waiters share
        return await asyncio.shield(task)

    async def _execute_and_cleanup(
        self,
        key: str,
        request_fn: Callable[[], Awaitable[T]],
    ) -> T:
        """Execute request and drop the key before the outcome is published."""
        try:
            return await request_fn()
        finally:
            if self._in_flight.get(key) is asyncio.current_task():
                del self._in_flight[key]
            self._log(f"DONE: Request completed: {key[:50]}")

    def cancel(self, key: str) -> bool:
        """Cancel an in-flight request."""
        task = self._in_flight.pop(key, None)
        if task is None:
            return False
        task.cancel()
        self._log(f"CANCEL: Request cancelled: {key[:50]}")
        return True

    def cancel_all(self) -> int:
        """Cancel all in-flight requests."""
        count = len(self._in_flight)
        for task in self._in_flight.values():
            task.cancel()
        self._in_flight.clear()
        if count:
            self._log(f"CANCEL_ALL: {count} requests cancelled")
        return count

    def get_in_flight_count(self) -> int:
        return len(self._in_flight)

    def get_in_flight_keys(self) -> list[str]:
        """Keys whose request has not settled yet."""
        return list(self._in_flight)

    def get_stats(self) -> "DeduplicatorStats":
        """Counters since construction, with the live pending count."""
        self._stats.in_flight = self.get_in_flight_count()
        return self._stats

    def _log(self, message: str) -> None:
        if self._debug:
            logger.debug(f"[dedupe] {message}")


class DeduplicatorStats:
    """How many calls reached the backend versus joined a pending request."""

    def __init__(self):
        self.total: int = 0  # Underlying requests started
        self.deduplicated: int = 0  # Calls that joined a pending request
        self.in_flight: int = 0  # Keys still pending at the last snapshot

    @property
    def dedup_rate(self) -> float:
        """Share of calls that did not hit the backend."""
        calls = self.total + self.deduplicated
        return self.deduplicated / calls if calls else 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_requests": self.total,
            "deduplicated": self.deduplicated,
            "in_flight": self.in_flight,
            "dedup_rate": f"{self.dedup_rate:.2%}",
        }
