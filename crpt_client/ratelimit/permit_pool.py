"""
Fixed-window permit pool for outbound document submissions.
"""

import asyncio
import math
import threading
from typing import Optional

from shared.logging import get_logger
from shared.errors import ConfigurationError


class PermitPool:
    """Admits at most ``capacity`` operations per window.

    ``try_acquire`` never waits: when the pool is empty the caller is told so
    immediately and decides itself whether to retry. The window is reset by
    :class:`PermitReplenisher`, not computed per request.
    """

    def __init__(self, capacity: int, window_seconds: float):
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity <= 0:
            raise ConfigurationError(
                "Request limit must be positive",
                details={"capacity": capacity}
            )
        if isinstance(window_seconds, bool) or not isinstance(window_seconds, (int, float)) \
                or not math.isfinite(window_seconds) or window_seconds <= 0:
            raise ConfigurationError(
                "Rate limit window must be a positive finite number of seconds",
                details={"window_seconds": window_seconds}
            )

        self._capacity = capacity
        self._window_seconds = float(window_seconds)
        self._available = capacity
        self._lock = threading.Lock()
        self.logger = get_logger("crpt.permits")

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def window_seconds(self) -> float:
        return self._window_seconds

    @property
    def available(self) -> int:
        with self._lock:
            return self._available

    def try_acquire(self) -> bool:
        """Take one permit if any is left in the current window."""
        with self._lock:
            if self._available == 0:
                return False
            self._available -= 1
            return True

    def release(self) -> None:
        """Return one permit, never exceeding capacity."""
        with self._lock:
            if self._available < self._capacity:
                self._available += 1

    def reset(self) -> None:
        """Refill the pool to full capacity."""
        with self._lock:
            self._available = self._capacity
        self.logger.debug("Permit window reset", capacity=self._capacity)


class PermitReplenisher:
    """Background task resetting a :class:`PermitPool` once per window."""

    def __init__(self, pool: PermitPool):
        self.pool = pool
        self.logger = get_logger("crpt.permits")
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start the replenishment loop on the running event loop."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._replenish_loop())
        self.logger.info(
            "Permit replenisher started",
            capacity=self.pool.capacity,
            window_seconds=self.pool.window_seconds
        )

    async def stop(self) -> None:
        """Cancel the replenishment loop and wait for it to finish."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        # wait() does not raise the task's CancelledError; a cancel of the caller still does
        await asyncio.wait([task])
        self.logger.info("Permit replenisher stopped")

    async def _replenish_loop(self):
        """Reset the pool at a fixed rate."""
        loop = asyncio.get_running_loop()
        period = self.pool.window_seconds
        next_tick = loop.time() + period
        while True:
            await asyncio.sleep(max(0.0, next_tick - loop.time()))
            self.pool.reset()
            next_tick += period
            # Skip ticks missed while the loop was blocked; reset is idempotent
            now = loop.time()
            if next_tick <= now:
                next_tick = now + period
