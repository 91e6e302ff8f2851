"""Request pacing for the SEC fair-access limit.

The SEC allows 10 requests per second per client. ``RateGovernor`` is a token
bucket that starts full and gets one token back every ``period / capacity``
seconds, so a burst of ``capacity`` requests goes out at once and later
requests are spread evenly instead of bunching at window boundaries.
"""

import asyncio
import logging
import weakref
from collections import deque

logger = logging.getLogger(__name__)


def _stop(task):
    if task is None or task.done():
        return
    loop = task.get_loop()
    if not loop.is_closed():
        loop.call_soon_threadsafe(task.cancel)


async def _replenish(ref, interval):
    # Holds only a weak reference so an abandoned governor can be collected.
    while True:
        await asyncio.sleep(interval)
        governor = ref()
        if governor is None:
            return
        governor._add_token()
        del governor


class RateGovernor:
    """Token-bucket limiter shared by every endpoint of a client.

    Callers ``await acquire()`` before each request and never hand tokens
    back. A background task adds one token per ``refill_interval`` and passes
    it straight to a suspended caller when there is one.

    The governor can be built outside an event loop. Its replenisher starts
    on the first ``acquire()`` in the running loop; until then the bucket is
    full, so no token is owed.
    """

    def __init__(self, capacity: int = 10, period: float = 1.0):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        if period <= 0:
            raise ValueError(f"period must be positive, got {period}")

        self.capacity = capacity
        self.period = period
        self.refill_interval = period / capacity

        self._tokens = capacity
        self._waiters = deque()
        self._task = None
        self._loop = None
        self._closed = False

    @property
    def available_tokens(self) -> int:
        return self._tokens

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_replenisher(self):
        loop = asyncio.get_running_loop()
        if self._task is not None and not self._task.done() and self._loop is loop:
            return

        if self._loop is not loop:
            # Futures created on another loop can never be resolved from this one.
            _stop(self._task)
            self._waiters.clear()

        self._loop = loop
        self._task = loop.create_task(_replenish(weakref.ref(self), self.refill_interval))
        weakref.finalize(self, _stop, self._task)
        logger.debug(f"Started replenisher: {self.capacity} tokens per {self.period}s")

    def _add_token(self):
        while self._waiters:
            waiter = self._waiters.popleft()
            if not waiter.done():
                waiter.set_result(None)
                return
        if self._tokens < self.capacity:
            self._tokens += 1

    async def acquire(self, timeout: float | None = None) -> None:
        """Take one token, waiting for the replenisher if the bucket is empty.

        With ``timeout`` set, raises ``TimeoutError`` if no token arrives in
        time. A token granted to a caller that is cancelled at the same moment
        is spent.
        """
        if self._closed:
            raise RuntimeError("RateGovernor is closed")
        self._ensure_replenisher()

        if self._tokens > 0:
            self._tokens -= 1
            return

        waiter = self._loop.create_future()
        self._waiters.append(waiter)
        try:
            if timeout is None:
                await waiter
            else:
                await asyncio.wait_for(waiter, timeout)
        except asyncio.TimeoutError:
            raise TimeoutError(f"No rate-limit token within {timeout}s") from None
        finally:
            if waiter in self._waiters:
                self._waiters.remove(waiter)

    def close(self):
        """Stop the replenisher and fail anyone still waiting."""
        if self._closed:
            return
        self._closed = True
        _stop(self._task)
        while self._waiters:
            waiter = self._waiters.popleft()
            if not waiter.done():
                waiter.set_exception(RuntimeError("RateGovernor is closed"))

    async def __aenter__(self):
        await self.acquire()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return None
