# ABOUTME: Per-source request throttling with a refilling reservoir and minimum spacing.
# ABOUTME: One RateLimitedScheduler per external source, shared by every query in the process.

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class SourcePolicy:
    """Capacity policy for one external source.

    reservoir: dispatches allowed per refill window.
    refresh_interval: seconds between refills back to ``reservoir``.
    min_interval: minimum seconds between any two dispatches.
    """

    reservoir: int = 30
    refresh_interval: float = 60.0
    min_interval: float = 1.2

    def __post_init__(self) -> None:
        if self.reservoir <= 0:
            raise ValueError(f"reservoir must be positive, got {self.reservoir}")
        if self.refresh_interval <= 0:
            raise ValueError(
                f"refresh_interval must be positive, got {self.refresh_interval}"
            )
        if self.min_interval < 0:
            raise ValueError(f"min_interval must be non-negative, got {self.min_interval}")


class RateLimitedScheduler:
    """Delays task dispatch to respect a source's SourcePolicy.

    Tasks are dispatched one at a time in arrival order. A dispatch needs both
    a reservoir slot and ``min_interval`` elapsed since the previous dispatch;
    callers suspend until then. The reservoir refills to capacity on fixed
    intervals counted from construction, independently of when tasks arrive.
    Nothing is ever rejected and the task's own exceptions reach the caller.
    """

    def __init__(
        self,
        name: str,
        policy: SourcePolicy | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.name = name
        self.policy = policy or SourcePolicy()
        self._clock = clock
        self._sleep = sleep
        self._remaining = self.policy.reservoir
        self._next_refill = clock() + self.policy.refresh_interval
        self._last_dispatch: float | None = None
        self._dispatch_lock: asyncio.Lock | None = None
        self._lock_loop: asyncio.AbstractEventLoop | None = None

    @property
    def remaining(self) -> int:
        """Reservoir slots left in the current window."""
        self._refill(self._clock())
        return self._remaining

    async def schedule(self, task: Callable[[], Awaitable[T]]) -> T:
        """Run ``task`` once the policy allows a dispatch and return its result."""
        # asyncio.Lock wakes waiters in FIFO order, which gives per-source ordering.
        async with self._lock_for_running_loop():
            await self._wait_for_slot()
        return await task()

    def _lock_for_running_loop(self) -> asyncio.Lock:
        """Dispatch lock for the current event loop.

        The reservoir outlives any one loop (the CLI runs each lookup under its
        own asyncio.run), but an asyncio.Lock may only be used on one loop.
        """
        loop = asyncio.get_running_loop()
        if self._dispatch_lock is None or self._lock_loop is not loop:
            self._dispatch_lock = asyncio.Lock()
            self._lock_loop = loop
        return self._dispatch_lock

    async def _wait_for_slot(self) -> None:
        while True:
            now = self._clock()
            self._refill(now)

            wait = 0.0
            if self._last_dispatch is not None:
                wait = self._last_dispatch + self.policy.min_interval - now
            if self._remaining <= 0:
                wait = max(wait, self._next_refill - now)

            if wait <= 0:
                self._remaining -= 1
                self._last_dispatch = now
                return

            logger.debug(
                "%s: waiting %.3fs before dispatch (%d/%d left in window)",
                self.name,
                wait,
                self._remaining,
                self.policy.reservoir,
            )
            await self._sleep(wait)

    def _refill(self, now: float) -> None:
        """Restore the reservoir if one or more refill boundaries have passed."""
        if now < self._next_refill:
            return
        interval = self.policy.refresh_interval
        missed = int((now - self._next_refill) // interval) + 1
        self._next_refill += missed * interval
        self._remaining = self.policy.reservoir
