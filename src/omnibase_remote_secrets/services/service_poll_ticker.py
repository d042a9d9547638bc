# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Drift-free periodic ticker for asyncio loops.

Ticks are scheduled from the previous tick's due time, not from when the
consumer got around to waiting again, so slow fetches do not push the
schedule back. Ticks missed entirely (consumer busier than one interval) are
dropped rather than delivered in a burst.

The clock and sleep functions are injectable so tests can drive the ticker
with a manual clock.
"""

from __future__ import annotations

import asyncio
import math
import time
from collections.abc import Awaitable, Callable

from omnibase_remote_secrets.utils import wait_unless_set

Clock = Callable[[], float]
Sleep = Callable[[float], Awaitable[object]]


class ServicePollTicker:
    """Ticker with reset and stop, consumed via ``await ticker.wait()``.

    Coroutine-safe, not thread-safe: ``reset`` and ``stop`` must be called
    from the event loop that awaits ``wait``.
    """

    def __init__(
        self,
        interval_seconds: float,
        *,
        clock: Clock | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        """Start the ticker; the first tick is due one interval from now.

        Raises:
            ValueError: If ``interval_seconds`` is not positive.
        """
        _check_interval(interval_seconds)
        self._clock: Clock = clock or time.monotonic
        self._sleep: Sleep = sleep or asyncio.sleep
        self._interval = interval_seconds
        self._due = self._clock() + interval_seconds
        self._wakeup = asyncio.Event()
        self._stopped = False

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def next_due(self) -> float:
        """Clock reading at which the next tick fires."""
        return self._due

    @property
    def is_stopped(self) -> bool:
        return self._stopped

    def reset(self, interval_seconds: float) -> None:
        """Change the interval; the next tick is one new interval from now.

        Restarts a stopped ticker.
        """
        _check_interval(interval_seconds)
        self._interval = interval_seconds
        self._due = self._clock() + interval_seconds
        self._stopped = False
        self._wakeup.set()

    def stop(self) -> None:
        """Stop ticking; pending and future ``wait`` calls return False."""
        self._stopped = True
        self._wakeup.set()

    async def wait(self) -> bool:
        """Block until the next tick.

        Returns:
            True on a tick, False if the ticker is stopped.
        """
        while not self._stopped:
            delay = self._due - self._clock()
            if delay <= 0:
                self._advance()
                return True
            self._wakeup.clear()
            # A reset or stop interrupts the sleep; the loop re-reads _due.
            await wait_unless_set(self._sleep(delay), self._wakeup)
        return False

    def _advance(self) -> None:
        now = self._clock()
        self._due += self._interval
        if self._due < now:
            missed = math.floor((now - self._due) / self._interval) + 1
            self._due += missed * self._interval


def _check_interval(interval_seconds: float) -> None:
    if not interval_seconds > 0:
        raise ValueError(f"interval_seconds must be positive, got {interval_seconds}")


__all__: list[str] = ["Clock", "ServicePollTicker", "Sleep"]
