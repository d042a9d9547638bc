# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Race an awaitable against an ``asyncio.Event``.

Every blocking point of the watch loops (ticker wait, queue put, queue get)
must give up as soon as the shutdown event fires. ``wait_unless_set`` is the
single place that implements that "operation or shutdown" select.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

T = TypeVar("T")


async def wait_unless_set(
    awaitable: Awaitable[T],
    event: asyncio.Event,
) -> tuple[bool, T | None]:
    """Await ``awaitable`` unless ``event`` is set first.

    If the event is already set the awaitable is never started. If both
    finish in the same loop iteration the event wins: callers treat the
    operation as abandoned, which for a queue put or get means the item is
    dropped.

    Args:
        awaitable: Coroutine or future to run.
        event: Event that cancels the wait when set.

    Returns:
        ``(True, result)`` when the awaitable completed first,
        ``(False, None)`` when the event fired first.

    Raises:
        Exception: Whatever the awaitable raised, when it finished first.
    """
    if event.is_set():
        if asyncio.iscoroutine(awaitable):
            awaitable.close()
        return False, None

    operation: asyncio.Future[T] = asyncio.ensure_future(awaitable)
    stopper = asyncio.ensure_future(event.wait())
    try:
        await asyncio.wait({operation, stopper}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        for task in (operation, stopper):
            if not task.done():
                task.cancel()
        # Reap both so a cancelled caller never leaves orphaned tasks behind.
        await asyncio.gather(operation, stopper, return_exceptions=True)

    if event.is_set() or operation.cancelled():
        return False, None
    return True, operation.result()


__all__: list[str] = ["wait_unless_set"]
