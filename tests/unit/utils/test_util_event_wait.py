# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for wait_unless_set."""

from __future__ import annotations

import asyncio

import pytest

from omnibase_remote_secrets.utils import wait_unless_set


class TestWaitUnlessSet:
    @pytest.mark.asyncio
    async def test_operation_completes(self) -> None:
        event = asyncio.Event()

        async def operation() -> str:
            return "done"

        assert await wait_unless_set(operation(), event) == (True, "done")

    @pytest.mark.asyncio
    async def test_already_set_never_starts_operation(self) -> None:
        event = asyncio.Event()
        event.set()
        started = False

        async def operation() -> None:
            nonlocal started
            started = True

        assert await wait_unless_set(operation(), event) == (False, None)
        assert not started

    @pytest.mark.asyncio
    async def test_event_interrupts_blocked_operation(self) -> None:
        event = asyncio.Event()
        queue: asyncio.Queue[int] = asyncio.Queue()

        waiter = asyncio.create_task(wait_unless_set(queue.get(), event))
        await asyncio.sleep(0)
        event.set()

        assert await asyncio.wait_for(waiter, timeout=1) == (False, None)
        # The abandoned get must not have consumed a later item.
        queue.put_nowait(1)
        assert queue.get_nowait() == 1

    @pytest.mark.asyncio
    async def test_operation_error_propagates(self) -> None:
        event = asyncio.Event()

        async def operation() -> None:
            raise LookupError("missing")

        with pytest.raises(LookupError, match="missing"):
            await wait_unless_set(operation(), event)

    @pytest.mark.asyncio
    async def test_full_queue_put_abandoned_on_event(self) -> None:
        event = asyncio.Event()
        queue: asyncio.Queue[int] = asyncio.Queue(maxsize=1)
        queue.put_nowait(1)

        putter = asyncio.create_task(wait_unless_set(queue.put(2), event))
        await asyncio.sleep(0)
        event.set()

        assert await asyncio.wait_for(putter, timeout=1) == (False, None)
        assert queue.qsize() == 1
        assert queue.get_nowait() == 1

    @pytest.mark.asyncio
    async def test_caller_cancellation_reaps_tasks(self) -> None:
        event = asyncio.Event()
        cancelled = asyncio.Event()

        async def operation() -> None:
            try:
                await asyncio.sleep(3600)
            except asyncio.CancelledError:
                cancelled.set()
                raise

        waiter = asyncio.create_task(wait_unless_set(operation(), event))
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        waiter.cancel()

        with pytest.raises(asyncio.CancelledError):
            await waiter
        assert cancelled.is_set()
