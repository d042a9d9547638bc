# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Secret watcher: the periodic fetch loop.

The watcher owns the poll ticker, the store handle and the watch parameters.
It fetches once when ``run`` starts and once per tick, and hands every
outcome to a single-slot queue drained by ``ServiceRemoteSecretsComponent``.

Concurrency Safety:
    Coroutine-safe, not thread-safe:
    - ``_lock`` (asyncio.Lock) is held for one fetch plus its queue put, so
      at most one fetch is in flight and ``update_parameters`` waits for the
      in-flight fetch to finish with the snapshot it already read.
    - Each wait (tick, queue put) races the shutdown event; an outcome
      computed as shutdown fires is dropped.
    - The store call runs in a worker thread and is never raced against
      shutdown, so a fetch is either not started or completed.
"""

from __future__ import annotations

import asyncio
import logging
from uuid import uuid4

from omnibase_remote_secrets.enums import EnumInfraTransportType
from omnibase_remote_secrets.errors import (
    InfraConnectionError,
    ModelInfraErrorContext,
    RuntimeHostError,
)
from omnibase_remote_secrets.models import ModelFetchOutcome, ModelWatchParameters
from omnibase_remote_secrets.services.service_poll_ticker import (
    Clock,
    ServicePollTicker,
    Sleep,
)
from omnibase_remote_secrets.utils import sanitize_error_message, wait_unless_set
from omnibase_remote_secrets.utils.util_secret_payload import decode_secret_payload

logger = logging.getLogger(__name__)


class ServiceSecretWatcher:
    """Fetches one secret on a schedule and publishes outcomes to a queue.

    Attributes:
        parameters: Current watch parameter snapshot
        ticker: The poll ticker (exposed for inspection)
        fetches_total: Number of fetches performed, including dropped ones

    Example:
        >>> outcomes: asyncio.Queue[ModelFetchOutcome] = asyncio.Queue(maxsize=1)
        >>> watcher = ServiceSecretWatcher(params, outcomes)
        >>> initial = await watcher.fetch_once()
        >>> task = asyncio.create_task(watcher.run(shutdown_event))
    """

    def __init__(
        self,
        parameters: ModelWatchParameters,
        outcomes: asyncio.Queue[ModelFetchOutcome],
        *,
        clock: Clock | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        """Create the watcher and start its ticker.

        The poll interval floor is the configuration layer's job and is not
        re-checked here.

        Args:
            parameters: Initial watch parameters.
            outcomes: Single-slot queue shared with the consumer.
            clock: Monotonic clock for the ticker (tests inject a manual one).
            sleep: Sleep coroutine for the ticker.
        """
        self._parameters = parameters
        self._outcomes = outcomes
        self._lock = asyncio.Lock()
        self._ticker = ServicePollTicker(
            parameters.poll_interval_seconds,
            clock=clock,
            sleep=sleep,
        )
        self._fetches_total = 0

    @property
    def parameters(self) -> ModelWatchParameters:
        return self._parameters

    @property
    def ticker(self) -> ServicePollTicker:
        return self._ticker

    @property
    def fetches_total(self) -> int:
        return self._fetches_total

    async def fetch_once(self) -> ModelFetchOutcome:
        """Fetch synchronously with respect to the caller, bypassing the queue."""
        async with self._lock:
            return await self._fetch_locked()

    async def run(self, shutdown: asyncio.Event) -> None:
        """Fetch now and on every tick until ``shutdown`` is set.

        Fetch failures never end the loop; they are delivered as failed
        outcomes and the next tick is the retry. The ticker is stopped on
        every exit path, including task cancellation.
        """
        if self._ticker.is_stopped:
            self._ticker.reset(self._parameters.poll_interval_seconds)

        logger.info(
            "Secret watcher started",
            extra={
                "secret_id": self._parameters.secret_id,
                "version_label": self._parameters.version_label,
                "poll_interval_seconds": self._parameters.poll_interval_seconds,
            },
        )
        try:
            await self._fetch_and_deliver(shutdown)
            while not shutdown.is_set():
                completed, ticked = await wait_unless_set(self._ticker.wait(), shutdown)
                if not completed or not ticked:
                    break
                await self._fetch_and_deliver(shutdown)
        finally:
            self._ticker.stop()
            logger.info(
                "Secret watcher stopped",
                extra={
                    "secret_id": self._parameters.secret_id,
                    "fetches_total": self._fetches_total,
                },
            )

    async def update_parameters(self, parameters: ModelWatchParameters) -> None:
        """Replace all watch parameters and restart the tick schedule.

        Waits for an in-flight fetch to finish; that fetch keeps its own
        snapshot and the next tick, one new interval from now, uses the new
        one.
        """
        async with self._lock:
            previous = self._parameters
            self._parameters = parameters
            self._ticker.reset(parameters.poll_interval_seconds)

        logger.info(
            "Secret watcher parameters updated",
            extra={
                "secret_id": parameters.secret_id,
                "version_label": parameters.version_label,
                "poll_interval_seconds": parameters.poll_interval_seconds,
                "previous_secret_id": previous.secret_id,
                "store_replaced": parameters.store is not previous.store,
            },
        )

    async def _fetch_and_deliver(self, shutdown: asyncio.Event) -> None:
        async with self._lock:
            outcome = await self._fetch_locked()
            delivered, _ = await wait_unless_set(self._outcomes.put(outcome), shutdown)

        if not delivered:
            logger.debug(
                "Dropped fetch outcome on shutdown",
                extra={
                    "secret_id": outcome.secret_id,
                    "correlation_id": str(outcome.correlation_id),
                },
            )

    async def _fetch_locked(self) -> ModelFetchOutcome:
        # Caller holds _lock. Everything below uses this one snapshot.
        params = self._parameters
        correlation_id = uuid4()
        ctx = ModelInfraErrorContext(
            transport_type=EnumInfraTransportType.AWS_SECRETS_MANAGER,
            operation="fetch_secret",
            target_name=params.secret_id,
            correlation_id=correlation_id,
        )
        self._fetches_total += 1

        try:
            raw = await asyncio.to_thread(
                params.store.fetch, params.secret_id, params.version_label
            )
            content = decode_secret_payload(raw, context=ctx)
        except RuntimeHostError as e:
            logger.warning(
                "Secret fetch failed: %s",
                e.message,
                extra={
                    "secret_id": params.secret_id,
                    "version_label": params.version_label,
                    "error_type": type(e).__name__,
                    "error_code": e.error_code.value,
                    "correlation_id": str(correlation_id),
                },
            )
            return ModelFetchOutcome.failure(
                e,
                secret_id=params.secret_id,
                version_label=params.version_label,
                correlation_id=correlation_id,
            )
        except Exception as e:
            safe_error = sanitize_error_message(e)
            logger.warning(
                "Secret fetch failed with unexpected error",
                extra={
                    "secret_id": params.secret_id,
                    "version_label": params.version_label,
                    "error": safe_error,
                    "error_type": type(e).__name__,
                    "correlation_id": str(correlation_id),
                },
            )
            error = InfraConnectionError(
                f"secret store request for {params.secret_id!r} failed: {safe_error}",
                context=ctx,
            )
            error.__cause__ = e
            return ModelFetchOutcome.failure(
                error,
                secret_id=params.secret_id,
                version_label=params.version_label,
                correlation_id=correlation_id,
            )

        logger.debug(
            "Fetched secret",
            extra={
                "secret_id": params.secret_id,
                "version_label": params.version_label,
                "version_id": raw.version_id,
                "key_count": len(content),
                "correlation_id": str(correlation_id),
            },
        )
        return ModelFetchOutcome.success(
            content,
            secret_id=params.secret_id,
            version_label=params.version_label,
            correlation_id=correlation_id,
        )


__all__: list[str] = ["ServiceSecretWatcher"]
