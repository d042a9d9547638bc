# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Remote secrets component: publishes watched secrets and reports health.

The component sits between a ``ServiceSecretWatcher`` and the host:

- it builds the store handle and watcher from ``ModelSecretWatchConfig``
- it applies every fetch outcome exactly once (``handle_outcome``): a
  success becomes a fresh ``ModelSecretExports`` passed to
  ``on_state_change`` and a HEALTHY state; a failure becomes an UNHEALTHY
  state and leaves the last exports in place
- it answers ``current_health`` from any thread at any time

Lifecycle:
    >>> component = await ServiceRemoteSecretsComponent.create(config, on_change)
    >>> component.current_health().status
    <EnumHealthStatus.HEALTHY: 'healthy'>
    >>> shutdown = asyncio.Event()
    >>> task = asyncio.create_task(component.run(shutdown))
    >>> await component.update(new_config)
    >>> shutdown.set()
    >>> await task

Concurrency Safety:
    - Watch parameters are guarded by the watcher's asyncio.Lock.
    - Health and exports are guarded by ``_state_lock`` (threading.RLock),
      held only for in-memory work, so health queries never wait on a fetch.
      It is re-entrant so ``on_state_change`` may call ``current_health``.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Final

from pydantic import SecretStr

from omnibase_remote_secrets.adapters import build_secret_store
from omnibase_remote_secrets.enums import EnumHealthStatus
from omnibase_remote_secrets.errors import ProtocolConfigurationError
from omnibase_remote_secrets.models import (
    ModelFetchOutcome,
    ModelHealthState,
    ModelSecretExports,
    ModelSecretStoreClientConfig,
    ModelSecretWatchConfig,
)
from omnibase_remote_secrets.protocols import ProtocolSecretStore
from omnibase_remote_secrets.services.service_poll_ticker import Clock, Sleep
from omnibase_remote_secrets.services.service_secret_watcher import (
    ServiceSecretWatcher,
)
from omnibase_remote_secrets.utils import sanitize_error_message, wait_unless_set

logger = logging.getLogger(__name__)

COMPONENT_NAME: Final[str] = "remote.aws_secretsmanager"
HEALTHY_MESSAGE: Final[str] = "Secrets retrieved"

# Per-fetch cap on individual unsupported-value warnings; the rest are
# reported as one summary line.
MAX_UNSUPPORTED_VALUE_WARNINGS: Final[int] = 20

StateChangeCallback = Callable[[ModelSecretExports], None]
StoreFactory = Callable[[ModelSecretStoreClientConfig], ProtocolSecretStore]
WallClock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(UTC)


class ServiceRemoteSecretsComponent:
    """Watch one remote secret and republish it to the host.

    Attributes:
        config: Active configuration (replaced by a successful ``update``)
        exports: Last published exports, or None before the first success
        watcher: The underlying watcher
    """

    def __init__(
        self,
        config: ModelSecretWatchConfig,
        on_state_change: StateChangeCallback,
        *,
        store_factory: StoreFactory = build_secret_store,
        clock: Clock | None = None,
        sleep: Sleep | None = None,
        now: WallClock | None = None,
    ) -> None:
        """Build the store handle and watcher without fetching.

        Use ``create`` unless you need an unfetched instance.

        Args:
            config: Validated configuration.
            on_state_change: Called with fresh exports after each successful fetch.
            store_factory: Builds a store handle from client overrides.
            clock: Monotonic clock for the poll ticker.
            sleep: Sleep coroutine for the poll ticker.
            now: Wall clock for health timestamps.

        Raises:
            ProtocolConfigurationError: If the store handle cannot be built.
        """
        store = store_factory(config.client)

        self._config = config
        self._on_state_change = on_state_change
        self._store_factory = store_factory
        self._now: WallClock = now or _utc_now

        self._state_lock = threading.RLock()
        self._health = ModelHealthState()
        self._exports: ModelSecretExports | None = None
        self._outcomes_applied_total = 0
        self._fetch_failures_total = 0
        self._unsupported_values_total = 0

        self._outcomes: asyncio.Queue[ModelFetchOutcome] = asyncio.Queue(maxsize=1)
        self._watcher = ServiceSecretWatcher(
            config.watch_parameters(store),
            self._outcomes,
            clock=clock,
            sleep=sleep,
        )

    @classmethod
    async def create(
        cls,
        config: ModelSecretWatchConfig,
        on_state_change: StateChangeCallback,
        *,
        store_factory: StoreFactory = build_secret_store,
        clock: Clock | None = None,
        sleep: Sleep | None = None,
        now: WallClock | None = None,
    ) -> ServiceRemoteSecretsComponent:
        """Build the component and apply one initial fetch.

        The returned component already reports the outcome of that fetch, so
        it is never observed without a health state. A failed initial fetch
        does not fail construction.

        Raises:
            ProtocolConfigurationError: If the store handle cannot be built.
        """
        component = cls(
            config,
            on_state_change,
            store_factory=store_factory,
            clock=clock,
            sleep=sleep,
            now=now,
        )
        component.handle_outcome(await component._watcher.fetch_once())
        return component

    @property
    def config(self) -> ModelSecretWatchConfig:
        with self._state_lock:
            return self._config

    @property
    def exports(self) -> ModelSecretExports | None:
        with self._state_lock:
            return self._exports

    @property
    def watcher(self) -> ServiceSecretWatcher:
        return self._watcher

    async def run(self, shutdown: asyncio.Event) -> None:
        """Run the fetch loop and the outcome loop until ``shutdown`` is set.

        Returns only after both loops have exited.
        """
        logger.info(
            "Remote secrets component running",
            extra={"component": COMPONENT_NAME, "secret_id": self._config.secret_id},
        )
        watcher_task = asyncio.create_task(
            self._watcher.run(shutdown), name=f"{COMPONENT_NAME}.watcher"
        )
        receiver_task = asyncio.create_task(
            self._receive_loop(shutdown), name=f"{COMPONENT_NAME}.receiver"
        )
        try:
            await asyncio.gather(watcher_task, receiver_task)
        finally:
            for task in (watcher_task, receiver_task):
                if not task.done():
                    task.cancel()
            await asyncio.gather(watcher_task, receiver_task, return_exceptions=True)
            logger.info(
                "Remote secrets component stopped",
                extra={"component": COMPONENT_NAME},
            )

    async def update(self, config: ModelSecretWatchConfig) -> None:
        """Switch to a new configuration without restarting.

        The new store handle is built first; if that fails nothing changes.
        Otherwise the watcher's parameters are swapped and the new poll
        interval applies from now on.

        Raises:
            ProtocolConfigurationError: If the new store handle cannot be built.
        """
        try:
            store = self._store_factory(config.client)
        except ProtocolConfigurationError as e:
            logger.warning(
                "Rejected secret watch configuration update: %s",
                e.message,
                extra={"component": COMPONENT_NAME, "secret_id": config.secret_id},
            )
            raise

        await self._watcher.update_parameters(config.watch_parameters(store))
        with self._state_lock:
            self._config = config

    def current_health(self) -> ModelHealthState:
        """Return the health snapshot; safe from any thread."""
        with self._state_lock:
            return self._health

    def handle_outcome(self, outcome: ModelFetchOutcome) -> None:
        """Apply one fetch outcome to exports and health.

        Success: build exports from TEXT and BINARY values (other values are
        skipped with a warning), call ``on_state_change``, record HEALTHY.
        Failure: record UNHEALTHY with the error text; exports stay as they
        were and ``on_state_change`` is not called.

        An exception from ``on_state_change`` is logged and recorded as
        UNHEALTHY; it never propagates.
        """
        with self._state_lock:
            self._outcomes_applied_total += 1

            if outcome.error is not None or outcome.content is None:
                self._fetch_failures_total += 1
                message = str(outcome.error) or type(outcome.error).__name__
                self._set_health(EnumHealthStatus.UNHEALTHY, message)
                return

            exports = self._build_exports(outcome)
            try:
                self._on_state_change(exports)
            except Exception as e:
                logger.exception(
                    "State change callback failed",
                    extra={
                        "component": COMPONENT_NAME,
                        "secret_id": outcome.secret_id,
                        "correlation_id": str(outcome.correlation_id),
                    },
                )
                self._set_health(
                    EnumHealthStatus.UNHEALTHY,
                    f"failed to publish secrets: {sanitize_error_message(e)}",
                )
                return

            self._exports = exports
            self._set_health(EnumHealthStatus.HEALTHY, HEALTHY_MESSAGE)

    def describe(self) -> dict[str, object]:
        """Return component metadata and counters.

        Never exposes credentials or secret values; only key counts.
        """
        params = self._watcher.parameters
        with self._state_lock:
            health = self._health
            exported_keys = len(self._exports.data) if self._exports else 0
            outcomes_applied = self._outcomes_applied_total
            failures = self._fetch_failures_total
            unsupported = self._unsupported_values_total
        return {
            "component": COMPONENT_NAME,
            "secret_id": params.secret_id,
            "version_label": params.version_label,
            "poll_interval_seconds": params.poll_interval_seconds,
            "health_status": health.status.value,
            "health_message": health.message,
            "last_updated": health.last_updated.isoformat(),
            "exported_key_count": exported_keys,
            "fetches_total": self._watcher.fetches_total,
            "outcomes_applied_total": outcomes_applied,
            "fetch_failures_total": failures,
            "unsupported_values_total": unsupported,
        }

    async def _receive_loop(self, shutdown: asyncio.Event) -> None:
        while not shutdown.is_set():
            received, outcome = await wait_unless_set(self._outcomes.get(), shutdown)
            if not received or outcome is None:
                break
            try:
                self.handle_outcome(outcome)
            except Exception:
                logger.exception(
                    "Failed to apply fetch outcome, continuing",
                    extra={
                        "component": COMPONENT_NAME,
                        "correlation_id": str(outcome.correlation_id),
                    },
                )
            finally:
                self._outcomes.task_done()

    def _build_exports(self, outcome: ModelFetchOutcome) -> ModelSecretExports:
        data: dict[str, SecretStr] = {}
        skipped = 0
        for key, value in (outcome.content or {}).items():
            if value.kind.is_exportable:
                data[key] = value.as_secret()
                continue

            skipped += 1
            if skipped <= MAX_UNSUPPORTED_VALUE_WARNINGS:
                logger.warning(
                    "found field in secret which cannot be converted into a string",
                    extra={
                        "secret_id": outcome.secret_id,
                        "key": key,
                        "value_type": value.type_name,
                    },
                )

        if skipped > MAX_UNSUPPORTED_VALUE_WARNINGS:
            logger.warning(
                "Skipped %d more fields in secret which cannot be converted into a string",
                skipped - MAX_UNSUPPORTED_VALUE_WARNINGS,
                extra={"secret_id": outcome.secret_id, "skipped_total": skipped},
            )
        self._unsupported_values_total += skipped
        return ModelSecretExports(data=data)

    def _set_health(self, status: EnumHealthStatus, message: str) -> None:
        # Caller holds _state_lock.
        timestamp = self._now()
        if timestamp <= self._health.last_updated:
            timestamp = self._health.last_updated + timedelta(microseconds=1)
        self._health = ModelHealthState(
            status=status,
            message=message,
            last_updated=timestamp,
        )


__all__: list[str] = [
    "COMPONENT_NAME",
    "HEALTHY_MESSAGE",
    "MAX_UNSUPPORTED_VALUE_WARNINGS",
    "ServiceRemoteSecretsComponent",
    "StateChangeCallback",
    "StoreFactory",
]
