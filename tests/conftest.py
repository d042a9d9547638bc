# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for omnibase_remote_secrets tests.

Provides:
    - FakeSecretStore: in-memory ``ProtocolSecretStore`` with scripted responses
    - ManualClock: monotonic clock plus sleep coroutine driven by the test
    - json_secret: helper building a textual ``ModelRawSecret`` from a mapping
"""

from __future__ import annotations

import asyncio
import json
import threading
from collections import deque
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import pytest

from omnibase_remote_secrets.models import ModelRawSecret, ModelSecretWatchConfig

StoreResponse = ModelRawSecret | BaseException


def json_secret(data: object, version_id: str | None = "v1") -> ModelRawSecret:
    """Build a textual payload from JSON-serializable data."""
    return ModelRawSecret(text_value=json.dumps(data), version_id=version_id)


class ManualClock:
    """Monotonic clock that only moves when told to.

    ``sleep`` advances the clock by the requested delay and yields once, so a
    ticker driven by it runs through its schedule without real waiting.
    """

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    async def sleep(self, delay: float) -> None:
        self.sleeps.append(delay)
        self.now += delay
        await asyncio.sleep(0)


class FakeSecretStore:
    """Scripted secret store.

    Responses are consumed in order; the last one repeats once the script is
    exhausted. An exception response is raised instead of returned.

    Attributes:
        calls: (secret_id, version_label) per fetch, in call order
        call_times: Clock reading at the start of each fetch (with a clock)
        started: Set when a fetch begins
        release: When given, every fetch blocks until it is set
    """

    def __init__(
        self,
        *responses: StoreResponse,
        clock: ManualClock | None = None,
        fetch_duration: float = 0.0,
        release: threading.Event | None = None,
    ) -> None:
        self._responses: deque[StoreResponse] = deque(
            responses or (json_secret({"token": "abc"}),)
        )
        self._clock = clock
        self._fetch_duration = fetch_duration
        self._lock = threading.Lock()
        self.calls: list[tuple[str, str]] = []
        self.call_times: list[float] = []
        self.started = threading.Event()
        self.release = release

    def script(self, *responses: StoreResponse) -> None:
        """Replace the remaining responses."""
        with self._lock:
            self._responses = deque(responses)

    def fetch(self, secret_id: str, version_label: str) -> ModelRawSecret:
        with self._lock:
            self.calls.append((secret_id, version_label))
            if self._clock is not None:
                self.call_times.append(self._clock())
            response = (
                self._responses.popleft()
                if len(self._responses) > 1
                else self._responses[0]
            )
        self.started.set()
        if self.release is not None:
            self.release.wait(timeout=5)
        if self._clock is not None and self._fetch_duration:
            self._clock.advance(self._fetch_duration)
        if isinstance(response, BaseException):
            raise response
        return response

    @property
    def fetch_count(self) -> int:
        with self._lock:
            return len(self.calls)


class SteppingWallClock:
    """Wall clock returning a fixed instant unless advanced."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2025, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture
def manual_clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def wall_clock() -> SteppingWallClock:
    return SteppingWallClock()


@pytest.fixture
def fake_store() -> FakeSecretStore:
    return FakeSecretStore(json_secret({"username": "svc", "password": "hunter2"}))


@pytest.fixture
def watch_config() -> ModelSecretWatchConfig:
    return ModelSecretWatchConfig(
        secret_id="prod/payments/api",
        poll_interval="10m",
        client={"region": "eu-west-1"},
    )


@pytest.fixture
def store_factory(
    fake_store: FakeSecretStore,
) -> Callable[[object], FakeSecretStore]:
    """Store factory that always returns ``fake_store``."""

    def factory(_client_config: object) -> FakeSecretStore:
        return fake_store

    return factory
