# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for the remote secret store collaborator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from omnibase_remote_secrets.models.model_raw_secret import ModelRawSecret


@runtime_checkable
class ProtocolSecretStore(Protocol):
    """Synchronous client capable of reading one secret revision.

    Implementations own authentication, transport and any retries internal
    to their SDK. The watcher calls ``fetch`` from a worker thread, so it may
    block.

    Failures are reported by raising, preferably one of the
    ``RuntimeHostError`` subclasses; anything else is wrapped by the watcher.
    """

    def fetch(self, secret_id: str, version_label: str) -> ModelRawSecret:
        """Return the raw payload of ``secret_id`` at ``version_label``."""
        ...


__all__: list[str] = ["ProtocolSecretStore"]
