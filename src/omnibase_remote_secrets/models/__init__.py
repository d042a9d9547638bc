# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pydantic models for the remote secrets component.

Exports:
    ModelFetchOutcome: Result of one fetch attempt (content or error)
    ModelHealthState: Health snapshot of the component
    ModelRawSecret: Undecoded store payload
    ModelSecretExports: Secrets published on a successful fetch
    ModelSecretStoreClientConfig: Secret store client overrides
    ModelSecretValue: Classified value of a secret bundle
    ModelSecretWatchConfig: Component configuration
    ModelWatchParameters: Watcher parameter snapshot
"""

from omnibase_remote_secrets.models.model_fetch_outcome import ModelFetchOutcome
from omnibase_remote_secrets.models.model_health_state import ModelHealthState
from omnibase_remote_secrets.models.model_raw_secret import ModelRawSecret
from omnibase_remote_secrets.models.model_secret_exports import ModelSecretExports
from omnibase_remote_secrets.models.model_secret_store_client_config import (
    ModelSecretStoreClientConfig,
)
from omnibase_remote_secrets.models.model_secret_value import ModelSecretValue
from omnibase_remote_secrets.models.model_secret_watch_config import (
    DEFAULT_POLL_INTERVAL,
    DEFAULT_VERSION_LABEL,
    MINIMUM_POLL_INTERVAL,
    ModelSecretWatchConfig,
)
from omnibase_remote_secrets.models.model_watch_parameters import (
    ModelWatchParameters,
)

__all__: list[str] = [
    "DEFAULT_POLL_INTERVAL",
    "DEFAULT_VERSION_LABEL",
    "MINIMUM_POLL_INTERVAL",
    "ModelFetchOutcome",
    "ModelHealthState",
    "ModelRawSecret",
    "ModelSecretExports",
    "ModelSecretStoreClientConfig",
    "ModelSecretValue",
    "ModelSecretWatchConfig",
    "ModelWatchParameters",
]
