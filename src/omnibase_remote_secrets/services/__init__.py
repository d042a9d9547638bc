# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Runtime services: poll ticker, secret watcher and the remote secrets component."""

from omnibase_remote_secrets.services.service_poll_ticker import (
    Clock,
    ServicePollTicker,
    Sleep,
)
from omnibase_remote_secrets.services.service_remote_secrets_component import (
    COMPONENT_NAME,
    HEALTHY_MESSAGE,
    MAX_UNSUPPORTED_VALUE_WARNINGS,
    ServiceRemoteSecretsComponent,
    StateChangeCallback,
    StoreFactory,
)
from omnibase_remote_secrets.services.service_secret_watcher import (
    ServiceSecretWatcher,
)

__all__: list[str] = [
    "COMPONENT_NAME",
    "HEALTHY_MESSAGE",
    "MAX_UNSUPPORTED_VALUE_WARNINGS",
    "Clock",
    "ServicePollTicker",
    "ServiceRemoteSecretsComponent",
    "ServiceSecretWatcher",
    "Sleep",
    "StateChangeCallback",
    "StoreFactory",
]
