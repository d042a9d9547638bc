# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Remote secrets component for ONEX hosts.

Polls one AWS Secrets Manager secret, republishes its keys as
``ModelSecretExports`` through an ``on_state_change`` callback and reports
health. Configuration can be swapped at runtime with ``update``.
"""

from omnibase_remote_secrets.errors import (
    ProtocolConfigurationError,
    RuntimeHostError,
    SecretResolutionError,
)
from omnibase_remote_secrets.models import (
    ModelHealthState,
    ModelSecretExports,
    ModelSecretStoreClientConfig,
    ModelSecretWatchConfig,
)
from omnibase_remote_secrets.services import ServiceRemoteSecretsComponent

__version__ = "0.1.0"

__all__: list[str] = [
    "ModelHealthState",
    "ModelSecretExports",
    "ModelSecretStoreClientConfig",
    "ModelSecretWatchConfig",
    "ProtocolConfigurationError",
    "RuntimeHostError",
    "SecretResolutionError",
    "ServiceRemoteSecretsComponent",
    "__version__",
]
