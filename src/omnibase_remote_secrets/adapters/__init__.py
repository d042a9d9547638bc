# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Secret store adapters."""

from omnibase_remote_secrets.adapters.adapter_aws_secrets_manager import (
    CREDENTIAL_PAIR_MESSAGE,
    AdapterAwsSecretsManager,
    build_secret_store,
)

__all__: list[str] = [
    "CREDENTIAL_PAIR_MESSAGE",
    "AdapterAwsSecretsManager",
    "build_secret_store",
]
