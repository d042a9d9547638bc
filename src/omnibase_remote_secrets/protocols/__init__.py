# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocols for collaborators of the remote secrets component."""

from omnibase_remote_secrets.protocols.protocol_secret_store import (
    ProtocolSecretStore,
)

__all__: list[str] = ["ProtocolSecretStore"]
