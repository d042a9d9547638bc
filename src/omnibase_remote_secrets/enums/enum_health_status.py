# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Health status enumeration for the remote secrets component."""

from enum import Enum


class EnumHealthStatus(str, Enum):
    """Health of the most recent fetch outcome.

    ``UNKNOWN`` only exists between object construction and the first applied
    outcome; ``ServiceRemoteSecretsComponent.create`` never returns while the
    component is still in that state.
    """

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    UNKNOWN = "unknown"


__all__ = ["EnumHealthStatus"]
