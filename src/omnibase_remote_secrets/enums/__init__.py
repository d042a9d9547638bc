# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Remote Secrets Enumerations Module.

Exports:
    EnumHealthStatus: Component health status (HEALTHY, UNHEALTHY, UNKNOWN)
    EnumInfraErrorCode: Error classification codes for infrastructure errors
    EnumInfraTransportType: Transport type enumeration for error context
    EnumSecretValueKind: Classification of decoded secret values (TEXT, BINARY, UNSUPPORTED)
"""

from omnibase_remote_secrets.enums.enum_health_status import EnumHealthStatus
from omnibase_remote_secrets.enums.enum_infra_error_code import EnumInfraErrorCode
from omnibase_remote_secrets.enums.enum_infra_transport_type import (
    EnumInfraTransportType,
)
from omnibase_remote_secrets.enums.enum_secret_value_kind import EnumSecretValueKind

__all__: list[str] = [
    "EnumHealthStatus",
    "EnumInfraErrorCode",
    "EnumInfraTransportType",
    "EnumSecretValueKind",
]
