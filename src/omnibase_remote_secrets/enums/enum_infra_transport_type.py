# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Transport Type Enumeration.

Defines the transport types used in error context and log fields.
"""

from enum import Enum


class EnumInfraTransportType(str, Enum):
    """Transport types for remote secrets components.

    Attributes:
        AWS_SECRETS_MANAGER: AWS Secrets Manager API transport
        CONFIG: Local configuration loading (files, CLI flags)
    """

    AWS_SECRETS_MANAGER = "aws_secretsmanager"
    CONFIG = "config"


__all__ = ["EnumInfraTransportType"]
