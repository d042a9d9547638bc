# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error codes carried by infrastructure errors."""

from enum import Enum


class EnumInfraErrorCode(str, Enum):
    """Error classification codes for ``RuntimeHostError`` and subclasses."""

    OPERATION_FAILED = "operation_failed"
    INVALID_CONFIGURATION = "invalid_configuration"
    RESOURCE_NOT_FOUND = "resource_not_found"
    UNSUPPORTED_OPERATION = "unsupported_operation"
    PARSING_ERROR = "parsing_error"
    SERVICE_UNAVAILABLE = "service_unavailable"
    TIMEOUT = "timeout"
    AUTHENTICATION_FAILED = "authentication_failed"


__all__ = ["EnumInfraErrorCode"]
