# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Remote Secrets Errors Module.

Exports:
    ModelInfraErrorContext: Configuration model for bundled error context
    RuntimeHostError: Base infrastructure error class
    ProtocolConfigurationError: Configuration validation errors
    SecretResolutionError: Secret resolution errors (missing secret/version)
    UnsupportedSecretPayloadError: Binary-only payloads
    SecretPayloadDecodeError: Malformed or non-object payloads
    InfraConnectionError: Secret store transport errors
    InfraTimeoutError: Secret store timeouts
    InfraAuthenticationError: Credential and permission failures

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - Access keys, secret keys, session tokens
        - Secret payloads or individual secret values

    SAFE to include:
        - Secret identifiers and version labels
        - AWS error codes (e.g. ResourceNotFoundException)
        - Endpoints, regions, correlation IDs

    Example - GOOD (sanitized)::

        raise InfraConnectionError(
            f"Secret store request failed: {error_code}",
            context=context,
            region="eu-west-1",
        )
"""

from omnibase_remote_secrets.errors.infra_errors import (
    InfraAuthenticationError,
    InfraConnectionError,
    InfraTimeoutError,
    ProtocolConfigurationError,
    RuntimeHostError,
    SecretPayloadDecodeError,
    SecretResolutionError,
    UnsupportedSecretPayloadError,
)
from omnibase_remote_secrets.errors.model_infra_error_context import (
    ModelInfraErrorContext,
)

__all__: list[str] = [
    # Configuration model
    "ModelInfraErrorContext",
    # Error classes
    "RuntimeHostError",
    "ProtocolConfigurationError",
    "SecretResolutionError",
    "UnsupportedSecretPayloadError",
    "SecretPayloadDecodeError",
    "InfraConnectionError",
    "InfraTimeoutError",
    "InfraAuthenticationError",
]
