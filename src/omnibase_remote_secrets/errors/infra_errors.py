# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure-Specific Error Classes.

Error Hierarchy:
    RuntimeHostError (base infrastructure error)
    ├── ProtocolConfigurationError
    ├── SecretResolutionError
    │   ├── UnsupportedSecretPayloadError
    │   └── SecretPayloadDecodeError
    ├── InfraConnectionError
    ├── InfraTimeoutError
    └── InfraAuthenticationError

All errors:
    - Use EnumInfraErrorCode for error classification
    - Support proper error chaining with `raise ... from e`
    - Include structured context for debugging
    - Support correlation IDs for tracing a fetch or update
    - Accept ModelInfraErrorContext for bundled context parameters

``str(error)`` is always the human-readable message. The watch component
reports that text verbatim as its health message, so messages must never
contain credentials or secret values.
"""

from __future__ import annotations

from uuid import UUID

from omnibase_remote_secrets.enums import EnumInfraErrorCode
from omnibase_remote_secrets.errors.model_infra_error_context import (
    ModelInfraErrorContext,
)


class RuntimeHostError(Exception):
    """Base error class for remote secrets infrastructure errors.

    Structured Fields (via ModelInfraErrorContext):
        transport_type: Type of transport (aws_secretsmanager, config, ...)
        operation: Operation being performed
        correlation_id: Correlation ID for tracing
        target_name: Target resource name

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.AWS_SECRETS_MANAGER,
        ...     operation="fetch_secret",
        ...     target_name="prod/api",
        ... )
        >>> raise RuntimeHostError("Operation failed", context=context, attempt=1)
    """

    def __init__(
        self,
        message: str,
        error_code: EnumInfraErrorCode | None = None,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize RuntimeHostError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled infrastructure context (transport_type, operation, etc.)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or EnumInfraErrorCode.OPERATION_FAILED

        structured_context: dict[str, object] = dict(extra_context)
        self.correlation_id: UUID | None = None
        if context is not None:
            if context.transport_type is not None:
                structured_context["transport_type"] = context.transport_type
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            self.correlation_id = context.correlation_id
        self.context = structured_context

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"error_code={self.error_code.value!r})"
        )


class ProtocolConfigurationError(RuntimeHostError):
    """Raised when configuration validation fails.

    Used for invalid credential pairings, sub-floor poll intervals,
    unreadable configuration files and schema validation failures.

    Example:
        >>> raise ProtocolConfigurationError(
        ...     "if access key or secret are specified then the other must also be specified",
        ...     context=context,
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumInfraErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


class SecretResolutionError(RuntimeHostError):
    """Raised when a secret cannot be resolved from the store.

    Used for missing secrets or version labels and as the base of the
    payload errors below.

    Example:
        >>> raise SecretResolutionError(
        ...     "Secret not found",
        ...     context=context,
        ...     version_label="AWSCURRENT",
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        error_code: EnumInfraErrorCode | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code or EnumInfraErrorCode.RESOURCE_NOT_FOUND,
            context=context,
            **extra_context,
        )


class UnsupportedSecretPayloadError(SecretResolutionError):
    """Raised when the store returns a payload shape this component rejects.

    Binary-only secrets are the contractual case: they are valid on the
    store side, but cannot be decoded into a key/value bundle.
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            context=context,
            error_code=EnumInfraErrorCode.UNSUPPORTED_OPERATION,
            **extra_context,
        )


class SecretPayloadDecodeError(SecretResolutionError):
    """Raised when a textual payload is not a flat JSON object."""

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            context=context,
            error_code=EnumInfraErrorCode.PARSING_ERROR,
            **extra_context,
        )


class InfraConnectionError(RuntimeHostError):
    """Raised when the secret store cannot be reached or rejects the call.

    Example:
        >>> raise InfraConnectionError(
        ...     "Secret store request failed: InternalServiceError",
        ...     context=context,
        ...     endpoint="https://secretsmanager.eu-west-1.amazonaws.com",
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumInfraErrorCode.SERVICE_UNAVAILABLE,
            context=context,
            **extra_context,
        )


class InfraTimeoutError(RuntimeHostError):
    """Raised when a secret store call exceeds its connect or read timeout."""

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumInfraErrorCode.TIMEOUT,
            context=context,
            **extra_context,
        )


class InfraAuthenticationError(RuntimeHostError):
    """Raised when the store rejects the credentials or denies access.

    Example:
        >>> raise InfraAuthenticationError(
        ...     "Secret store denied access: AccessDeniedException",
        ...     context=context,
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumInfraErrorCode.AUTHENTICATION_FAILED,
            context=context,
            **extra_context,
        )


__all__ = [
    "RuntimeHostError",
    "ProtocolConfigurationError",
    "SecretResolutionError",
    "UnsupportedSecretPayloadError",
    "SecretPayloadDecodeError",
    "InfraConnectionError",
    "InfraTimeoutError",
    "InfraAuthenticationError",
]
