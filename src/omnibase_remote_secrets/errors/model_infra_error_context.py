# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Error Context Configuration Model.

Bundles the structured fields shared by every infrastructure error so error
constructors keep a short signature.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from omnibase_remote_secrets.enums import EnumInfraTransportType


class ModelInfraErrorContext(BaseModel):
    """Structured context attached to infrastructure errors.

    Attributes:
        transport_type: Transport the failing operation used
        operation: Operation being performed (fetch_secret, load_config, ...)
        target_name: Target resource name (secret id, config path)
        correlation_id: Correlation ID for tracing a single fetch or update

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.AWS_SECRETS_MANAGER,
        ...     operation="fetch_secret",
        ...     target_name="prod/db/credentials",
        ... )
        >>> raise SecretResolutionError("Secret not found", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    transport_type: EnumInfraTransportType | None = Field(
        default=None,
        description="Type of infrastructure transport",
    )
    operation: str | None = Field(
        default=None,
        description="Operation being performed",
    )
    target_name: str | None = Field(
        default=None,
        description="Target resource or endpoint name",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Correlation ID for tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: UUID | None = None,
        **kwargs: object,
    ) -> ModelInfraErrorContext:
        """Build a context, generating a correlation ID when none is given."""
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelInfraErrorContext"]
