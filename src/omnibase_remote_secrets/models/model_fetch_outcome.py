# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Result of one fetch attempt, handed from the watcher to the component."""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator

from omnibase_remote_secrets.models.model_secret_value import ModelSecretValue


class ModelFetchOutcome(BaseModel):
    """Either decoded content or an error, never both.

    ``content`` is None exactly when ``error`` is set. ``secret_id`` and
    ``version_label`` record the parameter snapshot the fetch actually used,
    which may already differ from the watcher's current parameters.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    content: dict[str, ModelSecretValue] | None = Field(default=None, repr=False)
    error: Exception | None = None
    secret_id: str
    version_label: str
    correlation_id: UUID = Field(default_factory=uuid4)

    @model_validator(mode="after")
    def _exactly_one_of_content_or_error(self) -> ModelFetchOutcome:
        if (self.content is None) == (self.error is None):
            raise ValueError("exactly one of content or error must be set")
        return self

    @classmethod
    def success(
        cls,
        content: dict[str, ModelSecretValue],
        *,
        secret_id: str,
        version_label: str,
        correlation_id: UUID | None = None,
    ) -> ModelFetchOutcome:
        return cls(
            content=content,
            secret_id=secret_id,
            version_label=version_label,
            correlation_id=correlation_id or uuid4(),
        )

    @classmethod
    def failure(
        cls,
        error: Exception,
        *,
        secret_id: str,
        version_label: str,
        correlation_id: UUID | None = None,
    ) -> ModelFetchOutcome:
        return cls(
            error=error,
            secret_id=secret_id,
            version_label=version_label,
            correlation_id=correlation_id or uuid4(),
        )

    @property
    def is_success(self) -> bool:
        return self.error is None


__all__: list[str] = ["ModelFetchOutcome"]
