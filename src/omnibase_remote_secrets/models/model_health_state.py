# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Health snapshot returned by ``current_health``."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from omnibase_remote_secrets.enums import EnumHealthStatus


class ModelHealthState(BaseModel):
    """Status summarizing the most recent fetch outcome.

    Attributes:
        status: HEALTHY after a successful fetch, UNHEALTHY after a failed one
        message: "Secrets retrieved" or the error text of the failed fetch
        last_updated: When the outcome was applied (UTC, strictly increasing)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    status: EnumHealthStatus = EnumHealthStatus.UNKNOWN
    message: str = ""
    last_updated: datetime = Field(
        default_factory=lambda: datetime.min.replace(tzinfo=UTC),
    )

    @property
    def is_healthy(self) -> bool:
        return self.status is EnumHealthStatus.HEALTHY


__all__: list[str] = ["ModelHealthState"]
