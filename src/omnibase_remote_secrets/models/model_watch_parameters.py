# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Mutable-as-a-unit parameters of a secret watcher."""

from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field

from omnibase_remote_secrets.protocols import ProtocolSecretStore


class ModelWatchParameters(BaseModel):
    """What the next fetch retrieves, and how often.

    Frozen: the watcher swaps the whole instance under its lock and each fetch
    works from the instance it read, so a fetch never sees a mix of old and
    new fields.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    secret_id: str = Field(min_length=1, description="Secret name or ARN")
    version_label: str = Field(min_length=1, description="Version stage to fetch")
    poll_interval: timedelta = Field(
        gt=timedelta(0),
        description="Time between scheduled fetches",
    )
    store: ProtocolSecretStore = Field(
        repr=False,
        description="Client used for the fetch",
    )

    @property
    def poll_interval_seconds(self) -> float:
        return self.poll_interval.total_seconds()


__all__: list[str] = ["ModelWatchParameters"]
