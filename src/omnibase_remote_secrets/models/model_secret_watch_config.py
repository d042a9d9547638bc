# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Secret Watch Configuration Model.

Validated configuration for one remote secrets component: which secret to
watch, which version stage, how often, and the client overrides.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Annotated, Final

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

from omnibase_remote_secrets.models.model_secret_store_client_config import (
    ModelSecretStoreClientConfig,
)
from omnibase_remote_secrets.models.model_watch_parameters import (
    ModelWatchParameters,
)
from omnibase_remote_secrets.protocols import ProtocolSecretStore
from omnibase_remote_secrets.utils.util_duration import format_duration, parse_duration

DEFAULT_VERSION_LABEL: Final[str] = "AWSCURRENT"
DEFAULT_POLL_INTERVAL: Final[timedelta] = timedelta(minutes=10)
MINIMUM_POLL_INTERVAL: Final[timedelta] = timedelta(seconds=30)

DurationField = Annotated[timedelta, BeforeValidator(parse_duration)]


class ModelSecretWatchConfig(BaseModel):
    """Configuration for a remote secrets component.

    Attributes:
        secret_id: Secret name or ARN (required)
        version_label: Version stage to fetch (default "AWSCURRENT")
        poll_interval: Time between fetches (default 10m, must exceed 30s)
        client: Secret store client overrides

    Example:
        >>> config = ModelSecretWatchConfig(secret_id="prod/api", poll_interval="5m")
        >>> config.poll_interval
        datetime.timedelta(seconds=300)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    secret_id: str = Field(
        min_length=1,
        description="Secret name or ARN to watch",
    )
    version_label: str = Field(
        default=DEFAULT_VERSION_LABEL,
        min_length=1,
        description="Version stage to fetch",
    )
    poll_interval: DurationField = Field(
        default=DEFAULT_POLL_INTERVAL,
        description="Time between scheduled fetches (e.g. '10m', '1h30m')",
    )
    client: ModelSecretStoreClientConfig = Field(
        default_factory=ModelSecretStoreClientConfig,
        description="Secret store client overrides",
    )

    @field_validator("poll_interval", mode="after")
    @classmethod
    def validate_poll_interval_floor(cls, v: timedelta) -> timedelta:
        """Reject poll intervals at or below the minimum.

        Raises:
            ValueError: If poll_interval <= 30s.
        """
        if v <= MINIMUM_POLL_INTERVAL:
            raise ValueError(
                f"poll_interval must be greater than "
                f"{format_duration(MINIMUM_POLL_INTERVAL)}, got {format_duration(v)}"
            )
        return v

    def with_overrides(self, **changes: object) -> ModelSecretWatchConfig:
        """Return a re-validated copy with ``changes`` applied.

        ``None`` values are ignored so CLI flags that were not passed leave
        the configured value in place.
        """
        data = self.model_dump()
        data.update({key: value for key, value in changes.items() if value is not None})
        return type(self).model_validate(data)

    def watch_parameters(self, store: ProtocolSecretStore) -> ModelWatchParameters:
        """Build the watcher parameter snapshot for this configuration."""
        return ModelWatchParameters(
            secret_id=self.secret_id,
            version_label=self.version_label,
            poll_interval=self.poll_interval,
            store=store,
        )


__all__: list[str] = [
    "DEFAULT_POLL_INTERVAL",
    "DEFAULT_VERSION_LABEL",
    "MINIMUM_POLL_INTERVAL",
    "ModelSecretWatchConfig",
]
