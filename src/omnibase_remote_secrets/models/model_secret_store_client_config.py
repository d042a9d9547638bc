# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Secret Store Client Configuration Model.

Overrides for the AWS Secrets Manager client. Every field is optional;
anything left unset falls back to boto3's default credential and region
resolution (environment, shared config files, instance metadata).

Security Note:
    ``secret`` uses SecretStr to prevent accidental logging. Prefer the
    default credential chain over putting keys into configuration files.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class ModelSecretStoreClientConfig(BaseModel):
    """Client overrides for the secret store.

    Attributes:
        endpoint: Custom endpoint URL (e.g. LocalStack)
        disable_ssl: Skip TLS certificate verification
        access_key: Static access key id; requires ``secret``
        secret: Static secret access key; requires ``access_key``
        region: Region the client is created for
        signing_region: Region used for request signing with a custom endpoint

    Note:
        The access key / secret pairing is checked when the store handle is
        built (``AdapterAwsSecretsManager.from_config``), so that both initial
        construction and live updates reject a half-configured pair the same
        way.

    Example:
        >>> config = ModelSecretStoreClientConfig(
        ...     endpoint="http://localhost:4566",
        ...     region="us-east-1",
        ... )
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        from_attributes=True,
    )

    endpoint: str | None = Field(
        default=None,
        description="Custom secret store endpoint URL",
    )
    disable_ssl: bool = Field(
        default=False,
        description="Disable TLS certificate verification",
    )
    access_key: str | None = Field(
        default=None,
        description="Static access key id (requires secret)",
    )
    secret: SecretStr | None = Field(
        default=None,
        description="Static secret access key (requires access_key)",
    )
    region: str | None = Field(
        default=None,
        description="Client region",
    )
    signing_region: str | None = Field(
        default=None,
        description="Signing region used together with a custom endpoint",
    )

    @property
    def has_static_credentials(self) -> bool:
        return bool(self.access_key) and self.secret is not None and bool(
            self.secret.get_secret_value()
        )


__all__: list[str] = ["ModelSecretStoreClientConfig"]
