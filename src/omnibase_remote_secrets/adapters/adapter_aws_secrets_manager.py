# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AWS Secrets Manager adapter.

Thin synchronous wrapper around a boto3 ``secretsmanager`` client. The adapter
owns client construction from ``ModelSecretStoreClientConfig`` and the mapping
of botocore failures onto the infrastructure error hierarchy. Scheduling,
threading and health are owned by the watcher and component, NOT the adapter.

Security:
    - Credentials are only ever passed to boto3, never logged.
    - Error messages carry the secret id and AWS error code, never the
      AWS-provided message text (which can echo request parameters).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Final

import boto3
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectTimeoutError,
    ReadTimeoutError,
)

from omnibase_remote_secrets.enums import EnumInfraTransportType
from omnibase_remote_secrets.errors import (
    InfraAuthenticationError,
    InfraConnectionError,
    InfraTimeoutError,
    ModelInfraErrorContext,
    ProtocolConfigurationError,
    RuntimeHostError,
    SecretResolutionError,
)
from omnibase_remote_secrets.models import ModelRawSecret, ModelSecretStoreClientConfig
from omnibase_remote_secrets.utils import sanitize_error_message

logger = logging.getLogger(__name__)

SERVICE_NAME: Final[str] = "secretsmanager"

CREDENTIAL_PAIR_MESSAGE: Final[str] = (
    "if access key or secret are specified then the other must also be specified"
)

_AUTH_ERROR_CODES: Final[frozenset[str]] = frozenset(
    {
        "AccessDeniedException",
        "ExpiredTokenException",
        "IncompleteSignature",
        "InvalidClientTokenId",
        "InvalidSignatureException",
        "MissingAuthenticationToken",
        "UnrecognizedClientException",
    }
)

_RESOLUTION_ERROR_CODES: Final[frozenset[str]] = frozenset(
    {
        "DecryptionFailure",
        "InvalidParameterException",
        "InvalidRequestException",
    }
)

SessionFactory = Callable[..., Any]


class AdapterAwsSecretsManager:
    """``ProtocolSecretStore`` implementation backed by boto3.

    Example:
        >>> store = AdapterAwsSecretsManager.from_config(
        ...     ModelSecretStoreClientConfig(region="eu-west-1")
        ... )
        >>> raw = store.fetch("prod/api", "AWSCURRENT")
    """

    def __init__(
        self,
        client: Any,
        *,
        endpoint: str | None = None,
        region: str | None = None,
    ) -> None:
        """Wrap an existing boto3 ``secretsmanager`` client.

        Args:
            client: boto3 Secrets Manager client.
            endpoint: Endpoint override the client was built with, for describe().
            region: Region the client was built with, for describe().
        """
        self._client = client
        self._endpoint = endpoint
        self._region = region

    @classmethod
    def from_config(
        cls,
        config: ModelSecretStoreClientConfig,
        session_factory: SessionFactory = boto3.session.Session,
    ) -> AdapterAwsSecretsManager:
        """Build a client from configuration overrides.

        Resolution rules:
            - access key and secret must be given together, or not at all
            - with a custom ``endpoint``, ``signing_region`` (if set) is the
              region requests are signed for; otherwise ``region``
            - ``disable_ssl`` turns off TLS certificate verification
            - everything unset falls back to boto3's default chain

        Args:
            config: Client overrides.
            session_factory: boto3 session constructor (injectable for tests).

        Returns:
            A ready adapter.

        Raises:
            ProtocolConfigurationError: If the credential pair is incomplete
                or boto3 cannot build a client from the configuration.
        """
        ctx = ModelInfraErrorContext.with_correlation(
            transport_type=EnumInfraTransportType.AWS_SECRETS_MANAGER,
            operation="create_client",
            target_name=config.endpoint or SERVICE_NAME,
        )

        has_access_key = bool(config.access_key)
        has_secret = config.secret is not None and bool(config.secret.get_secret_value())
        if has_access_key != has_secret:
            raise ProtocolConfigurationError(CREDENTIAL_PAIR_MESSAGE, context=ctx)

        session_kwargs: dict[str, str] = {}
        if config.has_static_credentials and config.secret is not None:
            session_kwargs["aws_access_key_id"] = str(config.access_key)
            session_kwargs["aws_secret_access_key"] = config.secret.get_secret_value()

        region = config.region
        if config.endpoint and config.signing_region:
            region = config.signing_region
        if region:
            session_kwargs["region_name"] = region

        client_kwargs: dict[str, Any] = {}
        if config.endpoint:
            client_kwargs["endpoint_url"] = config.endpoint
        if config.disable_ssl:
            client_kwargs["verify"] = False

        try:
            session = session_factory(**session_kwargs)
            client = session.client(SERVICE_NAME, **client_kwargs)
        except (BotoCoreError, ValueError) as e:
            raise ProtocolConfigurationError(
                f"Cannot create secret store client: {type(e).__name__}",
                context=ctx,
            ) from e

        logger.debug(
            "Created secret store client",
            extra={
                "endpoint": config.endpoint,
                "region": region,
                "static_credentials": config.has_static_credentials,
                "verify_tls": not config.disable_ssl,
            },
        )
        return cls(client, endpoint=config.endpoint, region=region)

    @property
    def endpoint(self) -> str | None:
        return self._endpoint

    @property
    def region(self) -> str | None:
        return self._region

    def fetch(self, secret_id: str, version_label: str) -> ModelRawSecret:
        """Fetch one secret revision.

        Args:
            secret_id: Secret name or ARN.
            version_label: Version stage (e.g. "AWSCURRENT").

        Returns:
            The raw payload; decoding happens in the watcher.

        Raises:
            SecretResolutionError: Secret or version not found, or not readable.
            InfraAuthenticationError: Credentials rejected or access denied.
            InfraTimeoutError: Connect or read timeout.
            InfraConnectionError: Any other client or transport failure.
        """
        ctx = ModelInfraErrorContext.with_correlation(
            transport_type=EnumInfraTransportType.AWS_SECRETS_MANAGER,
            operation="get_secret_value",
            target_name=secret_id,
        )
        try:
            response = self._client.get_secret_value(
                SecretId=secret_id,
                VersionStage=version_label,
            )
        except ClientError as e:
            raise _map_client_error(e, secret_id, version_label, ctx) from e
        except (ConnectTimeoutError, ReadTimeoutError) as e:
            raise InfraTimeoutError(
                f"secret store request for {secret_id!r} timed out",
                context=ctx,
            ) from e
        except BotoCoreError as e:
            logger.debug(
                "Secret store transport failure",
                extra={"secret_id": secret_id, "error": sanitize_error_message(e)},
            )
            raise InfraConnectionError(
                f"secret store request for {secret_id!r} failed: {type(e).__name__}",
                context=ctx,
            ) from e

        return ModelRawSecret(
            text_value=response.get("SecretString"),
            binary_value=response.get("SecretBinary"),
            version_id=response.get("VersionId"),
        )


def _map_client_error(
    error: ClientError,
    secret_id: str,
    version_label: str,
    ctx: ModelInfraErrorContext,
) -> RuntimeHostError:
    code = str(error.response.get("Error", {}).get("Code", "Unknown"))

    if code == "ResourceNotFoundException":
        return SecretResolutionError(
            f"secret {secret_id!r} with version label {version_label!r} was not found",
            context=ctx,
            aws_error_code=code,
        )
    if code in _AUTH_ERROR_CODES:
        return InfraAuthenticationError(
            f"secret store denied access to {secret_id!r}: {code}",
            context=ctx,
            aws_error_code=code,
        )
    if code in _RESOLUTION_ERROR_CODES:
        return SecretResolutionError(
            f"secret {secret_id!r} could not be read: {code}",
            context=ctx,
            aws_error_code=code,
        )
    return InfraConnectionError(
        f"secret store request for {secret_id!r} failed: {code}",
        context=ctx,
        aws_error_code=code,
    )


def build_secret_store(config: ModelSecretStoreClientConfig) -> AdapterAwsSecretsManager:
    """Default store factory used by the component."""
    return AdapterAwsSecretsManager.from_config(config)


__all__: list[str] = [
    "CREDENTIAL_PAIR_MESSAGE",
    "AdapterAwsSecretsManager",
    "build_secret_store",
]
