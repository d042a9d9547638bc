# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for AdapterAwsSecretsManager.

Client construction is tested against a mocked boto3 session factory;
``fetch`` is tested against a real client wired to botocore's Stubber.
"""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import MagicMock

import boto3
import pytest
from botocore.exceptions import (
    ConnectTimeoutError,
    EndpointConnectionError,
    NoRegionError,
    ReadTimeoutError,
)
from botocore.stub import Stubber

from omnibase_remote_secrets.adapters import (
    CREDENTIAL_PAIR_MESSAGE,
    AdapterAwsSecretsManager,
    build_secret_store,
)
from omnibase_remote_secrets.enums import EnumInfraErrorCode
from omnibase_remote_secrets.errors import (
    InfraAuthenticationError,
    InfraConnectionError,
    InfraTimeoutError,
    ProtocolConfigurationError,
    SecretResolutionError,
)
from omnibase_remote_secrets.models import ModelSecretStoreClientConfig
from omnibase_remote_secrets.protocols import ProtocolSecretStore

SECRET_ID = "prod/payments/api"
EXPECTED_PARAMS = {"SecretId": SECRET_ID, "VersionStage": "AWSCURRENT"}
VERSION_ID = "EXAMPLE1-90ab-cdef-fedc-ba987SECRET1"


@pytest.fixture
def session_factory() -> MagicMock:
    return MagicMock(name="boto3.session.Session")


@pytest.fixture
def stubbed_client() -> Iterator[tuple[object, Stubber]]:
    client = boto3.client(
        "secretsmanager",
        region_name="eu-west-1",
        aws_access_key_id="AKIATEST",
        aws_secret_access_key="test-secret-key",
    )
    with Stubber(client) as stubber:
        yield client, stubber
        stubber.assert_no_pending_responses()


class TestFromConfig:
    def test_defaults_use_boto3_chain(self, session_factory: MagicMock) -> None:
        adapter = AdapterAwsSecretsManager.from_config(
            ModelSecretStoreClientConfig(), session_factory=session_factory
        )

        session_factory.assert_called_once_with()
        session_factory.return_value.client.assert_called_once_with("secretsmanager")
        assert adapter.endpoint is None
        assert adapter.region is None

    def test_static_credentials_and_region(self, session_factory: MagicMock) -> None:
        AdapterAwsSecretsManager.from_config(
            ModelSecretStoreClientConfig(
                access_key="AKIAEXAMPLE",
                secret="shh",
                region="us-east-2",
            ),
            session_factory=session_factory,
        )

        session_factory.assert_called_once_with(
            aws_access_key_id="AKIAEXAMPLE",
            aws_secret_access_key="shh",
            region_name="us-east-2",
        )

    def test_custom_endpoint_prefers_signing_region(
        self, session_factory: MagicMock
    ) -> None:
        adapter = AdapterAwsSecretsManager.from_config(
            ModelSecretStoreClientConfig(
                endpoint="https://secrets.internal:4566",
                region="us-east-1",
                signing_region="eu-central-1",
                disable_ssl=True,
            ),
            session_factory=session_factory,
        )

        session_factory.assert_called_once_with(region_name="eu-central-1")
        session_factory.return_value.client.assert_called_once_with(
            "secretsmanager",
            endpoint_url="https://secrets.internal:4566",
            verify=False,
        )
        assert adapter.endpoint == "https://secrets.internal:4566"
        assert adapter.region == "eu-central-1"

    def test_signing_region_ignored_without_endpoint(
        self, session_factory: MagicMock
    ) -> None:
        AdapterAwsSecretsManager.from_config(
            ModelSecretStoreClientConfig(region="us-east-1", signing_region="eu-central-1"),
            session_factory=session_factory,
        )
        session_factory.assert_called_once_with(region_name="us-east-1")

    @pytest.mark.parametrize(
        ("access_key", "secret"),
        [("AKIAEXAMPLE", None), (None, "shh"), ("AKIAEXAMPLE", "")],
    )
    def test_incomplete_credential_pair(
        self,
        session_factory: MagicMock,
        access_key: str | None,
        secret: str | None,
    ) -> None:
        with pytest.raises(ProtocolConfigurationError) as exc_info:
            AdapterAwsSecretsManager.from_config(
                ModelSecretStoreClientConfig(access_key=access_key, secret=secret),
                session_factory=session_factory,
            )

        assert exc_info.value.message == CREDENTIAL_PAIR_MESSAGE
        session_factory.assert_not_called()

    def test_botocore_failure_becomes_configuration_error(
        self, session_factory: MagicMock
    ) -> None:
        session_factory.return_value.client.side_effect = NoRegionError()

        with pytest.raises(ProtocolConfigurationError, match="NoRegionError"):
            AdapterAwsSecretsManager.from_config(
                ModelSecretStoreClientConfig(), session_factory=session_factory
            )

    def test_invalid_endpoint_becomes_configuration_error(
        self, session_factory: MagicMock
    ) -> None:
        session_factory.return_value.client.side_effect = ValueError("Invalid endpoint")

        with pytest.raises(ProtocolConfigurationError) as exc_info:
            AdapterAwsSecretsManager.from_config(
                ModelSecretStoreClientConfig(endpoint="not a url"),
                session_factory=session_factory,
            )

        assert exc_info.value.error_code is EnumInfraErrorCode.INVALID_CONFIGURATION

    def test_build_secret_store_real_session(self) -> None:
        store = build_secret_store(
            ModelSecretStoreClientConfig(
                access_key="AKIATEST",
                secret="test-secret-key",
                region="eu-west-1",
            )
        )

        assert isinstance(store, AdapterAwsSecretsManager)
        assert isinstance(store, ProtocolSecretStore)
        assert store.region == "eu-west-1"


class TestFetch:
    def test_secret_string(self, stubbed_client: tuple[object, Stubber]) -> None:
        client, stubber = stubbed_client
        stubber.add_response(
            "get_secret_value",
            {
                "Name": SECRET_ID,
                "SecretString": '{"password": "hunter2"}',
                "VersionId": VERSION_ID,
            },
            EXPECTED_PARAMS,
        )

        raw = AdapterAwsSecretsManager(client).fetch(SECRET_ID, "AWSCURRENT")

        assert raw.text_value == '{"password": "hunter2"}'
        assert raw.binary_value is None
        assert raw.version_id == VERSION_ID

    def test_secret_binary(self, stubbed_client: tuple[object, Stubber]) -> None:
        client, stubber = stubbed_client
        stubber.add_response(
            "get_secret_value",
            {"Name": SECRET_ID, "SecretBinary": b"\x00\x01"},
            EXPECTED_PARAMS,
        )

        raw = AdapterAwsSecretsManager(client).fetch(SECRET_ID, "AWSCURRENT")

        assert raw.is_binary_only
        assert raw.binary_value == b"\x00\x01"

    def test_version_label_forwarded(self, stubbed_client: tuple[object, Stubber]) -> None:
        client, stubber = stubbed_client
        stubber.add_response(
            "get_secret_value",
            {"Name": SECRET_ID, "SecretString": "{}"},
            {"SecretId": SECRET_ID, "VersionStage": "AWSPREVIOUS"},
        )

        AdapterAwsSecretsManager(client).fetch(SECRET_ID, "AWSPREVIOUS")

    def test_not_found(self, stubbed_client: tuple[object, Stubber]) -> None:
        client, stubber = stubbed_client
        stubber.add_client_error(
            "get_secret_value",
            service_error_code="ResourceNotFoundException",
            service_message="Secrets Manager can't find the specified secret.",
            http_status_code=400,
            expected_params=EXPECTED_PARAMS,
        )

        with pytest.raises(SecretResolutionError) as exc_info:
            AdapterAwsSecretsManager(client).fetch(SECRET_ID, "AWSCURRENT")

        assert str(exc_info.value) == (
            f"secret {SECRET_ID!r} with version label 'AWSCURRENT' was not found"
        )
        assert exc_info.value.context["aws_error_code"] == "ResourceNotFoundException"
        assert exc_info.value.correlation_id is not None

    @pytest.mark.parametrize(
        "code", ["AccessDeniedException", "UnrecognizedClientException"]
    )
    def test_auth_failure(
        self, stubbed_client: tuple[object, Stubber], code: str
    ) -> None:
        client, stubber = stubbed_client
        stubber.add_client_error(
            "get_secret_value",
            service_error_code=code,
            service_message="denied",
            http_status_code=400,
            expected_params=EXPECTED_PARAMS,
        )

        with pytest.raises(InfraAuthenticationError, match=code):
            AdapterAwsSecretsManager(client).fetch(SECRET_ID, "AWSCURRENT")

    def test_decryption_failure(self, stubbed_client: tuple[object, Stubber]) -> None:
        client, stubber = stubbed_client
        stubber.add_client_error(
            "get_secret_value",
            service_error_code="DecryptionFailure",
            service_message="KMS key disabled",
            http_status_code=400,
            expected_params=EXPECTED_PARAMS,
        )

        with pytest.raises(SecretResolutionError, match="could not be read: DecryptionFailure"):
            AdapterAwsSecretsManager(client).fetch(SECRET_ID, "AWSCURRENT")

    def test_other_client_error(self, stubbed_client: tuple[object, Stubber]) -> None:
        client, stubber = stubbed_client
        stubber.add_client_error(
            "get_secret_value",
            service_error_code="InternalServiceError",
            service_message="try again",
            http_status_code=500,
            expected_params=EXPECTED_PARAMS,
        )

        with pytest.raises(InfraConnectionError) as exc_info:
            AdapterAwsSecretsManager(client).fetch(SECRET_ID, "AWSCURRENT")

        assert "try again" not in str(exc_info.value)
        assert "InternalServiceError" in str(exc_info.value)

    @pytest.mark.parametrize(
        "error",
        [
            ConnectTimeoutError(endpoint_url="https://secretsmanager.eu-west-1.amazonaws.com"),
            ReadTimeoutError(endpoint_url="https://secretsmanager.eu-west-1.amazonaws.com"),
        ],
    )
    def test_timeouts(self, error: Exception) -> None:
        client = MagicMock()
        client.get_secret_value.side_effect = error

        with pytest.raises(InfraTimeoutError, match="timed out"):
            AdapterAwsSecretsManager(client).fetch(SECRET_ID, "AWSCURRENT")

    def test_transport_failure(self) -> None:
        client = MagicMock()
        client.get_secret_value.side_effect = EndpointConnectionError(
            endpoint_url="https://secretsmanager.eu-west-1.amazonaws.com"
        )

        with pytest.raises(InfraConnectionError, match="EndpointConnectionError") as exc_info:
            AdapterAwsSecretsManager(client).fetch(SECRET_ID, "AWSCURRENT")

        assert isinstance(exc_info.value.__cause__, EndpointConnectionError)
