# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for value classification, fetch outcomes and health state."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

import pytest
from pydantic import ValidationError

from omnibase_remote_secrets.enums import EnumHealthStatus, EnumSecretValueKind
from omnibase_remote_secrets.errors import SecretResolutionError
from omnibase_remote_secrets.models import (
    ModelFetchOutcome,
    ModelHealthState,
    ModelRawSecret,
    ModelSecretExports,
    ModelSecretValue,
)


class TestClassify:
    @pytest.mark.parametrize(
        ("value", "kind", "type_name"),
        [
            ("text", EnumSecretValueKind.TEXT, "str"),
            ("", EnumSecretValueKind.TEXT, "str"),
            (b"raw", EnumSecretValueKind.BINARY, "bytes"),
            (bytearray(b"raw"), EnumSecretValueKind.BINARY, "bytearray"),
            (42, EnumSecretValueKind.UNSUPPORTED, "int"),
            (1.5, EnumSecretValueKind.UNSUPPORTED, "float"),
            (True, EnumSecretValueKind.UNSUPPORTED, "bool"),
            (None, EnumSecretValueKind.UNSUPPORTED, "NoneType"),
            ([1, 2], EnumSecretValueKind.UNSUPPORTED, "list"),
            ({"a": 1}, EnumSecretValueKind.UNSUPPORTED, "dict"),
        ],
    )
    def test_kinds(
        self, value: object, kind: EnumSecretValueKind, type_name: str
    ) -> None:
        classified = ModelSecretValue.classify(value)

        assert classified.kind is kind
        assert classified.type_name == type_name
        assert classified.kind.is_exportable is (kind is not EnumSecretValueKind.UNSUPPORTED)

    def test_text_as_secret(self) -> None:
        assert ModelSecretValue.classify("hunter2").as_secret().get_secret_value() == "hunter2"

    def test_binary_decoded_as_utf8(self) -> None:
        secret = ModelSecretValue.classify("héllo".encode()).as_secret()
        assert secret.get_secret_value() == "héllo"

    def test_invalid_utf8_replaced(self) -> None:
        secret = ModelSecretValue.classify(b"ok\xff").as_secret()
        assert secret.get_secret_value() == "ok�"

    def test_unsupported_cannot_be_exported(self) -> None:
        with pytest.raises(ValueError, match="int"):
            ModelSecretValue.classify(7).as_secret()

    def test_value_not_in_repr(self) -> None:
        assert "hunter2" not in repr(ModelSecretValue.classify("hunter2"))


class TestFetchOutcome:
    def test_success(self) -> None:
        correlation_id = uuid4()
        outcome = ModelFetchOutcome.success(
            {"a": ModelSecretValue.classify("x")},
            secret_id="prod/api",
            version_label="AWSCURRENT",
            correlation_id=correlation_id,
        )

        assert outcome.is_success
        assert outcome.error is None
        assert outcome.correlation_id == correlation_id

    def test_failure(self) -> None:
        error = SecretResolutionError("missing")
        outcome = ModelFetchOutcome.failure(
            error, secret_id="prod/api", version_label="AWSCURRENT"
        )

        assert not outcome.is_success
        assert outcome.error is error
        assert outcome.content is None

    def test_empty_content_is_success(self) -> None:
        outcome = ModelFetchOutcome.success(
            {}, secret_id="prod/api", version_label="AWSCURRENT"
        )
        assert outcome.is_success

    def test_neither_content_nor_error_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelFetchOutcome(secret_id="prod/api", version_label="AWSCURRENT")

    def test_both_content_and_error_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelFetchOutcome(
                content={},
                error=RuntimeError("boom"),
                secret_id="prod/api",
                version_label="AWSCURRENT",
            )


class TestHealthState:
    def test_initial_state_unknown(self) -> None:
        health = ModelHealthState()

        assert health.status is EnumHealthStatus.UNKNOWN
        assert not health.is_healthy
        assert health.last_updated == datetime.min.replace(tzinfo=UTC)

    def test_healthy(self) -> None:
        health = ModelHealthState(
            status=EnumHealthStatus.HEALTHY,
            message="Secrets retrieved",
            last_updated=datetime(2025, 1, 1, tzinfo=UTC),
        )
        assert health.is_healthy


class TestRawSecretAndExports:
    def test_binary_only(self) -> None:
        assert ModelRawSecret(binary_value=b"x").is_binary_only
        assert not ModelRawSecret(text_value="{}", binary_value=b"x").is_binary_only
        assert not ModelRawSecret().is_binary_only

    def test_raw_values_not_in_repr(self) -> None:
        raw = ModelRawSecret(text_value='{"password": "hunter2"}')
        assert "hunter2" not in repr(raw)

    def test_export_keys_sorted(self) -> None:
        exports = ModelSecretExports(data={"b": "2", "a": "1"})

        assert exports.keys() == ["a", "b"]
        assert "1" not in repr(exports)
