# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Decode raw store payloads into classified key/value bundles.

This is the store-boundary decode step: a ``ModelRawSecret`` either becomes a
``dict[str, ModelSecretValue]`` or raises. Every value is classified here so
the component only ever branches on ``EnumSecretValueKind``.

Not re-exported from ``omnibase_remote_secrets.utils`` because it depends on
the models package, which itself depends on ``utils``.
"""

from __future__ import annotations

import json

from omnibase_remote_secrets.errors import (
    ModelInfraErrorContext,
    SecretPayloadDecodeError,
    UnsupportedSecretPayloadError,
)
from omnibase_remote_secrets.models.model_raw_secret import ModelRawSecret
from omnibase_remote_secrets.models.model_secret_value import ModelSecretValue

BINARY_UNSUPPORTED_MESSAGE = "binary secrets are not supported"


def decode_secret_payload(
    raw: ModelRawSecret,
    context: ModelInfraErrorContext | None = None,
) -> dict[str, ModelSecretValue]:
    """Decode the textual payload of ``raw`` as a flat JSON object.

    A payload carrying a textual value is decoded even if a binary value is
    also present; only binary-only payloads are rejected.

    Args:
        raw: Payload returned by the store.
        context: Error context for raised errors.

    Returns:
        Classified values keyed by JSON object key.

    Raises:
        UnsupportedSecretPayloadError: If the payload is binary-only.
        SecretPayloadDecodeError: If the text is not valid JSON or is not a
            JSON object. The message never quotes the payload.

    Example:
        >>> values = decode_secret_payload(ModelRawSecret(text_value='{"a": "x", "b": 1}'))
        >>> sorted((k, v.kind.value) for k, v in values.items())
        [('a', 'text'), ('b', 'unsupported')]
    """
    if raw.is_binary_only:
        raise UnsupportedSecretPayloadError(BINARY_UNSUPPORTED_MESSAGE, context=context)

    text = raw.text_value or ""
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        # from None: e.doc holds the whole payload.
        raise SecretPayloadDecodeError(
            f"secret payload is not valid JSON: {e.msg} at line {e.lineno} column {e.colno}",
            context=context,
        ) from None

    if not isinstance(document, dict):
        raise SecretPayloadDecodeError(
            f"secret payload must be a JSON object, got {_json_type_name(document)}",
            context=context,
        )

    return {str(key): ModelSecretValue.classify(value) for key, value in document.items()}


def _json_type_name(document: object) -> str:
    if isinstance(document, list):
        return "array"
    if isinstance(document, str):
        return "string"
    if isinstance(document, bool):
        return "boolean"
    if isinstance(document, (int, float)):
        return "number"
    if document is None:
        return "null"
    return type(document).__name__


__all__: list[str] = ["BINARY_UNSUPPORTED_MESSAGE", "decode_secret_payload"]
