# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tagged value decoded from a secret bundle.

Each value of a fetched bundle is classified exactly once, when the payload
is decoded, into TEXT, BINARY or UNSUPPORTED. Downstream code branches on
``kind`` and never inspects Python types itself.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from omnibase_remote_secrets.enums import EnumSecretValueKind


class ModelSecretValue(BaseModel):
    """One classified value of a secret bundle.

    Attributes:
        kind: Classification of the value.
        text: The value when ``kind`` is TEXT.
        binary: The value when ``kind`` is BINARY.
        type_name: Name of the original Python type, kept for diagnostics
            about unsupported values. Never the value itself.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: EnumSecretValueKind
    text: str | None = Field(default=None, repr=False)
    binary: bytes | None = Field(default=None, repr=False)
    type_name: str = Field(description="Original type name of the value")

    @classmethod
    def classify(cls, value: object) -> ModelSecretValue:
        """Classify a decoded value.

        Example:
            >>> ModelSecretValue.classify("x").kind
            <EnumSecretValueKind.TEXT: 'text'>
            >>> ModelSecretValue.classify(123).kind
            <EnumSecretValueKind.UNSUPPORTED: 'unsupported'>
        """
        type_name = type(value).__name__
        if isinstance(value, str):
            return cls(kind=EnumSecretValueKind.TEXT, text=value, type_name=type_name)
        if isinstance(value, (bytes, bytearray)):
            return cls(
                kind=EnumSecretValueKind.BINARY,
                binary=bytes(value),
                type_name=type_name,
            )
        return cls(kind=EnumSecretValueKind.UNSUPPORTED, type_name=type_name)

    def as_secret(self) -> SecretStr:
        """Wrap the value for export.

        Byte values are decoded as UTF-8; invalid sequences are replaced
        rather than failing the whole bundle.

        Raises:
            ValueError: If the value is UNSUPPORTED.
        """
        if self.kind is EnumSecretValueKind.TEXT and self.text is not None:
            return SecretStr(self.text)
        if self.kind is EnumSecretValueKind.BINARY and self.binary is not None:
            return SecretStr(self.binary.decode("utf-8", errors="replace"))
        raise ValueError(f"Value of type {self.type_name} cannot be exported")


__all__: list[str] = ["ModelSecretValue"]
