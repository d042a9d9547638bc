# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Exports published to the host on every successful fetch."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class ModelSecretExports(BaseModel):
    """Secrets exported from one successful fetch.

    Built fresh from each fetch and never merged with an earlier export.
    Values are ``SecretStr`` so accidental logging prints ``'**********'``.

    Example:
        >>> exports = ModelSecretExports(data={"password": SecretStr("hunter2")})
        >>> exports.data["password"]
        SecretStr('**********')
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    data: dict[str, SecretStr] = Field(
        default_factory=dict,
        description="Exported secrets keyed by bundle key",
    )

    def keys(self) -> list[str]:
        """Exported key names in sorted order."""
        return sorted(self.data)


__all__: list[str] = ["ModelSecretExports"]
