# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Raw secret payload as returned by a secret store."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelRawSecret(BaseModel):
    """Undecoded payload of one secret revision.

    A store sets ``text_value``, ``binary_value`` or (rarely) neither. The
    values are never included in ``repr`` output.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    text_value: str | None = Field(
        default=None,
        repr=False,
        description="Textual payload (AWS SecretString)",
    )
    binary_value: bytes | None = Field(
        default=None,
        repr=False,
        description="Binary payload (AWS SecretBinary)",
    )
    version_id: str | None = Field(
        default=None,
        description="Store-side identifier of the returned revision",
    )

    @property
    def is_binary_only(self) -> bool:
        return self.binary_value is not None and self.text_value is None


__all__: list[str] = ["ModelRawSecret"]
