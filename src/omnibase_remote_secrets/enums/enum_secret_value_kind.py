# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Classification of individual values inside a fetched secret bundle."""

from enum import Enum


class EnumSecretValueKind(str, Enum):
    """Kind of a single value decoded from a secret payload.

    Attributes:
        TEXT: A string value, exported as a secret.
        BINARY: A byte sequence, exported as a secret.
        UNSUPPORTED: Anything else (numbers, booleans, null, nested
            structures). Dropped from the export with a warning.
    """

    TEXT = "text"
    BINARY = "binary"
    UNSUPPORTED = "unsupported"

    @property
    def is_exportable(self) -> bool:
        return self is not EnumSecretValueKind.UNSUPPORTED


__all__ = ["EnumSecretValueKind"]
