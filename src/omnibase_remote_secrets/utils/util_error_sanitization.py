# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error message sanitization utilities.

Third-party exception text (boto3, botocore, JSON decoder) is passed through
these helpers before it reaches a log record. Exception text can echo request
parameters, and a JSON decode error can quote the start of a secret payload.

Example:
    >>> from omnibase_remote_secrets.utils import sanitize_error_message
    >>> try:
    ...     raise ValueError("signing failed for aws_secret_access_key=abc123")
    ... except Exception as e:
    ...     safe_msg = sanitize_error_message(e)
    >>> "abc123" not in safe_msg
    True
"""

from __future__ import annotations

# Checked case-insensitively. The bare word "secret" is deliberately absent:
# nearly every Secrets Manager error mentions it.
SENSITIVE_PATTERNS: tuple[str, ...] = (
    # Credentials
    "password",
    "passwd",
    # AWS credential material
    "aws_secret_access_key",
    "secret_access_key",
    "secretaccesskey",
    "aws_access_key_id",
    "access_key_id",
    "accesskeyid",
    "aws_session_token",
    "session_token",
    "x-amz-security-token",
    # Authentication headers
    "authorization",
    "bearer",
    "credential=",
    "signature=",
    # Key material
    "private_key",
    "privatekey",
    "-----begin",
    "-----end",
    # Payload excerpts quoted by decoders
    "secretstring",
    "secretbinary",
)

_REDACTED = "[REDACTED - potentially sensitive data]"


def sanitize_error_string(error_str: str, max_length: int = 500) -> str:
    """Sanitize a raw error string for safe inclusion in logs.

    Sanitization rules:
        1. If any sensitive pattern is present, return a generic redacted message
        2. Truncate long messages to prevent excessive data exposure

    Args:
        error_str: The error string to sanitize
        max_length: Maximum length of the sanitized message (default 500)

    Returns:
        Sanitized error message safe for logging.

    Example:
        >>> sanitize_error_string("Authorization: AWS4-HMAC-SHA256 Credential=AKIA...")
        '[REDACTED - potentially sensitive data]'
    """
    if not error_str:
        return ""

    error_lower = error_str.lower()
    for pattern in SENSITIVE_PATTERNS:
        if pattern in error_lower:
            return _REDACTED

    if len(error_str) > max_length:
        return error_str[:max_length] + "... [truncated]"

    return error_str


def sanitize_error_message(exception: BaseException, max_length: int = 500) -> str:
    """Sanitize an exception for logging, prefixed with its type name.

    Args:
        exception: The exception to sanitize
        max_length: Maximum length of the sanitized message (default 500)

    Returns:
        ``"{ExceptionType}: {sanitized_message}"``
    """
    exception_type = type(exception).__name__
    sanitized = sanitize_error_string(str(exception), max_length=max_length)
    if not sanitized:
        return exception_type
    return f"{exception_type}: {sanitized}"


__all__: list[str] = [
    "SENSITIVE_PATTERNS",
    "sanitize_error_message",
    "sanitize_error_string",
]
