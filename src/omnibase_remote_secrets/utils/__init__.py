# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility modules for the remote secrets component.

Re-exported here:
    - util_duration: Duration parsing/formatting for configuration values
    - util_error_sanitization: Error message sanitization for secure logging
    - util_event_wait: "operation or shutdown" select for asyncio loops
    - util_logging: Logging setup for command-line entry points

Import directly (they depend on the models package):
    - util_config_loader: YAML configuration loading
    - util_secret_payload: Store payload decoding and value classification
"""

from omnibase_remote_secrets.utils.util_duration import (
    format_duration,
    parse_duration,
)
from omnibase_remote_secrets.utils.util_error_sanitization import (
    SENSITIVE_PATTERNS,
    sanitize_error_message,
    sanitize_error_string,
)
from omnibase_remote_secrets.utils.util_event_wait import wait_unless_set
from omnibase_remote_secrets.utils.util_logging import (
    configure_logging,
    resolve_log_level,
)

__all__: list[str] = [
    "SENSITIVE_PATTERNS",
    "configure_logging",
    "format_duration",
    "parse_duration",
    "resolve_log_level",
    "sanitize_error_message",
    "sanitize_error_string",
    "wait_unless_set",
]
