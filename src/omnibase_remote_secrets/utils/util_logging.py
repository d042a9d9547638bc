# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Logging setup for command-line entry points.

Library modules only create loggers; handlers and levels are the host's
business. The CLI calls ``configure_logging`` once at startup.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV_VAR = "OMNIBASE_SECRETS_LOG_LEVEL"

_VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def resolve_log_level(requested: str | None = None) -> int:
    """Resolve a level from ``requested`` or ``OMNIBASE_SECRETS_LOG_LEVEL``.

    Invalid values fall back to INFO with a warning on stderr.
    """
    log_level = (requested or os.getenv(LOG_LEVEL_ENV_VAR, "INFO")).upper()
    if log_level not in _VALID_LEVELS:
        print(
            f"Warning: Invalid {LOG_LEVEL_ENV_VAR} '{log_level}', using INFO. "
            f"Valid levels: {', '.join(sorted(_VALID_LEVELS))}",
            file=sys.stderr,
        )
        log_level = "INFO"
    return int(getattr(logging, log_level))


def configure_logging(requested: str | None = None) -> None:
    """Configure root logging with the standard format."""
    logging.basicConfig(
        level=resolve_log_level(requested),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # botocore logs request details at DEBUG; keep it quieter than ours.
    logging.getLogger("botocore").setLevel(logging.WARNING)


__all__: list[str] = ["LOG_LEVEL_ENV_VAR", "configure_logging", "resolve_log_level"]
