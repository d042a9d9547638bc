# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Load ``ModelSecretWatchConfig`` from YAML files.

Example document::

    secret_id: prod/payments/api
    version_label: AWSCURRENT
    poll_interval: 10m
    client:
      region: eu-west-1

Every failure (missing file, YAML syntax, wrong document shape, schema
validation) surfaces as ``ProtocolConfigurationError``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from omnibase_remote_secrets.enums import EnumInfraTransportType
from omnibase_remote_secrets.errors import (
    ModelInfraErrorContext,
    ProtocolConfigurationError,
)
from omnibase_remote_secrets.models.model_secret_watch_config import (
    ModelSecretWatchConfig,
)

logger = logging.getLogger(__name__)


def parse_secret_watch_config(
    data: object,
    source: str = "<mapping>",
) -> ModelSecretWatchConfig:
    """Validate an already-loaded configuration mapping.

    Raises:
        ProtocolConfigurationError: If ``data`` is not a mapping or fails
            validation. Validation messages name fields, never values.
    """
    ctx = ModelInfraErrorContext.with_correlation(
        transport_type=EnumInfraTransportType.CONFIG,
        operation="parse_config",
        target_name=source,
    )
    if not isinstance(data, dict):
        raise ProtocolConfigurationError(
            f"Configuration in {source} must be a mapping, got {type(data).__name__}",
            context=ctx,
        )
    try:
        return ModelSecretWatchConfig.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
            for error in e.errors(include_input=False)
        )
        raise ProtocolConfigurationError(
            f"Invalid secret watch configuration in {source}: {problems}",
            context=ctx,
        ) from e


def load_secret_watch_config(path: str | Path) -> ModelSecretWatchConfig:
    """Read and validate a YAML configuration file.

    Args:
        path: Path of the YAML document.

    Returns:
        The validated configuration.

    Raises:
        ProtocolConfigurationError: If the file cannot be read or parsed, or
            its contents are invalid.
    """
    config_path = Path(path)
    ctx = ModelInfraErrorContext.with_correlation(
        transport_type=EnumInfraTransportType.CONFIG,
        operation="load_config",
        target_name=str(config_path),
    )
    try:
        raw_text = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ProtocolConfigurationError(
            f"Cannot read configuration file {config_path}: {e.strerror or type(e).__name__}",
            context=ctx,
        ) from e

    try:
        data = yaml.safe_load(raw_text)
    except yaml.YAMLError as e:
        raise ProtocolConfigurationError(
            f"Configuration file {config_path} is not valid YAML",
            context=ctx,
        ) from e

    config = parse_secret_watch_config(data, source=str(config_path))
    logger.debug(
        "Loaded secret watch configuration",
        extra={
            "config_path": str(config_path),
            "secret_id": config.secret_id,
            "version_label": config.version_label,
        },
    )
    return config


__all__: list[str] = ["load_secret_watch_config", "parse_secret_watch_config"]
