# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Duration parsing for configuration values.

Accepts the compact duration strings operators already use for poll
frequencies (``"10m"``, ``"1h30m"``, ``"45s"``, ``"1.5h"``), plain numbers of
seconds, and ``timedelta`` instances.
"""

from __future__ import annotations

import math
import re
from datetime import timedelta

_UNIT_SECONDS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_COMPONENT_PATTERN = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")


def parse_duration(value: object) -> timedelta:
    """Convert a configuration value into a ``timedelta``.

    Args:
        value: ``timedelta``, int/float seconds, or a duration string made of
            one or more ``<number><unit>`` components (units: ns, us, ms, s,
            m, h). A bare numeric string is read as seconds.

    Returns:
        The parsed duration.

    Raises:
        ValueError: If the value cannot be parsed or is negative.

    Example:
        >>> parse_duration("1h30m")
        datetime.timedelta(seconds=5400)
        >>> parse_duration(90)
        datetime.timedelta(seconds=90)
    """
    if isinstance(value, timedelta):
        result = value
    elif isinstance(value, bool):
        raise ValueError(f"Invalid duration {value!r}")
    elif isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise ValueError(f"Invalid duration {value!r}")
        result = timedelta(seconds=value)
    elif isinstance(value, str):
        result = _parse_duration_string(value.strip())
    else:
        raise ValueError(f"Invalid duration {value!r}")

    if result < timedelta(0):
        raise ValueError(f"Duration must not be negative, got {value!r}")
    return result


def _parse_duration_string(text: str) -> timedelta:
    if not text:
        raise ValueError("Invalid duration ''")

    try:
        seconds = float(text)
    except ValueError:
        pass
    else:
        if not math.isfinite(seconds):
            raise ValueError(f"Invalid duration {text!r}")
        return timedelta(seconds=seconds)

    total = 0.0
    position = 0
    for match in _COMPONENT_PATTERN.finditer(text):
        if match.start() != position:
            break
        total += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
        position = match.end()

    if position == 0 or position != len(text):
        raise ValueError(f"Invalid duration {text!r}")
    return timedelta(seconds=total)


def format_duration(value: timedelta) -> str:
    """Render a duration in the compact form accepted by ``parse_duration``.

    Example:
        >>> format_duration(timedelta(minutes=90))
        '1h30m'
    """
    remaining = value.total_seconds()
    if remaining == 0:
        return "0s"

    parts: list[str] = []
    hours, remaining = divmod(remaining, 3600)
    minutes, seconds = divmod(remaining, 60)
    if hours:
        parts.append(f"{int(hours)}h")
    if minutes:
        parts.append(f"{int(minutes)}m")
    if seconds:
        parts.append(f"{seconds:g}s")
    return "".join(parts)


__all__: list[str] = ["format_duration", "parse_duration"]
