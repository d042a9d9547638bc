# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit test configuration.

Every test collected under tests/unit/ gets the ``unit`` marker, so the
suite can be selected with ``pytest -m unit``. Module-level ``pytestmark``
in a conftest does not propagate to sibling files, hence the collection hook.
"""

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Add the ``unit`` marker to tests under tests/unit/."""
    for item in items:
        if "tests/unit" not in str(item.path):
            continue
        if not any(marker.name == "unit" for marker in item.iter_markers()):
            item.add_marker(pytest.mark.unit)
