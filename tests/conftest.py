"""Shared pytest fixtures.

Run pytest from the project root; pythonpath in pyproject.toml puts src/ and
the root on sys.path so ``tests.rule_test_utils`` imports resolve.
"""

from unittest.mock import MagicMock

import pytest

from expect_assertions_linter.infrastructure.gateways.tree_sitter_gateway import TreeSitterGateway


@pytest.fixture
def gateway() -> TreeSitterGateway:
    return TreeSitterGateway()


@pytest.fixture
def telemetry() -> MagicMock:
    """Telemetry double; assert on step/warning/error calls."""
    return MagicMock()
