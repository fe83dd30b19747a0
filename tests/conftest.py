"""Shared test fixtures for gridstack tests."""

from __future__ import annotations

import pytest

from gridstack.config import GridConfig, reset_settings
from gridstack.grid.engine import GridStack


@pytest.fixture(autouse=True)
def _reset_settings():
    """Reset settings singleton between tests."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def uniform():
    """Cell-size lookup with every cell 100px wide/tall."""
    return lambda index: 100.0


@pytest.fixture
def config() -> GridConfig:
    """Five columns, five minimum rows, 2x2 default items, no margin."""
    return GridConfig(column_count=5, min_row_count=5, item_margin=0)


@pytest.fixture
def grid(config: GridConfig) -> GridStack:
    return GridStack(config)
