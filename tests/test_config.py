"""Tests for gridstack.config — grid config validation, settings and singleton."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from gridstack.config import GridConfig, GridStackSettings, get_settings, reset_settings
from gridstack.exceptions import ConfigurationError


class TestGridConfig:
    def test_defaults(self):
        c = GridConfig()
        assert c.column_count == 5
        assert c.min_row_count == 5
        assert (c.default_column_span, c.default_row_span) == (2, 2)
        assert c.item_margin == 5.0
        assert c.auto_assign is True

    def test_min_row_count_must_be_positive(self):
        with pytest.raises(ValidationError):
            GridConfig(min_row_count=0)

    def test_column_count_must_be_positive(self):
        with pytest.raises(ValidationError):
            GridConfig(column_count=0, default_column_span=1)

    def test_default_span_wider_than_grid_rejected(self):
        with pytest.raises(ValidationError, match="default_column_span"):
            GridConfig(column_count=3, default_column_span=4)

    def test_negative_margin_rejected(self):
        with pytest.raises(ValidationError):
            GridConfig(item_margin=-1)

    def test_frozen(self):
        c = GridConfig()
        with pytest.raises(ValidationError):
            c.column_count = 12


class TestGridStackSettings:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("GRIDSTACK_COLUMN_COUNT", "12")
        monkeypatch.setenv("GRIDSTACK_AUTO_ASSIGN", "false")
        s = GridStackSettings()
        assert s.column_count == 12
        assert s.auto_assign is False

    def test_grid_config_from_settings(self):
        s = GridStackSettings(column_count=8, min_row_count=3)
        c = s.grid_config()
        assert c.column_count == 8
        assert c.min_row_count == 3

    def test_grid_config_overrides(self):
        s = GridStackSettings(column_count=8)
        c = s.grid_config(column_count=4, default_column_span=1)
        assert c.column_count == 4
        assert c.default_column_span == 1

    def test_invalid_combination_raises_configuration_error(self):
        s = GridStackSettings(column_count=1)
        with pytest.raises(ConfigurationError, match="Invalid grid settings"):
            s.grid_config()


class TestGetSettings:
    def test_singleton_caches(self):
        reset_settings()
        s1 = get_settings()
        s2 = get_settings()
        assert s1 is s2

    def test_overrides_bypass_cache(self):
        s1 = get_settings()
        s2 = get_settings(column_count=7)
        assert s2.column_count == 7
        assert s1 is not s2
