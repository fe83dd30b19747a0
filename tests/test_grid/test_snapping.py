"""Tests for gridstack.grid.snapping — move and resize snapping math."""

from __future__ import annotations

import pytest

from gridstack.exceptions import CellSizeError
from gridstack.grid.snapping import cell_offset, snap_move, snap_resize


class TestSnapMove:
    @pytest.mark.parametrize(
        ("distance", "expected"),
        [(0, 0), (49, 0), (50, 0), (51, 1), (149, 1), (151, 2)],
    )
    def test_midpoint_boundary(self, uniform, distance, expected):
        assert snap_move(0, 1, 5, distance, uniform) == expected

    def test_from_later_column(self, uniform):
        assert snap_move(2, 1, 5, 0, uniform) == 2
        assert snap_move(2, 1, 5, 60, uniform) == 3
        assert snap_move(2, 1, 5, -60, uniform) == 1

    def test_clamped_to_far_edge(self, uniform):
        assert snap_move(0, 2, 5, 10_000, uniform) == 3

    def test_negative_drag_stops_at_zero(self, uniform):
        assert snap_move(2, 1, 5, -1_000, uniform) == 0

    def test_non_uniform_cells_use_cell_under_pointer(self):
        sizes = [100.0, 200.0, 100.0, 100.0, 100.0]
        # 160px lands inside the wide second column, short of its midpoint.
        assert snap_move(0, 1, 5, 160, sizes.__getitem__) == 1
        assert snap_move(1, 1, 5, 0, sizes.__getitem__) == 1
        assert snap_move(0, 1, 5, 260, sizes.__getitem__) == 2

    def test_cells_past_limit_not_measured(self):
        sizes = [100.0, 100.0, 100.0]
        # Three cells, span 1: the limit is 2, so index 2 is never looked up.
        assert snap_move(0, 1, 3, 10_000, sizes.__getitem__) == 2

    def test_missing_size_raises(self):
        with pytest.raises(CellSizeError) as excinfo:
            snap_move(3, 1, 5, 0, [100.0].__getitem__)
        assert excinfo.value.index == 1

    def test_none_size_raises(self):
        with pytest.raises(CellSizeError):
            snap_move(1, 1, 5, 0, lambda i: None)


class TestSnapResize:
    def test_unchanged_size_keeps_span(self, uniform):
        assert snap_resize(200, 0, 5, 0, uniform) == 2

    @pytest.mark.parametrize(
        ("distance", "expected"),
        [(40, 2), (50, 2), (51, 3), (160, 4)],
    )
    def test_grow_snaps_at_midpoint(self, uniform, distance, expected):
        assert snap_resize(200, 0, 5, distance, uniform) == expected

    def test_shrink(self, uniform):
        assert snap_resize(200, 0, 5, -60, uniform) == 1

    def test_never_below_one(self, uniform):
        assert snap_resize(100, 0, 5, -1_000, uniform) == 1

    def test_limited_by_start_cell(self, uniform):
        assert snap_resize(100, 3, 5, 10_000, uniform) == 2
        assert snap_resize(100, 0, 5, 10_000, uniform) == 5

    def test_margin_shrunk_extent_rounds_back(self, uniform):
        # Item drawn 10px narrower than its two cells still snaps to two.
        assert snap_resize(190, 1, 5, 0, uniform) == 2

    def test_missing_size_raises(self):
        with pytest.raises(CellSizeError):
            snap_resize(100, 0, 5, 500, [100.0].__getitem__)


class TestCellOffset:
    def test_sums_leading_cells(self):
        assert cell_offset([10.0, 20.0, 30.0].__getitem__, 2) == 30.0

    def test_zero_index(self, uniform):
        assert cell_offset(uniform, 0) == 0
