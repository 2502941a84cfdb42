from __future__ import annotations

from utiltable.models.cell import Cell
from utiltable.models.row_grid import RowGrid
from utiltable.services.merge import merge_rows


def _meta(grid: RowGrid, column: int) -> list[tuple[int, bool]]:
    return [(row[column].span, row[column].visible) for row in grid.rows()]


def test_merge_collapses_runs_per_column():
    grid = RowGrid.from_values([
        ["1", "A", "x", "", "p", "q"],
        ["2", "A", "x", "", "p", "r"],
        ["3", "B", "x", "", "p", "r"],
    ])

    merged = merge_rows(grid)

    assert _meta(merged, 0) == [(1, True), (1, True), (1, True)]
    assert _meta(merged, 1) == [(2, True), (1, False), (1, True)]
    assert _meta(merged, 2) == [(3, True), (1, False), (1, False)]
    assert _meta(merged, 4) == [(3, True), (1, False), (1, False)]
    assert _meta(merged, 5) == [(1, True), (2, True), (1, False)]


def test_empty_values_never_merge():
    grid = RowGrid.from_values([
        ["1", "A", "x", "", "p", ""],
        ["2", "A", "x", "", "p", ""],
    ])

    merged = merge_rows(grid)

    assert _meta(merged, 3) == [(1, True), (1, True)]
    assert _meta(merged, 5) == [(1, True), (1, True)]


def test_columns_merge_independently():
    grid = RowGrid.from_values([
        ["1", "A", "tcp", "send", "t", "m"],
        ["1", "A", "udp", "send", "t", "m"],
        ["1", "B", "udp", "send", "t", "m"],
    ])

    merged = merge_rows(grid)

    # row 1 merges upward in column 1 but starts a new run in column 2
    assert merged.rows()[1][1].visible is False
    assert merged.rows()[1][2].visible is True
    assert merged.rows()[1][2].span == 2
    assert merged.rows()[0][3].span == 3


def test_run_head_accumulates_span_after_a_break_in_another_column():
    grid = RowGrid.from_values([
        ["1", "A", "x", "s", "t", "m"],
        ["2", "B", "x", "s", "t", "m"],
        ["3", "B", "x", "s", "t", "m"],
        ["4", "C", "x", "s", "t", "m"],
    ])

    merged = merge_rows(grid)

    assert _meta(merged, 1) == [(1, True), (2, True), (1, False), (1, True)]
    assert _meta(merged, 2) == [(4, True), (1, False), (1, False), (1, False)]


def test_merge_ignores_stale_metadata():
    stale = RowGrid([
        [Cell("1", 4, False), Cell("A", 9), Cell("x"), Cell("s"), Cell("t"), Cell("m")],
        [Cell("2", 1, False), Cell("B", 1, False), Cell("x"), Cell("s"), Cell("t"), Cell("m")],
    ])

    merged = merge_rows(stale)

    assert _meta(merged, 0) == [(1, True), (1, True)]
    assert _meta(merged, 1) == [(1, True), (1, True)]
    assert _meta(merged, 2) == [(2, True), (1, False)]


def test_merge_only_inspects_first_six_columns():
    grid = RowGrid.from_values([
        ["1", "A", "x", "s", "t", "m", "same"],
        ["2", "A", "x", "s", "t", "m", "same"],
    ])

    merged = merge_rows(grid)

    assert _meta(merged, 6) == [(1, True), (1, True)]
    assert _meta(merged, 5) == [(2, True), (1, False)]


def test_merge_keeps_order_and_input():
    values = [
        ["3", "B", "x", "s", "t", "m"],
        ["1", "A", "x", "s", "t", "m"],
    ]
    grid = RowGrid.from_values(values)

    merged = merge_rows(grid)

    assert merged is not grid
    assert merged.values() == [tuple(v) for v in values]
    assert all(c.span == 1 and c.visible for row in grid.rows() for c in row)


def test_merge_empty_grid():
    assert len(merge_rows(RowGrid())) == 0


def test_metric_column_merges_equal_values():
    grid = RowGrid.from_values([
        ["941.2", "A", "x", "s", "t", "m"],
        ["941.2", "B", "x", "s", "t", "m"],
        ["941.2", "C", "x", "s", "t", "m"],
        ["812.0", "C", "x", "s", "t", "m"],
    ])

    merged = merge_rows(grid)

    assert _meta(merged, 0) == [(3, True), (1, False), (1, False), (1, True)]


def test_metric_column_empty_values_stay_separate():
    grid = RowGrid.from_values([
        ["", "A", "x", "s", "t", "m"],
        ["", "A", "x", "s", "t", "m"],
        ["7", "A", "x", "s", "t", "m"],
    ])

    merged = merge_rows(grid)

    assert _meta(merged, 0) == [(1, True), (1, True), (1, True)]
