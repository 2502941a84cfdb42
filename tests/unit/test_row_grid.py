from __future__ import annotations

import pytest

from utiltable.models.cell import Cell
from utiltable.models.row_grid import RowGrid, StructuralError


def _six(prefix: str) -> list[str]:
    return [f"{prefix}{i}" for i in range(6)]


def test_from_values_creates_fresh_cells():
    grid = RowGrid.from_values([_six("a"), _six("b")])

    assert len(grid) == 2
    assert grid.width == 6
    for row in grid.rows():
        for cell in row:
            assert cell.span == 1
            assert cell.visible is True
    assert grid.values()[1] == tuple(_six("b"))
    assert grid.column(2) == ["a2", "b2"]


def test_replace_swaps_whole_sequence():
    grid = RowGrid.from_values([_six("a")])
    before = grid.rows()
    other = RowGrid.from_values([_six("x"), _six("y")])

    grid.replace(other.rows())

    assert grid.values() == other.values()
    # the previous tuple is left as it was
    assert before[0][0].value == "a0"


def test_validate_accepts_homogeneous_and_empty_grids():
    RowGrid.from_values([_six("a"), _six("b")]).validate()
    RowGrid().validate()


def test_validate_reports_inhomogeneous_cell_count():
    grid = RowGrid.from_values([_six("a"), _six("b"), _six("c")[:5]])

    with pytest.raises(StructuralError) as e:
        grid.validate()

    assert e.value.row == 2
    assert e.value.expected == 6
    assert e.value.actual == 5
    assert str(e.value) == "inhomogeneous cell count: 5 vs 6."


def test_validate_rejects_narrow_grid():
    grid = RowGrid.from_values([["1", "2", "3"], ["4", "5", "6"]])
    with pytest.raises(StructuralError) as e:
        grid.validate()
    assert e.value.actual == 3
    assert "too few cells" in str(e.value)


def test_validate_allows_trailing_columns():
    RowGrid.from_values([_six("a") + ["extra"], _six("b") + ["extra"]]).validate()


def test_reset_merge_clears_metadata():
    grid = RowGrid([[Cell("x", 3, True), Cell("y", 1, False)]])

    reset = grid.reset_merge()

    assert [(c.value, c.span, c.visible) for c in reset.rows()[0]] == [
        ("x", 1, True),
        ("y", 1, True),
    ]
    # input grid untouched
    assert grid.rows()[0][0].span == 3


def test_cells_compare_by_identity():
    a = Cell("tcp")
    b = Cell("tcp")
    assert a != b
    assert a == a


def test_cell_is_frozen():
    c = Cell("tcp")
    with pytest.raises(AttributeError):
        c.span = 2
