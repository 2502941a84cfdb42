from __future__ import annotations

from ..logging.init import get_logger
from ..models.cell import Cell
from ..models.row_grid import DESCRIPTIVE_COLUMNS, Row, RowGrid
from .merge import merge_rows

"""Filter service: pull rows matching a clicked value to the top.

The click target's column is recovered from its position among the parent
row's cells. Rows whose value in that column equals the clicked value come
first, then all others; both groups keep their input order. Applying the
filter again on the result narrows further (nested stable partitions).
"""

__all__ = [
    "ClickTargetError",
    "filter_by_cell",
    "locate_column",
    "partition_rows",
]


class ClickTargetError(Exception):
    """Raised when a clicked cell cannot be resolved to a descriptive column."""


def locate_column(row: Row, cell: Cell) -> int:
    """Return the index of ``cell`` among the cells of ``row``.

    Lookup is by identity, so only a Cell object taken from ``row`` matches.

    Raises:
        ClickTargetError: The cell is not in the row, or it sits in a column
            that cannot be filtered on.
    """
    for index, sibling in enumerate(row):
        if sibling is cell:
            break
    else:
        raise ClickTargetError(f"clicked cell {cell.value!r} not found in its row")
    if index not in DESCRIPTIVE_COLUMNS:
        raise ClickTargetError(f"column {index} is not a descriptive column")
    return index


def partition_rows(rows: tuple[Row, ...], column: int, value: str) -> tuple[list[Row], list[Row]]:
    match: list[Row] = []
    others: list[Row] = []
    for row in rows:
        (match if row[column].value == value else others).append(row)
    return match, others


def filter_by_cell(grid: RowGrid, row: Row, cell: Cell) -> RowGrid:
    """Return a new grid partitioned on the clicked cell's value.

    Args:
        grid: Current grid (not modified)
        row: Row that contains the clicked cell
        cell: The clicked cell object

    Raises:
        ClickTargetError: The click target cannot be located
        StructuralError: Rows have inhomogeneous cell counts
    """
    if not any(r is row for r in grid.rows()):
        raise ClickTargetError("clicked row is not part of the current grid")
    column = locate_column(row, cell)
    grid.validate()

    match, others = partition_rows(grid.rows(), column, cell.value)
    get_logger().debug(
        f"filter: column={column} value={cell.value!r} match={len(match)} rest={len(others)}"
    )
    return merge_rows(RowGrid(match + others).reset_merge())
