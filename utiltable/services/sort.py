from __future__ import annotations

from functools import cmp_to_key

from ..logging.init import get_logger
from ..models.row_grid import DESCRIPTIVE_COLUMNS, Row, RowGrid
from .merge import merge_rows

"""Sort service: order rows by one descriptive column with a cyclic tie-break.

Ties on the chosen column are broken by the remaining descriptive columns in
wraparound order (k, k+1, ..., 5, 1, ..., k-1). The metric column 0 is never
consulted. Comparison is textual and ascending only. Rows tied on all five
descriptive columns keep their input order.

Text is ordered by Unicode code point, not UTF-16 code unit, so astral
characters sort after everything in the BMP.
"""

__all__ = [
    "InvalidSortColumnError",
    "cascade_order",
    "sort_by_column",
]


class InvalidSortColumnError(Exception):
    """Raised when a sort is requested on a non-descriptive column."""


def cascade_order(column: int) -> list[int]:
    """Columns consulted when sorting by ``column``, in order."""
    if column not in DESCRIPTIVE_COLUMNS:
        raise InvalidSortColumnError(
            f"column {column} is not sortable (expected one of {list(DESCRIPTIVE_COLUMNS)})"
        )
    start = DESCRIPTIVE_COLUMNS.index(column)
    return list(DESCRIPTIVE_COLUMNS[start:] + DESCRIPTIVE_COLUMNS[:start])


def _make_comparator(order: list[int]):
    def compare(a: Row, b: Row) -> int:
        for c in order:
            av, bv = a[c].value, b[c].value
            if av != bv:
                return -1 if av < bv else 1
        return 0
    return compare


def sort_by_column(grid: RowGrid, column: int) -> RowGrid:
    """Return a new grid sorted by ``column`` with merge metadata rebuilt.

    Args:
        grid: Current grid (not modified)
        column: Descriptive column index, 1..5

    Raises:
        InvalidSortColumnError: ``column`` is not a descriptive column
        StructuralError: Rows have inhomogeneous cell counts
    """
    order = cascade_order(column)
    grid.validate()

    # sorted() is stable, so full ties keep input order
    rows = sorted(grid.rows(), key=cmp_to_key(_make_comparator(order)))
    get_logger().debug(f"sort: column={column} cascade={order} rows={len(rows)}")
    return merge_rows(RowGrid(rows).reset_merge())
