from __future__ import annotations

from ..logging.init import get_logger
from ..models.cell import Cell
from ..models.row_grid import COLUMN_COUNT, RowGrid

"""Row merge service: collapse vertically repeated values into spanning cells.

Each column keeps its own run-head (the last row whose cell in that column was
not merged away). A row's cell merges into the run-head when both carry the
same non-empty text; otherwise it starts a new run. Rows are never reordered.
"""

__all__ = [
    "merge_rows",
]


def merge_rows(grid: RowGrid) -> RowGrid:
    """Return a new grid with merge metadata recomputed for columns 0..5.

    Any merge metadata already on the input is ignored. The caller is expected
    to have validated the grid (homogeneous width).

    Args:
        grid: Grid in its final display order

    Returns:
        Freshly annotated grid with the same row order
    """
    values = grid.values()
    if not values:
        return RowGrid()

    width = len(values[0])
    merge_width = min(COLUMN_COUNT, width)
    spans = [[1] * width for _ in values]
    visible = [[True] * width for _ in values]
    heads = [0] * merge_width

    for r in range(1, len(values)):
        for c in range(merge_width):
            value = values[r][c]
            head = heads[c]
            # empty cells never merge, even with each other
            if value and values[head][c] == value:
                spans[head][c] += 1
                visible[r][c] = False
            else:
                heads[c] = r

    get_logger().debug(f"merge: rows={len(values)} columns={merge_width}")
    return RowGrid(
        [Cell(v, spans[r][c], visible[r][c]) for c, v in enumerate(row)]
        for r, row in enumerate(values)
    )
