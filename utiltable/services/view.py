from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..config.loader import ViewConfig, default_config
from ..logging.init import get_logger
from ..models.cell import Cell, HeaderCell
from ..models.operation_warning import OperationWarning
from ..models.row_grid import DESCRIPTIVE_COLUMNS, Row, RowGrid, StructuralError
from .filter import filter_by_cell
from .merge import merge_rows
from .sort import sort_by_column

"""Table view: the handle that owns the displayed grid and routes clicks.

Header clicks sort, descriptive cell clicks filter. Each operation computes a
complete replacement grid and swaps it in; a StructuralError aborts the
operation, keeps the previous grid and is reported as an OperationWarning.
"""

__all__ = [
    "TableView",
    "relabel_headers",
]


def relabel_headers(headers: Sequence[str], labels: Sequence[str], marker: str) -> list[HeaderCell]:
    """Apply display names to the descriptive headers and mark them sortable.

    Column 0 and any trailing columns keep their source label.
    """
    out = [HeaderCell(str(h)) for h in headers]
    for column, label in zip(DESCRIPTIVE_COLUMNS, labels):
        if column < len(out):
            out[column] = HeaderCell(f"{label}{marker}", sortable=True)
    return out


class TableView:
    """Current grid plus header row for one rendered table.

    Holders of rows taken from ``grid.rows()`` must drop them after any
    operation; the view only ever accepts clicks on rows of its current grid.
    """

    def __init__(self, grid: RowGrid, headers: Sequence[str], config: ViewConfig | None = None) -> None:
        self.config = config or default_config()
        self.grid = grid
        self.headers = relabel_headers(headers, self.config.header_labels, self.config.sort_marker)
        self.warnings: list[OperationWarning] = []
        self.logger = get_logger()

    @classmethod
    def from_values(
        cls,
        headers: Sequence[str],
        rows: Iterable[Sequence[str]],
        config: ViewConfig | None = None,
    ) -> TableView:
        """Build a view from raw text rows and run the initial merge pass.

        Inhomogeneous rows are kept unmerged and reported in ``warnings``.
        """
        view = cls(RowGrid.from_values(rows), headers, config)
        view.refresh()
        return view

    def cell_at(self, row: int, column: int) -> tuple[Row, Cell]:
        """Return the (parent row, cell) pair a click on this position reports."""
        parent = self.grid.rows()[row]
        return parent, parent[column]

    def click_header(self, column: int) -> OperationWarning | None:
        """Sort by ``column``. Returns a warning if the operation was aborted."""
        self.logger.debug(f"header click: column={column}")
        return self._apply("sort", lambda: sort_by_column(self.grid, column))

    def click_cell(self, row: Row, cell: Cell) -> OperationWarning | None:
        """Filter on the clicked cell's value. Returns a warning if aborted."""
        self.logger.debug(f"cell click: value={cell.value!r}")
        return self._apply("filter", lambda: filter_by_cell(self.grid, row, cell))

    def _apply(self, operation: str, compute) -> OperationWarning | None:
        try:
            result = compute()
        except StructuralError as e:
            self.logger.warning(f"{operation}: {e}")
            warning = OperationWarning.create(
                operation=operation,
                row=e.row,
                expected_cells=e.expected,
                actual_cells=e.actual,
                message=str(e),
            )
            self.warnings.append(warning)
            return warning
        self.grid.replace(result.rows())
        return None

    def is_clickable(self, row: int, column: int) -> bool:
        """Descriptive cells accept filter clicks, hidden ones included.

        A hidden cell filters on its own value, which equals its run-head's.
        """
        return 0 <= row < len(self.grid) and column in DESCRIPTIVE_COLUMNS

    def refresh(self) -> OperationWarning | None:
        """Recompute merge metadata for the current row order."""
        def compute() -> RowGrid:
            self.grid.validate()
            return merge_rows(self.grid)
        return self._apply("merge", compute)
