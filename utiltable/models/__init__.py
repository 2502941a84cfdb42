"""Domain models for the utilization table view.

This package contains the grid, cell and warning records shared by the
merge, sort and filter services.
"""

from .cell import Cell, HeaderCell
from .operation_warning import OperationWarning
from .row_grid import (
    COLUMN_COUNT,
    DESCRIPTIVE_COLUMNS,
    METRIC_COLUMN,
    Row,
    RowGrid,
    StructuralError,
)

__all__ = [
    # Cells
    "Cell",
    "HeaderCell",
    # Grid
    "COLUMN_COUNT",
    "DESCRIPTIVE_COLUMNS",
    "METRIC_COLUMN",
    "Row",
    "RowGrid",
    "StructuralError",
    # Records
    "OperationWarning",
]
