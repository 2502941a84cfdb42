from __future__ import annotations

from collections.abc import Iterable, Sequence

from .cell import Cell

"""RowGrid model for the utilization table.

The grid is the single data model shared by the merge, sort and filter
services. Rows are immutable tuples of Cells; every operation derives a new
row sequence and the owner swaps it in with replace().
"""

__all__ = [
    "COLUMN_COUNT",
    "DESCRIPTIVE_COLUMNS",
    "METRIC_COLUMN",
    "Row",
    "RowGrid",
    "StructuralError",
]

# Column 0 is the metric, 1..5 are IP / Transport / Direction / Test / Modifier
COLUMN_COUNT = 6
METRIC_COLUMN = 0
DESCRIPTIVE_COLUMNS = (1, 2, 3, 4, 5)

Row = tuple[Cell, ...]


class StructuralError(Exception):
    """Raised when the grid's rows do not share one cell count."""

    def __init__(self, row: int, expected: int, actual: int, message: str | None = None) -> None:
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(message or f"inhomogeneous cell count: {actual} vs {expected}.")


class RowGrid:
    """Ordered sequence of rows with per-cell merge metadata."""

    def __init__(self, rows: Iterable[Sequence[Cell]] = ()) -> None:
        self._rows: tuple[Row, ...] = tuple(tuple(r) for r in rows)

    @classmethod
    def from_values(cls, values: Iterable[Sequence[str]]) -> RowGrid:
        """Build a grid of fresh cells (span=1, visible) from raw text rows."""
        return cls([Cell(str(v)) for v in row] for row in values)

    def rows(self) -> tuple[Row, ...]:
        return self._rows

    def replace(self, new_rows: Iterable[Sequence[Cell]]) -> None:
        """Swap the entire row sequence. The previous rows are discarded."""
        self._rows = tuple(tuple(r) for r in new_rows)

    def validate(self) -> None:
        """Check that every row has the first row's cell count.

        Raises:
            StructuralError: On the first row whose width differs, or when the
                grid is narrower than COLUMN_COUNT.
        """
        if not self._rows:
            return
        expected = len(self._rows[0])
        for index, row in enumerate(self._rows):
            if len(row) != expected:
                raise StructuralError(index, expected, len(row))
        if expected < COLUMN_COUNT:
            raise StructuralError(
                0,
                COLUMN_COUNT,
                expected,
                f"too few cells: {expected} vs at least {COLUMN_COUNT}.",
            )

    def reset_merge(self) -> RowGrid:
        """Return a grid with every cell back at span=1, visible=True."""
        return RowGrid([c.reset() for c in row] for row in self._rows)

    def values(self) -> list[tuple[str, ...]]:
        return [tuple(c.value for c in row) for row in self._rows]

    def column(self, index: int) -> list[str]:
        return [row[index].value for row in self._rows]

    @property
    def width(self) -> int:
        return len(self._rows[0]) if self._rows else 0

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self):
        return iter(self._rows)

    def __repr__(self) -> str:  # pragma: no cover (debug aid)
        return f"RowGrid(rows={len(self._rows)}, width={self.width})"
