from __future__ import annotations

from dataclasses import dataclass

"""Cell models for the utilization table.

A data Cell carries its text plus the merge metadata the rendering surface
needs (span / visible). HeaderCell describes one column heading.
"""

__all__ = [
    "Cell",
    "HeaderCell",
]


@dataclass(frozen=True, eq=False)
class Cell:
    """One data cell.

    Compared by identity: two cells holding the same text in different
    positions are different click targets.

    Attributes:
        value: Raw cell text (all comparisons are textual)
        span: Rows covered by this cell in its column, itself included
        visible: False when absorbed into the span of a cell above it
    """
    value: str
    span: int = 1
    visible: bool = True

    def reset(self) -> Cell:
        """Return a copy with merge metadata cleared."""
        return Cell(self.value)


@dataclass(frozen=True)
class HeaderCell:
    label: str
    sortable: bool = False
