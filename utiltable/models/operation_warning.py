from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""OperationWarning model for aborted table operations.

A sort or filter that hits a StructuralError is abandoned and leaves the
displayed grid untouched; the caller receives one of these records instead.
Supports row=-1 when the offending row cannot be determined.
"""

__all__ = [
    "OperationWarning",
]


@dataclass(frozen=True)
class OperationWarning:
    """Structured warning for an aborted operation.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        operation: "merge", "sort" or "filter"
        row: Index of the offending row, -1 if unknown
        expected_cells: Cell count taken from the reference row
        actual_cells: Cell count found on the offending row
        message: Human readable diagnostic
    """
    timestamp: str  # ISO8601 UTC
    operation: str
    row: int
    expected_cells: int
    actual_cells: int
    message: str

    @staticmethod
    def create(
        operation: str, row: int, expected_cells: int, actual_cells: int, message: str
    ) -> OperationWarning:
        """Create a new OperationWarning stamped with the current UTC time."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return OperationWarning(
            timestamp=ts,
            operation=operation,
            row=row,
            expected_cells=expected_cells,
            actual_cells=actual_cells,
            message=message,
        )

    def to_json_line(self) -> str:
        """Serialize to a single JSON line with a fixed key set."""
        return json.dumps(asdict(self), ensure_ascii=False)
