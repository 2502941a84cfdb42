from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pandas as pd
import pandas._libs.parsers as parsers

from ..models.row_grid import COLUMN_COUNT

"""Table source reader.

The first row of the file is the header, every following row is one
measurement. Cells are read as text. A short csv/tsv line keeps its own
width so the grid can report it. Nothing is type-converted since all table
comparisons are textual.
"""

__all__ = [
    "NarrowTableError",
    "SourceHeaderError",
    "SourceParseError",
    "TableSource",
    "UnsupportedSourceError",
    "normalize_table",
    "read_table_file",
]

_DELIMITERS = {".csv": ",", ".tsv": "\t"}
_EXCEL_SUFFIXES = {".xlsx", ".xls"}


class SourceHeaderError(Exception):
    """Raised when the header row is missing."""

class NarrowTableError(Exception):
    """Raised when the table has fewer columns than the view needs."""

class UnsupportedSourceError(Exception):
    """Raised for file types the reader does not handle."""

class SourceParseError(Exception):
    """Raised when pandas cannot parse the file (e.g. a line longer than the header)."""


@dataclass
class TableSource:
    name: str
    headers: list[str]
    rows: list[list[str]]


def read_table_file(path: Path, sheet: str | None = None, keep_na_strings: bool = True) -> pd.DataFrame:
    """Read a csv/tsv/xlsx file into a raw DataFrame of strings.

    Parameters
    ----------
    path: source file
    sheet: Excel sheet name (first sheet when None; ignored for csv/tsv)
    keep_na_strings: keep pandas' default NA tokens ("NA", "null", ...) as text
    """
    suffix = path.suffix.lower()
    if suffix in _DELIMITERS:
        try:
            # NaN is left only where a short line has no cell at all
            df = pd.read_csv(path, sep=_DELIMITERS[suffix], header=None, dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError as e:
            raise SourceHeaderError(f"table '{path.name}' is empty") from e
        except pd.errors.ParserError as e:
            raise SourceParseError(f"cannot parse {path.name}: {e}") from e
        if not keep_na_strings:
            df = df.replace(sorted(parsers.STR_NA_VALUES), "")
        return df
    if suffix in _EXCEL_SUFFIXES:
        df = pd.read_excel(
            path, sheet_name=sheet or 0, header=None, dtype=str, keep_default_na=not keep_na_strings
        )
        # sheets have no ragged rows; empty cells are plain empty text
        return df.fillna("")
    raise UnsupportedSourceError(f"unsupported source file: {path.name}")


def normalize_table(df: pd.DataFrame, name: str) -> TableSource:
    """Split a raw DataFrame into header and data rows.

    Steps:
    1. Validate a header row exists
    2. Validate there are at least COLUMN_COUNT columns
    3. Remaining rows become data rows; all-blank rows are skipped
    4. NaN cells past a row's last value are dropped so short source lines
       keep their real width
    """
    if df.shape[0] < 1:
        raise SourceHeaderError(f"table '{name}' has no header row")
    if df.shape[1] < COLUMN_COUNT:
        raise NarrowTableError(
            f"table '{name}' has {df.shape[1]} columns, expected at least {COLUMN_COUNT}"
        )
    headers = [str(h).strip() for h in df.iloc[0].fillna("").tolist()]
    rows: list[list[str]] = []
    for _, raw in df.iloc[1:].iterrows():
        cells = raw.tolist()
        width = max((i + 1 for i, v in enumerate(cells) if not pd.isna(v)), default=0)
        values = ["" if pd.isna(v) else str(v) for v in cells[:width]]
        if not any(v.strip() for v in values):
            continue
        rows.append(values)
    return TableSource(name=name, headers=headers, rows=rows)
