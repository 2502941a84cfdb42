from __future__ import annotations

from html import escape
from typing import Any

from ..models.row_grid import DESCRIPTIVE_COLUMNS
from .view import TableView

"""Rendering adapters for a TableView.

The merge metadata maps onto HTML directly: span > 1 becomes rowspan and an
absorbed cell is emitted with the hidden attribute. The text renderer blanks
absorbed cells instead.
"""

__all__ = [
    "render_html",
    "render_text",
    "to_records",
]


def to_records(view: TableView) -> dict[str, Any]:
    """JSON-ready snapshot of headers and per-cell merge annotations."""
    return {
        "headers": [{"label": h.label, "sortable": h.sortable} for h in view.headers],
        "rows": [
            [{"value": c.value, "span": c.span, "visible": c.visible} for c in row]
            for row in view.grid.rows()
        ],
    }


def render_html(view: TableView, table_class: str | None = None) -> str:
    table_class = table_class or view.config.output.table_class
    lines = [f'<table class="{escape(table_class)}">', "<thead>", "<tr>"]
    for h in view.headers:
        cls = ' class="desc"' if h.sortable else ""
        lines.append(f"<th{cls}>{escape(h.label)}</th>")
    lines += ["</tr>", "</thead>", "<tbody>"]
    for row in view.grid.rows():
        cells = []
        for index, cell in enumerate(row):
            attrs = ""
            if index in DESCRIPTIVE_COLUMNS:
                attrs += ' class="desc"'
            if cell.span > 1:
                attrs += f' rowspan="{cell.span}"'
            if not cell.visible:
                attrs += " hidden"
            cells.append(f"<td{attrs}>{escape(cell.value)}</td>")
        lines.append("<tr>" + "".join(cells) + "</tr>")
    lines += ["</tbody>", "</table>"]
    return "\n".join(lines)


def render_text(view: TableView) -> str:
    header = [h.label for h in view.headers]
    body = [[c.value if c.visible else "" for c in row] for row in view.grid.rows()]
    widths = [len(h) for h in header]
    for row in body:
        for i, v in enumerate(row):
            if i < len(widths):
                widths[i] = max(widths[i], len(v))
            else:
                widths.append(len(v))

    def fmt(values: list[str]) -> str:
        return " | ".join(v.ljust(widths[i]) for i, v in enumerate(values)).rstrip()

    out = [fmt(header), "-+-".join("-" * w for w in widths)]
    out.extend(fmt(row) for row in body)
    return "\n".join(out)
