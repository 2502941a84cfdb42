from __future__ import annotations

from .view import TableView

"""Summary line rendering for the CLI.

Format:
SUMMARY rows={rows} columns={columns} operations={ops} aborted={aborted} merged_cells={hidden}
"""


def render_summary_line(view: TableView, operations: int, aborted: int) -> str:
    """Render the SUMMARY line for a finished CLI run.

    ``merged_cells`` counts cells absorbed into a span above them.

    Examples:
        >>> view = TableView.from_values(list("mabcde"), [list("1AXyPQ"), list("2AXyPR")])
        >>> render_summary_line(view, operations=0, aborted=0)
        'SUMMARY rows=2 columns=6 operations=0 aborted=0 merged_cells=4'
    """
    merged = sum(1 for row in view.grid.rows() for c in row if not c.visible)
    return (
        f"SUMMARY rows={len(view.grid)} "
        f"columns={view.grid.width} "
        f"operations={operations} "
        f"aborted={aborted} "
        f"merged_cells={merged}"
    )
