from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from utiltable.config.loader import ConfigError, ViewConfig, default_config, load_config
from utiltable.logging.init import log_summary, setup_logging
from utiltable.services.filter import ClickTargetError
from utiltable.services.render import render_html, render_text, to_records
from utiltable.services.sort import InvalidSortColumnError
from utiltable.services.summary import render_summary_line
from utiltable.services.view import TableView
from utiltable.source.reader import (
    NarrowTableError,
    SourceHeaderError,
    SourceParseError,
    UnsupportedSourceError,
    normalize_table,
    read_table_file,
)

"""CLI entrypoint.

Flow:
- Load config (defaults when --config is omitted)
- Read the source table and run the initial merge pass
- Replay --sort / --filter in command-line order, as a sequence of clicks
- Render the final grid as text, html or json
"""

EXIT_SUCCESS_ALL = 0
EXIT_FATAL = 1
EXIT_OPERATION_ABORTED = 2

_SOURCE_ERRORS = (
    FileNotFoundError,
    NarrowTableError,
    SourceHeaderError,
    SourceParseError,
    UnsupportedSourceError,
)


def _sort_op(text: str) -> tuple[str, int, int]:
    try:
        column = int(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid column: {text!r}") from e
    return ("sort", -1, column)


def _filter_op(text: str) -> tuple[str, int, int]:
    row, sep, column = text.partition(":")
    try:
        if not sep:
            raise ValueError(text)
        return ("filter", int(row), int(column))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected ROW:COL, got {text!r}") from e


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Merge, sort and filter a utilization table")
    p.add_argument("input", type=Path, help="Source table (.csv, .tsv, .xlsx)")
    p.add_argument("--config", type=Path, default=None, help="YAML view configuration")
    p.add_argument("--sort", dest="ops", action="append", type=_sort_op, metavar="COL",
                   help="Click header COL (1-5) to sort")
    p.add_argument("--filter", dest="ops", action="append", type=_filter_op, metavar="ROW:COL",
                   help="Click data cell ROW:COL (0-based, current order) to filter")
    p.add_argument("--format", choices=["text", "html", "json"], default=None,
                   help="Output format (overrides config)")
    p.add_argument("--output", type=Path, default=None, help="Write output here instead of stdout")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _render(view: TableView, fmt: str) -> str:
    if fmt == "html":
        return render_html(view)
    if fmt == "json":
        return json.dumps(to_records(view), ensure_ascii=False, indent=2)
    return render_text(view)


def _load_view(path: Path, cfg: ViewConfig) -> TableView:
    df = read_table_file(path, sheet=cfg.source.sheet, keep_na_strings=cfg.source.keep_na_strings)
    table = normalize_table(df, path.name)
    return TableView.from_values(table.headers, table.rows, cfg)


def main(argv: list[str] | None = None) -> int:
    # None のときのみシステム引数を読む ([] はテストからの明示的な空引数)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    logger = setup_logging(debug=args.debug)
    logger.debug("debug mode enabled")

    try:
        cfg = load_config(args.config) if args.config is not None else default_config()
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    try:
        view = _load_view(args.input, cfg)
    except _SOURCE_ERRORS as e:
        logger.error(f"source: {e}")
        return EXIT_FATAL
    logger.info(f"loaded {args.input.name}: rows={len(view.grid)} columns={view.grid.width}")

    ops = args.ops or []
    for name, row, column in ops:
        try:
            if name == "sort":
                view.click_header(column)
            else:
                if not 0 <= row < len(view.grid) or not 0 <= column < view.grid.width:
                    raise ClickTargetError(f"no cell at {row}:{column}")
                view.click_cell(*view.cell_at(row, column))
        except (InvalidSortColumnError, ClickTargetError) as e:
            logger.error(f"{name}: {e}")
            return EXIT_FATAL

    output = _render(view, args.format or cfg.output.format)
    if args.output is not None:
        args.output.write_text(output + "\n", encoding="utf-8")
        logger.info(f"wrote {args.output}")
    else:
        sys.stdout.write(output + "\n")

    aborted = len(view.warnings)
    log_summary(render_summary_line(view, operations=len(ops), aborted=aborted)[len("SUMMARY "):])

    if aborted:
        return EXIT_OPERATION_ABORTED
    return EXIT_SUCCESS_ALL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
