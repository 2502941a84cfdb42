#!/usr/bin/env python3
"""Sample table generator for manual and performance runs.

Generates a synthetic utilization report in the layout the reader expects:
- Row 1: Header row (metric, ip, transport, direction, test, modifier)
- Row 2+: One measurement per row

Descriptive values are drawn from small pools so that sorting and merging
produce realistic runs of repeated values.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd

HEADERS = ["utilization", "ip", "transport", "direction", "test", "modifier"]

POOLS = {
    "ip": ["10.0.0.1", "10.0.0.2", "fdd7:e83e:66bc::1", "fdd7:e83e:66bc::2"],
    "transport": ["tcp", "udp"],
    "direction": ["send", "recv", "bidir"],
    "test": ["iperf3", "tcpbench", "udpbench", "fork"],
    "modifier": ["", "-R", "-P10", "-u"],
}


def generate_sample_grid(rows: int, seed: int = 42) -> pd.DataFrame:
    """Generate a DataFrame of synthetic measurements.

    Args:
        rows: Number of measurement rows
        seed: Random seed for reproducible data

    Returns:
        DataFrame with the six report columns, all as text
    """
    rng = np.random.default_rng(seed)
    data: dict[str, list[str]] = {
        # Mbit/s, formatted as the report shows it
        "utilization": [f"{v:.1f}" for v in rng.uniform(0, 10_000, rows)],
    }
    for name, pool in POOLS.items():
        data[name] = rng.choice(pool, rows).tolist()
    return pd.DataFrame(data, columns=HEADERS)


def write_sample(output_path: Path, rows: int, seed: int = 42) -> None:
    df = generate_sample_grid(rows, seed)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if output_path.suffix.lower() == ".xlsx":
        df.to_excel(output_path, index=False, engine="openpyxl")
    else:
        sep = "\t" if output_path.suffix.lower() == ".tsv" else ","
        df.to_csv(output_path, index=False, sep=sep)
    print(f"Created table: {output_path}")
    print(f"  Rows: {rows} (+ 1 header row)")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate synthetic utilization tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s sample.csv
  %(prog)s large.xlsx --rows 100000 --seed 7
        """,
    )
    parser.add_argument("output", type=Path, help="Output .csv, .tsv or .xlsx path")
    parser.add_argument("--rows", type=int, default=200, help="Number of rows (default: 200)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args()

    if args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1

    write_sample(args.output, args.rows, args.seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
