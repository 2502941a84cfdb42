"""Utilization report table: row merging, cascading sort and click filtering."""

__version__ = "0.1.0"
