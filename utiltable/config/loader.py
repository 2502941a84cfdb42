from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

"""View configuration loader.

Responsibilities:
- Load a YAML config file
- Validate it against config/schema.json
- Apply defaults for every omitted key
"""

__all__ = [
    "ConfigError",
    "OutputConfig",
    "SourceConfig",
    "ViewConfig",
    "default_config",
    "load_config",
]

SCHEMA_PATH = Path(__file__).with_name("schema.json")

DEFAULT_HEADER_LABELS = ("IP", "Transport", "Direction", "Test", "Modifier")
DEFAULT_SORT_MARKER = " →"  # &rarr;


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class SourceConfig:
    sheet: str | None = None  # xlsx sheet name, first sheet when None
    keep_na_strings: bool = True  # keep "NA"/"null" etc. as text


@dataclass(frozen=True)
class OutputConfig:
    format: str = "text"  # text | html | json
    table_class: str = "utilization"


@dataclass(frozen=True)
class ViewConfig:
    header_labels: tuple[str, ...] = DEFAULT_HEADER_LABELS  # display names for columns 1..5
    sort_marker: str = DEFAULT_SORT_MARKER
    source: SourceConfig = field(default_factory=SourceConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def default_config() -> ViewConfig:
    return ViewConfig()


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the bundled JSON schema.

    Raises:
        ConfigError: The schema file is missing or unreadable, or the data
            violates it (wrong types, unknown keys, wrong label count).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path) -> ViewConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError("config validation failed: top level must be a mapping")

    _validate_config_schema(data)

    src_raw = data.get("source") or {}
    out_raw = data.get("output") or {}
    defaults = default_config()
    return ViewConfig(
        header_labels=tuple(data.get("header_labels", defaults.header_labels)),
        sort_marker=data.get("sort_marker", defaults.sort_marker),
        source=SourceConfig(
            sheet=src_raw.get("sheet"),
            keep_na_strings=src_raw.get("keep_na_strings", True),
        ),
        output=OutputConfig(
            format=out_raw.get("format", "text"),
            table_class=out_raw.get("table_class", "utilization"),
        ),
    )
