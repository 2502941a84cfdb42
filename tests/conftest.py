# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path
import pytest

from utiltable.logging.init import reset_logging

SOURCE_HEADERS = ["Mbit/s", "ip", "transport", "direction", "test", "modifier"]

# One row per measurement, in the order the report generator emits them
SAMPLE_ROWS = [
    ["941.2", "10.0.0.2", "tcp", "send", "iperf3", ""],
    ["935.8", "10.0.0.2", "tcp", "recv", "iperf3", ""],
    ["812.0", "10.0.0.2", "udp", "send", "iperf3", "-u"],
    ["940.1", "10.0.0.1", "tcp", "send", "iperf3", ""],
    ["939.9", "10.0.0.1", "tcp", "send", "tcpbench", ""],
    ["620.4", "10.0.0.1", "tcp", "recv", "tcpbench", "-R"],
    ["410.7", "10.0.0.1", "udp", "recv", "udpbench", ""],
]


@pytest.fixture(autouse=True)
def _fresh_logger():
    # handlers bind sys.stderr at setup; rebuild them under each test's capture
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_rows() -> list[list[str]]:
    return [list(r) for r in SAMPLE_ROWS]


@pytest.fixture()
def sample_headers() -> list[str]:
    return list(SOURCE_HEADERS)


@pytest.fixture()
def sample_config_yaml() -> str:
    return """header_labels: [IP, Transport, Direction, Test, Modifier]
sort_marker: " ^"
source:
  keep_na_strings: true
output:
  format: json
  table_class: report
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "view.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def sample_csv(temp_workdir: Path) -> Path:
    lines = [",".join(SOURCE_HEADERS)] + [",".join(r) for r in SAMPLE_ROWS]
    p = temp_workdir / "data" / "utilization.csv"
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return p
