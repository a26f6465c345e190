# Shared pytest fixtures
from __future__ import annotations
import tempfile
from datetime import UTC, datetime
from pathlib import Path

import pandas as pd
import pytest

from exceptions_maker.logging.init import reset_logging

HEADER = [
    "Component name", "GitHub repo", "Comments", "License(s)", "SPDX license expression",
    "Approved", "Whitelisted", "Approval mechanism", "Reason not whitelisted",
]

SAMPLE_ROWS = [
    ["libfoo", "github.com/x/libfoo", "", "MIT", "MIT", "Yes", "Yes", "", ""],
    ["https://github.com/foo/bar", "github.com/foo/bar", "used in CLI", "Apache 2", "Apache-2.0",
     "Yes", "N/A", "Apache-2.0 license", ""],
    ["libweak", "github.com/x/libweak", "", "MPL 2.0", "MPL-2.0", "Yes", "No",
     "GB vote 2019-08-20", "weak copyleft"],
]


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture(autouse=True)
def _clean_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def generated_at() -> datetime:
    return datetime(2024, 3, 5, 14, 7, 9, tzinfo=UTC)


def write_workbook(path: Path, rows: list[list[object]], sheet: str = "Approved") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        pd.DataFrame([HEADER] + rows).to_excel(writer, sheet_name=sheet, header=False, index=False)
    return path


@pytest.fixture()
def sample_workbook(temp_workdir: Path) -> Path:
    return write_workbook(temp_workdir / "data" / "cncf-exceptions.xlsx", SAMPLE_ROWS)


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source:
  path: ./data/cncf-exceptions.xlsx
  sheet: Approved
output:
  directory: ./out
  name_prefix: cncf-exceptions
  extension: spdx
document:
  name_prefix: cncf-exceptions
  namespace_prefix: https://github.com/cncf/foundation/license-exceptions
  creator_organizations: [CNCF]
  creator_tools: [cncf-exceptions-maker-0.1]
on_error: abort
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "exceptions.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def make_workbook(temp_workdir: Path):
    def _make(rows: list[list[object]], name: str = "cncf-exceptions.xlsx", sheet: str = "Approved") -> Path:
        return write_workbook(temp_workdir / "data" / name, rows, sheet=sheet)
    return _make
