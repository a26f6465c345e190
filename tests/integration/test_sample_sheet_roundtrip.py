from __future__ import annotations

import importlib.util
from datetime import datetime
from pathlib import Path

import pytest

from exceptions_maker.models.config_models import ErrorPolicy
from exceptions_maker.services.converter import ConversionAbortedError, convert_rows
from exceptions_maker.sheets.reader import read_exception_rows

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "gen_sample_sheet.py"


@pytest.fixture()
def gen_module():
    spec = importlib.util.spec_from_file_location("gen_sample_sheet", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_generated_sheet_converts(gen_module, temp_workdir: Path, generated_at: datetime, capsys):
    path = temp_workdir / "data" / "sample.xlsx"
    gen_module.create_workbook(path, rows=25, seed=7)
    rows = read_exception_rows(path)
    assert len(rows) == 25

    result = convert_rows(rows, generated_at)
    assert result.converted_rows == 25
    assert result.document.packages[-1].spdx_id == "SPDXRef-Package26"
    url_pkgs = [p for p in result.document.packages if p.name.startswith("https://")]
    assert url_pkgs and all(p.download_location == p.name for p in url_pkgs)


def test_generated_inconsistent_rows(gen_module, temp_workdir: Path, generated_at: datetime, capsys):
    path = temp_workdir / "data" / "bad.xlsx"
    gen_module.create_workbook(path, rows=10, inconsistent=2)
    rows = read_exception_rows(path)

    with pytest.raises(ConversionAbortedError) as e:
        convert_rows(rows, generated_at)
    assert e.value.row_number == 2

    result = convert_rows(rows, generated_at, policy=ErrorPolicy.SKIP)
    assert result.failed_rows == 2
    assert result.converted_rows == 8
