from __future__ import annotations

from datetime import UTC, datetime

import pytest

from exceptions_maker.models.conversion_result import ConversionResult
from exceptions_maker.services.document import make_document
from exceptions_maker.services.summary import render_summary_line


def _result(elapsed: float, total: int = 4, converted: int = 2, incomplete: int = 1, failed: int = 1):
    t = datetime(2024, 1, 1, tzinfo=UTC)
    return ConversionResult(
        document=make_document(t),
        total_rows=total,
        converted_rows=converted,
        incomplete_rows=incomplete,
        failed_rows=failed,
        start_time=t,
        end_time=t,
        elapsed_seconds=elapsed,
    )


def test_summary_line_counts():
    line = render_summary_line(_result(2.0))
    assert line == "SUMMARY rows=4 packages=2 incomplete=1 failed=1 elapsed_sec=2"


@pytest.mark.parametrize(
    "elapsed,expected",
    [
        (0, "0"),
        (3.0, "3"),
        (0.001234, "0.001234"),
        (0.25, "0.25"),
        (1.23456, "1.235"),
    ],
)
def test_summary_elapsed_format(elapsed: float, expected: str):
    assert render_summary_line(_result(elapsed)).endswith(f"elapsed_sec={expected}")


def test_skipped_rows_property():
    assert _result(0).skipped_rows == 2
