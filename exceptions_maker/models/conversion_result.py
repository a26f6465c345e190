from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .document import ExceptionDocument

"""Conversion result model: the finished document plus run counters."""

__all__ = [
    "ConversionResult",
]


@dataclass(frozen=True)
class ConversionResult:
    """Aggregated result of one conversion run (feeds the SUMMARY line)."""
    document: ExceptionDocument
    total_rows: int  # rows delivered by the source
    converted_rows: int  # rows that became packages
    incomplete_rows: int  # < 9 cells, skipped before parsing
    failed_rows: int  # rejected rows (skip mode only; abort mode raises)
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float

    @property
    def skipped_rows(self) -> int:
        return self.incomplete_rows + self.failed_rows
