from __future__ import annotations

from dataclasses import dataclass
from typing import Any

"""Row-level models for the exceptions spreadsheet.

SourceRow is a row exactly as the row source delivers it (untyped cells).
RowDetails is the same row after validation: nine text fields in the fixed
column order of the "Approved" sheet, plus the derived URL flag.
"""

__all__ = [
    "ROW_LENGTH",
    "COLUMN_NAMES",
    "SourceRow",
    "RowDetails",
]

# A..I
ROW_LENGTH = 9

COLUMN_NAMES = (
    "component_name",
    "github_repo",
    "comments",
    "licenses",
    "spdx_licenses",
    "approved",
    "whitelisted",
    "approval_mechanism",
    "not_whitelisted_because",
)


@dataclass(frozen=True)
class SourceRow:
    """One spreadsheet row as read from the source.

    row_number is the sheet row (header = 1, first data row = 2), used in
    log and error messages.
    """
    row_number: int
    cells: list[Any]

    @property
    def is_complete(self) -> bool:
        return len(self.cells) >= ROW_LENGTH


@dataclass(frozen=True)
class RowDetails:
    """Validated, typed view of a 9-cell exceptions row."""
    component_name: str
    github_repo: str
    comments: str
    licenses: str  # human readable
    spdx_licenses: str  # normalized license expression, not validated
    approved: str
    whitelisted: str  # "Yes" / "N/A" / anything else
    approval_mechanism: str
    not_whitelisted_because: str
    is_component_name_url: bool = False
