from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from urllib.parse import urlparse

from ..models.row_details import COLUMN_NAMES, ROW_LENGTH, RowDetails

"""Row parser: raw 9-cell spreadsheet row -> RowDetails.

Validation only. Cell values are carried through verbatim; the only derived
value is is_component_name_url.
"""

__all__ = [
    "RowConversionError",
    "MalformedRowError",
    "parse_row",
    "is_absolute_uri",
]


class RowConversionError(Exception):
    """Base exception for a row that cannot be turned into a package."""

    def __init__(self, message: str, row_number: int | None = None) -> None:
        super().__init__(message)
        self.row_number = row_number


class MalformedRowError(RowConversionError):
    """Raised when a row violates the fixed 9-column text layout."""

    def __init__(
        self,
        message: str,
        row_number: int | None = None,
        position: int | None = None,
        expected: str | None = None,
    ) -> None:
        super().__init__(message, row_number)
        self.position = position
        self.expected = expected


def is_absolute_uri(value: str) -> bool:
    """Return True when value is an absolute URI (scheme plus host or path).

    "https://github.com/foo/bar" -> True
    "github.com/foo/bar", "foo-library", "" -> False
    """
    if not value or value != value.strip():
        return False
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    if not parsed.scheme:
        return False
    return bool(parsed.netloc or parsed.path)


def parse_row(row: Sequence[Any], row_number: int | None = None) -> RowDetails:
    """Validate a raw row and return its typed RowDetails.

    Raises:
        MalformedRowError: row is not exactly 9 cells, or a cell is not str
    """
    if len(row) != ROW_LENGTH:
        raise MalformedRowError(
            f"expected row of length {ROW_LENGTH}, got {len(row)}",
            row_number=row_number,
        )

    values: dict[str, str] = {}
    for position, (name, cell) in enumerate(zip(COLUMN_NAMES, row)):
        if not isinstance(cell, str):
            raise MalformedRowError(
                f"row[{position}] ({name}) expected str, got "
                f"{type(cell).__name__}: {cell!r}",
                row_number=row_number,
                position=position,
                expected="str",
            )
        values[name] = cell

    return RowDetails(
        **values,
        is_component_name_url=is_absolute_uri(values["component_name"]),
    )
