from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Any

import pandas as pd

from ..models.row_details import ROW_LENGTH, SourceRow

"""Row source: local export of the exceptions spreadsheet.

Reads the same range the Sheets API call used (`Approved!A2:I`):
- row 1 is the header and is skipped
- only columns A..I are kept
- every cell is read as text (dtype=str, no NaN conversion), like the
  formatted values returned by the API
- fully blank rows are dropped, but row numbers keep counting so package
  identifiers match the sheet rows
"""

__all__ = [
    "SheetReadError",
    "EXCEL_SUFFIXES",
    "read_sheet_frame",
    "frame_to_rows",
    "read_exception_rows",
]

EXCEL_SUFFIXES = {".xlsx", ".xlsm"}


class SheetReadError(Exception):
    """Raised when the spreadsheet export cannot be read."""


def read_sheet_frame(path: Path, sheet_name: str = "Approved") -> pd.DataFrame:
    """Read the raw sheet (no header handling) as a text-only DataFrame.

    CSV exports hold a single sheet, so sheet_name is ignored for them.
    """
    if not path.exists():
        raise SheetReadError(f"input file not found: {path}")

    suffix = path.suffix.lower()
    try:
        if suffix in EXCEL_SUFFIXES:
            return pd.read_excel(
                path,
                sheet_name=sheet_name,
                header=None,
                dtype=str,
                keep_default_na=False,
                engine="openpyxl",
            )
        if suffix == ".csv":
            return pd.read_csv(path, header=None, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        return pd.DataFrame()
    except ValueError as e:
        # pandas raises ValueError for a missing worksheet
        raise SheetReadError(f"unable to read {path.name} sheet '{sheet_name}': {e}") from e
    except (OSError, zipfile.BadZipFile) as e:
        raise SheetReadError(f"unable to read {path}: {e}") from e
    raise SheetReadError(f"unsupported input format: {path.suffix or path.name}")


def _trim_trailing_blanks(cells: list[Any]) -> list[Any]:
    end = len(cells)
    while end > 0 and cells[end - 1] == "":
        end -= 1
    return cells[:end]


def frame_to_rows(
    df: pd.DataFrame,
    first_row_number: int = 2,
    trim_trailing_blanks: bool = False,
) -> list[SourceRow]:
    """Turn a raw sheet frame into SourceRows (header = first frame row)."""
    if df.empty or df.shape[0] < 2:
        return []

    data_part = df.iloc[1:, :ROW_LENGTH]
    rows: list[SourceRow] = []
    for offset, raw in enumerate(data_part.itertuples(index=False, name=None)):
        cells = ["" if pd.isna(v) else v for v in raw]
        if all(c == "" for c in cells):
            continue
        if trim_trailing_blanks:
            cells = _trim_trailing_blanks(cells)
        rows.append(SourceRow(row_number=first_row_number + offset, cells=cells))
    return rows


def read_exception_rows(
    path: Path,
    sheet_name: str = "Approved",
    first_row_number: int = 2,
    trim_trailing_blanks: bool = False,
) -> list[SourceRow]:
    """Read the exceptions sheet and return its data rows in order."""
    df = read_sheet_frame(path, sheet_name)
    return frame_to_rows(df, first_row_number=first_row_number, trim_trailing_blanks=trim_trailing_blanks)
