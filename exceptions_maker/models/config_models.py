from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

"""Config dataclasses for the exceptions maker.

Populated by exceptions_maker.config.loader from config/exceptions.yml after
JSON Schema validation; defaults here match the CNCF "Approved" sheet and the
historical output file names.
"""

__all__ = [
    "ErrorPolicy",
    "SourceConfig",
    "OutputConfig",
    "DocumentConfig",
    "ExceptionsConfig",
]


class ErrorPolicy(Enum):
    """What the converter does with a row that fails parsing / building.

    - ABORT: stop the whole run on the first bad row (historical behavior)
    - SKIP: log the row, record it in the error log and continue
    """
    ABORT = "abort"
    SKIP = "skip"


@dataclass(frozen=True)
class SourceConfig:
    """Where the exceptions rows come from (local export of the sheet)."""
    path: str
    sheet: str = "Approved"
    first_row_number: int = 2  # row 1 = header
    trim_trailing_blanks: bool = False  # emulate Sheets API short rows


@dataclass(frozen=True)
class OutputConfig:
    directory: str = "."
    name_prefix: str = "cncf-exceptions"
    extension: str = "spdx"


@dataclass(frozen=True)
class DocumentConfig:
    """Values embedded in the manifest creation info."""
    name_prefix: str = "cncf-exceptions"
    namespace_prefix: str = "https://github.com/cncf/foundation/license-exceptions"
    creator_organizations: tuple[str, ...] = ("CNCF",)
    creator_tools: tuple[str, ...] = ("cncf-exceptions-maker-0.1",)


@dataclass(frozen=True)
class ExceptionsConfig:
    """Root configuration object."""
    source: SourceConfig
    output: OutputConfig = field(default_factory=OutputConfig)
    document: DocumentConfig = field(default_factory=DocumentConfig)
    on_error: ErrorPolicy = ErrorPolicy.ABORT
