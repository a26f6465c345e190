from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime

from ..logging.error_log import ErrorLogBuffer
from ..models.config_models import DocumentConfig, ErrorPolicy
from ..models.conversion_result import ConversionResult
from ..models.document import ExceptionDocument
from ..models.error_record import (
    INCOMPLETE_ROW,
    INCONSISTENT_APPROVAL,
    MALFORMED_ROW,
    ErrorRecord,
)
from ..models.row_details import ROW_LENGTH, SourceRow
from .document import make_document
from .progress import ProgressTracker
from .record_builder import InconsistentApprovalError, make_entry_from_row
from .row_parser import RowConversionError

"""Batch conversion of spreadsheet rows into an ExceptionDocument.

- Rows shorter than 9 cells are logged (WARN) and skipped before parsing
- Complete rows get consecutive ordinals starting at first_ordinal (2: the
  first data row under the header); the ordinal becomes SPDXRef-Package<n>
- Skipped rows do not consume an ordinal, so N packages are always numbered
  first_ordinal .. first_ordinal + N - 1
- ErrorPolicy.ABORT (default): the first bad row stops the run
- ErrorPolicy.SKIP: bad rows are logged, written to the error log, skipped

Error messages and the error log use the sheet row number of SourceRow.
"""

__all__ = [
    "ConversionAbortedError",
    "convert_rows",
]

logger = logging.getLogger(__name__)


class ConversionAbortedError(Exception):
    """Raised in abort mode when a row cannot be converted."""

    def __init__(self, row_number: int, cause: RowConversionError) -> None:
        super().__init__(f"unable to convert row {row_number} data to SPDX package: {cause}")
        self.row_number = row_number
        self.cause = cause


def _error_type(err: RowConversionError) -> str:
    if isinstance(err, InconsistentApprovalError):
        return INCONSISTENT_APPROVAL
    return MALFORMED_ROW


def convert_rows(
    rows: Sequence[SourceRow],
    generated_at: datetime,
    *,
    document_config: DocumentConfig | None = None,
    policy: ErrorPolicy = ErrorPolicy.ABORT,
    error_log: ErrorLogBuffer | None = None,
    source_name: str = "",
    first_ordinal: int = 2,
) -> ConversionResult:
    """Convert rows (in order) into a new document stamped with generated_at.

    Raises:
        ConversionAbortedError: policy is ABORT and a row failed
    """
    start_time = datetime.now(UTC)
    document: ExceptionDocument = make_document(generated_at, document_config)

    ordinal = first_ordinal
    incomplete = 0
    failed = 0

    if not rows:
        logger.info("No data found.")

    with ProgressTracker(len(rows)) as progress:
        for row in rows:
            progress.advance(row.row_number)

            if len(row.cells) < ROW_LENGTH:
                incomplete += 1
                logger.warning(f"INCOMPLETE ROW ({len(row.cells)}): {row.cells}")
                if error_log is not None:
                    error_log.append(ErrorRecord.create(
                        source_name, row.row_number, INCOMPLETE_ROW,
                        f"expected {ROW_LENGTH} cells, got {len(row.cells)}",
                    ))
                continue

            try:
                # A..I のみ対象 (それ以降の列は無視)
                entry = make_entry_from_row(row.cells[:ROW_LENGTH], ordinal)
            except RowConversionError as e:
                if error_log is not None:
                    error_log.append(ErrorRecord.create(
                        source_name, row.row_number, _error_type(e), str(e),
                    ))
                if policy is ErrorPolicy.ABORT:
                    raise ConversionAbortedError(row.row_number, e) from e
                failed += 1
                logger.error(f"row {row.row_number} skipped: {e}")
                continue

            document.add_package(entry)
            ordinal += 1
            logger.debug(f"row {row.row_number} -> {entry.spdx_id} ({entry.name})")
            progress.set_postfix(packages=len(document), skipped=incomplete + failed)

    end_time = datetime.now(UTC)
    return ConversionResult(
        document=document,
        total_rows=len(rows),
        converted_rows=len(document),
        incomplete_rows=incomplete,
        failed_rows=failed,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
    )
