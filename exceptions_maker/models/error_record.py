from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""ErrorRecord model for the row error log.

One ErrorRecord is written per spreadsheet row that was skipped or rejected
during conversion. Records are serialized as JSON Lines with a fixed key set
(timestamp, source, row, error_type, message).
"""

__all__ = [
    "ErrorRecord",
    "INCOMPLETE_ROW",
    "MALFORMED_ROW",
    "INCONSISTENT_APPROVAL",
]

INCOMPLETE_ROW = "INCOMPLETE_ROW"
MALFORMED_ROW = "MALFORMED_ROW"
INCONSISTENT_APPROVAL = "INCONSISTENT_APPROVAL"


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        source: Spreadsheet export the row came from
        row: Row number in the sheet (header is row 1). -1 when unknown
        error_type: Error classification in UPPER_SNAKE_CASE format
        message: Human readable description of the problem
    """
    timestamp: str  # ISO8601 UTC
    source: str
    row: int
    error_type: str  # UPPER_SNAKE
    message: str

    @staticmethod
    def create(source: str, row: int, error_type: str, message: str) -> ErrorRecord:
        """Create a new ErrorRecord stamped with the current UTC time."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            source=source,
            row=row,
            error_type=error_type,
            message=message,
        )

    def to_json_line(self) -> str:
        """Serialize to a single JSON line (no extra keys)."""
        return json.dumps(asdict(self), ensure_ascii=False)
