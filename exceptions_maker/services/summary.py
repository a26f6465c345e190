from __future__ import annotations

from ..models.conversion_result import ConversionResult

"""SUMMARY line rendering."""


def _format_seconds(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # avoid scientific notation for tiny durations
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return f"{value:.3f}".rstrip("0").rstrip(".")


def render_summary_line(result: ConversionResult) -> str:
    """Render the SUMMARY line for a finished conversion.

    Format:
    SUMMARY rows={total} packages={converted} incomplete={incomplete}
    failed={failed} elapsed_sec={elapsed}

    Examples:
        >>> from datetime import datetime, timezone
        >>> from exceptions_maker.models.document import CreationInfo, ExceptionDocument
        >>> t = datetime(2024, 1, 1, tzinfo=timezone.utc)
        >>> doc = ExceptionDocument(CreationInfo("n", "ns", "2024-01-01T00:00:00Z"))
        >>> result = ConversionResult(
        ...     document=doc, total_rows=3, converted_rows=2, incomplete_rows=1,
        ...     failed_rows=0, start_time=t, end_time=t, elapsed_seconds=2.0,
        ... )
        >>> render_summary_line(result)
        'SUMMARY rows=3 packages=2 incomplete=1 failed=0 elapsed_sec=2'
    """
    return (
        f"SUMMARY rows={result.total_rows} "
        f"packages={result.converted_rows} "
        f"incomplete={result.incomplete_rows} "
        f"failed={result.failed_rows} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
