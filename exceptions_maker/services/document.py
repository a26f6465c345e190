from __future__ import annotations

from datetime import UTC, datetime

from ..models.config_models import DocumentConfig
from ..models.document import CreationInfo, ExceptionDocument

"""Document assembly.

The generation time is passed in explicitly. The driver computes it once and
reuses the same value for the document metadata and both output file names.
"""

__all__ = [
    "DATE_FMT",
    "CREATED_FMT",
    "to_utc",
    "date_string",
    "make_document",
]

DATE_FMT = "%Y-%m-%d"
CREATED_FMT = "%Y-%m-%dT%H:%M:%SZ"


def to_utc(moment: datetime) -> datetime:
    """Normalize to an aware UTC datetime (naive values are taken as UTC)."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


def date_string(moment: datetime) -> str:
    return to_utc(moment).strftime(DATE_FMT)


def make_document(generated_at: datetime, config: DocumentConfig | None = None) -> ExceptionDocument:
    """Create an empty ExceptionDocument stamped with generated_at."""
    cfg = config or DocumentConfig()
    moment = to_utc(generated_at)
    datestr = moment.strftime(DATE_FMT)
    info = CreationInfo(
        document_name=f"{cfg.name_prefix}-{datestr}",
        document_namespace=f"{cfg.namespace_prefix}-{datestr}",
        created=moment.strftime(CREATED_FMT),
        creator_organizations=tuple(cfg.creator_organizations),
        creator_tools=tuple(cfg.creator_tools),
    )
    return ExceptionDocument(creation_info=info)
