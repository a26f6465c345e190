from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..models.approval import (
    APACHE_MECHANISM,
    WHITELISTED_NA,
    WHITELISTED_YES,
    ApacheWaiver,
    Approval,
    NotWhitelisted,
    Whitelisted,
)
from ..models.license_entry import NOASSERTION, LicenseEntry
from ..models.row_details import RowDetails
from .row_parser import RowConversionError, parse_row

"""Record builder: RowDetails -> LicenseEntry (SPDX package).

The package comment is composed from the free-text comment column and the
approval status. Approval is resolved once per row into one of the
Whitelisted / ApacheWaiver / NotWhitelisted variants and then rendered.
"""

__all__ = [
    "InconsistentApprovalError",
    "COMMENT_SEPARATOR",
    "package_spdx_id",
    "resolve_approval",
    "prepare_comment",
    "make_license_entry",
    "make_entry_from_row",
]

COMMENT_SEPARATOR = "; "


class InconsistentApprovalError(RowConversionError):
    """Whitelisted is "N/A" but the approval mechanism is not the Apache-2.0 waiver.

    This is a data entry problem in the sheet and needs a human fix; it is
    never defaulted.
    """

    def __init__(self, message: str, row_number: int | None = None, mechanism: str = "") -> None:
        super().__init__(message, row_number)
        self.mechanism = mechanism


def package_spdx_id(row_number: int) -> str:
    return f"SPDXRef-Package{row_number}"


def resolve_approval(details: RowDetails, row_number: int | None = None) -> Approval:
    """Classify the whitelisting columns of a row.

    Raises:
        InconsistentApprovalError: "N/A" paired with a non Apache-2.0 mechanism
    """
    if details.whitelisted == WHITELISTED_YES:
        return Whitelisted()
    if details.whitelisted == WHITELISTED_NA:
        if details.approval_mechanism == APACHE_MECHANISM:
            return ApacheWaiver()
        raise InconsistentApprovalError(
            f"N/A for whitelisted but not Apache-2.0: component={details.component_name!r} "
            f"approval_mechanism={details.approval_mechanism!r}",
            row_number=row_number,
            mechanism=details.approval_mechanism,
        )
    return NotWhitelisted(
        reason=details.not_whitelisted_because,
        mechanism=details.approval_mechanism,
    )


def prepare_comment(details: RowDetails, row_number: int | None = None) -> str:
    """Compose the package comment ("" when there is nothing to say)."""
    segments: list[str] = []
    if details.comments != "":
        segments.append(details.comments)
    segments.append(resolve_approval(details, row_number).segment())
    return COMMENT_SEPARATOR.join(segments)


def make_license_entry(details: RowDetails, row_number: int) -> LicenseEntry:
    """Build the SPDX package for a parsed row.

    row_number is used as-is for the identifier; callers own the sequence.
    """
    comment = prepare_comment(details, row_number)
    return LicenseEntry(
        name=details.component_name,
        spdx_id=package_spdx_id(row_number),
        download_location=details.component_name if details.is_component_name_url else NOASSERTION,
        # license expression is trusted, not validated
        license_concluded=details.spdx_licenses,
        license_declared=NOASSERTION,
        copyright_text=NOASSERTION,
        files_analyzed=False,
        comment=comment or None,
    )


def make_entry_from_row(row: Sequence[Any], row_number: int) -> LicenseEntry:
    """Parse a raw row and build its package in one step."""
    details = parse_row(row, row_number)
    return make_license_entry(details, row_number)
