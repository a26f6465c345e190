from __future__ import annotations

from dataclasses import dataclass

"""LicenseEntry: one SPDX package describing a license exception."""

__all__ = [
    "NOASSERTION",
    "LicenseEntry",
]

NOASSERTION = "NOASSERTION"


@dataclass(frozen=True)
class LicenseEntry:
    """SPDX 2.1 package for a single approved exception.

    Only license_concluded and comment carry spreadsheet content besides the
    name; declared license and copyright text are never asserted.
    """
    name: str
    spdx_id: str  # SPDXRef-Package<row number>
    download_location: str = NOASSERTION
    license_concluded: str = NOASSERTION
    license_declared: str = NOASSERTION
    copyright_text: str = NOASSERTION
    files_analyzed: bool = False
    comment: str | None = None  # None = omitted from the manifest
