from __future__ import annotations

from dataclasses import dataclass, field

from .license_entry import LicenseEntry

"""ExceptionDocument: the manifest container handed to both serializers."""

__all__ = [
    "CreationInfo",
    "ExceptionDocument",
]


@dataclass(frozen=True)
class CreationInfo:
    """Document-level metadata (SPDX creation info section)."""
    document_name: str
    document_namespace: str
    created: str  # YYYY-MM-DDTHH:MM:SSZ
    creator_organizations: tuple[str, ...] = ()
    creator_tools: tuple[str, ...] = ()
    spdx_version: str = "SPDX-2.1"
    data_license: str = "CC0-1.0"
    spdx_id: str = "SPDXRef-DOCUMENT"


@dataclass
class ExceptionDocument:
    """Creation info plus packages in input row order.

    Packages are only ever appended; once conversion finishes the document
    is treated as read-only.
    """
    creation_info: CreationInfo
    packages: list[LicenseEntry] = field(default_factory=list)

    def add_package(self, entry: LicenseEntry) -> None:
        self.packages.append(entry)

    def __len__(self) -> int:
        return len(self.packages)
