from __future__ import annotations

from ..models.document import CreationInfo, ExceptionDocument
from ..models.license_entry import LicenseEntry

"""SPDX 2.1 tag-value rendering of an ExceptionDocument.

Layout:

    SPDXVersion: SPDX-2.1
    ...
    Created: 2024-01-02T03:04:05Z

    ##### Package: <name>

    PackageName: <name>
    SPDXID: SPDXRef-Package2
    ...

Multi-line values are wrapped in <text>...</text>.
"""

__all__ = [
    "render_tag_value",
    "textify",
]


def textify(value: str) -> str:
    if "\n" in value:
        return f"<text>{value}</text>"
    return value


def _creation_info_lines(ci: CreationInfo) -> list[str]:
    lines = [
        f"SPDXVersion: {ci.spdx_version}",
        f"DataLicense: {ci.data_license}",
        f"SPDXID: {ci.spdx_id}",
        f"DocumentName: {textify(ci.document_name)}",
        f"DocumentNamespace: {ci.document_namespace}",
    ]
    lines += [f"Creator: Organization: {org}" for org in ci.creator_organizations]
    lines += [f"Creator: Tool: {tool}" for tool in ci.creator_tools]
    lines.append(f"Created: {ci.created}")
    return lines


def _package_lines(pkg: LicenseEntry) -> list[str]:
    lines = [
        f"##### Package: {pkg.name}",
        "",
        f"PackageName: {textify(pkg.name)}",
        f"SPDXID: {pkg.spdx_id}",
        f"PackageDownloadLocation: {pkg.download_location}",
        f"FilesAnalyzed: {'true' if pkg.files_analyzed else 'false'}",
        f"PackageLicenseConcluded: {pkg.license_concluded}",
        f"PackageLicenseDeclared: {pkg.license_declared}",
        f"PackageCopyrightText: {textify(pkg.copyright_text)}",
    ]
    if pkg.comment:
        lines.append(f"PackageComment: {textify(pkg.comment)}")
    return lines


def render_tag_value(document: ExceptionDocument) -> str:
    """Render the whole document; always ends with a newline."""
    blocks = ["\n".join(_creation_info_lines(document.creation_info))]
    for pkg in document.packages:
        blocks.append("\n".join(_package_lines(pkg)))
    return "\n\n".join(blocks) + "\n"
