from __future__ import annotations

import json

from ..models.document import ExceptionDocument
from ..models.package_subset import PackageSubset

"""JSON projection of the manifest (package / license / comment per entry)."""

__all__ = [
    "to_package_subsets",
    "render_json",
]


def to_package_subsets(document: ExceptionDocument) -> list[PackageSubset]:
    """Project every package, in document order. Missing comments become ""."""
    return [
        PackageSubset(
            package=pkg.name,
            license=pkg.license_concluded,
            comment=pkg.comment or "",
        )
        for pkg in document.packages
    ]


def render_json(subsets: list[PackageSubset]) -> str:
    """Pretty-print with 2-space indentation."""
    return json.dumps([s.to_dict() for s in subsets], indent=2, ensure_ascii=False)
