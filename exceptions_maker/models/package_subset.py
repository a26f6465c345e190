from __future__ import annotations

from dataclasses import asdict, dataclass

"""PackageSubset: the reduced per-package shape written to the JSON output."""

__all__ = [
    "PackageSubset",
]


@dataclass(frozen=True)
class PackageSubset:
    package: str
    license: str
    comment: str = ""  # never None

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
