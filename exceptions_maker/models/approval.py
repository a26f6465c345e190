from __future__ import annotations

from dataclasses import dataclass

"""Approval status of a license exception, resolved once per row.

Exactly one of the three variants applies to a row; each renders the comment
segment that describes it.
"""

__all__ = [
    "Approval",
    "Whitelisted",
    "ApacheWaiver",
    "NotWhitelisted",
    "WHITELISTED_YES",
    "WHITELISTED_NA",
    "APACHE_MECHANISM",
]

WHITELISTED_YES = "Yes"
WHITELISTED_NA = "N/A"
APACHE_MECHANISM = "Apache-2.0 license"


@dataclass(frozen=True)
class Whitelisted:
    def segment(self) -> str:
        return "whitelisted"


@dataclass(frozen=True)
class ApacheWaiver:
    """Apache-2.0 licensed component; no exception approval required."""

    def segment(self) -> str:
        return "Apache-2.0, no approval needed"


@dataclass(frozen=True)
class NotWhitelisted:
    reason: str
    mechanism: str

    def segment(self) -> str:
        return f"not whitelisted because: {self.reason}; approved by {self.mechanism}"


Approval = Whitelisted | ApacheWaiver | NotWhitelisted
