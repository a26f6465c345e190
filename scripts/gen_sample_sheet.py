#!/usr/bin/env python3
"""Generate a synthetic license exceptions workbook.

Produces a file laid out like the "Approved" tab of the exceptions
spreadsheet, suitable for smoke testing the exceptions-maker CLI:
- Row 1: header row (9 columns, A..I)
- Row 2+: one exception per row

Whitelisted values are drawn from "Yes" / "N/A" / "No"; "N/A" rows always use
the "Apache-2.0 license" mechanism so the file converts without errors unless
--inconsistent is given.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd

HEADER = [
    "Component name",
    "GitHub repo",
    "Comments",
    "License(s)",
    "SPDX license expression",
    "Approved",
    "Whitelisted",
    "Approval mechanism",
    "Reason not whitelisted",
]

LICENSES = ["MIT", "BSD-3-Clause", "ISC", "MPL-2.0", "LGPL-2.1-only", "Apache-2.0"]
MECHANISMS = ["GB vote 2019-08-20", "GB vote 2020-01-14", "Apache-2.0 license"]
REASONS = ["weak copyleft", "not on allowlist", "unusual license"]


def generate_rows(rows: int, seed: int = 42, inconsistent: int = 0) -> list[list[str]]:
    """Return `rows` synthetic exception rows (all cells text)."""
    rng = np.random.default_rng(seed)
    data: list[list[str]] = []
    for i in range(rows):
        lic = str(rng.choice(LICENSES))
        whitelisted = str(rng.choice(["Yes", "N/A", "No"]))
        if whitelisted == "N/A":
            mechanism = "Apache-2.0 license"
            lic = "Apache-2.0"
        else:
            mechanism = str(rng.choice(MECHANISMS[:2]))
        name = f"https://github.com/example/lib{i}" if i % 3 == 0 else f"lib{i}"
        data.append([
            name,
            f"github.com/example/lib{i}",
            "" if i % 4 else f"used by project {i % 7}",
            lic,
            lic,
            "Yes",
            whitelisted,
            mechanism,
            str(rng.choice(REASONS)) if whitelisted == "No" else "",
        ])
    # N/A + non-Apache mechanism: rejected by the converter
    for row in data[:inconsistent]:
        row[6] = "N/A"
        row[7] = MECHANISMS[0]
    return data


def create_workbook(output_path: Path, rows: int, sheet: str = "Approved", seed: int = 42,
                    inconsistent: int = 0) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df = pd.DataFrame([HEADER] + generate_rows(rows, seed, inconsistent))
    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=sheet, header=False, index=False)
    print(f"Created workbook: {output_path}")
    print(f"  Sheet: {sheet}")
    print(f"  Rows: {rows} (+ 1 header row)")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate a synthetic license exceptions workbook",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s data/cncf-exceptions.xlsx
  %(prog)s data/bad.xlsx --rows 50 --inconsistent 2
        """,
    )
    parser.add_argument("output", type=Path, help="Output .xlsx path")
    parser.add_argument("--rows", type=int, default=100, help="Number of data rows (default: 100)")
    parser.add_argument("--sheet", default="Approved", help="Sheet name (default: Approved)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--inconsistent", type=int, default=0,
                        help="Number of leading rows with N/A + non Apache-2.0 mechanism")
    args = parser.parse_args()

    if args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1
    if args.inconsistent < 0 or args.inconsistent > args.rows:
        print("Error: --inconsistent must be between 0 and --rows", file=sys.stderr)
        return 1

    try:
        create_workbook(args.output, args.rows, args.sheet, args.seed, args.inconsistent)
    except OSError as e:
        print(f"Error writing workbook: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
