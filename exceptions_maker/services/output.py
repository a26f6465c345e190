from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..models.document import ExceptionDocument
from .json_projection import render_json, to_package_subsets
from .tagvalue import render_tag_value

"""Output file naming and writing.

Both files share one date string, computed by the caller from the same
generation time used for the document metadata:

    <prefix>-<YYYY-MM-DD>.<extension>   SPDX tag-value
    <prefix>-<YYYY-MM-DD>.json          package / license / comment list
"""

__all__ = [
    "OutputError",
    "OutputPaths",
    "output_paths",
    "write_outputs",
]

logger = logging.getLogger(__name__)


class OutputError(Exception):
    """Raised when an output file cannot be written."""


@dataclass(frozen=True)
class OutputPaths:
    manifest: Path
    json: Path


def output_paths(directory: Path | str, name_prefix: str, extension: str, date_str: str) -> OutputPaths:
    base = Path(directory)
    ext = extension.lstrip(".")
    return OutputPaths(
        manifest=base / f"{name_prefix}-{date_str}.{ext}",
        json=base / f"{name_prefix}-{date_str}.json",
    )


def _write_text(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"error while saving {path}: {e}") from e


def write_outputs(document: ExceptionDocument, paths: OutputPaths) -> OutputPaths:
    """Write the tag-value manifest and the JSON projection."""
    _write_text(paths.manifest, render_tag_value(document))
    logger.info(f"Saved exceptions list as SPDX to {paths.manifest}")

    _write_text(paths.json, render_json(to_package_subsets(document)))
    logger.info(f"Saved exceptions list as JSON to {paths.json}")
    return paths
