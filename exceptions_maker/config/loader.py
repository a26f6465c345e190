from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import (
    DocumentConfig,
    ErrorPolicy,
    ExceptionsConfig,
    OutputConfig,
    SourceConfig,
)

"""Config loader.

Responsibilities:
- Load YAML config (default config/exceptions.yml)
- Validate against the bundled JSON schema (config_schema.json)
- Apply defaults and build the frozen config dataclasses
"""

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "load_config",
]

DEFAULT_CONFIG_PATH = Path("config/exceptions.yml")
SCHEMA_PATH = Path(__file__).with_name("config_schema.json")


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: schema missing / unreadable, or the data violates it
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path, input_override: str | None = None) -> ExceptionsConfig:
    """Load and validate the config file.

    input_override replaces source.path (CLI --input / EXCEPTIONS_INPUT).
    """
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    src_raw = data["source"]
    source = SourceConfig(
        path=input_override or src_raw["path"],
        sheet=src_raw.get("sheet", "Approved"),
        first_row_number=src_raw.get("first_row_number", 2),
        trim_trailing_blanks=src_raw.get("trim_trailing_blanks", False),
    )

    out_raw = data.get("output", {})
    defaults_out = OutputConfig()
    output = OutputConfig(
        directory=out_raw.get("directory", defaults_out.directory),
        name_prefix=out_raw.get("name_prefix", defaults_out.name_prefix),
        extension=out_raw.get("extension", defaults_out.extension),
    )

    doc_raw = data.get("document", {})
    defaults_doc = DocumentConfig()
    document = DocumentConfig(
        name_prefix=doc_raw.get("name_prefix", defaults_doc.name_prefix),
        namespace_prefix=doc_raw.get("namespace_prefix", defaults_doc.namespace_prefix),
        creator_organizations=tuple(doc_raw.get("creator_organizations", defaults_doc.creator_organizations)),
        creator_tools=tuple(doc_raw.get("creator_tools", defaults_doc.creator_tools)),
    )

    return ExceptionsConfig(
        source=source,
        output=output,
        document=document,
        on_error=ErrorPolicy(data.get("on_error", ErrorPolicy.ABORT.value)),
    )
