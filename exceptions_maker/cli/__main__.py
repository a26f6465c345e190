from __future__ import annotations

import argparse
import os
import sys
from dataclasses import replace
from datetime import UTC, datetime
from pathlib import Path

from dotenv import load_dotenv

from exceptions_maker.config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from exceptions_maker.logging.error_log import ErrorLogBuffer
from exceptions_maker.logging.init import log_summary, setup_logging
from exceptions_maker.models.config_models import ErrorPolicy, ExceptionsConfig
from exceptions_maker.services.converter import ConversionAbortedError, convert_rows
from exceptions_maker.services.document import date_string
from exceptions_maker.services.output import OutputError, output_paths, write_outputs
from exceptions_maker.services.summary import render_summary_line
from exceptions_maker.sheets.reader import SheetReadError, read_exception_rows, read_sheet_frame

"""CLI entrypoint.

Flow:
- Load .env, then config (YAML + schema)
- Read the exceptions rows from the local sheet export
- Convert rows into the SPDX document (abort / skip policy)
- Write <prefix>-<date>.<ext> (tag-value) and <prefix>-<date>.json
- Print the SUMMARY line
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_PARTIAL_FAILURE = 2

CONFIG_ENV = "EXCEPTIONS_CONFIG"
INPUT_ENV = "EXCEPTIONS_INPUT"


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="exceptions-maker",
        description="Convert the license exceptions spreadsheet into SPDX and JSON",
    )
    p.add_argument("--config", type=Path, default=None, help=f"Config file (default: {DEFAULT_CONFIG_PATH})")
    p.add_argument("--input", default=None, help="Spreadsheet export to read (overrides source.path)")
    p.add_argument("--output-dir", default=None, help="Directory for the output files")
    p.add_argument("--skip-invalid", action="store_true", help="Skip rows that fail conversion instead of aborting")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print the sheet header & first rows then exit")
    return p.parse_args(argv)


def _resolve_config(args: argparse.Namespace) -> ExceptionsConfig:
    config_path = args.config or Path(os.getenv(CONFIG_ENV) or DEFAULT_CONFIG_PATH)
    cfg = load_config(config_path, input_override=args.input or os.getenv(INPUT_ENV))
    if args.output_dir:
        cfg = replace(cfg, output=replace(cfg.output, directory=args.output_dir))
    if args.skip_invalid:
        cfg = replace(cfg, on_error=ErrorPolicy.SKIP)
    return cfg


def _inspect_data(cfg: ExceptionsConfig) -> int:
    path = Path(cfg.source.path)
    try:
        df = read_sheet_frame(path, cfg.source.sheet)
    except SheetReadError as e:
        print(f"inspect: {e}")
        return EXIT_FATAL
    print(f"FILE: {path.name} SHEET: {cfg.source.sheet} shape={df.shape}")
    if df.empty:
        print("  (empty)")
        return EXIT_SUCCESS
    print(f"  header={df.iloc[0].tolist()}")
    for _, raw in df.iloc[1:4].iterrows():
        print(f"  row={raw.tolist()}")
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    # None のときのみ sys.argv を読む (テストから [] を渡せるように)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    logger = setup_logging(debug=args.debug)
    logger.debug("debug mode enabled")

    load_dotenv(dotenv_path=Path(".env"), override=True)

    try:
        cfg = _resolve_config(args)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if args.inspect_data:
        return _inspect_data(cfg)

    source = Path(cfg.source.path)
    logger.info(f"Reading exceptions from: {source} (sheet {cfg.source.sheet})")
    try:
        rows = read_exception_rows(
            source,
            sheet_name=cfg.source.sheet,
            first_row_number=cfg.source.first_row_number,
            trim_trailing_blanks=cfg.source.trim_trailing_blanks,
        )
    except SheetReadError as e:
        logger.error(f"input: {e}")
        return EXIT_FATAL

    # computed once: document metadata and both file names share this date
    generated_at = datetime.now(UTC)
    error_log = ErrorLogBuffer()
    try:
        result = convert_rows(
            rows,
            generated_at,
            document_config=cfg.document,
            policy=cfg.on_error,
            error_log=error_log,
            source_name=source.name,
            first_ordinal=cfg.source.first_row_number,
        )
    except ConversionAbortedError as e:
        logger.error(f"conversion: {e}")
        error_log.flush()
        return EXIT_FATAL

    log_path = error_log.flush()
    if log_path is not None:
        logger.info(f"Skipped rows written to {log_path}")

    paths = output_paths(
        cfg.output.directory,
        cfg.output.name_prefix,
        cfg.output.extension,
        date_string(generated_at),
    )
    try:
        write_outputs(result.document, paths)
    except OutputError as e:
        logger.error(f"output: {e}")
        return EXIT_FATAL

    log_summary(render_summary_line(result).removeprefix("SUMMARY "))

    if result.failed_rows > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
