from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import ConfigError, default_config, load_config
from ..errors import InvoiceSheetError, SheetReadError
from ..excel.writer import to_json, write_result
from ..logging.error_log import ErrorLogBuffer
from ..logging.init import log_summary, setup_logging
from ..models.config_models import ExtractorConfig
from ..services.orchestrator import process_file
from ..services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env, then the YAML config (--config or INVOICE_SHEET_CONFIG)
- Decode the workbook and run the extraction pipeline
- Write validation errors to the JSON Lines error log
- Emit the result (stdout JSON or --output file) and a SUMMARY line
"""

EXIT_SUCCESS_ALL = 0
EXIT_FATAL = 1
EXIT_VALIDATION_ERRORS = 2

CONFIG_ENV = "INVOICE_SHEET_CONFIG"


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env using python-dotenv. Failures only produce a warning."""
    try:
        if path.exists():
            load_dotenv(dotenv_path=path, override=override)
    except OSError as e:  # pragma: no cover
        logging.getLogger(__name__).warning(f"failed to load .env: {e}")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="invoice-sheet", description="Extract invoice records from a spreadsheet"
    )
    p.add_argument("file", type=Path, help="Workbook (.xlsx) to process")
    p.add_argument("--month", required=True, help="Expected invoicing month, e.g. 'Sep 2023' or 2023-09")
    p.add_argument("--config", type=Path, default=None, help="YAML config file")
    p.add_argument("--output", type=Path, default=None, help="Write result to .json/.csv/.xlsx instead of stdout")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _resolve_config(args: argparse.Namespace) -> ExtractorConfig:
    path = args.config or (Path(os.environ[CONFIG_ENV]) if os.getenv(CONFIG_ENV) else None)
    if path is None:
        return default_config()
    return load_config(path)


def main(argv: list[str] | None = None) -> int:
    # None のときのみ sys.argv を読む (テストで [] を渡せるように)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    # stdout に JSON を出す場合、ログは stderr へ
    logger = setup_logging(
        level=logging.DEBUG if args.debug else logging.INFO,
        stream=sys.stdout if args.output else sys.stderr,
    )
    if args.debug:
        for h in logger.handlers:
            h.setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
        logger.debug("debug mode enabled")

    _load_env_file(Path(".env"))

    try:
        cfg = _resolve_config(args)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    try:
        result = process_file(args.file, args.month, cfg)
    except SheetReadError as e:
        logger.error(f"read: {e}")
        return EXIT_FATAL
    except InvoiceSheetError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    buffer = ErrorLogBuffer(Path(cfg.error_log_dir))
    if buffer.extend_from_invoices(args.file.name, result.invoices):
        log_path = buffer.flush()
        logger.warning(f"validation errors written to {log_path}")

    if args.output:
        try:
            write_result(result, args.output)
        except (ValueError, OSError) as e:
            logger.error(f"output: {e}")
            return EXIT_FATAL
    else:
        sys.stdout.write(to_json(result) + "\n")

    log_summary(render_summary_line(result, cfg.unknown_currency_value)[len("SUMMARY "):])

    if result.invalid_count > 0:
        return EXIT_VALIDATION_ERRORS
    return EXIT_SUCCESS_ALL
