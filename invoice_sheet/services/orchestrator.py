from __future__ import annotations

import logging
from pathlib import Path

from ..errors import PeriodMismatch
from ..excel.reader import read_sheet
from ..models.config_models import ExtractorConfig
from ..models.extraction_result import ExtractionResult
from ..models.sheet import SparseSheet
from .extractor import extract_invoices
from .period import normalize_expected_period, parse_invoicing_period
from .rates import build_rate_table
from .structure import validate_sheet_structure
from .totals import calculate_totals

"""Pipeline orchestration.

structure validation -> period check -> rate table -> record extraction ->
total calculation. Fatal errors propagate to the caller before any record is
built; record-scoped problems end up on the records themselves.
"""

__all__ = [
    "process_file",
    "process_sheet",
]

logger = logging.getLogger(__name__)


def process_sheet(
    sheet: SparseSheet,
    expected_period: str,
    config: ExtractorConfig | None = None,
    source: str | None = None,
) -> ExtractionResult:
    """Run the full pipeline over an already decoded sheet.

    Args:
        sheet: Decoded sparse sheet
        expected_period: Caller's invoicing month, "Sep 2023" or "2023-09"
        config: Runtime settings (defaults when None)
        source: Optional source name used in log messages

    Raises:
        StructuralError / BrokenTableLayout / OutOfRange / PeriodMismatch
    """
    cfg = config or ExtractorConfig()
    validate_sheet_structure(sheet, date_cell=cfg.date_cell)

    invoicing_month = parse_invoicing_period(sheet.get(cfg.date_cell))
    expected = normalize_expected_period(expected_period)
    if invoicing_month != expected:
        raise PeriodMismatch(invoicing_month, expected)

    rates = build_rate_table(sheet, missing_value=cfg.missing_rate_value)
    invoices = extract_invoices(sheet)
    invoices = calculate_totals(
        invoices,
        rates,
        unknown_currency=cfg.unknown_currency_value,
        missing_rate=cfg.missing_rate_value,
    )

    result = ExtractionResult(
        invoicing_month=invoicing_month,
        currency_rates=rates,
        invoices=invoices,
        source=source,
    )
    logger.info(
        f"extracted {len(invoices)} invoice(s) from {source or 'sheet'}"
        f" month={invoicing_month} invalid={result.invalid_count}"
    )
    return result


def process_file(
    path: Path, expected_period: str, config: ExtractorConfig | None = None
) -> ExtractionResult:
    """Decode ``path`` and run process_sheet() on it."""
    cfg = config or ExtractorConfig()
    logger.info(f"Processing workbook: {path}")
    sheet = read_sheet(path, sheet_name=cfg.sheet_name)
    return process_sheet(sheet, expected_period, cfg, source=path.name)
