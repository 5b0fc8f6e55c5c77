from __future__ import annotations

from ..models.config_models import DEFAULT_UNKNOWN_CURRENCY_VALUE
from ..models.extraction_result import ExtractionResult

"""Summary line rendering.

Format:
SUMMARY month={YYYY-MM} records={n} valid={v} invalid={i} rates={r} unknown_currency={u}
"""


def render_summary_line(
    result: ExtractionResult, unknown_currency: str | None = DEFAULT_UNKNOWN_CURRENCY_VALUE
) -> str:
    """Render a SUMMARY line for one extraction result.

    Args:
        result: Extraction result to summarize
        unknown_currency: Sentinel written for unknown currencies; records whose
            total equals it are counted as unknown_currency

    Examples:
        >>> render_summary_line(ExtractionResult("2023-09", {"USD": 1.1}, []))
        'SUMMARY month=2023-09 records=0 valid=0 invalid=0 rates=1 unknown_currency=0'
    """
    unknown = sum(1 for r in result.invoices if r.invoice_total == unknown_currency)
    return (
        f"SUMMARY month={result.invoicing_month} "
        f"records={len(result.invoices)} "
        f"valid={result.valid_count} "
        f"invalid={result.invalid_count} "
        f"rates={len(result.currency_rates)} "
        f"unknown_currency={unknown}"
    )
