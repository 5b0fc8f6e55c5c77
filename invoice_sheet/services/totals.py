from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from ..models.config_models import (
    CANNOT_CALCULATE_TOTAL,
    DEFAULT_MISSING_RATE_VALUE,
    DEFAULT_UNKNOWN_CURRENCY_VALUE,
)
from ..models.invoice_record import InvoiceRecord

"""Invoice total calculation.

Invoice Total = trunc(Total Price) x rate of the record's Invoice Currency.
Lookup misses are written as sentinel text on the record and never interrupt
the batch.
"""

__all__ = [
    "calculate_totals",
    "compute_total",
    "format_total",
]

logger = logging.getLogger(__name__)

CURRENCY_FIELD = "Invoice Currency"
TOTAL_PRICE_FIELD = "Total Price"


def _to_decimal(value: Any) -> Decimal | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    try:
        # float は str 経由で変換 (1.1 -> Decimal("1.1"))
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return number if number.is_finite() else None


def format_total(value: Decimal) -> str:
    """Plain decimal text without exponent or trailing zeros ("110", "4.5")."""
    text = format(value.normalize(), "f")
    return "0" if text in ("-0", "") else text


def compute_total(total_price: Any, rate: Any) -> str | None:
    """trunc(total_price) * rate as text, or None when either is not numeric."""
    price = _to_decimal(total_price)
    rate_value = _to_decimal(rate)
    if price is None or rate_value is None:
        return None
    return format_total(Decimal(int(price)) * rate_value)


def calculate_totals(
    records: Iterable[InvoiceRecord],
    rates: Mapping[str, Any],
    unknown_currency: str | None = DEFAULT_UNKNOWN_CURRENCY_VALUE,
    missing_rate: str | None = DEFAULT_MISSING_RATE_VALUE,
) -> list[InvoiceRecord]:
    """Return records enriched with Invoice Total, same order and length."""
    enriched: list[InvoiceRecord] = []
    for record in records:
        currency = record.get(CURRENCY_FIELD)
        if not isinstance(currency, str) or currency not in rates:
            enriched.append(record.with_total(unknown_currency))
            continue
        rate = rates[currency]
        total = None if rate == missing_rate else compute_total(record.get(TOTAL_PRICE_FIELD), rate)
        if total is None:
            logger.warning(f"row {record.row_number}: cannot calculate total for {currency}")
            total = CANNOT_CALCULATE_TOTAL
        enriched.append(record.with_total(total))
    return enriched
