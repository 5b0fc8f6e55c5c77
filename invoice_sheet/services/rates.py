from __future__ import annotations

import logging
from typing import Any

from ..models.config_models import DEFAULT_MISSING_RATE_VALUE
from ..models.sheet import SparseSheet

"""Currency rate table builder.

A rate annotation is a text cell ending with "Rate" (e.g. "USD Rate"); the
first word is the currency label and the rate itself sits in the cell right
next to it.
"""

__all__ = [
    "RATE_SUFFIX",
    "build_rate_table",
]

logger = logging.getLogger(__name__)

RATE_SUFFIX = "Rate"


def build_rate_table(
    sheet: SparseSheet, missing_value: str | None = DEFAULT_MISSING_RATE_VALUE
) -> dict[str, Any]:
    """Scan the sheet for rate annotations.

    A missing neighbour cell records ``missing_value`` for that label instead
    of failing. An annotation in the last column raises OutOfRange.
    """
    rates: dict[str, Any] = {}
    for coord, value in sheet.items():
        if not (isinstance(value, str) and value.endswith(RATE_SUFFIX)):
            continue
        label = value.split()[0]
        rate_cell = coord.right()
        rate = sheet.get(rate_cell)
        if rate is None:
            logger.warning(f"rate cell {rate_cell} for '{label}' is empty")
            rate = missing_value
        if label in rates:
            logger.debug(f"rate '{label}' redefined at {coord}")
        rates[label] = rate
    logger.debug(f"rate table built: {sorted(rates)}")
    return rates
