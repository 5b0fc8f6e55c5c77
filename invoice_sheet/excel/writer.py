from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pandas as pd

from ..models.extraction_result import ExtractionResult
from ..models.invoice_record import VALIDATION_ERRORS_KEY

"""Extraction result export.

- .json: the full outbound payload (InvoicingMonth / currencyRates / invoicesData)
- .csv / .xlsx: one row per invoice, validation errors joined with "; "
"""

__all__ = [
    "invoices_frame",
    "to_json",
    "write_result",
]

logger = logging.getLogger(__name__)

ERROR_JOINER = "; "


def _json_default(value: Any) -> Any:
    # datetime 等 (セルに日付が入っている場合)
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def to_json(result: ExtractionResult) -> str:
    return json.dumps(result.to_dict(), ensure_ascii=False, indent=2, default=_json_default)


def invoices_frame(result: ExtractionResult) -> pd.DataFrame:
    """Flatten invoice records into a DataFrame (column order of first appearance)."""
    rows: list[dict[str, Any]] = []
    for record in result.invoices:
        data = record.to_dict()
        data[VALIDATION_ERRORS_KEY] = ERROR_JOINER.join(data[VALIDATION_ERRORS_KEY])
        rows.append({"Row": record.row_number, **data})
    frame = pd.DataFrame(rows)
    if not frame.empty:
        frame.insert(1, "InvoicingMonth", result.invoicing_month)
    return frame


def write_result(result: ExtractionResult, path: Path) -> Path:
    """Write ``result`` according to the output suffix.

    Raises:
        ValueError: unsupported output suffix
    """
    suffix = path.suffix.lower()
    path.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".json":
        path.write_text(to_json(result) + "\n", encoding="utf-8")
    elif suffix == ".csv":
        invoices_frame(result).to_csv(path, index=False)
    elif suffix == ".xlsx":
        with pd.ExcelWriter(path, engine="openpyxl") as writer:
            invoices_frame(result).to_excel(writer, sheet_name="Invoices", index=False)
            rates = pd.DataFrame(
                [{"Currency": k, "Rate": v} for k, v in result.currency_rates.items()],
                columns=["Currency", "Rate"],
            )
            rates.to_excel(writer, sheet_name="Rates", index=False)
    else:
        raise ValueError(f"unsupported output format: {path.suffix}")
    logger.info(f"result written: {path}")
    return path
