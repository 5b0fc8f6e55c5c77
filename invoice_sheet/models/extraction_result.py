from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .invoice_record import InvoiceRecord

"""Extraction result model.

Terminal artifact of one processed sheet: the canonical invoicing month, the
rate table and the enriched invoice records.
"""

__all__ = [
    "ExtractionResult",
]


@dataclass(frozen=True)
class ExtractionResult:
    invoicing_month: str  # YYYY-MM
    currency_rates: dict[str, Any]  # label -> raw rate value or sentinel
    invoices: list[InvoiceRecord] = field(default_factory=list)
    source: str | None = None  # 入力ファイル名 (ログ用)

    @property
    def valid_count(self) -> int:
        return sum(1 for r in self.invoices if r.is_valid)

    @property
    def invalid_count(self) -> int:
        return len(self.invoices) - self.valid_count

    def to_dict(self) -> dict[str, Any]:
        """Outbound payload: InvoicingMonth / currencyRates / invoicesData."""
        return {
            "InvoicingMonth": self.invoicing_month,
            "currencyRates": dict(self.currency_rates),
            "invoicesData": [r.to_dict() for r in self.invoices],
        }
