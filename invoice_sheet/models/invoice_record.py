from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

"""InvoiceRecord model.

One record is produced per admitted data row. The record keeps the raw cell
values as read from the sheet together with any validation messages, so a
consumer sees both what was submitted and what is wrong with it.
"""

__all__ = [
    "INVOICE_TOTAL_KEY",
    "VALIDATION_ERRORS_KEY",
    "InvoiceRecord",
]

VALIDATION_ERRORS_KEY = "validationErrors"
INVOICE_TOTAL_KEY = "Invoice Total"


@dataclass(frozen=True)
class InvoiceRecord:
    """Invoice reconstructed from a single sheet row.

    Attributes:
        row_number: Sheet row the record was assembled from (1-based)
        values: Column name -> raw cell value, read-only (empty cells are not stored)
        validation_errors: "<field>: <reason>" messages in discovery order
        invoice_total: Computed total text, or a sentinel; None until enriched
    """
    row_number: int
    values: Mapping[str, Any] = field(default_factory=dict)
    validation_errors: tuple[str, ...] = ()
    invoice_total: str | None = None

    def __post_init__(self) -> None:
        # 呼び出し側の dict とも、enrich 前後のレコード同士とも共有しない
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))
        object.__setattr__(self, "validation_errors", tuple(self.validation_errors))

    def __hash__(self) -> int:
        return hash((self.row_number, frozenset(self.values.items()), self.validation_errors, self.invoice_total))

    @property
    def is_valid(self) -> bool:
        return not self.validation_errors

    def get(self, column: str, default: Any = None) -> Any:
        return self.values.get(column, default)

    def with_total(self, total: str | None) -> InvoiceRecord:
        return replace(self, invoice_total=total)

    def to_dict(self) -> dict[str, Any]:
        """Outbound shape: column values plus validationErrors / Invoice Total."""
        data: dict[str, Any] = {VALIDATION_ERRORS_KEY: list(self.validation_errors)}
        data.update(self.values)
        data[INVOICE_TOTAL_KEY] = self.invoice_total
        return data
