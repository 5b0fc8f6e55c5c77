from __future__ import annotations

from collections.abc import Iterable

from ..errors import MissingMandatoryField, StructuralError
from ..models.schema import MANDATORY_FIELDS
from ..models.sheet import CellCoordinate, SparseSheet

"""Sheet structure validation.

Confirms the anchors, the invoicing date cell and the mandatory column labels
exist before any record is extracted. Pure predicate over the sheet.
"""

__all__ = [
    "INVOICE_NO_ANCHOR",
    "STATUS_ANCHOR",
    "find_anchor",
    "validate_sheet_structure",
]

STATUS_ANCHOR = "Status"
INVOICE_NO_ANCHOR = "Invoice #"


def find_anchor(sheet: SparseSheet, marker: str) -> CellCoordinate:
    """Return the single cell holding ``marker``.

    Raises:
        StructuralError: no cell, or more than one cell, holds the marker
    """
    found = sheet.find(marker)
    if not found:
        raise StructuralError(marker)
    if len(found) > 1:
        cells = ", ".join(str(c) for c in found)
        raise StructuralError(marker, f"Ambiguous '{marker}' cell in sheet: {cells}")
    return found[0]


def validate_sheet_structure(
    sheet: SparseSheet,
    mandatory_fields: Iterable[str] = MANDATORY_FIELDS,
    date_cell: str = "A1",
) -> None:
    """Raise when the sheet cannot be processed.

    Checks, in order: "Status" anchor, "Invoice #" anchor, textual invoicing
    date in ``date_cell``, then every mandatory field label.
    """
    find_anchor(sheet, STATUS_ANCHOR)
    find_anchor(sheet, INVOICE_NO_ANCHOR)

    if not isinstance(sheet.get(date_cell), str):
        raise StructuralError(date_cell, f"Wrong Invoice Date in cell {date_cell}")

    labels = {v for _, v in sheet.items() if isinstance(v, str)}
    for name in mandatory_fields:
        if name not in labels:
            raise MissingMandatoryField(name)
