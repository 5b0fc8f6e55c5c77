from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..errors import BrokenTableLayout
from ..models.invoice_record import InvoiceRecord
from ..models.schema import VALIDATION_SCHEMA, check_field
from ..models.sheet import COLUMN_LETTERS, CellCoordinate, SparseSheet
from .structure import INVOICE_NO_ANCHOR, STATUS_ANCHOR, find_anchor

"""Invoice record extraction.

Reconstructs table semantics from coordinate keyed cells:

1. locate the header row from the "Status" / "Invoice #" anchors
2. harvest column names from the header row
3. admit data rows (status "Ready" OR well formed invoice number)
4. assemble one record per admitted row, validating mandatory fields

Validation failures never drop a record; they are attached to it.
"""

__all__ = [
    "HeaderLayout",
    "admit_rows",
    "assemble_record",
    "extract_invoices",
    "harvest_columns",
    "is_invoice_number",
    "locate_header",
]

logger = logging.getLogger(__name__)

READY_STATUS = "Ready"
INVOICE_NO_PREFIX = "INV"
INVOICE_NO_LENGTH = 11


@dataclass(frozen=True)
class HeaderLayout:
    row: int
    status_column: str
    invoice_no_column: str


def locate_header(sheet: SparseSheet) -> HeaderLayout:
    """Find the header row from the anchor cells.

    Raises:
        StructuralError: an anchor is missing or ambiguous
        BrokenTableLayout: anchors are on different rows
    """
    status = find_anchor(sheet, STATUS_ANCHOR)
    invoice_no = find_anchor(sheet, INVOICE_NO_ANCHOR)
    if status.row != invoice_no.row:
        raise BrokenTableLayout(status.row, invoice_no.row)
    return HeaderLayout(row=status.row, status_column=status.column, invoice_no_column=invoice_no.column)


def harvest_columns(sheet: SparseSheet, header_row: int) -> dict[CellCoordinate, str]:
    """Column layout: header cell -> column name, in column order."""
    columns: dict[CellCoordinate, str] = {}
    for letter in COLUMN_LETTERS:
        coord = CellCoordinate(letter, header_row)
        value = sheet.get(coord)
        if value is not None:
            columns[coord] = str(value)
    return columns


def is_invoice_number(value: Any) -> bool:
    # "INV" + 8 文字
    return (
        isinstance(value, str)
        and len(value) == INVOICE_NO_LENGTH
        and value.startswith(INVOICE_NO_PREFIX)
    )


def admit_rows(sheet: SparseSheet, layout: HeaderLayout) -> list[int]:
    """Rows below the header that are Ready or carry an invoice number.

    Both predicates are evaluated per cell; a row matching either is admitted
    once. Returned in ascending order.
    """
    rows: set[int] = set()
    for coord, value in sheet.items():
        if coord.row <= layout.row:
            continue
        if coord.column == layout.status_column and isinstance(value, str) and value == READY_STATUS:
            rows.add(coord.row)
        elif coord.column == layout.invoice_no_column and is_invoice_number(value):
            rows.add(coord.row)
    return sorted(rows)


def assemble_record(
    sheet: SparseSheet,
    row: int,
    columns: Mapping[CellCoordinate, str],
    schema: Mapping[str, Mapping[str, Any]] = VALIDATION_SCHEMA,
) -> InvoiceRecord:
    values: dict[str, Any] = {}
    errors: list[str] = []
    for header_cell, name in columns.items():
        value = sheet.get(CellCoordinate(header_cell.column, row))
        if name in schema:
            errors.extend(check_field(name, value, schema).messages)
        if value is not None:
            values[name] = value
    if errors:
        logger.debug(f"row {row}: {len(errors)} validation error(s)")
    return InvoiceRecord(row_number=row, values=values, validation_errors=tuple(errors))


def extract_invoices(
    sheet: SparseSheet,
    schema: Mapping[str, Mapping[str, Any]] = VALIDATION_SCHEMA,
) -> list[InvoiceRecord]:
    """Extract one InvoiceRecord per admitted row."""
    layout = locate_header(sheet)
    columns = harvest_columns(sheet, layout.row)
    rows = admit_rows(sheet, layout)
    logger.debug(
        f"header row={layout.row} columns={list(columns.values())} admitted_rows={rows}"
    )
    return [assemble_record(sheet, row, columns, schema) for row in rows]
