"""Exception hierarchy for the invoice sheet extractor.

Fatal errors abort processing of the whole sheet. Record-scoped problems
(field validation failures, unknown currencies) are never raised; they are
carried as data on the affected InvoiceRecord.
"""

from __future__ import annotations


class InvoiceSheetError(Exception):
    """Base exception for all invoice sheet errors."""


class SheetReadError(InvoiceSheetError):
    """Workbook could not be found or decoded."""


class StructuralError(InvoiceSheetError):
    """Sheet lacks an element the pipeline depends on."""

    def __init__(self, element: str, message: str | None = None) -> None:
        self.element = element
        super().__init__(message or f"No '{element}' cell in sheet")


class MissingMandatoryField(StructuralError):
    """A mandatory column label does not appear anywhere in the sheet."""

    def __init__(self, field: str) -> None:
        super().__init__(field, f"Mandatory field '{field}' is missing")


class InvalidPeriod(StructuralError):
    """Invoicing period text does not follow the '<Mon> <YYYY>' pattern."""

    def __init__(self, text: object) -> None:
        self.text = text
        super().__init__("invoicing period", f"Invalid invoicing period: {text!r}")


class BrokenTableLayout(InvoiceSheetError):
    """'Status' and 'Invoice #' anchors are not on the same row."""

    def __init__(self, status_row: int, invoice_no_row: int) -> None:
        self.status_row = status_row
        self.invoice_no_row = invoice_no_row
        super().__init__(
            f"Broken table: 'Status' on row {status_row}, 'Invoice #' on row {invoice_no_row}"
        )


class OutOfRange(InvoiceSheetError):
    """Column navigation went past the last supported column letter."""

    def __init__(self, column: str) -> None:
        self.column = column
        super().__init__(f"No column to the right of '{column}'")


class PeriodMismatch(InvoiceSheetError):
    """Sheet invoicing month differs from the month requested by the caller."""

    def __init__(self, sheet_period: str, expected_period: str) -> None:
        self.sheet_period = sheet_period
        self.expected_period = expected_period
        super().__init__(
            f"Invoicing month param {expected_period} does not match file invoicing month {sheet_period}"
        )
