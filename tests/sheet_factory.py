"""Sheet builders shared by the test suite."""
from __future__ import annotations

from pathlib import Path
from typing import Any

from openpyxl import Workbook

from invoice_sheet.models.sheet import SparseSheet


def invoice_cells(**overrides: Any) -> dict[str, Any]:
    """Typical invoice sheet: rates on top, header on row 5, data from row 6.

    Keyword overrides replace cells; a value of None removes the cell.
    """
    cells: dict[str, Any] = {
        "A1": "Sep 2023",
        "A2": "USD Rate", "B2": 1.1,
        "A3": "EUR Rate",  # B3 空 -> "No value"
        "A5": "Customer", "B5": "Cust No'", "C5": "Project Type", "D5": "Quantity",
        "E5": "Status", "F5": "Invoice #", "G5": "Price Per Item",
        "H5": "Item Price Currency", "I5": "Total Price", "J5": "Invoice Currency",
        "K5": "Comment",
        "A6": "Acme", "B6": 12345, "C6": "Consulting", "D6": 2,
        "E6": "Ready", "F6": "INV00000001", "G6": 50,
        "H6": "USD", "I6": 100, "J6": "USD",
    }
    for key, value in overrides.items():
        if value is None:
            cells.pop(key, None)
        else:
            cells[key] = value
    return cells


def data_row(row: int, **values: Any) -> dict[str, Any]:
    """Valid data row at ``row``; keyword args keyed by column letter override it."""
    base: dict[str, Any] = {
        "A": "Globex", "B": 54321, "C": "Support", "D": 1,
        "E": "Ready", "F": f"INV{row:08d}", "G": 10,
        "H": "USD", "I": 10, "J": "USD",
    }
    base.update(values)
    return {f"{col}{row}": v for col, v in base.items() if v is not None}


def build_sheet(cells: dict[str, Any]) -> SparseSheet:
    return SparseSheet.from_cells(cells)


def write_workbook(path: Path, cells: dict[str, Any], title: str = "Sheet1") -> Path:
    wb = Workbook()
    ws = wb.active
    ws.title = title
    for coord, value in cells.items():
        ws[coord] = value
    wb.save(path)
    return path
