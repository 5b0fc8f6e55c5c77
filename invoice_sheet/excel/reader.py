from __future__ import annotations

import logging
from pathlib import Path
from typing import Any
import zlib
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from ..errors import SheetReadError
from ..models.sheet import SparseSheet

"""Workbook decoder.

Turns an .xlsx file into a coordinate -> value mapping holding only cells with
a value (formatting-only cells are dropped). Formulas are read as their cached
values. Only a single worksheet is decoded.
"""

__all__ = [
    "read_cells",
    "read_sheet",
]

logger = logging.getLogger(__name__)

# 壊れた zip / XML / セル値はすべて SheetReadError に変換
_DECODE_ERRORS = (
    InvalidFileException,
    BadZipFile,
    zlib.error,
    SyntaxError,  # xml.etree ParseError / lxml XMLSyntaxError
    OSError,
    KeyError,
    IndexError,
    ValueError,
    TypeError,
)


def read_cells(path: Path, sheet_name: str | None = None) -> dict[str, Any]:
    """Decode one worksheet into ``{"A1": value}``.

    Parameters
    ----------
    path: workbook path
    sheet_name: worksheet to read (None -> first worksheet)

    Raises
    ------
    SheetReadError: file missing, not a workbook, corrupt content, or worksheet not found
    """
    if not path.exists():
        raise SheetReadError(f"workbook not found: {path}")
    try:
        wb = load_workbook(path, data_only=True)
    except _DECODE_ERRORS as e:
        raise SheetReadError(f"Error parsing file {path.name}: {e}") from e

    try:
        if sheet_name is None:
            ws = wb.worksheets[0]
        elif sheet_name in wb.sheetnames:
            ws = wb[sheet_name]
        else:
            raise SheetReadError(f"sheet '{sheet_name}' not found in {path.name}")

        cells: dict[str, Any] = {}
        for row in ws.iter_rows():
            for cell in row:
                # 値のないセル (書式のみ) は除外
                if cell.value is None:
                    continue
                cells[cell.coordinate] = cell.value
    except _DECODE_ERRORS as e:
        raise SheetReadError(f"Error parsing file {path.name}: {e}") from e
    finally:
        wb.close()

    logger.debug(f"decoded {len(cells)} cell(s) from {path.name}:{ws.title}")
    return cells


def read_sheet(path: Path, sheet_name: str | None = None) -> SparseSheet:
    """Decode a worksheet straight into a SparseSheet."""
    return SparseSheet.from_cells(read_cells(path, sheet_name))
