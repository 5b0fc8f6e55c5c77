from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from ..errors import OutOfRange

"""Sparse sheet model.

A decoded worksheet is kept as an unordered mapping from cell coordinate to
raw value. Only cells holding a value are stored, so an absent coordinate
always means "empty cell" (never zero, never an empty string).

Column navigation is bounded by COLUMN_LETTERS; wider sheets are outside the
supported layout.
"""

__all__ = [
    "COLUMN_LETTERS",
    "CellCoordinate",
    "CellValue",
    "SparseSheet",
    "next_column",
    "parse_coordinate",
]

logger = logging.getLogger(__name__)

COLUMN_LETTERS: tuple[str, ...] = tuple("ABCDEFGHIJKLMNOPQRSTUVWXYZ")

_COORD_RE = re.compile(r"^([A-Z]+)([1-9][0-9]*)$")

CellValue = Any  # str | int | float | datetime (decoded scalar, never None)


def next_column(column: str) -> str:
    """Return the column letter right of ``column``.

    Raises:
        OutOfRange: ``column`` is the last letter (or not a supported letter)
    """
    try:
        idx = COLUMN_LETTERS.index(column)
    except ValueError:
        raise OutOfRange(column) from None
    if idx >= len(COLUMN_LETTERS) - 1:
        raise OutOfRange(column)
    return COLUMN_LETTERS[idx + 1]


@dataclass(frozen=True)
class CellCoordinate:
    column: str  # A..Z
    row: int  # 1-based

    def __post_init__(self) -> None:
        if self.column not in COLUMN_LETTERS:
            raise ValueError(f"unsupported column: {self.column!r}")
        if self.row < 1:
            raise ValueError(f"row must be positive: {self.row}")

    def __str__(self) -> str:
        return f"{self.column}{self.row}"

    @property
    def sort_key(self) -> tuple[int, int]:
        """Visual order: row first, then column."""
        return (self.row, COLUMN_LETTERS.index(self.column))

    def right(self) -> CellCoordinate:
        return CellCoordinate(next_column(self.column), self.row)


def parse_coordinate(text: str) -> CellCoordinate:
    """Split a coordinate string like ``"E5"`` into column and row."""
    m = _COORD_RE.match(text.strip().upper()) if isinstance(text, str) else None
    if m is None:
        raise ValueError(f"invalid cell coordinate: {text!r}")
    return CellCoordinate(m.group(1), int(m.group(2)))


def _is_defined(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    return True


class SparseSheet:
    """Immutable coordinate -> value mapping for a single worksheet."""

    def __init__(self, cells: Mapping[CellCoordinate, CellValue]) -> None:
        self._cells: Mapping[CellCoordinate, CellValue] = MappingProxyType(dict(cells))

    @classmethod
    def from_cells(cls, raw: Mapping[str, Any]) -> SparseSheet:
        """Build a sheet from decoded ``{"A1": value}`` cells.

        Cells without a defined value (formatting-only cells, NaN) are dropped.
        Coordinates outside A..Z are dropped with a warning.
        """
        cells: dict[CellCoordinate, CellValue] = {}
        for key, value in raw.items():
            if not _is_defined(value):
                continue
            try:
                coord = key if isinstance(key, CellCoordinate) else parse_coordinate(key)
            except ValueError:
                logger.warning(f"ignoring cell outside supported range: {key}")
                continue
            cells[coord] = value
        return cls(cells)

    @staticmethod
    def _coord(key: CellCoordinate | str) -> CellCoordinate:
        return key if isinstance(key, CellCoordinate) else parse_coordinate(key)

    def get(self, key: CellCoordinate | str) -> CellValue | None:
        """Cell value, or None when the cell is empty."""
        return self._cells.get(self._coord(key))

    def __getitem__(self, key: CellCoordinate | str) -> CellValue:
        return self._cells[self._coord(key)]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (CellCoordinate, str)):
            return False
        try:
            return self._coord(key) in self._cells
        except ValueError:
            return False

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[CellCoordinate]:
        return iter(self._cells)

    def items(self) -> Iterator[tuple[CellCoordinate, CellValue]]:
        """Cells in visual (row, column) order."""
        for coord in sorted(self._cells, key=lambda c: c.sort_key):
            yield coord, self._cells[coord]

    def find(self, value: CellValue) -> list[CellCoordinate]:
        """Coordinates of cells whose value equals ``value`` (exact match)."""
        return [c for c, v in self.items() if type(v) is type(value) and v == value]

    def to_dict(self) -> dict[str, CellValue]:
        return {str(c): v for c, v in self.items()}
