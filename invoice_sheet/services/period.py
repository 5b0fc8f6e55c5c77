from __future__ import annotations

import re

from ..errors import InvalidPeriod

"""Invoicing period parsing.

The sheet states its invoicing month as "<Mon> <YYYY>" (e.g. "Sep 2023").
Both the sheet value and the caller's expected period are compared in the
canonical "YYYY-MM" form.
"""

__all__ = [
    "MONTHS",
    "normalize_expected_period",
    "parse_invoicing_period",
]

MONTHS: dict[str, str] = {
    "Jan": "01",
    "Feb": "02",
    "Mar": "03",
    "Apr": "04",
    "May": "05",
    "Jun": "06",
    "Jul": "07",
    "Aug": "08",
    "Sep": "09",
    "Oct": "10",
    "Nov": "11",
    "Dec": "12",
}

_CANONICAL_RE = re.compile(r"^(\d{4})-(0[1-9]|1[0-2])$")


def parse_invoicing_period(text: object) -> str:
    """Convert "Sep 2023" into "2023-09".

    Raises:
        InvalidPeriod: text is not "<Mon> <YYYY>" with a known month abbreviation
    """
    if not isinstance(text, str):
        raise InvalidPeriod(text)
    parts = text.split()
    if len(parts) != 2:
        raise InvalidPeriod(text)
    month, year = parts
    if month not in MONTHS or not (len(year) == 4 and year.isdigit()):
        raise InvalidPeriod(text)
    return f"{year}-{MONTHS[month]}"


def normalize_expected_period(text: str) -> str:
    """Accept either "Sep 2023" or an already canonical "2023-09"."""
    stripped = text.strip() if isinstance(text, str) else text
    if isinstance(stripped, str) and _CANONICAL_RE.match(stripped):
        return stripped
    return parse_invoicing_period(stripped)
