"""Date normalization for spreadsheet cells.

Workbooks mix real date cells, Excel serial numbers and hand-typed text. The
accepted text forms are ISO ``YYYY-MM-DD`` (optionally followed by a time) and
US ``MM/DD/YYYY``; anything else is treated as missing.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta

# Excel's day zero, accounting for its phantom 1900-02-29
EXCEL_EPOCH = date(1899, 12, 30)

_ISO_DATE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})(?:[T ].*)?$")
_US_DATE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")


def _safe_date(year: int, month: int, day: int) -> date | None:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def from_excel_serial(serial: float) -> date | None:
    """Convert an Excel serial day number; the fractional time part is dropped."""
    if serial < 1:
        return None
    try:
        return EXCEL_EPOCH + timedelta(days=int(serial))
    except OverflowError:
        return None


def normalize_date(value: object | None) -> date | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)):
        return from_excel_serial(value)

    text = str(value).strip()
    if not text:
        return None

    match = _ISO_DATE.match(text)
    if match:
        year, month, day = (int(part) for part in match.groups())
        return _safe_date(year, month, day)

    match = _US_DATE.match(text)
    if match:
        month, day, year = (int(part) for part in match.groups())
        return _safe_date(year, month, day)

    return None
