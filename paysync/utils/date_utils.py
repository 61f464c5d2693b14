# paysync/utils/date_utils.py

import calendar
from datetime import date, datetime
from typing import Optional, Tuple, Union

from paysync.constants import DATE_FORMAT


def to_display_str(value: Optional[date]) -> str:
    """Formats a date as YYYY-MM-DD, or '-' when missing."""
    if value is None:
        return "-"
    if not isinstance(value, (date, datetime)):
        return str(value)
    return value.strftime(DATE_FORMAT)

def parse_iso_date(value: Union[str, date, datetime, None]) -> Optional[date]:
    """Accepts 'YYYY-MM-DD' (optionally followed by a time part) and returns a date, or None."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return date.fromisoformat(value.strip().split("T")[0].split(" ")[0])
    except ValueError:
        return None

def shift_month(year: int, month: int, offset: int) -> Tuple[int, int]:
    """(year, month) moved by offset months; offset may be negative."""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1

def month_bounds(year: int, month: int) -> Tuple[date, date]:
    """First and last day of a calendar month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)

def is_same_month(value: Optional[date], reference: date) -> bool:
    return value is not None and value.year == reference.year and value.month == reference.month

def from_qdate(q_date: 'QDate') -> date:
    """Converts a PyQt QDate to a standard python date."""
    return q_date.toPyDate()

def to_qdate(g_date: Optional[Union[date, datetime]]) -> 'QDate':
    """Converts a standard python date to a PyQt QDate (today when missing)."""
    from PyQt5.QtCore import QDate
    if g_date is None:
        return QDate.currentDate()
    return QDate(g_date.year, g_date.month, g_date.day)
