from __future__ import annotations

from datetime import date, datetime

from ..core.constants import DISPLAY_DATE_FORMAT, ISO_DATE_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def to_display_date(value: date | str) -> str:
    """Format a date (or an ISO string) as DD-MM-YYYY for the spreadsheet."""
    if isinstance(value, str):
        value = parse_iso_date(value)
    return value.strftime(DISPLAY_DATE_FORMAT)


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()
