from __future__ import annotations

from typing import Optional

from ..core.constants import MONTH_NAMES, SEMESTER_MONTHS
from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} wajib diisi")
    return str(value).strip()


def require_month_name(value: Optional[str]) -> str:
    """Accept a month name case-insensitively, return its canonical spelling."""
    cleaned = (value or "").strip().lower()
    for name in MONTH_NAMES:
        if name.lower() == cleaned:
            return name
    raise ValidationError(f"Bulan tidak dikenal: {value!r}")


def require_semester(value: Optional[str]) -> str:
    cleaned = str(value or "").strip()
    if cleaned not in SEMESTER_MONTHS:
        raise ValidationError("Semester harus 1 atau 2")
    return cleaned
