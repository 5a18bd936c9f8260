"""Reductions from recap rows or ledger statuses to status totals.

Percentages are only used for exports and charts; the summary tiles show raw
counts.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Sequence

from ..core.constants import DEFAULT_PERCENT_DECIMALS
from ..core.enums import AttendanceStatus
from ..students.roster_filter import matches_class
from .model import RecapRow, StatusSummary


def summarize(rows: Iterable[RecapRow]) -> StatusSummary:
    present = leave = sick = absent = 0
    for r in rows:
        present += r.present or 0
        leave += r.leave or 0
        sick += r.sick or 0
        absent += r.absent or 0
    return StatusSummary(present=present, leave=leave, sick=sick, absent=absent)


def summarize_statuses(statuses: Iterable[AttendanceStatus]) -> StatusSummary:
    counts = Counter(AttendanceStatus(s) for s in statuses)
    return StatusSummary(
        present=counts[AttendanceStatus.HADIR],
        leave=counts[AttendanceStatus.IZIN],
        sick=counts[AttendanceStatus.SAKIT],
        absent=counts[AttendanceStatus.ALPHA],
    )


def percent(count: int, summary: StatusSummary, decimals: int = DEFAULT_PERCENT_DECIMALS) -> float:
    total = summary.total
    if total == 0:
        return 0.0
    return round(count / total * 100, decimals)


def status_percent(status: AttendanceStatus, summary: StatusSummary, decimals: int = DEFAULT_PERCENT_DECIMALS) -> float:
    return percent(summary.count_of(status), summary, decimals)


def filter_rows_by_class(rows: Sequence[RecapRow], selected_class: str) -> List[RecapRow]:
    return [r for r in rows if matches_class(r.class_label, selected_class)]
