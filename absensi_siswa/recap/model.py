from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from ..core.enums import AttendanceStatus


def _count(value: Any) -> int:
    """Spreadsheet cells may be blank, None or numeric strings; blank counts as zero."""
    if value is None or value == "":
        return 0
    try:
        return max(int(float(value)), 0)
    except (TypeError, ValueError, OverflowError):
        return 0


@dataclass(frozen=True)
class StatusSummary:
    present: int = 0
    leave: int = 0
    sick: int = 0
    absent: int = 0

    @property
    def total(self) -> int:
        return self.present + self.leave + self.sick + self.absent

    def count_of(self, status: AttendanceStatus) -> int:
        return {
            AttendanceStatus.HADIR: self.present,
            AttendanceStatus.IZIN: self.leave,
            AttendanceStatus.SAKIT: self.sick,
            AttendanceStatus.ALPHA: self.absent,
        }[AttendanceStatus(status)]

    def to_dict(self) -> dict:
        return {
            AttendanceStatus.HADIR.value: self.present,
            AttendanceStatus.IZIN.value: self.leave,
            AttendanceStatus.SAKIT.value: self.sick,
            AttendanceStatus.ALPHA.value: self.absent,
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "StatusSummary":
        return cls(
            present=_count(payload.get("hadir", payload.get("Hadir"))),
            leave=_count(payload.get("izin", payload.get("Izin"))),
            sick=_count(payload.get("sakit", payload.get("Sakit"))),
            absent=_count(payload.get("alpa", payload.get("Alpha", payload.get("alpha")))),
        )


@dataclass(frozen=True)
class RecapRow:
    """Read-model: one student's monthly totals as computed by the sheet."""

    student_name: str
    class_label: Optional[str]
    present: int = 0
    absent: int = 0
    leave: int = 0
    sick: int = 0
    attendance_percent: Optional[float] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "RecapRow":
        percent = payload.get("persenHadir")
        try:
            attendance_percent = None if percent in (None, "") else float(percent)
        except (TypeError, ValueError):
            attendance_percent = None
        if attendance_percent is not None and not math.isfinite(attendance_percent):
            attendance_percent = None

        kelas = payload.get("kelas")
        return cls(
            student_name=str(payload.get("nama") or ""),
            class_label=None if kelas is None else str(kelas),
            present=_count(payload.get("hadir")),
            absent=_count(payload.get("alpa")),
            leave=_count(payload.get("izin")),
            sick=_count(payload.get("sakit")),
            attendance_percent=attendance_percent,
        )


@dataclass(frozen=True)
class MonthlyRecap:
    month: str
    selected_class: str
    rows: List[RecapRow] = field(default_factory=list)
    summary: StatusSummary = field(default_factory=StatusSummary)


@dataclass(frozen=True)
class GraphPoint:
    month: str
    summary: StatusSummary
    attendance_percent: float
