from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..core.enums import AttendanceStatus
from ..recap.model import StatusSummary
from ..students.model import Student


@dataclass(frozen=True)
class AttendanceSubmission:
    """One row appended to the attendance sheet."""

    date: str  # DD-MM-YYYY
    student_name: str
    class_label: Optional[str]
    national_id: str
    status: AttendanceStatus

    def to_payload(self) -> dict:
        return {
            "tanggal": self.date,
            "nama": self.student_name,
            "kelas": self.class_label,
            "nisn": self.national_id,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class DayView:
    """Read-model for one date and class filter, ready for the UI."""

    date: str
    selected_class: str
    students: List[Student]
    statuses: Dict[str, AttendanceStatus]
    summary: StatusSummary
