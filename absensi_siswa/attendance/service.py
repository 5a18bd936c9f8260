from __future__ import annotations

import logging
from typing import Any, List

from ..common.datetime_utils import parse_iso_date, to_display_date
from ..core.constants import WILDCARD_CLASS
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..recap.aggregator import summarize_statuses
from ..students.service import RosterService
from .ledger import AttendanceLedger
from .model import AttendanceSubmission, DayView
from .repository import AttendanceSink

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, roster: RosterService, ledger: AttendanceLedger, sink: AttendanceSink):
        self._roster = roster
        self._ledger = ledger
        self._sink = sink

    def view_day(self, date: str, selected_class: str = WILDCARD_CLASS) -> DayView:
        date = self._require_date(date)
        # Lazy init always uses the full roster so later class switches see the same entry.
        self._ledger.ensure_initialized(date, self._roster.students)

        students = self._roster.students_in(selected_class)
        statuses = self._ledger.statuses_for(date, students)
        return DayView(
            date=date,
            selected_class=selected_class,
            students=students,
            statuses=statuses,
            summary=summarize_statuses(statuses.values()),
        )

    def set_status(self, date: str, student_id: str, status: Any) -> AttendanceStatus:
        date = self._require_date(date)
        if not any(s.id == student_id for s in self._roster.students):
            raise ValidationError(f"Siswa tidak ditemukan: {student_id!r}")
        # A write to a date nobody has viewed yet still starts from the default fill.
        self._ledger.ensure_initialized(date, self._roster.students)
        self._ledger.set_status(date, student_id, status)
        return self._ledger.status_of(date, student_id)

    def build_submissions(self, date: str, selected_class: str = WILDCARD_CLASS) -> List[AttendanceSubmission]:
        date = self._require_date(date)
        display_date = to_display_date(date)
        return [
            AttendanceSubmission(
                date=display_date,
                student_name=s.name,
                class_label=s.class_label,
                national_id=s.national_id,
                status=self._ledger.status_of(date, s.id),
            )
            for s in self._roster.students_in(selected_class)
        ]

    def save(self, date: str, selected_class: str = WILDCARD_CLASS) -> str:
        """Send the day's statuses for the selected class as one batch.

        The ledger stays the source of truth; a failed submit leaves it as is.
        """
        records = self.build_submissions(date, selected_class)
        if not records:
            raise ValidationError(f"Tidak ada siswa di kelas {selected_class}.")

        self._sink.submit_attendance(records[0].date, records)

        if selected_class == WILDCARD_CLASS:
            return "Data absensi semua kelas berhasil dikirim!"
        return f"Data absensi kelas {selected_class} berhasil dikirim!"

    def _require_date(self, value: str) -> str:
        try:
            return parse_iso_date((value or "").strip()).isoformat()
        except ValueError:
            raise ValidationError("Tanggal harus berformat YYYY-MM-DD") from None
