from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

from ..core.enums import AttendanceStatus
from ..core.exceptions import InvalidStatusError
from ..students.model import Student

logger = logging.getLogger(__name__)

DEFAULT_STATUS = AttendanceStatus.HADIR


def coerce_status(value: Any) -> AttendanceStatus:
    """Accept an AttendanceStatus or its exact label, reject everything else."""
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus(value)
    except ValueError:
        raise InvalidStatusError(f"Unknown attendance status: {value!r}") from None


class AttendanceLedger:
    """In-memory attendance state for one session: date -> student id -> status.

    A date entry is created once, the first time the date is viewed with a
    non-empty roster, with every student set to Hadir. After that only
    ``set_status`` changes it. Students added to the roster later are not
    back-filled into existing dates; ``status_of`` answers Hadir for them.
    """

    def __init__(self):
        self._days: Dict[str, Dict[str, AttendanceStatus]] = {}

    def is_initialized(self, date: str) -> bool:
        return date in self._days

    def ensure_initialized(self, date: str, students: Sequence[Student]) -> bool:
        """Default-fill ``date`` on first view. Returns True when an entry was created."""
        if date in self._days or not students:
            return False
        self._days[date] = {s.id: DEFAULT_STATUS for s in students}
        logger.debug("Initialized %s for %d student(s)", date, len(students))
        return True

    def set_status(self, date: str, student_id: str, status: Any) -> None:
        status = coerce_status(status)
        self._days.setdefault(date, {})[student_id] = status

    def status_of(self, date: str, student_id: str) -> AttendanceStatus:
        return self._days.get(date, {}).get(student_id, DEFAULT_STATUS)

    def statuses_for(self, date: str, students: Sequence[Student]) -> Dict[str, AttendanceStatus]:
        return {s.id: self.status_of(date, s.id) for s in students}

    def snapshot(self, date: str) -> Dict[str, AttendanceStatus]:
        return dict(self._days.get(date, {}))

    def dates(self) -> List[str]:
        return sorted(self._days)
