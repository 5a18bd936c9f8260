from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.http_attendance_sink import AppsScriptAttendanceSink
from .attendance.ledger import AttendanceLedger
from .attendance.repository import AttendanceSink
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_PERCENT_DECIMALS, DEFAULT_REQUEST_TIMEOUT
from .gateway.apps_script import AppsScriptClient, AppsScriptConfig
from .recap.service import RecapService
from .students.http_student_repository import AppsScriptStudentRepository
from .students.repository import RosterProvider, StudentWriter
from .students.service import RosterService


@dataclass(frozen=True)
class Container:
    """Application context: built once at startup, shared by every controller."""

    roster_provider: RosterProvider
    attendance_sink: AttendanceSink
    ledger: AttendanceLedger

    roster_service: RosterService
    attendance_service: AttendanceService
    recap_service: RecapService


def wire_container(
    *,
    roster_provider: RosterProvider,
    attendance_sink: AttendanceSink,
    student_writer: Optional[StudentWriter] = None,
    percent_decimals: int = DEFAULT_PERCENT_DECIMALS,
) -> Container:
    """Assemble services around injected collaborators (used directly by tests)."""
    ledger = AttendanceLedger()
    roster_service = RosterService(roster_provider, student_writer)
    attendance_service = AttendanceService(roster_service, ledger, attendance_sink)
    recap_service = RecapService(attendance_sink, percent_decimals=percent_decimals)

    return Container(
        roster_provider=roster_provider,
        attendance_sink=attendance_sink,
        ledger=ledger,
        roster_service=roster_service,
        attendance_service=attendance_service,
        recap_service=recap_service,
    )


def build_container(*, apps_script_url: str, timeout: float = DEFAULT_REQUEST_TIMEOUT, percent_decimals: int = DEFAULT_PERCENT_DECIMALS) -> Container:
    client = AppsScriptClient(AppsScriptConfig(url=str(apps_script_url), timeout=float(timeout)))
    students_repo = AppsScriptStudentRepository(client)

    return wire_container(
        roster_provider=students_repo,
        attendance_sink=AppsScriptAttendanceSink(client),
        student_writer=students_repo,
        percent_decimals=percent_decimals,
    )
