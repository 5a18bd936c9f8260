from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import pytest

from absensi_siswa.attendance.model import AttendanceSubmission
from absensi_siswa.container import wire_container
from absensi_siswa.core.exceptions import GatewayError
from absensi_siswa.recap.model import RecapRow, StatusSummary
from absensi_siswa.students.model import Student


class InMemoryRoster:
    def __init__(self, students: Optional[List[Student]] = None):
        self.students = list(students or [])
        self.fail = False
        self.calls = 0

    def fetch_roster(self) -> Sequence[Student]:
        self.calls += 1
        if self.fail:
            raise GatewayError("Gagal menghubungi server spreadsheet")
        return list(self.students)

    def add_student(self, *, national_id: str, name: str, class_label: str) -> None:
        self.students.append(Student(id=national_id, name=name, national_id=national_id, class_label=class_label))

    def update_student(self, *, old_national_id: str, national_id: str, name: str, class_label: str) -> None:
        self.students = [
            Student(id=national_id, name=name, national_id=national_id, class_label=class_label)
            if s.national_id == old_national_id
            else s
            for s in self.students
        ]

    def delete_student(self, *, national_id: str) -> None:
        self.students = [s for s in self.students if s.national_id != national_id]


class FakeSink:
    def __init__(self):
        self.submitted: List[tuple[str, List[AttendanceSubmission]]] = []
        self.recap_rows: List[RecapRow] = []
        self.graph: Dict[str, StatusSummary] = {}
        self.last_query = None
        self.fail = False

    def submit_attendance(self, date: str, records: Sequence[AttendanceSubmission]) -> None:
        if self.fail:
            raise GatewayError("Gagal mengirim data ke server spreadsheet")
        self.submitted.append((date, list(records)))

    def query_monthly_recap(self, class_filter: str, month: str) -> Sequence[RecapRow]:
        self.last_query = {"kelas": class_filter, "bulan": month}
        return list(self.recap_rows)

    def query_graph_data(self, class_filter: str, semester: str) -> Dict[str, StatusSummary]:
        self.last_query = {"kelas": class_filter, "semester": semester}
        return dict(self.graph)


@pytest.fixture
def students() -> List[Student]:
    return [
        Student(id="1", name="Ani", national_id="001", class_label=" 3 "),
        Student(id="2", name="Budi", national_id="002", class_label="3A"),
        Student(id="3", name="Citra", national_id="003", class_label=None),
        Student(id="4", name="Dewi", national_id="004", class_label="10"),
    ]


@pytest.fixture
def roster_repo(students) -> InMemoryRoster:
    return InMemoryRoster(students)


@pytest.fixture
def sink() -> FakeSink:
    return FakeSink()


@pytest.fixture
def container(roster_repo, sink):
    c = wire_container(roster_provider=roster_repo, attendance_sink=sink, student_writer=roster_repo)
    c.roster_service.refresh()
    return c


@pytest.fixture
def client(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from absensi_siswa.main import create_app

    app = create_app(container)
    return app.test_client()
