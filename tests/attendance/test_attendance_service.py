import pytest

from absensi_siswa.container import wire_container
from absensi_siswa.core.enums import AttendanceStatus
from absensi_siswa.core.exceptions import GatewayError, ValidationError
from absensi_siswa.recap.model import StatusSummary
from absensi_siswa.students.model import Student


def test_two_student_day_summary(roster_repo, sink):
    roster_repo.students = [
        Student(id="1", name="Ani", national_id="001", class_label="3"),
        Student(id="2", name="Budi", national_id="002", class_label="3"),
    ]
    c = wire_container(roster_provider=roster_repo, attendance_sink=sink)
    c.roster_service.refresh()

    c.attendance_service.view_day("2024-05-01")
    c.attendance_service.set_status("2024-05-01", "1", "Sakit")
    view = c.attendance_service.view_day("2024-05-01")

    assert view.summary == StatusSummary(present=1, leave=0, sick=1, absent=0)


def test_view_day_filters_by_class_but_inits_whole_roster(container):
    view = container.attendance_service.view_day("2024-05-01", "3A")

    assert [s.id for s in view.students] == ["2"]
    assert len(container.ledger.snapshot("2024-05-01")) == 4


def test_view_day_rejects_bad_date(container):
    with pytest.raises(ValidationError):
        container.attendance_service.view_day("01-05-2024")


def test_save_formats_date_and_reads_ledger(container, sink):
    svc = container.attendance_service
    svc.view_day("2024-05-01")
    svc.set_status("2024-05-01", "4", AttendanceStatus.ALPHA)

    message = svc.save("2024-05-01", "10")

    assert message == "Data absensi kelas 10 berhasil dikirim!"
    date, records = sink.submitted[0]
    assert date == "01-05-2024"
    assert [r.to_payload() for r in records] == [
        {"tanggal": "01-05-2024", "nama": "Dewi", "kelas": "10", "nisn": "004", "status": "Alpha"}
    ]


def test_save_all_classes_sends_full_roster(container, sink):
    message = container.attendance_service.save("2024-05-01")

    assert message == "Data absensi semua kelas berhasil dikirim!"
    assert len(sink.submitted[0][1]) == 4
    assert all(r.status == AttendanceStatus.HADIR for r in sink.submitted[0][1])


def test_failed_save_leaves_ledger_untouched(container, sink):
    svc = container.attendance_service
    svc.set_status("2024-05-01", "1", AttendanceStatus.IZIN)
    sink.fail = True

    with pytest.raises(GatewayError):
        svc.save("2024-05-01")

    assert container.ledger.status_of("2024-05-01", "1") == AttendanceStatus.IZIN


def test_save_empty_class_is_rejected(container, sink):
    with pytest.raises(ValidationError):
        container.attendance_service.save("2024-05-01", "99")
    assert sink.submitted == []


def test_status_write_before_first_view_keeps_default_fill(container):
    svc = container.attendance_service

    svc.set_status("2024-06-01", "1", AttendanceStatus.IZIN)
    view = svc.view_day("2024-06-01")

    snapshot = container.ledger.snapshot("2024-06-01")
    assert len(snapshot) == 4
    assert snapshot["1"] == AttendanceStatus.IZIN
    assert view.summary == StatusSummary(present=3, leave=1)


@pytest.mark.parametrize("student_id", ["no-such", ""])
def test_status_for_unknown_student_is_rejected(container, student_id):
    with pytest.raises(ValidationError):
        container.attendance_service.set_status("2024-06-01", student_id, AttendanceStatus.SAKIT)

    assert student_id not in container.ledger.snapshot("2024-06-01")
