import pytest

from absensi_siswa.attendance.ledger import AttendanceLedger
from absensi_siswa.core.enums import AttendanceStatus
from absensi_siswa.core.exceptions import InvalidStatusError
from absensi_siswa.students.model import Student


def test_fresh_date_defaults_everyone_to_hadir(students):
    ledger = AttendanceLedger()

    assert ledger.ensure_initialized("2024-05-01", students) is True
    assert all(ledger.status_of("2024-05-01", s.id) == AttendanceStatus.HADIR for s in students)


def test_status_of_defaults_before_initialization():
    ledger = AttendanceLedger()

    assert ledger.status_of("2024-05-01", "missing") == AttendanceStatus.HADIR
    assert not ledger.is_initialized("2024-05-01")


def test_empty_roster_does_not_create_entry(students):
    ledger = AttendanceLedger()

    assert ledger.ensure_initialized("2024-05-01", []) is False
    assert not ledger.is_initialized("2024-05-01")

    # once the roster arrives, lazy init still happens
    assert ledger.ensure_initialized("2024-05-01", students) is True


def test_initialized_date_is_never_reset(students):
    ledger = AttendanceLedger()
    ledger.ensure_initialized("2024-05-01", students)
    ledger.set_status("2024-05-01", "1", AttendanceStatus.ALPHA)

    assert ledger.ensure_initialized("2024-05-01", students) is False
    assert ledger.status_of("2024-05-01", "1") == AttendanceStatus.ALPHA


def test_set_status_touches_only_one_cell(students):
    ledger = AttendanceLedger()
    ledger.ensure_initialized("2024-05-01", students)
    before = ledger.snapshot("2024-05-01")

    ledger.set_status("2024-05-01", "2", AttendanceStatus.ALPHA)

    after = ledger.snapshot("2024-05-01")
    assert after["2"] == AttendanceStatus.ALPHA
    assert {k: v for k, v in after.items() if k != "2"} == {k: v for k, v in before.items() if k != "2"}


def test_set_status_accepts_exact_label(students):
    ledger = AttendanceLedger()

    ledger.set_status("2024-05-01", "1", "Sakit")

    assert ledger.status_of("2024-05-01", "1") == AttendanceStatus.SAKIT


@pytest.mark.parametrize("bad", ["hadir", "Absent", "", None, 3])
def test_unknown_status_is_rejected(bad):
    ledger = AttendanceLedger()

    with pytest.raises(InvalidStatusError):
        ledger.set_status("2024-05-01", "1", bad)


def test_switching_dates_keeps_other_entries(students):
    ledger = AttendanceLedger()
    ledger.ensure_initialized("2024-05-01", students)
    ledger.set_status("2024-05-01", "1", AttendanceStatus.IZIN)

    ledger.ensure_initialized("2024-05-02", students)

    assert ledger.dates() == ["2024-05-01", "2024-05-02"]
    assert ledger.status_of("2024-05-01", "1") == AttendanceStatus.IZIN
    assert ledger.status_of("2024-05-02", "1") == AttendanceStatus.HADIR


def test_student_added_later_is_not_backfilled(students):
    ledger = AttendanceLedger()
    ledger.ensure_initialized("2024-05-01", students)

    newcomer = Student(id="9", name="Baru", national_id="009", class_label="3")
    ledger.ensure_initialized("2024-05-01", [*students, newcomer])

    assert "9" not in ledger.snapshot("2024-05-01")
    assert ledger.status_of("2024-05-01", "9") == AttendanceStatus.HADIR
