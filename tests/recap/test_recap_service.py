import pytest

from absensi_siswa.core.exceptions import ValidationError
from absensi_siswa.recap.model import RecapRow, StatusSummary
from absensi_siswa.recap.service import RecapService


def test_monthly_recap_sends_blank_filter_for_wildcard(sink):
    sink.recap_rows = [RecapRow(student_name="A", class_label="3", present=4, absent=1)]

    recap = RecapService(sink).monthly_recap(month="mei")

    assert sink.last_query == {"kelas": "", "bulan": "Mei"}
    assert recap.month == "Mei"
    assert recap.summary == StatusSummary(present=4, absent=1)


def test_monthly_recap_filters_rows_locally(sink):
    sink.recap_rows = [
        RecapRow(student_name="A", class_label="3", present=4),
        RecapRow(student_name="B", class_label="3A", present=9),
    ]

    recap = RecapService(sink).monthly_recap(month="Januari", selected_class="3")

    assert sink.last_query["kelas"] == "3"
    assert [r.student_name for r in recap.rows] == ["A"]
    assert recap.summary.present == 4


def test_unknown_month_is_rejected(sink):
    with pytest.raises(ValidationError):
        RecapService(sink).monthly_recap(month="Smarch")


def test_export_rows_include_percentages(sink):
    sink.recap_rows = [
        RecapRow(student_name="A", class_label="3", present=10, absent=2, leave=1, sick=0),
        RecapRow(student_name="", class_label=None),
    ]
    svc = RecapService(sink, percent_decimals=1)

    rows = svc.export_rows(svc.monthly_recap(month="Maret"))

    assert rows[0]["persen_hadir"] == 76.9
    assert rows[0]["persen_alpha"] == 15.4
    assert rows[1]["nama"] == "N/A"
    assert rows[1]["persen_hadir"] == 0.0


def test_semester_graph_orders_and_zero_fills_months(sink):
    sink.graph = {"agustus": StatusSummary(present=3, sick=1), "Juli": StatusSummary(present=1)}

    points = RecapService(sink).semester_graph(semester="1", selected_class="3A")

    assert sink.last_query == {"kelas": "3A", "semester": "1"}
    assert [p.month for p in points] == ["Juli", "Agustus", "September", "Oktober", "November", "Desember"]
    assert points[0].attendance_percent == 100.0
    assert points[1].attendance_percent == 75.0
    assert points[2].summary == StatusSummary()
    assert points[2].attendance_percent == 0.0


def test_semester_must_be_one_or_two(sink):
    with pytest.raises(ValidationError):
        RecapService(sink).semester_graph(semester="3")
