from __future__ import annotations

import logging
from typing import List

from ..attendance.repository import AttendanceSink
from ..common.validators import require_month_name, require_semester
from ..core.constants import DEFAULT_PERCENT_DECIMALS, SEMESTER_MONTHS, WILDCARD_CLASS
from ..core.enums import AttendanceStatus
from .aggregator import filter_rows_by_class, status_percent, summarize
from .model import GraphPoint, MonthlyRecap, StatusSummary

logger = logging.getLogger(__name__)


def _class_filter(selected_class: str) -> str:
    return "" if selected_class == WILDCARD_CLASS else selected_class


class RecapService:
    def __init__(self, sink: AttendanceSink, *, percent_decimals: int = DEFAULT_PERCENT_DECIMALS):
        self._sink = sink
        self._decimals = int(percent_decimals)

    def monthly_recap(self, *, month: str, selected_class: str = WILDCARD_CLASS) -> MonthlyRecap:
        month = require_month_name(month)
        rows = self._sink.query_monthly_recap(_class_filter(selected_class), month)
        # The sheet filters server-side too, but older script versions ignore "kelas".
        rows = filter_rows_by_class(list(rows), selected_class)
        logger.debug("Recap %s/%s: %d row(s)", month, selected_class, len(rows))
        return MonthlyRecap(month=month, selected_class=selected_class, rows=rows, summary=summarize(rows))

    def export_rows(self, recap: MonthlyRecap) -> List[dict]:
        """Flatten a recap for CSV export, with per-student status percentages."""
        out: List[dict] = []
        for r in recap.rows:
            row_summary = StatusSummary(present=r.present, leave=r.leave, sick=r.sick, absent=r.absent)
            out.append(
                {
                    "nama": r.student_name or "N/A",
                    "kelas": r.class_label or "N/A",
                    "hadir": r.present,
                    "alpha": r.absent,
                    "izin": r.leave,
                    "sakit": r.sick,
                    "persen_hadir": status_percent(AttendanceStatus.HADIR, row_summary, self._decimals),
                    "persen_izin": status_percent(AttendanceStatus.IZIN, row_summary, self._decimals),
                    "persen_sakit": status_percent(AttendanceStatus.SAKIT, row_summary, self._decimals),
                    "persen_alpha": status_percent(AttendanceStatus.ALPHA, row_summary, self._decimals),
                }
            )
        return out

    def semester_graph(self, *, semester: str, selected_class: str = WILDCARD_CLASS) -> List[GraphPoint]:
        semester = require_semester(semester)
        data = self._sink.query_graph_data(_class_filter(selected_class), semester)
        by_month = {name.strip().lower(): summary for name, summary in data.items()}

        points = []
        for month in SEMESTER_MONTHS[semester]:
            summary = by_month.get(month.lower(), StatusSummary())
            points.append(
                GraphPoint(
                    month=month,
                    summary=summary,
                    attendance_percent=status_percent(AttendanceStatus.HADIR, summary, self._decimals),
                )
            )
        return points
