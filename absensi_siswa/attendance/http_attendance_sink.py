from __future__ import annotations

import logging
from typing import Dict, Sequence

from ..core.exceptions import GatewayError
from ..gateway.apps_script import AppsScriptClient, unwrap_result
from ..recap.model import RecapRow, StatusSummary
from .model import AttendanceSubmission
from .repository import AttendanceSink

logger = logging.getLogger(__name__)


class AppsScriptAttendanceSink(AttendanceSink):
    """Attendance sheets behind the Apps Script endpoint.

    Note: The script computes monthly recaps and semester graphs itself; this
    side only forwards the filters ("" means all classes).
    """

    def __init__(self, client: AppsScriptClient):
        self._client = client

    def submit_attendance(self, date: str, records: Sequence[AttendanceSubmission]) -> None:
        payload = [r.to_payload() for r in records]
        logger.info("Submitting %d attendance row(s) for %s", len(payload), date)
        self._client.post_json(payload)

    def query_monthly_recap(self, class_filter: str, month: str) -> Sequence[RecapRow]:
        body = self._client.get_json({"action": "monthlyRecap", "kelas": class_filter, "bulan": month.lower()})
        rows = unwrap_result(body)
        if not isinstance(rows, list):
            raise GatewayError("Format data rekap tidak dikenali")
        return [RecapRow.from_payload(r) for r in rows if isinstance(r, dict)]

    def query_graph_data(self, class_filter: str, semester: str) -> Dict[str, StatusSummary]:
        body = self._client.get_json({"action": "graphData", "kelas": class_filter, "semester": semester})
        data = unwrap_result(body)
        if not data:
            return {}
        if not isinstance(data, dict):
            raise GatewayError("Format data grafik tidak dikenali")
        return {str(month): StatusSummary.from_payload(v) for month, v in data.items() if isinstance(v, dict)}
