from __future__ import annotations

from typing import Dict, Protocol, Sequence

from ..recap.model import RecapRow, StatusSummary
from .model import AttendanceSubmission


class AttendanceSink(Protocol):
    def submit_attendance(self, date: str, records: Sequence[AttendanceSubmission]) -> None:
        """Append one day's batch. Raises GatewayError when the batch is not accepted."""

        raise NotImplementedError

    def query_monthly_recap(self, class_filter: str, month: str) -> Sequence[RecapRow]:
        raise NotImplementedError

    def query_graph_data(self, class_filter: str, semester: str) -> Dict[str, StatusSummary]:
        raise NotImplementedError
