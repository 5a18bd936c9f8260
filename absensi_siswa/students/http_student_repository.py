from __future__ import annotations

import logging
from typing import Sequence

from ..core.exceptions import GatewayError
from ..gateway.apps_script import AppsScriptClient, unwrap_result
from .model import Student
from .repository import RosterProvider, StudentWriter

logger = logging.getLogger(__name__)


class AppsScriptStudentRepository(RosterProvider, StudentWriter):
    """Roster stored in the "siswa" sheet behind the Apps Script endpoint."""

    def __init__(self, client: AppsScriptClient):
        self._client = client

    def fetch_roster(self) -> Sequence[Student]:
        rows = unwrap_result(self._client.get_json())
        if not isinstance(rows, list):
            raise GatewayError("Format data siswa tidak dikenali")

        parsed = [Student.from_payload(r) for r in rows if isinstance(r, dict)]
        if len(parsed) != len(rows):
            logger.warning("Skipped %d non-object roster item(s)", len(rows) - len(parsed))

        # Rows without id or NISN would all share one ledger cell.
        students = [s for s in parsed if s.id]
        if len(students) != len(parsed):
            logger.warning("Skipped %d roster item(s) without id or NISN", len(parsed) - len(students))
        return students

    def add_student(self, *, national_id: str, name: str, class_label: str) -> None:
        self._client.post_json({"type": "siswa", "nisn": national_id, "nama": name, "kelas": class_label})

    def update_student(self, *, old_national_id: str, national_id: str, name: str, class_label: str) -> None:
        self._client.post_json(
            {
                "type": "edit",
                "nisnLama": old_national_id,
                "nisnBaru": national_id,
                "nama": name,
                "kelas": class_label,
            }
        )

    def delete_student(self, *, national_id: str) -> None:
        self._client.post_json({"type": "delete", "nisn": national_id})
