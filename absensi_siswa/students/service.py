from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import GatewayError, ValidationError
from .class_normalizer import normalize_classes
from .model import Student
from .repository import RosterProvider, StudentWriter
from .roster_filter import filter_by_class

logger = logging.getLogger(__name__)


class RosterService:
    """Use case: keep the session roster and its class list in sync with the sheet.

    The roster is owned here and handed out by reference; views filter it
    but never keep their own copy.
    """

    def __init__(self, provider: RosterProvider, writer: Optional[StudentWriter] = None):
        self._provider = provider
        self._writer = writer
        self._students: List[Student] = []
        self._classes: List[str] = normalize_classes([])

    @property
    def students(self) -> Sequence[Student]:
        return self._students

    def classes(self) -> List[str]:
        return list(self._classes)

    def students_in(self, selected_class: str) -> List[Student]:
        return filter_by_class(self._students, selected_class)

    def refresh(self) -> Sequence[Student]:
        """Reload the roster. On failure the previous roster is kept and the error re-raised."""
        try:
            students = list(self._provider.fetch_roster())
        except GatewayError:
            logger.exception("Roster refresh failed; keeping %d cached student(s)", len(self._students))
            raise

        self._students = students
        self._classes = normalize_classes(students)
        logger.info("Roster loaded: %d student(s), %d class(es)", len(students), len(self._classes) - 1)
        return self._students

    def add_student(self, *, national_id: str, name: str, class_label: str) -> None:
        national_id, name, class_label = self._require_fields(national_id, name, class_label)
        self._require_writer().add_student(national_id=national_id, name=name, class_label=class_label)
        self.refresh()

    def update_student(self, *, old_national_id: str, national_id: str, name: str, class_label: str) -> None:
        old_national_id = require_non_empty(old_national_id, "NISN lama")
        national_id, name, class_label = self._require_fields(national_id, name, class_label)
        self._require_writer().update_student(
            old_national_id=old_national_id,
            national_id=national_id,
            name=name,
            class_label=class_label,
        )
        self.refresh()

    def delete_student(self, *, national_id: str) -> None:
        national_id = require_non_empty(national_id, "NISN")
        self._require_writer().delete_student(national_id=national_id)
        self.refresh()

    def _require_fields(self, national_id: str, name: str, class_label: str) -> tuple[str, str, str]:
        try:
            return (
                require_non_empty(national_id, "NISN"),
                require_non_empty(name, "Nama"),
                require_non_empty(class_label, "Kelas"),
            )
        except ValidationError as e:
            raise ValidationError("Semua field wajib diisi!") from e

    def _require_writer(self) -> StudentWriter:
        if self._writer is None:
            raise ValidationError("Data siswa hanya bisa dibaca")
        return self._writer
