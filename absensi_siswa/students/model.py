from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.constants import PLACEHOLDER_CLASS_LABELS
from ..core.enums import ClassLabelKind


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


@dataclass(frozen=True)
class ClassLabel:
    """Class label as received from the roster, classified once at ingestion.

    The spreadsheet backend is loosely typed: a label may be missing, a
    number, a padded string, or the literal text "null"/"undefined" left by
    a serialization step upstream.
    """

    kind: ClassLabelKind
    value: Optional[str] = None

    @classmethod
    def parse(cls, raw: Any) -> "ClassLabel":
        if raw is None:
            return cls(ClassLabelKind.MISSING)
        text = str(raw).strip()
        if text in PLACEHOLDER_CLASS_LABELS:
            return cls(ClassLabelKind.PLACEHOLDER)
        return cls(ClassLabelKind.VALUE, text)

    def as_optional(self) -> Optional[str]:
        return self.value if self.kind == ClassLabelKind.VALUE else None


@dataclass(frozen=True)
class Student:
    """Domain entity: one siswa (student) in the roster."""

    id: str
    name: str
    national_id: str
    class_label: Optional[str] = None

    @property
    def effective_class(self) -> Optional[str]:
        return ClassLabel.parse(self.class_label).as_optional()

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Student":
        """Build from one roster item returned by the Apps Script endpoint."""
        raw_class = payload.get("kelas")
        national_id = _text(payload.get("nisn"))
        return cls(
            id=_text(payload.get("id")) or national_id,
            name=str(payload.get("name") or payload.get("nama") or "").strip(),
            national_id=national_id,
            class_label=None if raw_class is None else str(raw_class),
        )
