from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status absensi harian; nilai = label yang disimpan di spreadsheet."""

    HADIR = "Hadir"
    IZIN = "Izin"
    SAKIT = "Sakit"
    ALPHA = "Alpha"


class ClassLabelKind(str, Enum):
    """How a raw class label from the roster was classified on ingestion."""

    MISSING = "MISSING"
    PLACEHOLDER = "PLACEHOLDER"
    VALUE = "VALUE"
