from __future__ import annotations

from typing import List, Optional, Sequence

from ..core.constants import WILDCARD_CLASS
from .model import Student


def matches_class(class_label: Optional[object], selected_class: str) -> bool:
    """Exact match of a trimmed, null-coalesced label against a class id."""
    if selected_class == WILDCARD_CLASS:
        return True
    if class_label is None:
        return False
    return str(class_label).strip() == selected_class


def filter_by_class(students: Sequence[Student], selected_class: str) -> List[Student]:
    if selected_class == WILDCARD_CLASS:
        return list(students)
    return [s for s in students if matches_class(s.class_label, selected_class)]
