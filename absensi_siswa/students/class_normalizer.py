from __future__ import annotations

import logging
import re
from typing import Iterable, List, Tuple

from ..core.constants import WILDCARD_CLASS
from ..core.enums import ClassLabelKind
from .model import ClassLabel, Student

logger = logging.getLogger(__name__)

_NUMERIC_CLASS = re.compile(r"[0-9]+")


def class_sort_key(class_id: str) -> Tuple:
    """Natural order for class ids.

    Digit-only ids ("1", "10") come first in numeric order; everything else
    ("3A", "X IPA 1") follows, compared case-insensitively with the raw
    string as tie-break so the order is total.
    """
    if _NUMERIC_CLASS.fullmatch(class_id):
        return (0, int(class_id), "", class_id)
    return (1, 0, class_id.casefold(), class_id)


def normalize_classes(students: Iterable[Student]) -> List[str]:
    """Canonical class list for a roster, wildcard first.

    Missing and placeholder labels are dropped silently; the students
    themselves stay in the roster and are only visible under the wildcard.
    """
    classes = set()
    dropped = 0
    for student in students:
        label = ClassLabel.parse(student.class_label)
        if label.kind == ClassLabelKind.VALUE:
            classes.add(label.value)
        else:
            dropped += 1

    if dropped:
        logger.debug("%d student(s) without a usable class label", dropped)

    return [WILDCARD_CLASS, *sorted(classes, key=class_sort_key)]
