from __future__ import annotations

from typing import Protocol, Sequence

from .model import Student


class RosterProvider(Protocol):
    def fetch_roster(self) -> Sequence[Student]:
        raise NotImplementedError


class StudentWriter(Protocol):
    def add_student(self, *, national_id: str, name: str, class_label: str) -> None:
        raise NotImplementedError

    def update_student(self, *, old_national_id: str, national_id: str, name: str, class_label: str) -> None:
        raise NotImplementedError

    def delete_student(self, *, national_id: str) -> None:
        raise NotImplementedError
