"""In-memory fake repository and event recorder for testing.

The fake implements the same abstract interface as the JSON repository
but keeps everything in a list. No file I/O, no side effects.
"""

from __future__ import annotations

from edu_records.domain.events import ErrorEvent
from edu_records.domain.model.institute import Institute
from edu_records.domain.repository.institute_repository import (
    InstituteRepository,
    format_student_id,
)


class FakeInstituteRepository(InstituteRepository):

    def __init__(self, institutes: list[Institute] | None = None) -> None:
        self._store: list[Institute] = list(institutes or [])
        self._next_id = 1 + sum(
            1 for institute in self._store for _ in institute.iter_students()
        )
        self.saves = 0

    def get_by_name(self, name: str) -> Institute | None:
        for institute in self._store:
            if institute.name.lower() == name.strip().lower():
                return institute
        return None

    def list_all(self) -> list[Institute]:
        return list(self._store)

    def save(self, institute: Institute) -> None:
        self.saves += 1
        for index, existing in enumerate(self._store):
            if existing.name.lower() == institute.name.lower():
                self._store[index] = institute
                return
        self._store.append(institute)

    def rename(self, old_name: str, new_name: str) -> None:
        institute = self.get_by_name(old_name)
        if institute is not None:
            self.saves += 1
            institute.name = new_name

    def delete(self, name: str) -> None:
        self._store = [i for i in self._store if i.name.lower() != name.strip().lower()]

    def next_student_id(self) -> str:
        student_id = format_student_id(self._next_id)
        self._next_id += 1
        return student_id


class EventRecorder:
    """Subscriber that remembers every (sender, event) pair it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[object, ErrorEvent]] = []

    def __call__(self, sender: object, event: ErrorEvent) -> None:
        self.calls.append((sender, event))

    @property
    def events(self) -> list[ErrorEvent]:
        return [event for _, event in self.calls]

    @property
    def kinds(self) -> list[str]:
        return [event.kind for event in self.events]
