"""JSON-file-backed implementation of InstituteRepository.

The whole entity tree lives in one file.  Students are reconstituted
through the plain constructor, so each gets a fresh error channel.
"""

from __future__ import annotations

import json
import re
from decimal import Decimal
from pathlib import Path

from edu_records.domain.model.course import Course
from edu_records.domain.model.group import Group
from edu_records.domain.model.institute import Institute
from edu_records.domain.model.student import Student
from edu_records.domain.model.value_objects import Money
from edu_records.domain.repository.institute_repository import (
    STUDENT_ID_PREFIX,
    InstituteRepository,
    format_student_id,
)

_ID_PATTERN = re.compile(rf"^{STUDENT_ID_PREFIX}(\d+)$")


class JsonInstituteRepository(InstituteRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- InstituteRepository interface ----------------------------------------

    def get_by_name(self, name: str) -> Institute | None:
        for institute in self._load():
            if institute.name.lower() == name.strip().lower():
                return institute
        return None

    def list_all(self) -> list[Institute]:
        return self._load()

    def save(self, institute: Institute) -> None:
        institutes = self._load()
        for index, existing in enumerate(institutes):
            if existing.name.lower() == institute.name.lower():
                institutes[index] = institute
                break
        else:
            institutes.append(institute)
        self._persist(institutes)

    def rename(self, old_name: str, new_name: str) -> None:
        institutes = self._load()
        for institute in institutes:
            if institute.name.lower() == old_name.strip().lower():
                institute.name = new_name
                break
        self._persist(institutes)

    def delete(self, name: str) -> None:
        institutes = [i for i in self._load() if i.name.lower() != name.strip().lower()]
        self._persist(institutes)

    def next_student_id(self) -> str:
        highest = 0
        for institute in self._load():
            for student in institute.iter_students():
                match = _ID_PATTERN.match(student.id)
                if match:
                    highest = max(highest, int(match.group(1)))
        return format_student_id(highest + 1)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[Institute]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return [
            Institute(
                name=item["name"],
                subjects=list(item.get("subjects", [])),
                courses=[
                    Course(
                        number=course["number"],
                        groups=[
                            Group(
                                name=group["name"],
                                students=[self._load_student(s) for s in group.get("students", [])],
                            )
                            for group in course.get("groups", [])
                        ],
                    )
                    for course in item.get("courses", [])
                ],
            )
            for item in raw
        ]

    @staticmethod
    def _load_student(item: dict) -> Student:
        return Student(
            id=item["id"],
            full_name=item["full_name"],
            marks=dict(item.get("marks", {})),
            balance=Money(Decimal(item.get("balance", "0.00")), item.get("currency", "USD")),
            email=item.get("email"),
        )

    def _persist(self, institutes: list[Institute]) -> None:
        raw = [
            {
                "name": institute.name,
                "subjects": list(institute.subjects),
                "courses": [
                    {
                        "number": course.number,
                        "groups": [
                            {
                                "name": group.name,
                                "students": [
                                    {
                                        "id": s.id,
                                        "full_name": s.full_name,
                                        "marks": dict(s.marks),
                                        "balance": str(s.balance.amount),
                                        "currency": s.balance.currency,
                                        "email": s.email,
                                    }
                                    for s in group.students
                                ],
                            }
                            for group in course.groups
                        ],
                    }
                    for course in institute.courses
                ],
            }
            for institute in institutes
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
