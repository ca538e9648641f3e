"""Group: an ordered roster of students inside a course."""

from __future__ import annotations

from dataclasses import dataclass, field

from edu_records.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    ValidationError,
)
from edu_records.domain.model.student import Student


@dataclass
class Group:
    """Students are listed in the order they were enrolled."""

    name: str
    students: list[Student] = field(default_factory=list)

    @staticmethod
    def create(name: str) -> Group:
        if not name or not name.strip():
            raise ValidationError("Group name is required")
        return Group(name=name.strip())

    def add_student(self, student: Student) -> None:
        if any(s.id == student.id for s in self.students):
            raise DuplicateEntityError(
                f"Student {student.id} is already in group {self.name}"
            )
        self.students.append(student)

    def get_student(self, student_id: str) -> Student:
        for student in self.students:
            if student.id == student_id:
                return student
        raise EntityNotFoundError(f"Student '{student_id}' not found in group {self.name}")

    def __str__(self) -> str:
        return f"Group {self.name}, students: {len(self.students)}"
