"""Institute aggregate: root of the entity tree.

Institute owns its courses, courses own groups, groups own students.
Nothing in the tree is shared between two parents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from edu_records.domain.exceptions import EntityNotFoundError, ValidationError
from edu_records.domain.model.course import Course
from edu_records.domain.model.student import Student


@dataclass
class Institute:

    name: str
    subjects: list[str] = field(default_factory=list)
    courses: list[Course] = field(default_factory=list)

    @staticmethod
    def create(name: str) -> Institute:
        return Institute(name=Institute.normalize_name(name))

    @staticmethod
    def normalize_name(name: str) -> str:
        if not name or not name.strip():
            raise ValidationError("Institute name is required")
        return name.strip()

    # --- Subjects -------------------------------------------------------------

    def add_subject(self, subject: str) -> bool:
        """Register a subject; returns False if it was already known."""
        if not subject or not subject.strip():
            raise ValidationError("Subject name is required")
        subject = subject.strip()
        if subject in self.subjects:
            return False
        self.subjects.append(subject)
        return True

    # --- Courses --------------------------------------------------------------

    def find_course(self, number: int) -> Course | None:
        for course in self.courses:
            if course.number == number:
                return course
        return None

    def get_course(self, number: int) -> Course:
        course = self.find_course(number)
        if course is None:
            raise EntityNotFoundError(f"Course {number} not found in {self.name}")
        return course

    def ensure_course(self, number: int) -> tuple[Course, bool]:
        """Return the course with *number*, creating it if missing.

        The second element tells whether a new course was created.
        """
        course = self.find_course(number)
        if course is not None:
            return course, False
        course = Course.create(number)
        self.courses.append(course)
        return course, True

    # --- Traversal ------------------------------------------------------------

    def iter_students(self) -> Iterator[Student]:
        for course in self.courses:
            for group in course.groups:
                yield from group.students

    def __str__(self) -> str:
        return (
            f"Institute: {self.name}, courses: {len(self.courses)}, "
            f"subjects: {len(self.subjects)}"
        )
