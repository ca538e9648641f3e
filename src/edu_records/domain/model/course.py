"""Course: one study year of an institute, owning its groups."""

from __future__ import annotations

from dataclasses import dataclass, field

from edu_records.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    ValidationError,
)
from edu_records.domain.model.group import Group

MIN_COURSE = 1
MAX_COURSE = 6


@dataclass
class Course:
    """Group names are unique within a course, ignoring case."""

    number: int
    groups: list[Group] = field(default_factory=list)

    @staticmethod
    def create(number: int) -> Course:
        if (
            not isinstance(number, int)
            or isinstance(number, bool)
            or not MIN_COURSE <= number <= MAX_COURSE
        ):
            raise ValidationError(
                f"Course number must be between {MIN_COURSE} and {MAX_COURSE}, got {number!r}"
            )
        return Course(number=number)

    def add_group(self, name: str) -> Group:
        group = Group.create(name)
        if self.find_group(group.name) is not None:
            raise DuplicateEntityError(
                f"Group '{group.name}' already exists in course {self.number}"
            )
        self.groups.append(group)
        return group

    def find_group(self, name: str) -> Group | None:
        for group in self.groups:
            if group.name.lower() == name.strip().lower():
                return group
        return None

    def get_group(self, name: str) -> Group:
        group = self.find_group(name)
        if group is None:
            raise EntityNotFoundError(f"Group '{name}' not found in course {self.number}")
        return group

    def __str__(self) -> str:
        return f"Course {self.number}, groups: {len(self.groups)}"
