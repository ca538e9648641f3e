"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals (channels, sinks) to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StudentDTO:
    id: str
    full_name: str
    email: str | None
    balance: str  # formatted, e.g. "$12.50"
    marks: dict[str, int]
    excellent: bool


@dataclass(frozen=True)
class GroupDTO:
    name: str
    students: list[StudentDTO]


@dataclass(frozen=True)
class CourseDTO:
    number: int
    groups: list[GroupDTO]


@dataclass(frozen=True)
class InstituteDTO:
    name: str
    subjects: list[str]
    courses: list[CourseDTO]
    excellent_count: int


@dataclass(frozen=True)
class BestInstituteDTO:
    name: str
    excellent_count: int

    @property
    def report(self) -> str:
        return (
            f"Institute with the most excellent students: {self.name}. "
            f"Excellent students: {self.excellent_count}."
        )
