"""Shared navigation helpers for handlers that address a tree node."""

from __future__ import annotations

from edu_records.application.dto import StudentDTO
from edu_records.domain.exceptions import EntityNotFoundError
from edu_records.domain.model.group import Group
from edu_records.domain.model.institute import Institute
from edu_records.domain.model.student import Student
from edu_records.domain.repository.institute_repository import InstituteRepository


def require_institute(repo: InstituteRepository, name: str) -> Institute:
    institute = repo.get_by_name(name)
    if institute is None:
        raise EntityNotFoundError(f"Institute not found: '{name}'")
    return institute


def require_group(institute: Institute, course_number: int, group_name: str) -> Group:
    return institute.get_course(course_number).get_group(group_name)


def student_to_dto(student: Student) -> StudentDTO:
    return StudentDTO(
        id=student.id,
        full_name=student.full_name,
        email=student.email,
        balance=str(student.balance),
        marks=dict(student.marks),
        excellent=student.is_excellent(),
    )
