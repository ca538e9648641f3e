"""Application service: Add Student use case."""

from __future__ import annotations

from edu_records.application.dto import StudentDTO
from edu_records.application.lookup import require_group, require_institute, student_to_dto
from edu_records.domain.model.student import Student
from edu_records.domain.repository.institute_repository import InstituteRepository


class AddStudentHandler:

    def __init__(self, institute_repo: InstituteRepository) -> None:
        self._institute_repo = institute_repo

    def handle(
        self,
        institute_name: str,
        course_number: int,
        group_name: str,
        full_name: str,
        email: str | None = None,
    ) -> StudentDTO:
        """Enrol a new student under a system-assigned id."""
        institute = require_institute(self._institute_repo, institute_name)
        group = require_group(institute, course_number, group_name)

        student = Student.create(
            student_id=self._institute_repo.next_student_id(),
            full_name=full_name,
            email=email,
        )
        group.add_student(student)
        self._institute_repo.save(institute)

        return student_to_dto(student)
