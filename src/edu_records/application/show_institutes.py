"""Application service: Show Institutes use case (query)."""

from __future__ import annotations

from edu_records.application.dto import CourseDTO, GroupDTO, InstituteDTO
from edu_records.application.lookup import student_to_dto
from edu_records.domain.repository.institute_repository import InstituteRepository
from edu_records.domain.service.excellence import count_excellent


class ShowInstitutesHandler:

    def __init__(self, institute_repo: InstituteRepository) -> None:
        self._institute_repo = institute_repo

    def handle(self) -> list[InstituteDTO]:
        return [
            InstituteDTO(
                name=institute.name,
                subjects=list(institute.subjects),
                courses=[
                    CourseDTO(
                        number=course.number,
                        groups=[
                            GroupDTO(
                                name=group.name,
                                students=[student_to_dto(s) for s in group.students],
                            )
                            for group in course.groups
                        ],
                    )
                    for course in institute.courses
                ],
                excellent_count=count_excellent(institute),
            )
            for institute in self._institute_repo.list_all()
        ]
