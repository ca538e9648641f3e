"""Application service: Add Course and Group use case.

A course is looked up by number and only created when missing, so two
groups of the same year always share one Course.
"""

from __future__ import annotations

from edu_records.application.lookup import require_institute
from edu_records.domain.exceptions import DomainException
from edu_records.domain.repository.institute_repository import InstituteRepository


class AddGroupHandler:

    def __init__(self, institute_repo: InstituteRepository) -> None:
        self._institute_repo = institute_repo

    def handle(self, institute_name: str, course_number: int, group_name: str) -> bool:
        """Add the group; returns True if its course had to be created."""
        institute = require_institute(self._institute_repo, institute_name)
        course, created = institute.ensure_course(course_number)
        try:
            course.add_group(group_name)
        except DomainException:
            if created:
                institute.courses.remove(course)
            raise
        self._institute_repo.save(institute)
        return created
