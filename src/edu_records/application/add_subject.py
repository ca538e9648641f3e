"""Application service: Add Subject use case."""

from __future__ import annotations

from edu_records.application.lookup import require_institute
from edu_records.domain.repository.institute_repository import InstituteRepository


class AddSubjectHandler:

    def __init__(self, institute_repo: InstituteRepository) -> None:
        self._institute_repo = institute_repo

    def handle(self, institute_name: str, subject: str) -> bool:
        """Add *subject*; returns False when the institute already had it."""
        institute = require_institute(self._institute_repo, institute_name)
        added = institute.add_subject(subject)
        if added:
            self._institute_repo.save(institute)
        return added
