"""Application service: Delete Institute use case."""

from __future__ import annotations

from edu_records.application.lookup import require_institute
from edu_records.domain.repository.institute_repository import InstituteRepository


class DeleteInstituteHandler:

    def __init__(self, institute_repo: InstituteRepository) -> None:
        self._institute_repo = institute_repo

    def handle(self, name: str) -> None:
        institute = require_institute(self._institute_repo, name)
        self._institute_repo.delete(institute.name)
