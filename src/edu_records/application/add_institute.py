"""Application service: Add Institute use case."""

from __future__ import annotations

from edu_records.domain.exceptions import DuplicateEntityError
from edu_records.domain.model.institute import Institute
from edu_records.domain.repository.institute_repository import InstituteRepository


class AddInstituteHandler:

    def __init__(self, institute_repo: InstituteRepository) -> None:
        self._institute_repo = institute_repo

    def handle(self, name: str) -> Institute:
        institute = Institute.create(name)
        if self._institute_repo.get_by_name(institute.name) is not None:
            raise DuplicateEntityError(f"Institute already exists: '{institute.name}'")
        self._institute_repo.save(institute)
        return institute
