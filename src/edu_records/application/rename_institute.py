"""Application service: Rename Institute use case."""

from __future__ import annotations

from edu_records.application.lookup import require_institute
from edu_records.domain.exceptions import DuplicateEntityError
from edu_records.domain.model.institute import Institute
from edu_records.domain.repository.institute_repository import InstituteRepository


class RenameInstituteHandler:

    def __init__(self, institute_repo: InstituteRepository) -> None:
        self._institute_repo = institute_repo

    def handle(self, old_name: str, new_name: str) -> str:
        """Rename an institute; a change of case alone is allowed."""
        institute = require_institute(self._institute_repo, old_name)
        new_name = Institute.normalize_name(new_name)

        clash = self._institute_repo.get_by_name(new_name)
        if clash is not None and clash.name.lower() != institute.name.lower():
            raise DuplicateEntityError(f"Institute already exists: '{clash.name}'")

        self._institute_repo.rename(institute.name, new_name)
        return new_name
