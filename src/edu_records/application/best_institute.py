"""Application service: Best Institute use case (query)."""

from __future__ import annotations

from edu_records.application.dto import BestInstituteDTO
from edu_records.domain.repository.institute_repository import InstituteRepository
from edu_records.domain.service.excellence import best_institute

NO_DATA_REPORT = "No data."


class BestInstituteHandler:

    def __init__(self, institute_repo: InstituteRepository) -> None:
        self._institute_repo = institute_repo

    def handle(self) -> BestInstituteDTO | None:
        leader = best_institute(self._institute_repo.list_all())
        if leader is None:
            return None
        return BestInstituteDTO(
            name=leader.institute.name,
            excellent_count=leader.excellent_count,
        )
