"""Abstract repository for the Institute aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from edu_records.domain.model.institute import Institute

STUDENT_ID_PREFIX = "S"


def format_student_id(sequence: int) -> str:
    return f"{STUDENT_ID_PREFIX}{sequence:03d}"


class InstituteRepository(ABC):

    @abstractmethod
    def get_by_name(self, name: str) -> Institute | None:
        """Return an institute by name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Institute]:
        """Return every institute in insertion order."""

    @abstractmethod
    def save(self, institute: Institute) -> None:
        """Persist a new or updated institute, keeping its position."""

    @abstractmethod
    def rename(self, old_name: str, new_name: str) -> None:
        """Give an existing institute a new name, keeping its position."""

    @abstractmethod
    def delete(self, name: str) -> None:
        """Remove an institute; no-op if it does not exist."""

    @abstractmethod
    def next_student_id(self) -> str:
        """Return an identifier no stored student uses yet (``S001`` style)."""
