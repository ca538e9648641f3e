"""Domain service: excellence queries over the entity tree.

Read-only.  Both functions only call ``Student.is_excellent()``, so
students with unreadable marks still emit their EvaluationError events
on their own channels while being counted as not excellent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from edu_records.domain.model.institute import Institute


@dataclass(frozen=True)
class ExcellenceLeader:
    institute: Institute
    excellent_count: int


def count_excellent(institute: Institute) -> int:
    """Number of excellent students across every course and group."""
    return sum(1 for student in institute.iter_students() if student.is_excellent())


def best_institute(institutes: Iterable[Institute]) -> ExcellenceLeader | None:
    """Institute with the most excellent students, or None for no input.

    Ties go to the institute encountered first.
    """
    leader: ExcellenceLeader | None = None
    for institute in institutes:
        count = count_excellent(institute)
        if leader is None or count > leader.excellent_count:
            leader = ExcellenceLeader(institute=institute, excellent_count=count)
    return leader
