"""Application service: Put Mark use case.

The outcome of ``Student.put_mark`` is only observable through the
student's error channel, so the handler subscribes for the duration of
the call and hands back whatever was published.
"""

from __future__ import annotations

from edu_records.application.lookup import require_group, require_institute
from edu_records.domain.events import ErrorEvent, ErrorHandler
from edu_records.domain.exceptions import EntityNotFoundError
from edu_records.domain.repository.institute_repository import InstituteRepository


class PutMarkHandler:

    def __init__(
        self,
        institute_repo: InstituteRepository,
        on_error: ErrorHandler | None = None,
    ) -> None:
        self._institute_repo = institute_repo
        self._on_error = on_error

    def handle(
        self,
        institute_name: str,
        course_number: int,
        group_name: str,
        student_id: str,
        subject: str,
        mark: int,
    ) -> list[ErrorEvent]:
        """Set a mark; returns the error events raised (empty on success)."""
        institute = require_institute(self._institute_repo, institute_name)
        if subject not in institute.subjects:
            raise EntityNotFoundError(
                f"Subject '{subject}' is not taught at {institute.name}"
            )
        student = require_group(institute, course_number, group_name).get_student(student_id)

        raised: list[ErrorEvent] = []

        def collect(sender, event: ErrorEvent) -> None:
            raised.append(event)

        student.errors.subscribe(collect)
        if self._on_error is not None:
            student.errors.subscribe(self._on_error)
        try:
            student.put_mark(subject, mark)
        finally:
            if self._on_error is not None:
                student.errors.unsubscribe(self._on_error)
            student.errors.unsubscribe(collect)

        if not raised:
            self._institute_repo.save(institute)
        return raised
