"""CLI commands for students."""

from __future__ import annotations

import click

from edu_records.application.add_student import AddStudentHandler
from edu_records.application.put_mark import PutMarkHandler
from edu_records.domain.exceptions import DomainException
from edu_records.domain.model.student import MAX_MARK, MIN_MARK
from edu_records.infrastructure.bootstrap import institute_repository
from edu_records.infrastructure.cli.error_output import echo_student_error
from edu_records.infrastructure.cli.options import group_location, student_location


@click.command("add")
@group_location
@click.option("--name", required=True, help="Full name.")
@click.option("--email", default=None, help="Contact address.")
def student_add(institute: str, course: int, group: str, name: str, email: str | None) -> None:
    """Enrol a student in a group."""
    handler = AddStudentHandler(institute_repo=institute_repository())

    try:
        dto = handler.handle(
            institute_name=institute,
            course_number=course,
            group_name=group,
            full_name=name,
            email=email,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Student {dto.full_name} added with ID {dto.id}")


@click.command("mark")
@student_location
@click.option("--subject", required=True, help="Subject name.")
@click.option("--mark", required=True, type=int, help=f"Mark ({MIN_MARK}..{MAX_MARK}).")
def student_mark(
    institute: str, course: int, group: str, student_id: str, subject: str, mark: int
) -> None:
    """Put or change a student's mark."""
    handler = PutMarkHandler(institute_repo=institute_repository(), on_error=echo_student_error)

    try:
        events = handler.handle(
            institute_name=institute,
            course_number=course,
            group_name=group,
            student_id=student_id,
            subject=subject,
            mark=mark,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if events:
        click.get_current_context().exit(1)
    click.echo("Saved")
