"""CLI commands that run the scripted demonstrations."""

from __future__ import annotations

import click

from edu_records.application.fault_showcase import FaultShowcase
from edu_records.application.lookup import require_group, require_institute
from edu_records.application.student_checks import (
    capability_checks,
    financial_checks,
    run_checks,
)
from edu_records.domain.exceptions import DomainException
from edu_records.infrastructure.bootstrap import institute_repository, shared_notifier
from edu_records.infrastructure.cli.error_output import (
    echo_fault,
    echo_notification,
    echo_student_error,
)
from edu_records.infrastructure.cli.options import student_location


@click.command("faults")
@click.option("--plain", is_flag=True, help="Use the base notifier without the event prefix.")
def demo_faults(plain: bool) -> None:
    """Trigger the seven fault categories and report each one."""
    notifier = shared_notifier(plain=plain)
    notifier.subscribe(echo_fault)

    click.echo("=== Fault handling through the error channel ===")
    FaultShowcase(notifier).run_all()
    click.echo("=== Done ===")


def _run_on_student(
    institute: str, course: int, group: str, student_id: str, build_checks, title: str
) -> None:
    repo = institute_repository()
    try:
        inst = require_institute(repo, institute)
        student = require_group(inst, course, group).get_student(student_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    student.errors.subscribe(echo_student_error)
    student.deliver = echo_notification

    click.echo(f"=== {title} ===")
    run_checks(student, build_checks(click.echo))
    click.echo("=== Done ===")

    repo.save(inst)


@click.command("student")
@student_location
def demo_student(institute: str, course: int, group: str, student_id: str) -> None:
    """Exercise every capability of one student in sequence."""
    _run_on_student(
        institute, course, group, student_id, capability_checks, "Student capability checks"
    )


@click.command("finance")
@student_location
def demo_finance(institute: str, course: int, group: str, student_id: str) -> None:
    """Run the deposit / withdrawal / notification scenario."""
    _run_on_student(
        institute, course, group, student_id, financial_checks, "Financial operations"
    )
