"""CLI commands for building the institute tree."""

from __future__ import annotations

import click

from edu_records.application.add_group import AddGroupHandler
from edu_records.application.add_institute import AddInstituteHandler
from edu_records.application.add_subject import AddSubjectHandler
from edu_records.application.delete_institute import DeleteInstituteHandler
from edu_records.application.rename_institute import RenameInstituteHandler
from edu_records.application.show_institutes import ShowInstitutesHandler
from edu_records.domain.exceptions import DomainException
from edu_records.domain.model.course import MAX_COURSE, MIN_COURSE
from edu_records.infrastructure.bootstrap import institute_repository


@click.command("add")
@click.option("--name", required=True, help="Institute name.")
def institute_add(name: str) -> None:
    """Register a new institute."""
    handler = AddInstituteHandler(institute_repo=institute_repository())

    try:
        institute = handler.handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Institute '{institute.name}' added")


@click.command("delete")
@click.option("--name", required=True, help="Institute name.")
def institute_delete(name: str) -> None:
    """Remove an institute and everything in it."""
    handler = DeleteInstituteHandler(institute_repo=institute_repository())

    try:
        handler.handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Institute '{name}' deleted")


@click.command("rename")
@click.option("--name", required=True, help="Current institute name.")
@click.option("--new-name", required=True, help="New institute name.")
def institute_rename(name: str, new_name: str) -> None:
    """Give an institute a new name."""
    handler = RenameInstituteHandler(institute_repo=institute_repository())

    try:
        renamed = handler.handle(old_name=name, new_name=new_name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Institute '{name}' renamed to '{renamed}'")


@click.command("subject")
@click.option("--institute", required=True, help="Institute name.")
@click.option("--name", required=True, help="Subject name.")
def institute_subject(institute: str, name: str) -> None:
    """Add a subject taught at an institute."""
    handler = AddSubjectHandler(institute_repo=institute_repository())

    try:
        added = handler.handle(institute_name=institute, subject=name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Subject added" if added else "Subject already present")


@click.command("group")
@click.option("--institute", required=True, help="Institute name.")
@click.option(
    "--course",
    required=True,
    type=click.IntRange(MIN_COURSE, MAX_COURSE),
    help="Course number.",
)
@click.option("--name", required=True, help="Group name.")
def institute_group(institute: str, course: int, name: str) -> None:
    """Add a group, creating its course if needed."""
    handler = AddGroupHandler(institute_repo=institute_repository())

    try:
        created = handler.handle(institute_name=institute, course_number=course, group_name=name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if created:
        click.echo(f"Course {course} created")
    click.echo(f"Group '{name}' added")


@click.command("list")
def institute_list() -> None:
    """Show every institute with its courses, groups and students."""
    institutes = ShowInstitutesHandler(institute_repo=institute_repository()).handle()

    if not institutes:
        click.echo("No data.")
        return

    for inst in institutes:
        click.echo(
            f"Institute: {inst.name}, courses: {len(inst.courses)}, "
            f"subjects: {len(inst.subjects)}, excellent students: {inst.excellent_count}"
        )
        if inst.subjects:
            click.echo(f"  Subjects: {', '.join(inst.subjects)}")
        for course in inst.courses:
            click.echo(f"  Course {course.number}, groups: {len(course.groups)}")
            for group in course.groups:
                click.echo(f"    Group {group.name}, students: {len(group.students)}")
                for s in group.students:
                    excellent = "yes" if s.excellent else "no"
                    click.echo(
                        f"      {s.full_name} (ID:{s.id}), excellent: {excellent}, balance: {s.balance}"
                    )
                    if s.marks:
                        marks = ", ".join(f"{subj}:{mark}" for subj, mark in s.marks.items())
                        click.echo(f"        Marks: {marks}")
        click.echo()
