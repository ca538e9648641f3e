import click

from edu_records.infrastructure.bootstrap import configure_logging
from edu_records.infrastructure.cli.demo_commands import demo_faults, demo_finance, demo_student
from edu_records.infrastructure.cli.institute_commands import (
    institute_add,
    institute_delete,
    institute_group,
    institute_list,
    institute_rename,
    institute_subject,
)
from edu_records.infrastructure.cli.report_commands import report_best
from edu_records.infrastructure.cli.student_commands import student_add, student_mark


@click.group()
@click.option("--verbose", is_flag=True, help="Log operation details to stderr.")
def cli(verbose: bool) -> None:
    """EDU: institute academic records"""
    configure_logging(verbose)


@cli.group()
def institute() -> None:
    """Manage institutes, subjects, courses and groups."""


@cli.group()
def student() -> None:
    """Manage students."""


@cli.group()
def report() -> None:
    """Queries over the records."""


@cli.group()
def demo() -> None:
    """Scripted demonstrations."""


# Register subcommands
institute.add_command(institute_add)
institute.add_command(institute_delete)
institute.add_command(institute_group)
institute.add_command(institute_list)
institute.add_command(institute_rename)
institute.add_command(institute_subject)
student.add_command(student_add)
student.add_command(student_mark)
report.add_command(report_best)
demo.add_command(demo_faults)
demo.add_command(demo_finance)
demo.add_command(demo_student)
