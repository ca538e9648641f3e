"""CLI commands for reports."""

from __future__ import annotations

from pathlib import Path

import click

from edu_records.application.best_institute import NO_DATA_REPORT, BestInstituteHandler
from edu_records.infrastructure.bootstrap import institute_repository


@click.command("best")
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write the report to this file.",
)
def report_best(output: Path | None) -> None:
    """Institute with the most excellent students."""
    dto = BestInstituteHandler(institute_repo=institute_repository()).handle()
    text = NO_DATA_REPORT if dto is None else dto.report

    click.echo(text)
    if output is not None:
        try:
            output.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise click.ClickException(f"Could not write {output}: {exc}")
        click.echo(f"Saved to {output}")
