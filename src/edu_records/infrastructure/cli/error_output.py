"""Console subscribers for error channels."""

from __future__ import annotations

import click

from edu_records.domain.events import ErrorEvent
from edu_records.domain.model.notification import Notification
from edu_records.domain.model.student import Student


def echo_fault(sender, event: ErrorEvent) -> None:
    """Subscriber for the shared notifier."""
    click.secho(f"[ERROR] Time: {event.time:%H:%M:%S}", fg="red", err=True)
    click.secho(f"Kind: {event.kind} ({event.source})", fg="red", err=True)
    click.secho(f"Message: {event.text}\n", fg="red", err=True)


def echo_student_error(sender, event: ErrorEvent) -> None:
    """Subscriber for a single student's channel."""
    name = sender.full_name if isinstance(sender, Student) else "?"
    click.secho(
        f"[STUDENT ERROR] {name}: {event.source} [{event.kind}] - {event.text}",
        fg="yellow",
        err=True,
    )


def echo_notification(notification: Notification) -> None:
    click.echo(str(notification))
