"""Reusable option sets addressing a node of the institute tree."""

from __future__ import annotations

import click


def group_location(func):
    func = click.option("--group", required=True, help="Group name.")(func)
    func = click.option("--course", required=True, type=int, help="Course number.")(func)
    func = click.option("--institute", required=True, help="Institute name.")(func)
    return func


def student_location(func):
    func = click.option("--id", "student_id", required=True, help="Student ID, e.g. S001.")(func)
    return group_location(func)
