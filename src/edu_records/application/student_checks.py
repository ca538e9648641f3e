"""Scripted walks through a student's capabilities.

A check is any callable taking the student; a list of them is run in
order against one instance, like a multicast delegate.  Failures inside
the student's operations surface as events on its own channel, so the
checks never need to handle errors themselves.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable, Iterable

from edu_records.domain.model.student import Student

StudentCheck = Callable[[Student], None]
Output = Callable[[str], object]

TEST_SUBJECT = "Test subject"


def capability_checks(out: Output) -> list[StudentCheck]:
    """One pass over identification, printing, marks, finance and notification."""
    checks: list[StudentCheck] = []

    # Identifiable
    checks.append(lambda s: out(f"Student ID: {s.get_id()}"))

    # Printable
    checks.append(lambda s: out(f"Student info: {s.describe()}"))

    # MarkEditable
    def put_test_mark(s: Student) -> None:
        s.put_mark(TEST_SUBJECT, 5)
        out(f"Mark added for '{TEST_SUBJECT}': 5")

    def clear(s: Student) -> None:
        s.clear_marks()
        out("Marks cleared")

    checks.append(put_test_mark)
    checks.append(lambda s: out(f"After adding a mark: {s.describe()}"))
    checks.append(clear)
    checks.append(lambda s: out(f"After clearing marks: {s.describe()}"))

    # FinancialAccount
    checks.append(lambda s: s.deposit(Decimal("1000")))
    checks.append(lambda s: s.withdraw(Decimal("300")))
    checks.append(lambda s: out(f"After financial operations: {s.describe()}"))

    # Notifiable
    checks.append(lambda s: s.send_notification("Test notification about academic progress"))

    return checks


def financial_checks(out: Output) -> list[StudentCheck]:
    """Deposit, a covered and an uncovered withdrawal, then notifications."""

    def report_balance(s: Student) -> None:
        out(f"Current balance: {s.balance}")

    def notify_remaining(s: Student) -> None:
        if not s.balance.is_zero:
            s.send_notification(f"Your remaining balance is {s.balance}")

    return [
        report_balance,
        lambda s: s.deposit(Decimal("1500")),
        lambda s: s.withdraw(Decimal("500")),
        lambda s: s.withdraw(Decimal("1200")),
        lambda s: s.send_notification("Your balance has changed"),
        notify_remaining,
    ]


def run_checks(student: Student, checks: Iterable[StudentCheck]) -> None:
    for check in checks:
        check(student)
