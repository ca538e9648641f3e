"""Student aggregate: marks, balance and notifications of one person.

Every mutator here follows the same contract: validate, then either
mutate or publish exactly one ErrorEvent on ``errors`` and leave the
student untouched.  Validation failures never escape the method.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from edu_records.domain.events import ErrorChannel, ErrorEvent, ErrorNotifier
from edu_records.domain.exceptions import (
    DomainException,
    EvaluationError,
    InsufficientFundsError,
    ValidationError,
)
from edu_records.domain.model.capabilities import (
    FinancialAccount,
    Identifiable,
    MarkEditable,
    Notifiable,
    Printable,
)
from edu_records.domain.model.notification import (
    Notification,
    NotificationSink,
    log_notification,
)
from edu_records.domain.model.value_objects import Money, to_decimal

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MIN_MARK = 2
MAX_MARK = 5
EXCELLENT_MARK = MAX_MARK


def _is_valid_mark(mark: object) -> bool:
    return (
        isinstance(mark, int)
        and not isinstance(mark, bool)
        and MIN_MARK <= mark <= MAX_MARK
    )


@dataclass(eq=False)
class Student(Identifiable, Printable, MarkEditable, FinancialAccount, Notifiable):
    """A student and the channel its operation failures are reported on.

    Use ``Student.create()`` for new students.  The plain ``__init__``
    lets the repository reconstitute stored students as they are.
    """

    id: str
    full_name: str
    marks: dict[str, int] = field(default_factory=dict)
    balance: Money = field(default_factory=Money.zero)
    email: str | None = None
    errors: ErrorChannel = field(default_factory=ErrorNotifier, repr=False)
    deliver: NotificationSink = field(default=log_notification, repr=False)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(student_id: str, full_name: str, email: str | None = None) -> Student:
        if not full_name or not full_name.strip():
            raise ValidationError("Student name is required")
        email = email.strip() if email else None
        return Student(id=student_id, full_name=full_name.strip(), email=email or None)

    # --- Identifiable / Printable ---------------------------------------------

    def get_id(self) -> str:
        return self.id

    def describe(self) -> str:
        excellent = "yes" if self.is_excellent() else "no"
        return f"{self.full_name} (ID:{self.id}), excellent: {excellent}, balance: {self.balance}"

    def __str__(self) -> str:
        return self.describe()

    # --- MarkEditable ---------------------------------------------------------

    def put_mark(self, subject: str, mark: int) -> None:
        try:
            if not isinstance(subject, str) or not subject.strip():
                raise ValidationError("Subject name must not be empty")
            if not _is_valid_mark(mark):
                raise ValidationError(
                    f"Mark must be between {MIN_MARK} and {MAX_MARK}, got {mark!r}"
                )
            self.marks[subject] = mark
        except DomainException as exc:
            self._report("PutMarkError", exc)

    def clear_marks(self) -> None:
        self.marks.clear()

    def is_excellent(self) -> bool:
        """True iff at least one mark is recorded and every mark is 5.

        Malformed mark data is reported as an ``EvaluationError`` event and
        the student is treated as not excellent.
        """
        try:
            recorded = list(self.marks.items())
            if not recorded:
                return False
            for subject, mark in recorded:
                if not _is_valid_mark(mark):
                    raise EvaluationError(f"Unexpected mark {mark!r} for '{subject}'")
                if mark != EXCELLENT_MARK:
                    return False
            return True
        except (AttributeError, TypeError) as exc:
            self._report("IsExcellentError", EvaluationError(f"Marks are unreadable: {exc}"))
            return False
        except DomainException as exc:
            self._report("IsExcellentError", exc)
            return False

    # --- FinancialAccount -----------------------------------------------------

    def deposit(self, amount) -> None:
        try:
            value = to_decimal(amount)
            if value <= Decimal("0"):
                raise ValidationError("Deposit amount must be positive")
            self.balance = self.balance + Money(value, self.balance.currency)
            logger.info("Deposit: +%s. New balance: %s", Money(value), self.balance)
        except DomainException as exc:
            self._report("DepositError", exc)

    def withdraw(self, amount) -> None:
        try:
            value = to_decimal(amount)
            if value <= Decimal("0"):
                raise ValidationError("Withdrawal amount must be positive")
            requested = Money(value, self.balance.currency)
            if requested > self.balance:
                raise InsufficientFundsError(
                    f"Insufficient funds (requested {requested}, balance {self.balance})"
                )
            self.balance = self.balance - requested
            logger.info("Withdrawal: -%s. New balance: %s", requested, self.balance)
        except DomainException as exc:
            self._report("WithdrawError", exc)

    # --- Notifiable -----------------------------------------------------------

    def send_notification(self, message: str) -> None:
        try:
            if not isinstance(message, str) or not message.strip():
                raise ValidationError("Notification message must not be empty")
        except DomainException as exc:
            self._report("SendNotificationError", exc)
            return
        self.deliver(Notification(recipient=self.full_name, message=message, address=self.email))

    # --- Internal helpers -----------------------------------------------------

    def _report(self, operation: str, exc: DomainException) -> None:
        event = ErrorEvent(kind=exc.kind, text=str(exc), source=operation)
        logger.debug("%s for student %s: %s", operation, self.id, event.text)
        self.errors.publish(event, self)
