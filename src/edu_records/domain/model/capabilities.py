"""Small capability contracts a Student fulfils.

Each interface covers one concern so callers can depend on just the
part they use (e.g. the finance checks only need FinancialAccount).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable


class Identifiable(ABC):

    @abstractmethod
    def get_id(self) -> str:
        """Return the system-assigned identifier."""


class Printable(ABC):

    @abstractmethod
    def describe(self) -> str:
        """Return a one-line human-readable summary."""

    def print_info(self, out: Callable[[str], object] = print) -> None:
        out(self.describe())


class MarkEditable(ABC):

    @abstractmethod
    def put_mark(self, subject: str, mark: int) -> None:
        """Set or replace the mark for *subject*."""

    @abstractmethod
    def clear_marks(self) -> None:
        """Forget every recorded mark."""


class FinancialAccount(ABC):
    """Holder of a non-negative ``balance``."""

    @abstractmethod
    def deposit(self, amount) -> None:
        """Add a strictly positive *amount* to the balance."""

    @abstractmethod
    def withdraw(self, amount) -> None:
        """Take a strictly positive *amount* not exceeding the balance."""


class Notifiable(ABC):

    @abstractmethod
    def send_notification(self, message: str) -> None:
        """Deliver *message* to the holder's address, or the default sink."""
