"""Error notification channel.

Failures inside entity operations are not raised to the caller.  They are
turned into ``ErrorEvent`` objects and broadcast to whoever subscribed to
the channel that owns them.

``ErrorChannel`` is the capability interface callers hold.  ``ErrorNotifier``
is the default implementation; ``PrefixedErrorNotifier`` replaces both the
subscriber storage and the dispatch formatting while remaining usable
anywhere an ``ErrorChannel`` is expected.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """Classification codes consumers pattern-match on."""

    INVALID_ARGUMENT = "InvalidArgument"
    INSUFFICIENT_FUNDS = "InsufficientFunds"
    EVALUATION_ERROR = "EvaluationError"
    DIVIDE_BY_ZERO = "DivideByZero"
    INDEX_OUT_OF_RANGE = "IndexOutOfRange"
    ARRAY_TYPE_MISMATCH = "ArrayTypeMismatch"
    INVALID_CAST = "InvalidCast"
    OVERFLOW = "Overflow"
    OUT_OF_MEMORY = "OutOfMemory"
    STACK_OVERFLOW = "StackOverflow"


@dataclass(frozen=True)
class ErrorEvent:
    """One reported fault.

    ``kind`` is the taxonomy code, ``source`` names the failing operation
    (``"WithdrawError"``) or the caught exception class.  ``time`` is fixed
    when the event is built.
    """

    kind: str
    text: str
    source: str | None = None
    time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


ErrorHandler = Callable[[Any, ErrorEvent], None]


class ErrorChannel(ABC):

    @abstractmethod
    def subscribe(self, handler: ErrorHandler) -> None:
        """Append *handler* to the dispatch list."""

    @abstractmethod
    def unsubscribe(self, handler: ErrorHandler) -> None:
        """Remove the most recently added occurrence of *handler*, if any."""

    @abstractmethod
    def publish(self, event: ErrorEvent, sender: Any = None) -> None:
        """Invoke every subscribed handler, in order, with (sender, event)."""


def _remove_last(handlers: list[ErrorHandler], handler: ErrorHandler) -> None:
    for index in range(len(handlers) - 1, -1, -1):
        if handlers[index] == handler:
            del handlers[index]
            return


class ErrorNotifier(ErrorChannel):
    """Default channel: a plain ordered list of handlers.

    Duplicate subscriptions are kept and each one is invoked.  A handler
    that raises aborts the dispatch and the exception reaches the caller.
    """

    def __init__(self) -> None:
        self._handlers: list[ErrorHandler] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)

    def subscribe(self, handler: ErrorHandler) -> None:
        self._handlers.append(handler)

    def unsubscribe(self, handler: ErrorHandler) -> None:
        _remove_last(self._handlers, handler)

    def publish(self, event: ErrorEvent, sender: Any = None) -> None:
        for handler in list(self._handlers):
            handler(self if sender is None else sender, event)

    def raise_error(
        self,
        kind: ErrorKind | str,
        text: str,
        source: str | None = None,
        sender: Any = None,
    ) -> ErrorEvent:
        """Build an event and push it through ``publish``.

        Goes through ``self.publish`` so subclasses that override the
        dispatch strategy are honoured.
        """
        if isinstance(kind, ErrorKind):
            kind = kind.value
        event = ErrorEvent(kind=kind, text=text, source=source)
        logger.debug("Raising %s (%s): %s", event.kind, event.source, event.text)
        self.publish(event, sender)
        return event


class PrefixedErrorNotifier(ErrorNotifier):
    """Channel with its own subscriber list and tagged event text.

    Handlers registered here are kept apart from the base list, and every
    event they receive has its text prefixed with ``[<label> HH:MM:SS]``.
    """

    def __init__(self, label: str = "DerivedEvent") -> None:
        super().__init__()
        self.label = label
        self._backing: list[ErrorHandler] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._backing)

    def subscribe(self, handler: ErrorHandler) -> None:
        self._backing.append(handler)

    def unsubscribe(self, handler: ErrorHandler) -> None:
        _remove_last(self._backing, handler)

    def publish(self, event: ErrorEvent, sender: Any = None) -> None:
        if not self._backing:
            return
        tagged = replace(event, text=f"[{self.label} {event.time:%H:%M:%S}] {event.text}")
        for handler in list(self._backing):
            handler(self if sender is None else sender, tagged)
