"""Conversion of runtime faults into error events.

Each ``demo_*`` method triggers one fault category, catches it right
where it happens and reports it through ``raise_error`` on the shared
notifier, so subscribers see the same ``ErrorEvent`` shape they get
from student operations.

Memory exhaustion and runaway recursion cannot be provoked safely; those
two are simulated by raising the exception explicitly.
"""

from __future__ import annotations

import array
import logging
import math

from edu_records.domain.events import ErrorEvent, ErrorKind, ErrorNotifier

logger = logging.getLogger(__name__)


class FaultShowcase:

    def __init__(self, notifier: ErrorNotifier) -> None:
        self._notifier = notifier

    def demo_divide_by_zero(self) -> ErrorEvent | None:
        numerator, denominator = 1, 0
        try:
            numerator // denominator
        except ZeroDivisionError as exc:
            return self._report(ErrorKind.DIVIDE_BY_ZERO, exc)

    def demo_index_out_of_range(self) -> ErrorEvent | None:
        values = [0, 0]
        try:
            values[5]
        except IndexError as exc:
            return self._report(ErrorKind.INDEX_OUT_OF_RANGE, exc)

    def demo_array_type_mismatch(self) -> ErrorEvent | None:
        numbers = array.array("i", [0, 0])
        try:
            numbers[0] = "123"  # type: ignore[call-overload]
        except TypeError as exc:
            return self._report(ErrorKind.ARRAY_TYPE_MISMATCH, exc)

    def demo_invalid_cast(self) -> ErrorEvent | None:
        value: object = "hello"
        try:
            int(value)  # type: ignore[call-overload]
        except ValueError as exc:
            return self._report(ErrorKind.INVALID_CAST, exc)

    def demo_overflow(self) -> ErrorEvent | None:
        try:
            math.exp(1000)
        except OverflowError as exc:
            return self._report(ErrorKind.OVERFLOW, exc)

    def demo_out_of_memory(self) -> ErrorEvent | None:
        try:
            raise MemoryError("Simulated out-of-memory condition")
        except MemoryError as exc:
            return self._report(ErrorKind.OUT_OF_MEMORY, exc)

    def demo_stack_overflow(self) -> ErrorEvent | None:
        try:
            raise RecursionError("Simulated stack overflow")
        except RecursionError as exc:
            return self._report(ErrorKind.STACK_OVERFLOW, exc)

    def run_all(self) -> list[ErrorEvent]:
        """Run every demo in the classic order; returns the events built."""
        demos = (
            self.demo_stack_overflow,
            self.demo_array_type_mismatch,
            self.demo_divide_by_zero,
            self.demo_index_out_of_range,
            self.demo_invalid_cast,
            self.demo_out_of_memory,
            self.demo_overflow,
        )
        events: list[ErrorEvent] = []
        for demo in demos:
            event = demo()
            if event is not None:
                events.append(event)
        return events

    def _report(self, kind: ErrorKind, exc: BaseException) -> ErrorEvent:
        logger.debug("Caught %s: %s", type(exc).__name__, exc)
        return self._notifier.raise_error(kind, str(exc), source=type(exc).__name__)
