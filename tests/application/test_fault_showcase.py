"""Tests for turning runtime faults into error events."""

import pytest

from edu_records.application.fault_showcase import FaultShowcase
from edu_records.domain.events import ErrorNotifier, PrefixedErrorNotifier
from tests.fakes import EventRecorder


def _setup(notifier: ErrorNotifier | None = None) -> tuple[FaultShowcase, EventRecorder]:
    notifier = notifier or ErrorNotifier()
    recorder = EventRecorder()
    notifier.subscribe(recorder)
    return FaultShowcase(notifier), recorder


class TestIndividualFaults:

    @pytest.mark.parametrize(
        "method, kind, source",
        [
            ("demo_divide_by_zero", "DivideByZero", "ZeroDivisionError"),
            ("demo_index_out_of_range", "IndexOutOfRange", "IndexError"),
            ("demo_array_type_mismatch", "ArrayTypeMismatch", "TypeError"),
            ("demo_invalid_cast", "InvalidCast", "ValueError"),
            ("demo_overflow", "Overflow", "OverflowError"),
            ("demo_out_of_memory", "OutOfMemory", "MemoryError"),
            ("demo_stack_overflow", "StackOverflow", "RecursionError"),
        ],
    )
    def test_fault_reported_once(self, method, kind, source):
        showcase, recorder = _setup()

        getattr(showcase, method)()

        assert len(recorder.events) == 1
        event = recorder.events[0]
        assert (event.kind, event.source) == (kind, source)
        assert event.text

    def test_simulated_faults_say_so(self):
        showcase, recorder = _setup()
        showcase.demo_out_of_memory()
        showcase.demo_stack_overflow()
        assert all("Simulated" in e.text for e in recorder.events)


class TestRunAll:

    def test_runs_all_seven_in_order(self):
        showcase, recorder = _setup()

        events = showcase.run_all()

        assert recorder.kinds == [
            "StackOverflow",
            "ArrayTypeMismatch",
            "DivideByZero",
            "IndexOutOfRange",
            "InvalidCast",
            "OutOfMemory",
            "Overflow",
        ]
        assert events == recorder.events

    def test_prefixed_notifier_tags_every_event(self):
        showcase, recorder = _setup(PrefixedErrorNotifier())

        showcase.run_all()

        assert len(recorder.events) == 7
        assert all(e.text.startswith("[DerivedEvent ") for e in recorder.events)

    def test_no_subscribers_still_completes(self):
        showcase = FaultShowcase(ErrorNotifier())
        assert len(showcase.run_all()) == 7

    def test_repeated_runs_return_only_their_own_events(self):
        showcase, recorder = _setup()

        first = showcase.run_all()
        second = showcase.run_all()

        assert len(first) == len(second) == 7
        assert not hasattr(showcase, "events")
        assert first + second == recorder.events


class TestReturnedEvent:

    def test_demo_returns_the_published_event(self):
        showcase, recorder = _setup()
        event = showcase.demo_divide_by_zero()
        assert recorder.events == [event]
