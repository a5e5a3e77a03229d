"""Unit tests for zookit.testing.assertions.

Each case drives an assertion helper against a recording reporter and checks
the exact sequence of reporter calls it produced.
"""

import math
from dataclasses import dataclass
from typing import Any

import pytest

from zookit.adapters.reporters import Call, RecordingReporter
from zookit.testing.assertions import equal, msg_and_args_to_string, no_error

# pylint: disable=too-few-public-methods


@dataclass
class Foo:
    """Small nested value for deep-equality cases."""

    bar: str


def failed_with(message: str) -> list[Call]:
    """Calls expected from a single failed assertion."""
    return [Call("Helper"), Call("Errorf", (message,))]


@pytest.mark.parametrize(
    "give_want, give_got, give_msg_and_args, want",
    [
        (1, 1, (), []),
        (1, 2, (), failed_with("not equal: want: 1, got: 2")),
        (
            {"foo": Foo("baz")},
            {"foo": Foo("foobar")},
            (),
            failed_with("not equal: want: map[foo:{bar:baz}], got: map[foo:{bar:foobar}]"),
        ),
        (
            1,
            2,
            ("user message",),
            failed_with("not equal: want: 1, got: 2: user message"),
        ),
        (
            1,
            2,
            ("user message: %d %s", 1, "arg2"),
            failed_with("not equal: want: 1, got: 2: user message: 1 arg2"),
        ),
        (
            1,
            2,
            (1, "arg2"),
            failed_with("not equal: want: 1, got: 2: [1 arg2]"),
        ),
    ],
    ids=[
        "equal",
        "not-equal-shallow",
        "not-equal-deep",
        "with-message",
        "with-message-and-args",
        "only-args",
    ],
)
def test_equal(
    recorder: RecordingReporter,
    give_want: Any,
    give_got: Any,
    give_msg_and_args: tuple[Any, ...],
    want: list[Call],
) -> None:
    """equal reports nothing for equal values and Helper+Errorf otherwise."""
    equal(recorder, give_want, give_got, *give_msg_and_args)
    assert recorder.calls == want


@pytest.mark.parametrize(
    "give_err, give_msg_and_args, want",
    [
        (None, (), []),
        (ValueError("foo"), (), failed_with("unexpected error: foo")),
        (
            ValueError("foo"),
            ("user message",),
            failed_with("unexpected error: foo: user message"),
        ),
        (
            ValueError("foo"),
            ("user message: %d %s", 1, "arg2"),
            failed_with("unexpected error: foo: user message: 1 arg2"),
        ),
        (
            ValueError("foo"),
            (1, "arg2"),
            failed_with("unexpected error: foo: [1 arg2]"),
        ),
    ],
    ids=["no-error", "with-error", "with-message", "with-message-and-args", "only-args"],
)
def test_no_error(
    recorder: RecordingReporter,
    give_err: BaseException | None,
    give_msg_and_args: tuple[Any, ...],
    want: list[Call],
) -> None:
    """no_error reports nothing for None and Helper+Errorf for an exception."""
    no_error(recorder, give_err, *give_msg_and_args)
    assert recorder.calls == want


def test_failures_accumulate(recorder: RecordingReporter) -> None:
    """Assertions never raise, so several failures can be observed in one run."""
    equal(recorder, 1, 2)
    no_error(recorder, RuntimeError("boom"))
    equal(recorder, "a", "a")
    assert recorder.errors == [
        "not equal: want: 1, got: 2",
        "unexpected error: boom",
    ]


def test_equal_requires_same_type(recorder: RecordingReporter) -> None:
    """Values that compare equal in Python but differ in type are not equal."""
    equal(recorder, 1, 1.0)
    equal(recorder, 1, True)
    assert recorder.errors == [
        "not equal: want: 1, got: 1.0",
        "not equal: want: 1, got: true",
    ]


@pytest.mark.parametrize(
    "value",
    [[1.0, math.nan], {"foo": Foo("bar"), "n": [math.nan]}, Foo, len],
    ids=["list-with-nan", "nested-with-nan", "class", "builtin"],
)
def test_equal_is_reflexive(recorder: RecordingReporter, value: Any) -> None:
    """Comparing a value with itself never reports a failure."""
    equal(recorder, value, value)
    assert recorder.calls == []


def test_distinct_functions_render_by_name(recorder: RecordingReporter) -> None:
    """Unequal callables are named in the failure message."""
    equal(recorder, failed_with, msg_and_args_to_string)
    assert recorder.errors == [
        "not equal: want: failed_with, got: msg_and_args_to_string"
    ]


def test_message_with_percent_sign_is_not_reformatted(
    recorder: RecordingReporter,
) -> None:
    """The final message is passed as-is, so literal % signs survive."""
    equal(recorder, "100%", "99%")
    assert recorder.calls == failed_with("not equal: want: 100%, got: 99%")


class TestMsgAndArgsToString:
    """Rendering of the optional message tail."""

    @staticmethod
    def test_empty() -> None:
        """No values produce an empty string."""
        assert msg_and_args_to_string(()) == ""

    @staticmethod
    def test_single_template_is_not_formatted() -> None:
        """A single string is rendered as-is, even if it looks like a template."""
        assert msg_and_args_to_string(("100%d",)) == "100%d"

    @staticmethod
    def test_single_structure() -> None:
        """A single non-string value uses the structural rendering."""
        assert msg_and_args_to_string(({"k": [1, 2]},)) == "map[k:[1 2]]"

    @staticmethod
    def test_bad_template_falls_back_to_list() -> None:
        """A template that cannot be applied renders the whole list instead."""
        assert msg_and_args_to_string(("%d items", "many")) == "[%d items many]"

    @staticmethod
    def test_too_many_args_falls_back_to_list() -> None:
        """Extra arguments do not raise."""
        assert msg_and_args_to_string(("no verbs", 1)) == "[no verbs 1]"


def test_self_check_with_pytest_reporter(reporter) -> None:
    """The helpers can check their own output through the pytest plugin."""
    inner = RecordingReporter()
    equal(inner, 1, 2, "user message")
    equal(reporter, failed_with("not equal: want: 1, got: 2: user message"), inner.calls)
