"""
Tests for ConditionChecker.

Every check is exercised for pass and fail with a FailureRecorder handler
(report-and-continue), asserting:
- the return value is the predicate result
- the handler runs exactly once on failure, never on success
- explicit messages are passed verbatim, default messages otherwise
"""

import math
import re

import pytest

from contract_kernel.checker import ConditionChecker
from contract_kernel.domain.location import SourceLocation
from contract_kernel.domain.policy import CheckerSettings, FailurePolicy
from contract_kernel.exceptions import CheckFailedError
from contract_kernel.logging_config import LogContext
from contract_kernel.reporting import AssertLogger, FailureRecorder

LOC = SourceLocation("caller.py", 10, "caller")


class TestTruthiness:
    @pytest.mark.parametrize("cond", [True, 1, "x", [0]])
    def test_check_true_passes(self, checker, recorder, cond):
        assert checker.check_true(cond) is True
        assert len(recorder) == 0

    @pytest.mark.parametrize("cond", [False, 0, "", [], None])
    def test_check_true_fails(self, checker, recorder, cond):
        assert checker.check_true(cond) is False
        assert recorder.messages == ["expected true"]

    def test_check_false(self, checker, recorder):
        assert checker.check_false(0) is True
        assert checker.check_false("yes") is False
        assert recorder.messages == ["expected false"]


class TestNullability:
    def test_check_null(self, checker, recorder):
        assert checker.check_null(None) is True
        assert checker.check_null(0) is False
        assert recorder.messages == ["expected null but was '0'"]

    def test_check_non_null(self, checker, recorder):
        assert checker.check_non_null(0) is True
        assert checker.check_non_null(None) is False
        assert recorder.messages == ["expected not null"]


class TestFields:
    def test_check_has_field(self, checker, recorder):
        assert checker.check_has_field({"id": 1}, "id") is True
        assert checker.check_has_field({"id": 1}, "name") is False
        assert recorder.messages == ["expected field 'name' in '{'id': 1}'"]

    def test_check_missing_field(self, checker, recorder):
        class Order:
            total = 0

        assert checker.check_missing_field(Order(), "discount") is True
        assert checker.check_missing_field(Order(), "total") is False
        assert recorder.messages[0].startswith("unexpected field 'total'")


class TestTypes:
    def test_check_is_type(self, checker, recorder):
        assert checker.check_is_type(3, int) is True
        assert checker.check_is_type(3, (str, float)) is False
        assert recorder.messages == [
            "expected type 'str | float' but was '3' of kind int"
        ]

    def test_check_is_not_type(self, checker, recorder):
        assert checker.check_is_not_type("s", int) is True
        assert checker.check_is_not_type("s", str) is False
        assert recorder.messages == ["value 's' should not be of type 'str'"]

    def test_check_is_object(self, checker, recorder):
        assert checker.check_is_object({"a": 1}) is True
        assert checker.check_is_object(5) is False
        assert recorder.messages == ["expected object but was '5' of kind int"]


class TestEquality:
    def test_check_equals_by_value(self, checker, recorder):
        assert checker.check_equals([1, 2], [1, 2]) is True
        assert checker.check_equals(1, 2) is False
        assert recorder.messages == ["expected '2' but was '1'"]

    def test_check_equals_by_identity(self, checker, recorder):
        nan = float("nan")
        assert checker.check_equals(nan, nan) is True
        assert len(recorder) == 0

    def test_check_not_equals(self, checker, recorder):
        assert checker.check_not_equals("a", "b") is True
        assert checker.check_not_equals("a", "a") is False
        assert recorder.messages == ["expected 'a' to be different from 'a'"]

    def test_elementwise_comparison_is_a_normal_failure(self, checker, recorder):
        assert checker.check_equals(_Elementwise(), 3) is False
        assert checker.check_not_equals(_Elementwise(), 3) is True
        assert len(recorder) == 1


class _Ambiguous:
    def __bool__(self):
        raise ValueError("truth value of an element-wise result is ambiguous")


class _Elementwise:
    """Compares like an array: ``==`` yields an element-wise result."""

    def __eq__(self, other):
        return _Ambiguous()

    __hash__ = None

    def __repr__(self):
        return "elementwise"


class TestFloatEquals:
    def test_specials(self, checker):
        nan = float("nan")
        assert checker.check_float_equals(nan, nan) is True
        assert checker.check_float_equals(nan, 1.0) is False
        assert checker.check_float_equals(math.inf, math.inf) is True
        assert checker.check_float_equals(math.inf, -math.inf) is False

    def test_default_tolerance(self, checker):
        assert checker.check_float_equals(1.0, 1.0 + 1e-6) is True
        assert checker.check_float_equals(1.0, 1.1) is False

    def test_explicit_tolerance(self, checker):
        assert checker.check_float_equals(1.0, 1.1, tolerance=0.2) is True

    def test_tolerance_from_settings(self, recorder):
        loose = ConditionChecker(
            "Loose",
            settings=CheckerSettings(policy=FailurePolicy.REPORT, float_tolerance=0.5),
            handler=recorder,
        )
        assert loose.check_float_equals(1.0, 1.4) is True

    def test_message(self, checker, recorder):
        checker.check_float_equals(1.0, 2.0)
        assert recorder.messages == ["expected '2.0' but was '1.0' (tolerance 1e-05)"]


class TestMatching:
    def test_check_matches(self, checker, recorder):
        assert checker.check_matches(r"^\w+@\w+$", "me@host") is True
        assert checker.check_matches(re.compile(r"\d"), "none") is False
        assert recorder.messages == [
            "the value 'none' does not match the provided pattern '\\d'"
        ]

    def test_check_matches_none(self, checker):
        assert checker.check_matches(".*", None) is False


class TestContainment:
    def test_check_contains(self, checker, recorder):
        assert checker.check_contains([1, 2, 3], 2) is True
        assert checker.check_contains([1, 2, 3], 4) is False
        assert checker.check_contains(None, 4) is False
        assert len(recorder) == 2

    def test_check_not_contains(self, checker, recorder):
        assert checker.check_not_contains({"a"}, "b") is True
        assert checker.check_not_contains(None, "b") is True
        assert checker.check_not_contains({"a"}, "a") is False
        assert recorder.messages == ["'a' found in '{'a'}'"]

    def test_check_string_contains(self, checker, recorder):
        assert checker.check_string_contains("haystack", "st") is True
        assert checker.check_string_contains("haystack", "needle") is False
        assert checker.check_string_contains(None, "x") is False
        assert recorder.messages[0] == (
            "the value 'needle' is not contained in 'haystack'"
        )


class TestStringSequence:
    def test_in_order(self, checker, recorder):
        assert checker.check_string_sequence("abcdef", ["ab", "cd", "ef"]) is True
        assert len(recorder) == 0

    def test_order_violated(self, checker, recorder):
        assert checker.check_string_sequence("abcdef", ["cd", "ab"]) is False
        assert recorder.messages == ["expected 'ab' after 'abcd'"]

    def test_missing_first(self, checker, recorder):
        assert checker.check_string_sequence("abcdef", ["zz"]) is False
        assert recorder.messages == ["expected 'zz' after begin"]

    def test_snippet_truncated(self, checker, recorder):
        text = "0123456789" * 4 + "END"
        assert checker.check_string_sequence(text, ["END", "more"]) is False
        assert recorder.messages == [f"expected 'more' after '...{text[-30:]}'"]

    def test_generator_needles(self, checker):
        assert checker.check_string_sequence("a-b-c", (n for n in "abc")) is True


class TestRaisesAndFail:
    def test_check_raises_passes(self, checker, recorder):
        assert checker.check_raises(lambda: {}["k"], KeyError) is True
        assert len(recorder) == 0

    def test_check_raises_fails_when_nothing_raised(self, checker, recorder):
        assert checker.check_raises(lambda: None, ValueError) is False
        assert recorder.messages == ["expected 'ValueError' to be raised"]

    def test_check_raises_propagates_other_errors(self, checker):
        with pytest.raises(ZeroDivisionError):
            checker.check_raises(lambda: 1 / 0, KeyError)

    def test_fail(self, checker, recorder):
        assert checker.fail() is False
        assert checker.fail("boom") is False
        assert recorder.messages == ["failure expected", "boom"]


class TestMessagesAndLocations:
    def test_explicit_message_verbatim(self, checker, recorder):
        checker.check_equals(1, 2, "totals differ: %s")
        assert recorder.messages == ["totals differ: %s"]

    def test_empty_explicit_message_still_wins(self, checker, recorder):
        checker.check_true(False, "")
        assert recorder.messages == [""]

    def test_default_message_not_built_on_success(self, recorder):
        class Exploding:
            def __str__(self):
                raise RuntimeError("formatted a passing check")

        checker = ConditionChecker(
            "T", CheckerSettings(policy=FailurePolicy.REPORT), handler=recorder
        )
        assert checker.check_non_null(Exploding()) is True

    def test_explicit_location_forwarded(self, checker, recorder):
        checker.check_true(False, location=LOC)
        assert recorder.failures[0].location == LOC

    def test_capture_disabled(self, recorder):
        checker = ConditionChecker(
            "T",
            CheckerSettings(policy=FailurePolicy.REPORT, capture_locations=False),
            handler=recorder,
        )
        checker.check_true(False)
        assert recorder.failures[0].location is None


class TestHandlerManagement:
    def test_default_handler_is_assert_logger(self):
        checker = ConditionChecker("X")
        assert isinstance(checker.handler, AssertLogger)
        assert checker.handler.policy is FailurePolicy.RAISE

    def test_default_raise_policy(self):
        checker = ConditionChecker("X")
        with pytest.raises(CheckFailedError) as exc_info:
            checker.check_true(False, location=LOC)
        assert exc_info.value.message == "expected true"
        assert exc_info.value.location == LOC
        assert str(exc_info.value) == "caller.py[10]: expected true"

    def test_handler_property_assignment(self, recorder):
        checker = ConditionChecker("X")
        checker.handler = recorder
        assert checker.check_true(False) is False
        assert len(recorder) == 1

    def test_set_handler_returns_previous(self, recorder):
        checker = ConditionChecker("X")
        original = checker.handler
        assert checker.set_handler(recorder) is original

    def test_reset_handler(self, recorder):
        checker = ConditionChecker("X", handler=recorder)
        checker.reset_handler()
        assert isinstance(checker.handler, AssertLogger)

    def test_handled_by_restores(self, recorder):
        checker = ConditionChecker("X")
        original = checker.handler
        with checker.handled_by(recorder):
            assert checker.check_true(False) is False
        assert checker.handler is original
        assert len(recorder) == 1

    def test_handled_by_restores_after_error(self):
        checker = ConditionChecker("X")
        original = checker.handler
        with pytest.raises(RuntimeError):
            with checker.handled_by(FailureRecorder()):
                raise RuntimeError
        assert checker.handler is original

    def test_independent_instances(self):
        first, second = FailureRecorder(), FailureRecorder()
        a = ConditionChecker("A", handler=first)
        b = ConditionChecker("B", handler=second)
        a.check_true(False)
        assert len(first) == 1
        assert len(second) == 0
        assert b.check_true(True)

    def test_configure_resets_handler(self, recorder):
        checker = ConditionChecker("X", handler=recorder)
        checker.configure(CheckerSettings(policy=FailurePolicy.REPORT))
        assert isinstance(checker.handler, AssertLogger)
        assert checker.handler.policy is FailurePolicy.REPORT

    def test_handler_sees_check_name_in_log_context(self):
        seen = {}

        def handler(message, location):
            seen.update(LogContext.get_all())

        ConditionChecker("Probe", handler=handler).check_null(1)
        assert seen == {"facade": "Probe", "check": "check_null"}
        assert LogContext.get_all() == {}
