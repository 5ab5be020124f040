"""
ConditionChecker -- the one contract-checking component.

Responsibility:
    Evaluates a predicate; on failure builds a message (the caller's, or a
    default template) and forwards it with a source location to the
    replaceable failure handler.  Every check returns the predicate's
    boolean result, including after a failure the handler chose not to
    raise.

Architecture position:
    Kernel -- the facades in ``contract_kernel.facades`` are three
    instances of this class with different ``CheckerSettings``.

Invariants enforced:
    - The handler is invoked exactly once per failing check, never for a
      passing one.
    - An explicit ``message`` is passed to the handler verbatim; default
      templates are built only when it is None.

Failure modes:
    - Whatever the handler raises propagates (``CheckFailedError`` under
      the RAISE policy).
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from typing import Any

from contract_kernel.domain import messages
from contract_kernel.domain.location import SourceLocation
from contract_kernel.domain.policy import CheckerSettings
from contract_kernel.domain.predicates import (
    contains,
    equals,
    find_sequence,
    float_equals,
    has_field,
    matches,
    pattern_text,
)
from contract_kernel.domain.value_kind import ValueKind
from contract_kernel.exceptions import CheckFailedError
from contract_kernel.logging_config import LogContext
from contract_kernel.reporting import AssertLogger, FailureHandler


class ConditionChecker:
    """
    Parametrized condition checker.

    Contract:
        Each ``check_*`` method takes the operand(s), an optional
        ``message`` and an optional ``location`` and returns a bool.
        When ``location`` is None and ``settings.capture_locations`` is
        set, the caller's file and line are captured on failure.

    Guarantees:
        - Returns the predicate result whatever the handler does (unless
          the handler raises).
        - Holds no state besides name, settings and handler.
    """

    def __init__(
        self,
        name: str,
        settings: CheckerSettings | None = None,
        handler: FailureHandler | None = None,
        error_type: type[CheckFailedError] = CheckFailedError,
    ):
        self.name = name
        self.error_type = error_type
        self._settings = settings or CheckerSettings()
        self._handler: FailureHandler = handler or self.default_handler()

    def __repr__(self) -> str:
        return f"ConditionChecker({self.name!r}, policy={self._settings.policy.value!r})"

    # -----------------------------------------------------------------------
    # Configuration
    # -----------------------------------------------------------------------

    @property
    def settings(self) -> CheckerSettings:
        return self._settings

    def configure(self, settings: CheckerSettings) -> None:
        """Replace the settings and restore the default handler for them."""
        self._settings = settings
        self._handler = self.default_handler()

    def default_handler(self) -> AssertLogger:
        return AssertLogger(
            self.name,
            policy=self._settings.policy,
            style=self._settings.location_style,
            error_type=self.error_type,
        )

    @property
    def handler(self) -> FailureHandler:
        return self._handler

    @handler.setter
    def handler(self, handler: FailureHandler) -> None:
        self._handler = handler

    def set_handler(self, handler: FailureHandler) -> FailureHandler:
        """Install ``handler`` and return the one it replaced."""
        previous = self._handler
        self._handler = handler
        return previous

    def reset_handler(self) -> None:
        self._handler = self.default_handler()

    @contextmanager
    def handled_by(self, handler: FailureHandler) -> Iterator[FailureHandler]:
        """Route failures to ``handler`` for the duration of the block."""
        previous = self.set_handler(handler)
        try:
            yield handler
        finally:
            self._handler = previous

    # -----------------------------------------------------------------------
    # Core
    # -----------------------------------------------------------------------

    def _verify(
        self,
        check: str,
        passed: bool,
        message: str | None,
        default: Callable[[], str],
        location: SourceLocation | None,
    ) -> bool:
        if passed:
            return True
        text = message if message is not None else default()
        if location is None and self._settings.capture_locations:
            location = SourceLocation.capture()
        with LogContext.bind(facade=self.name, check=check):
            self._handler(text, location)
        return False

    def fail(
        self, message: str | None = None, location: SourceLocation | None = None
    ) -> bool:
        """Unconditional failure. Always returns False."""
        return self._verify("fail", False, message, messages.unconditional, location)

    # -----------------------------------------------------------------------
    # Truthiness and nullability
    # -----------------------------------------------------------------------

    def check_true(
        self, cond: Any, message: str | None = None, location: SourceLocation | None = None
    ) -> bool:
        return self._verify(
            "check_true", bool(cond), message, messages.expected_true, location
        )

    def check_false(
        self, cond: Any, message: str | None = None, location: SourceLocation | None = None
    ) -> bool:
        return self._verify(
            "check_false", not cond, message, messages.expected_false, location
        )

    def check_null(
        self, value: Any, message: str | None = None, location: SourceLocation | None = None
    ) -> bool:
        return self._verify(
            "check_null",
            value is None,
            message,
            lambda: messages.expected_null(value),
            location,
        )

    def check_non_null(
        self, value: Any, message: str | None = None, location: SourceLocation | None = None
    ) -> bool:
        return self._verify(
            "check_non_null",
            value is not None,
            message,
            messages.expected_non_null,
            location,
        )

    # -----------------------------------------------------------------------
    # Fields and types
    # -----------------------------------------------------------------------

    def check_has_field(
        self,
        obj: Any,
        name: str,
        message: str | None = None,
        location: SourceLocation | None = None,
    ) -> bool:
        return self._verify(
            "check_has_field",
            has_field(obj, name),
            message,
            lambda: messages.expected_field(obj, name),
            location,
        )

    def check_missing_field(
        self,
        obj: Any,
        name: str,
        message: str | None = None,
        location: SourceLocation | None = None,
    ) -> bool:
        return self._verify(
            "check_missing_field",
            not has_field(obj, name),
            message,
            lambda: messages.unexpected_field(obj, name),
            location,
        )

    def check_is_type(
        self,
        value: Any,
        type_: type | tuple[type, ...],
        message: str | None = None,
        location: SourceLocation | None = None,
    ) -> bool:
        return self._verify(
            "check_is_type",
            isinstance(value, type_),
            message,
            lambda: messages.expected_type(value, type_),
            location,
        )

    def check_is_not_type(
        self,
        value: Any,
        type_: type | tuple[type, ...],
        message: str | None = None,
        location: SourceLocation | None = None,
    ) -> bool:
        return self._verify(
            "check_is_not_type",
            not isinstance(value, type_),
            message,
            lambda: messages.unexpected_type(value, type_),
            location,
        )

    def check_is_object(
        self, value: Any, message: str | None = None, location: SourceLocation | None = None
    ) -> bool:
        return self._verify(
            "check_is_object",
            ValueKind.of(value).is_object,
            message,
            lambda: messages.expected_object(value),
            location,
        )

    # -----------------------------------------------------------------------
    # Equality
    # -----------------------------------------------------------------------

    def check_equals(
        self,
        value: Any,
        expected: Any,
        message: str | None = None,
        location: SourceLocation | None = None,
    ) -> bool:
        return self._verify(
            "check_equals",
            equals(value, expected),
            message,
            lambda: messages.expected_equal(value, expected),
            location,
        )

    def check_not_equals(
        self,
        value: Any,
        expected: Any,
        message: str | None = None,
        location: SourceLocation | None = None,
    ) -> bool:
        return self._verify(
            "check_not_equals",
            not equals(value, expected),
            message,
            lambda: messages.expected_not_equal(value, expected),
            location,
        )

    def check_float_equals(
        self,
        value: float,
        expected: float,
        tolerance: float | None = None,
        message: str | None = None,
        location: SourceLocation | None = None,
    ) -> bool:
        if tolerance is None:
            tolerance = self._settings.float_tolerance
        return self._verify(
            "check_float_equals",
            float_equals(value, expected, tolerance),
            message,
            lambda: messages.expected_float(value, expected, tolerance),
            location,
        )

    # -----------------------------------------------------------------------
    # Matching and containment
    # -----------------------------------------------------------------------

    def check_matches(
        self,
        pattern: str | re.Pattern[str],
        value: Any,
        message: str | None = None,
        location: SourceLocation | None = None,
    ) -> bool:
        return self._verify(
            "check_matches",
            matches(pattern, value),
            message,
            lambda: messages.expected_match(pattern_text(pattern), value),
            location,
        )

    def check_contains(
        self,
        collection: Any,
        item: Any,
        message: str | None = None,
        location: SourceLocation | None = None,
    ) -> bool:
        return self._verify(
            "check_contains",
            contains(collection, item),
            message,
            lambda: messages.expected_contains(collection, item),
            location,
        )

    def check_not_contains(
        self,
        collection: Any,
        item: Any,
        message: str | None = None,
        location: SourceLocation | None = None,
    ) -> bool:
        return self._verify(
            "check_not_contains",
            not contains(collection, item),
            message,
            lambda: messages.unexpected_contains(collection, item),
            location,
        )

    def check_string_contains(
        self,
        haystack: str | None,
        needle: str,
        message: str | None = None,
        location: SourceLocation | None = None,
    ) -> bool:
        return self._verify(
            "check_string_contains",
            haystack is not None and needle in haystack,
            message,
            lambda: messages.expected_substring(haystack, needle),
            location,
        )

    def check_string_sequence(
        self,
        haystack: str | None,
        needles: Iterable[str],
        message: str | None = None,
        location: SourceLocation | None = None,
    ) -> bool:
        gap = find_sequence(haystack, needles)
        return self._verify(
            "check_string_sequence",
            gap is None,
            message,
            lambda: messages.expected_sequence(gap, self._settings.snippet_length),
            location,
        )

    # -----------------------------------------------------------------------
    # Exceptions
    # -----------------------------------------------------------------------

    def check_raises(
        self,
        func: Callable[[], Any],
        expected: type[BaseException] | tuple[type[BaseException], ...] = Exception,
        message: str | None = None,
        location: SourceLocation | None = None,
    ) -> bool:
        """Pass when ``func()`` raises ``expected``; other errors propagate."""
        try:
            func()
        except expected:
            return True
        return self._verify(
            "check_raises",
            False,
            message,
            lambda: messages.expected_raise(expected),
            location,
        )
