"""
Failure reporting -- the handlers a ConditionChecker calls on failure.

Responsibility:
    Defines the ``FailureHandler`` callable type and the two handlers the
    kernel ships:

    - ``AssertLogger`` -- the shared default handler.  Formats the
      diagnostic and either logs it (REPORT) or raises the facade's
      ``CheckFailedError`` subclass (RAISE).
    - ``FailureRecorder`` -- an in-memory handler that only records what
      it receives.

Architecture position:
    Kernel -- sits between the pure domain layer and ``checker``.  This is
    the only kernel module that writes log records.

Failure modes:
    - RAISE policy: ``CheckFailedError`` (or the configured subclass)
      propagates out of the check call.

Usage::

    recorder = FailureRecorder()
    with Assert.handled_by(recorder):
        Assert.check_equals(total, 10)
    assert len(recorder) == 0
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from contract_kernel.domain.location import (
    LocationStyle,
    SourceLocation,
    format_diagnostic,
)
from contract_kernel.domain.policy import FailurePolicy
from contract_kernel.exceptions import CheckFailedError
from contract_kernel.logging_config import get_logger

logger = get_logger("reporting")

FailureHandler = Callable[[str, SourceLocation | None], None]
"""Invoked with the failure message and the optional source location."""


class AssertLogger:
    """
    Default failure handler shared by every facade.

    Contract:
        Called once per failed check with the message and location.

    Guarantees:
        - REPORT: emits exactly one WARNING record whose message is the
          formatted diagnostic, then returns.
        - RAISE: raises ``error_type`` carrying message, location, facade
          and the formatted diagnostic.  Nothing is logged.
    """

    def __init__(
        self,
        facade: str,
        policy: FailurePolicy = FailurePolicy.RAISE,
        style: LocationStyle = LocationStyle.BRACKET,
        error_type: type[CheckFailedError] = CheckFailedError,
    ):
        self.facade = facade
        self.policy = policy
        self.style = style
        self.error_type = error_type

    def __call__(self, message: str, location: SourceLocation | None = None) -> None:
        diagnostic = format_diagnostic(message, location, self.style)
        if self.policy is FailurePolicy.REPORT:
            logger.warning(
                diagnostic,
                extra={
                    "facade": self.facade,
                    "source_file": location.file if location else None,
                    "source_line": location.line if location else None,
                    "source_function": location.function if location else None,
                },
            )
            return
        raise self.error_type(
            message,
            location=location,
            facade=self.facade,
            diagnostic=diagnostic,
        )

    def __repr__(self) -> str:
        return (
            f"AssertLogger(facade={self.facade!r}, policy={self.policy.value!r}, "
            f"style={self.style.value!r})"
        )


@dataclass(frozen=True)
class RecordedFailure:
    message: str
    location: SourceLocation | None


class FailureRecorder:
    """
    Failure handler that collects failures in memory.

    Non-goals:
        - Does NOT log or raise; the check simply returns False.
    """

    def __init__(self) -> None:
        self._failures: list[RecordedFailure] = []

    def __call__(self, message: str, location: SourceLocation | None = None) -> None:
        self._failures.append(RecordedFailure(message, location))

    @property
    def failures(self) -> list[RecordedFailure]:
        """All recorded failures (read-only copy)."""
        return list(self._failures)

    @property
    def messages(self) -> list[str]:
        return [f.message for f in self._failures]

    def clear(self) -> None:
        self._failures.clear()

    def __len__(self) -> int:
        return len(self._failures)
