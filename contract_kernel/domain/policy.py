"""
Failure policy and checker settings.

The three facades differ only in configuration, never in algorithm.
``CheckerSettings`` is that configuration.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, unique

from contract_kernel.domain.location import LocationStyle
from contract_kernel.exceptions import InvalidPolicyError

DEFAULT_FLOAT_TOLERANCE = 1e-5
DEFAULT_SNIPPET_LENGTH = 30


@unique
class FailurePolicy(str, Enum):
    """What the default failure handler does with a failed check."""

    RAISE = "raise"
    """Format the diagnostic and raise a CheckFailedError."""

    REPORT = "report"
    """Format the diagnostic, log it, and let the caller continue."""

    @classmethod
    def parse(cls, value: str | FailurePolicy) -> FailurePolicy:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidPolicyError(str(value)) from None


@dataclass(frozen=True)
class CheckerSettings:
    """Per-checker configuration.

    Guarantees:
        - ``float_tolerance`` is finite and non-negative.
        - ``snippet_length`` is at least 1.
    """

    policy: FailurePolicy = FailurePolicy.RAISE
    float_tolerance: float = DEFAULT_FLOAT_TOLERANCE
    location_style: LocationStyle = LocationStyle.BRACKET
    snippet_length: int = DEFAULT_SNIPPET_LENGTH
    capture_locations: bool = True

    def __post_init__(self) -> None:
        if not math.isfinite(self.float_tolerance) or self.float_tolerance < 0:
            raise ValueError(
                f"float_tolerance must be finite and >= 0, got {self.float_tolerance!r}"
            )
        if self.snippet_length < 1:
            raise ValueError(
                f"snippet_length must be >= 1, got {self.snippet_length!r}"
            )
