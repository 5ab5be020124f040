"""
Configuration Validator (``contract_config.validator``).

Responsibility
--------------
Validates a ``CheckerConfiguration`` before it is applied to the facades.

Invariants enforced
-------------------
* ``float_tolerance`` is finite and non-negative.
* ``snippet_length`` is an integer, at least 1.
* ``capture_locations`` and ``lenient`` are booleans.
* ``location_style`` is ``bracket`` or ``colon``.
* Every facade entry names Assert, Require or Expect, at most once, with
  ``on_fail`` set to ``raise`` or ``report``.

Failure modes
-------------
* Validation errors  -> configuration MUST NOT be applied;
  ``get_active_config()`` raises ``ConfigValidationError``.
* Validation warnings  -> configuration is applied; a facade without an
  entry keeps its default policy.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from contract_config.schema import CheckerConfiguration
from contract_kernel.domain.location import LocationStyle
from contract_kernel.domain.policy import FailurePolicy
from contract_kernel.facades import FACADE_NAMES

_POLICY_NAMES = frozenset(p.value for p in FailurePolicy)
_STYLE_NAMES = frozenset(s.value for s in LocationStyle)


class ConfigValidationError(Exception):
    """Configuration failed validation and was not applied.

    Attributes:
        source: File the configuration was loaded from, if any.
        errors: Every validation error found.
    """

    code: str = "CONFIG_VALIDATION_FAILED"

    def __init__(self, source: str | None, errors: list[str]):
        self.source = source
        self.errors = list(errors)
        where = source or "<in-memory configuration>"
        super().__init__(
            f"Invalid checker configuration {where}: " + "; ".join(self.errors)
        )


@dataclass
class ConfigValidationResult:
    """
    Result of configuration validation.

    Contract
    --------
    * ``is_valid`` returns ``True`` only when ``errors`` is empty.
    * Warnings do not block application but should be reviewed.
    """

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(self, msg: str) -> None:
        self.errors.append(msg)

    def add_warning(self, msg: str) -> None:
        self.warnings.append(msg)


def validate_configuration(config: CheckerConfiguration) -> ConfigValidationResult:
    """
    Validate a checker configuration.

    Postconditions:
        - Returns a ``ConfigValidationResult`` with errors and warnings.
        - A configuration with errors MUST NOT be applied.
    """
    result = ConfigValidationResult()

    _validate_types(config, result)
    _validate_tolerance(config, result)
    _validate_snippet_length(config, result)
    _validate_location_style(config, result)
    _validate_facades(config, result)

    return result


def _validate_types(
    config: CheckerConfiguration, result: ConfigValidationResult
) -> None:
    for name in ("capture_locations", "lenient"):
        value = getattr(config, name)
        if not isinstance(value, bool):
            result.add_error(f"{name} must be true or false, got {value!r}")
    length = config.snippet_length
    if isinstance(length, bool) or not isinstance(length, int):
        result.add_error(f"snippet_length must be an integer, got {length!r}")


def _validate_tolerance(
    config: CheckerConfiguration, result: ConfigValidationResult
) -> None:
    tolerance = config.float_tolerance
    if not math.isfinite(tolerance) or tolerance < 0:
        result.add_error(
            f"float_tolerance must be finite and >= 0, got {tolerance!r}"
        )


def _validate_snippet_length(
    config: CheckerConfiguration, result: ConfigValidationResult
) -> None:
    if isinstance(config.snippet_length, int) and config.snippet_length < 1:
        result.add_error(
            f"snippet_length must be >= 1, got {config.snippet_length!r}"
        )


def _validate_location_style(
    config: CheckerConfiguration, result: ConfigValidationResult
) -> None:
    if config.location_style not in _STYLE_NAMES:
        result.add_error(
            f"location_style must be one of {sorted(_STYLE_NAMES)}, "
            f"got {config.location_style!r}"
        )


def _validate_facades(
    config: CheckerConfiguration, result: ConfigValidationResult
) -> None:
    seen: set[str] = set()
    for facade in config.facades:
        if facade.name not in FACADE_NAMES:
            result.add_error(
                f"Unknown facade {facade.name!r}: expected one of {list(FACADE_NAMES)}"
            )
        if facade.name in seen:
            result.add_error(f"Duplicate facade entry: {facade.name}")
        seen.add(facade.name)
        if facade.on_fail.strip().lower() not in _POLICY_NAMES:
            result.add_error(
                f"Facade '{facade.name}': on_fail must be 'raise' or 'report', "
                f"got {facade.on_fail!r}"
            )

    for name in FACADE_NAMES:
        if name not in seen:
            result.add_warning(f"Facade '{name}' not configured; default policy applies")
