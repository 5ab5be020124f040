"""
Assert / Require / Expect -- the process-wide checker instances.

All three are ``ConditionChecker`` instances; they differ only in default
failure policy and error type:

    Facade   | Policy | Raises
    ---------|--------|------------------------
    Assert   | report | AssertionFailedError (only if reconfigured to raise)
    Require  | raise  | RequirementFailedError
    Expect   | raise  | ExpectationFailedError

Reassign a facade's handler once at startup::

    from contract_kernel.facades import Require

    Require.handler = my_handler

The facades are module-level state and are not thread-safe to reconfigure.
"""

from __future__ import annotations

from contract_kernel.checker import ConditionChecker
from contract_kernel.domain.policy import CheckerSettings, FailurePolicy
from contract_kernel.exceptions import (
    AssertionFailedError,
    CheckFailedError,
    ExpectationFailedError,
    RequirementFailedError,
    UnknownFacadeError,
)

FACADE_NAMES: tuple[str, ...] = ("Assert", "Require", "Expect")

DEFAULT_POLICIES: dict[str, FailurePolicy] = {
    "Assert": FailurePolicy.REPORT,
    "Require": FailurePolicy.RAISE,
    "Expect": FailurePolicy.RAISE,
}

_ERROR_TYPES: dict[str, type[CheckFailedError]] = {
    "Assert": AssertionFailedError,
    "Require": RequirementFailedError,
    "Expect": ExpectationFailedError,
}


def _build(name: str) -> ConditionChecker:
    return ConditionChecker(
        name,
        settings=CheckerSettings(policy=DEFAULT_POLICIES[name]),
        error_type=_ERROR_TYPES[name],
    )


Assert = _build("Assert")
Require = _build("Require")
Expect = _build("Expect")

_FACADES: dict[str, ConditionChecker] = {
    "Assert": Assert,
    "Require": Require,
    "Expect": Expect,
}


def get_facade(name: str) -> ConditionChecker:
    try:
        return _FACADES[name]
    except KeyError:
        raise UnknownFacadeError(name) from None


def all_facades() -> tuple[ConditionChecker, ...]:
    return tuple(_FACADES[name] for name in FACADE_NAMES)


def reset_facades() -> None:
    """Restore every facade to its default settings and handler."""
    for name, checker in _FACADES.items():
        checker.configure(CheckerSettings(policy=DEFAULT_POLICIES[name]))
