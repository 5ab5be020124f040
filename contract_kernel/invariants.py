"""
Checker Invariants Contract.

These guarantees hold for every ConditionChecker regardless of facade,
policy or handler.  No configuration may override them.

This module exists solely to declare them.  Enforcement lives in
``ConditionChecker._verify`` and is exercised by tests/services and
tests/fuzzing.
"""

from enum import Enum, unique


@unique
class CheckerInvariant(str, Enum):
    """Non-configurable guarantees of every condition check."""

    RESULT_IS_PREDICATE = "result_is_predicate"
    """A check returns the predicate's boolean result, including after a
    failure whose handler returned normally."""

    SINGLE_HANDLER_CALL = "single_handler_call"
    """A failing check invokes its handler exactly once; a passing check
    never invokes it."""

    EXPLICIT_MESSAGE_VERBATIM = "explicit_message_verbatim"
    """A caller-supplied message reaches the handler unchanged. Default
    templates are built only when no message is supplied."""

    POLICY_IS_CONFIGURATION = "policy_is_configuration"
    """Assert, Require and Expect share one algorithm; they differ only in
    CheckerSettings and error type."""


# All invariants as a frozenset for programmatic checks.
ALL_CHECKER_INVARIANTS: frozenset[CheckerInvariant] = frozenset(CheckerInvariant)

# The kernel package may not import from these packages.
# This is enforced by tests/architecture/test_kernel_boundary.py.
FORBIDDEN_KERNEL_IMPORTS: tuple[str, ...] = (
    "contract_config",
    "scripts",
    "yaml",
)
