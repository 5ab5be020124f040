"""
Typed Exception Hierarchy for the Contract Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

A failed Require or Expect check aborts the caller.  Callers that want to
recover must catch by TYPE, not by parsing the diagnostic text:

Example - WRONG way to handle a failed requirement:
    try:
        load_order(order)
    except Exception as e:
        if "expected not null" in str(e):  # FRAGILE - wording may change
            ...

Example - RIGHT way (what this module enables):
    try:
        load_order(order)
    except RequirementFailedError as e:    # Typed catch
        log.warning("bad input at %s", e.location)  # Structured data
        api_response(code=e.code, detail=e.message)  # Machine-readable

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

All exceptions inherit from ContractKernelError:

    ContractKernelError (base)
    |
    +-- CheckFailedError
    |   +-- AssertionFailedError
    |   +-- RequirementFailedError
    |   +-- ExpectationFailedError
    |
    +-- InvalidPolicyError
    +-- UnknownFacadeError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Code                    | When Raised
------------------------|-----------------------------------------------------
CHECK_FAILED            | A checker configured to RAISE saw a false predicate
ASSERTION_FAILED        | ... and that checker is the Assert facade
REQUIREMENT_FAILED      | ... and that checker is the Require facade
EXPECTATION_FAILED      | ... and that checker is the Expect facade
INVALID_FAILURE_POLICY  | A policy name is neither "raise" nor "report"
UNKNOWN_FACADE          | A facade name is not Assert, Require or Expect

===============================================================================
DESIGN DECISIONS
===============================================================================

1. WHY NOT SUBCLASS AssertionError?
   ``python -O`` strips ``assert`` statements, and test runners treat
   AssertionError as a test failure rather than an error.  Contract checks
   are runtime behaviour, not debug-only assertions.

2. WHY code CLASS ATTRIBUTE (not instance)?
   Codes are static per exception type: ``RequirementFailedError.code``
   works without instantiation.

3. WHY KEEP message AND diagnostic SEPARATELY?
   ``message`` is what the check said; ``str(error)`` is the diagnostic
   with the source location prefixed.  Structured consumers want the
   former, humans reading a traceback want the latter.

===============================================================================
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from contract_kernel.domain.location import SourceLocation


class ContractKernelError(Exception):
    """
    Base exception for all contract kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "CONTRACT_KERNEL_ERROR"


# Check failures


class CheckFailedError(ContractKernelError):
    """A condition check failed under the RAISE policy."""

    code: str = "CHECK_FAILED"

    def __init__(
        self,
        message: str,
        location: SourceLocation | None = None,
        facade: str | None = None,
        diagnostic: str | None = None,
    ):
        self.message = message
        self.location = location
        self.facade = facade
        super().__init__(diagnostic if diagnostic is not None else message)


class AssertionFailedError(CheckFailedError):
    """An Assert check failed."""

    code: str = "ASSERTION_FAILED"


class RequirementFailedError(CheckFailedError):
    """A Require check failed."""

    code: str = "REQUIREMENT_FAILED"


class ExpectationFailedError(CheckFailedError):
    """An Expect check failed."""

    code: str = "EXPECTATION_FAILED"


# Configuration errors


class InvalidPolicyError(ContractKernelError):
    """Failure policy name is not recognised."""

    code: str = "INVALID_FAILURE_POLICY"

    def __init__(self, policy: str):
        self.policy = policy
        super().__init__(
            f"Invalid failure policy {policy!r}: expected 'raise' or 'report'"
        )


class UnknownFacadeError(ContractKernelError):
    """Facade name is not one of Assert, Require, Expect."""

    code: str = "UNKNOWN_FACADE"

    def __init__(self, facade: str):
        self.facade = facade
        super().__init__(f"Unknown facade: {facade}")
