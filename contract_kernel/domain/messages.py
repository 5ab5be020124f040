"""
Default failure messages.

Every template quotes its operands as ``'value'``.  These are used only
when the caller did not supply an explicit message.
"""

from __future__ import annotations

from typing import Any

from contract_kernel.domain.predicates import SequenceGap
from contract_kernel.domain.value_kind import ValueKind, type_label

ELLIPSIS = "..."


def quote(value: Any) -> str:
    if value is None:
        return "null"
    return f"'{value}'"


def expected_true() -> str:
    return "expected true"


def expected_false() -> str:
    return "expected false"


def expected_null(value: Any) -> str:
    return f"expected null but was {quote(value)}"


def expected_non_null() -> str:
    return "expected not null"


def expected_field(obj: Any, name: str) -> str:
    return f"expected field {quote(name)} in {quote(obj)}"


def unexpected_field(obj: Any, name: str) -> str:
    return f"unexpected field {quote(name)} in {quote(obj)}"


def expected_type(value: Any, type_: Any) -> str:
    return (
        f"expected type {quote(type_label(type_))} "
        f"but was {quote(value)} of kind {ValueKind.of(value).value}"
    )


def unexpected_type(value: Any, type_: Any) -> str:
    return f"value {quote(value)} should not be of type {quote(type_label(type_))}"


def expected_object(value: Any) -> str:
    return (
        f"expected object but was {quote(value)} "
        f"of kind {ValueKind.of(value).value}"
    )


def expected_equal(value: Any, expected: Any) -> str:
    return f"expected {quote(expected)} but was {quote(value)}"


def expected_not_equal(value: Any, expected: Any) -> str:
    return f"expected {quote(value)} to be different from {quote(expected)}"


def expected_match(pattern: str, value: Any) -> str:
    return f"the value {quote(value)} does not match the provided pattern {quote(pattern)}"


def expected_float(value: float, expected: float, tolerance: float) -> str:
    return (
        f"expected {quote(expected)} but was {quote(value)} "
        f"(tolerance {tolerance:g})"
    )


def expected_contains(collection: Any, item: Any) -> str:
    return f"{quote(item)} not found in {quote(collection)}"


def unexpected_contains(collection: Any, item: Any) -> str:
    return f"{quote(item)} found in {quote(collection)}"


def expected_substring(haystack: Any, needle: str) -> str:
    return f"the value {quote(needle)} is not contained in {quote(haystack)}"


def snippet(consumed: str, length: int) -> str:
    """Tail of ``consumed``, ellipsis-prefixed when longer than ``length``."""
    if len(consumed) > length:
        return ELLIPSIS + consumed[-length:]
    return consumed


def expected_sequence(gap: SequenceGap, snippet_length: int) -> str:
    if not gap.consumed:
        return f"expected {quote(gap.missing)} after begin"
    return (
        f"expected {quote(gap.missing)} after "
        f"{quote(snippet(gap.consumed, snippet_length))}"
    )


def expected_raise(expected: Any) -> str:
    return f"expected {quote(type_label(expected))} to be raised"


def unconditional() -> str:
    return "failure expected"
