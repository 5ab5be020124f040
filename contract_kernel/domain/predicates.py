"""
Predicates -- pure boolean tests behind every check.

Responsibility:
    The non-trivial predicates (float equality, field presence, regex
    matching, ordered substring search).  One-line predicates such as
    ``value is None`` live inline in ``ConditionChecker``.

Architecture position:
    Kernel > Domain -- pure functions, no handler or message knowledge.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


def float_equals(value: float, expected: float, tolerance: float) -> bool:
    """Compare two floats with NaN and infinity treated as values.

    - NaN equals NaN, and nothing else.
    - An infinity equals only the infinity of the same sign.
    - Anything else is equal when within ``tolerance``.
    """
    value = float(value)
    expected = float(expected)
    if math.isnan(value) or math.isnan(expected):
        return math.isnan(value) and math.isnan(expected)
    if math.isinf(value) or math.isinf(expected):
        return value == expected
    return abs(value - expected) <= tolerance


def has_field(obj: Any, name: str) -> bool:
    """Key presence for mappings, attribute presence for everything else."""
    if obj is None:
        return False
    if isinstance(obj, Mapping):
        return name in obj
    return hasattr(obj, name)


def matches(pattern: str | re.Pattern[str], value: Any) -> bool:
    """True when ``pattern`` is found anywhere in ``value``."""
    if value is None:
        return False
    if isinstance(pattern, re.Pattern):
        return pattern.search(str(value)) is not None
    return re.search(pattern, str(value)) is not None


def pattern_text(pattern: str | re.Pattern[str]) -> str:
    if isinstance(pattern, re.Pattern):
        return pattern.pattern
    return pattern


@dataclass(frozen=True)
class SequenceGap:
    """Where an ordered substring search stopped.

    ``missing`` is the needle that could not be found; ``consumed`` is the
    text the search had already advanced past.
    """

    missing: str
    consumed: str


def find_sequence(haystack: str | None, needles: Iterable[str]) -> SequenceGap | None:
    """Search for each needle in order, advancing past every match.

    Returns None when every needle is found, else the first gap.
    """
    position = 0
    for needle in needles:
        if haystack is None:
            return SequenceGap(missing=needle, consumed="")
        found = haystack.find(needle, position)
        if found < 0:
            return SequenceGap(missing=needle, consumed=haystack[:position])
        position = found + len(needle)
    return None


def contains(collection: Any, item: Any) -> bool:
    if collection is None:
        return False
    return item in collection


def equals(value: Any, expected: Any) -> bool:
    """Identity or ``==``.

    An ``==`` result with no single truth value (element-wise comparison of
    array-likes) counts as not equal.
    """
    if value is expected:
        return True
    try:
        return bool(value == expected)
    except (TypeError, ValueError):
        return False
