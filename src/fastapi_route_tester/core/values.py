"""Equality rules shared by every route assertion.

Scalars compare by their string form, case-insensitively, so that a route
value parsed from a URL ("42") equals the value a test expects (42).
"""

from collections.abc import Mapping
from datetime import date, time, timedelta
from decimal import Decimal
from typing import Any
from uuid import UUID

from fastapi_route_tester.core.models import Mismatch, MismatchKind

# bool and datetime are covered through int and date
SCALAR_TYPES: tuple[type, ...] = (str, int, float, Decimal, UUID, date, time, timedelta)


def is_comparable(value: Any) -> bool:
    """Check if a value is a scalar that can take part in a comparison."""
    return isinstance(value, SCALAR_TYPES)


def scalar_equals(first: Any, second: Any) -> bool:
    """Compare two route values.

    Two None values are equal. Otherwise both values must be comparable
    scalars whose string forms are equal ignoring case.

    Examples:
        scalar_equals("Home", "home") -> True
        scalar_equals("42", 42) -> True
        scalar_equals(None, "home") -> False
        scalar_equals(["a"], ["a"]) -> False
    """
    if first is None and second is None:
        return True

    return (
        is_comparable(first)
        and is_comparable(second)
        and str(first).casefold() == str(second).casefold()
    )


def diff_value_sets(
    expected: Mapping[str, Any] | None,
    actual: Mapping[str, Any],
    *,
    source: str = "",
) -> Mismatch | None:
    """Find the first disagreement between expected and resolved route values.

    The side with more entries drives the comparison. When expected has at
    least as many entries as actual, every expected key must be present in
    actual; otherwise every actual key must be present in expected. Both
    directions compare values with scalar_equals.

    Args:
        expected: Values the test expects, or None when it expects none.
        actual: Values the router resolved.
        source: Request URL used in the mismatch description.

    Returns:
        The first Mismatch found, or None when the value sets agree.
    """
    if expected is None:
        if actual:
            return Mismatch(
                MismatchKind.ROUTE_VALUE_COUNT_MISMATCH,
                expected=0,
                actual=len(actual),
                source=source,
            )
        return None

    if not actual:
        return Mismatch(
            MismatchKind.ROUTE_VALUE_COUNT_MISMATCH,
            expected=len(expected),
            actual=0,
            source=source,
        )

    if len(expected) >= len(actual):
        for key, value in expected.items():
            if key not in actual:
                return Mismatch(MismatchKind.ROUTE_VALUE_MISSING, key=key, source=source)
            if not scalar_equals(actual[key], value):
                return Mismatch(
                    MismatchKind.ROUTE_VALUE_VALUE_MISMATCH,
                    expected=value,
                    actual=actual[key],
                    key=key,
                    source=source,
                )
    else:
        for key, value in actual.items():
            if key not in expected:
                return Mismatch(
                    MismatchKind.UNEXPECTED_ROUTE_VALUE,
                    actual=value,
                    key=key,
                    source=source,
                )
            if not scalar_equals(value, expected[key]):
                return Mismatch(
                    MismatchKind.ROUTE_VALUE_VALUE_MISMATCH,
                    expected=expected[key],
                    actual=value,
                    key=key,
                    source=source,
                )

    return None
