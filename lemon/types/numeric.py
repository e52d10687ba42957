"""Numeric tower for Lemon.

Two representations: Python ``int`` (exact, arbitrary precision) and Python
``float`` (IEEE double). Mixed operations promote to float; int with int stays
exact. ``bool`` is excluded even though Python treats it as an int.
"""

from __future__ import annotations

import math
from typing import Union

from lemon import LispValue
from lemon.errors import LemonDivideByZero, LemonTypeError

Numeric = Union[int, float]


def is_numeric(value: LispValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def as_numeric(value: LispValue) -> Numeric:
    """Return `value` unchanged if numeric, otherwise raise LemonTypeError."""
    if not is_numeric(value):
        raise LemonTypeError("numeric", value)
    return value


def is_zero(n: Numeric) -> bool:
    return n == 0


def to_float(n: Numeric) -> float:
    """Convert `n` to a float, saturating to a signed infinity past the double range."""
    try:
        return float(n)
    except OverflowError:
        return math.inf if n > 0 else -math.inf


def promote(a: Numeric, b: Numeric) -> tuple[Numeric, Numeric]:
    """Bring a mixed int/float pair to float. Two ints are left exact."""
    if isinstance(a, float) or isinstance(b, float):
        return to_float(a), to_float(b)
    return a, b


def add(a: Numeric, b: Numeric) -> Numeric:
    a, b = promote(a, b)
    return a + b


def sub(a: Numeric, b: Numeric) -> Numeric:
    a, b = promote(a, b)
    return a - b


def mul(a: Numeric, b: Numeric) -> Numeric:
    a, b = promote(a, b)
    return a * b


def div(a: Numeric, b: Numeric) -> Numeric:
    """Divide `a` by `b`.

    Integer by integer is exact division truncated toward zero. If either
    operand is a float the quotient is a float. A zero divisor of either
    representation raises LemonDivideByZero.
    """
    if is_zero(b):
        raise LemonDivideByZero()
    if isinstance(a, int) and isinstance(b, int):
        q = abs(a) // abs(b)
        return q if (a < 0) == (b < 0) else -q
    a, b = promote(a, b)
    return a / b


def numeric_equal(a: Numeric, b: Numeric) -> bool:
    # int == float compares mathematically in Python
    return a == b
