"""Numeric input normalization.

Accepts the numeric shapes callers hand to the formatter (``int``, ``float``,
``Decimal`` and numeric strings) and reduces them to either an exact integer or
a float magnitude.

Examples:
>>> to_float("998.999")
998.999
>>> to_float(Decimal("9998.2"))
9998.2
>>> normalize(12345678)
NumericValue(is_exact_integer=True, value=12345678)
>>> normalize("12345678")
NumericValue(is_exact_integer=False, value=12345678.0)
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from number_delimit.utils.errors import InvalidNumberError

Number = Union[int, float, Decimal, str]

__all__ = ["Number", "NumericValue", "to_float", "normalize"]

# Plain ASCII decimal literal: no digit separators, no inf/nan words
NUMERIC_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


@dataclass(frozen=True)
class NumericValue:
    is_exact_integer: bool
    value: Union[int, float]

    @property
    def negative(self) -> bool:
        return self.value < 0


def to_float(value: Number) -> float:
    """Convert ``value`` to a native float.

    Booleans are rejected even though ``bool`` subclasses ``int``. Strings must
    be plain ASCII decimal literals; ``"1_000"``, ``"1,000"``, ``"inf"`` and
    non-ASCII digits are rejected.
    """
    if isinstance(value, bool):
        raise InvalidNumberError(value, "booleans are not numbers")
    if isinstance(value, float):
        return value
    if isinstance(value, (int, Decimal)):
        try:
            return float(value)
        except OverflowError as exc:
            raise InvalidNumberError(value, "out of float range") from exc
        except ValueError as exc:  # signaling NaN
            raise InvalidNumberError(value, "not convertible to float") from exc
    if isinstance(value, str):
        raw = value.strip()
        if raw == '':
            raise InvalidNumberError(value, "empty string")
        if not NUMERIC_LITERAL.fullmatch(raw):
            raise InvalidNumberError(value, "malformed numeric string")
        return float(raw)
    raise InvalidNumberError(value, f"unsupported type {type(value).__name__}")


def normalize(value: Number) -> NumericValue:
    """Classify ``value`` once so the formatter can stay representation-agnostic.

    Exact integers keep their ``int`` value so large magnitudes group without a
    float round-trip. Everything else becomes a finite float.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return NumericValue(is_exact_integer=True, value=value)
    magnitude = to_float(value)
    if not math.isfinite(magnitude):
        raise InvalidNumberError(value, "non-finite values cannot be delimited")
    return NumericValue(is_exact_integer=False, value=magnitude)
