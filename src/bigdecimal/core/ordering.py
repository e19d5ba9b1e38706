"""
Ordering and aggregation over BigDecimal values.

Key behaviours:
- ``compare`` is a total order by represented value (encodings may differ).
- ``min_of`` / ``max_of`` keep the first of equal candidates (stable).
- ``sum_of`` of an empty iterable is the canonical zero.

Notes:
- All helpers accept ints alongside BigDecimal and return BigDecimal.
- Aggregation stays exact; no rounding is applied.
"""

from __future__ import annotations

from typing import Iterable, Union

from .decimals import BigDecimal, ZERO, _coerce
from .exc import DecimalDomainError

Number = Union[BigDecimal, int]


def compare(x: Number, y: Number) -> int:
    """-1, 0 or 1 as x is below, equal to or above y."""
    return _coerce(x).compare(_coerce(y))


def _pick(values, better) -> BigDecimal:
    if len(values) == 1 and not isinstance(values[0], (BigDecimal, int)):
        values = values[0]
    best = None
    for v in values:
        d = _coerce(v)
        if best is None or better(d.compare(best)):
            best = d
    if best is None:
        raise DecimalDomainError("min_of/max_of of an empty sequence")
    return best


def min_of(*values) -> BigDecimal:
    """Smallest of the arguments, or of a single iterable argument."""
    return _pick(values, lambda c: c < 0)


def max_of(*values) -> BigDecimal:
    """Largest of the arguments, or of a single iterable argument."""
    return _pick(values, lambda c: c > 0)


def sum_of(values: Iterable[Number]) -> BigDecimal:
    """Exact sum; the empty sum is zero."""
    total = ZERO
    for v in values:
        total = total + _coerce(v)
    return total


__all__ = [
    "compare",
    "min_of",
    "max_of",
    "sum_of",
]
