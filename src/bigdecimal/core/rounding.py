"""
Rounding modes and the single increment rule shared by every rounding path.

The rounding engine splits a mantissa at a decimal-digit position with a
floored divmod, so the retained quotient ``q`` is always the grid point
toward negative infinity and the discarded remainder ``r`` satisfies
``0 <= r < unit``. Whether to step ``q`` up by one is then a function of the
mode, the remainder relative to half a unit, and (for ties and directed
modes) the sign or parity of ``q``.

Alignment notes:
- TRUNCATE / HALF_TRUNCATE step up only for negative ``q`` (moves toward zero).
- AWAY_FROM_ZERO / HALF_AWAY_FROM_ZERO step up only for ``q >= 0``.
- Modes with a ``decimal`` module counterpart map onto it via STD_ROUNDING,
  for I/O bridges and cross-checks.
"""

from __future__ import annotations

from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
)
from enum import Enum
from typing import Callable, Dict

from .exc import DecimalDomainError

# Debug printing control
DEBUG_ROUNDING = False

def _dbg(msg: str) -> None:
    if DEBUG_ROUNDING:
        print(msg)


class Round(Enum):
    """How a value between two grid points is mapped onto the grid."""

    HALF_EVEN = "half-even"
    HALF_CEILING = "half-ceiling"
    HALF_FLOOR = "half-floor"
    HALF_TRUNCATE = "half-truncate"
    HALF_AWAY_FROM_ZERO = "half-away-from-zero"
    CEILING = "ceiling"
    FLOOR = "floor"
    TRUNCATE = "truncate"
    AWAY_FROM_ZERO = "away-from-zero"

    @property
    def is_half(self) -> bool:
        """True for the round-to-nearest family (ties need a tie-break)."""
        return self in _TIE_BREAK


# Predicate on the floored quotient q: step up by one?
_TIE_BREAK: Dict[Round, Callable[[int], bool]] = {
    Round.HALF_EVEN: lambda q: q % 2 == 1,
    Round.HALF_CEILING: lambda q: True,
    Round.HALF_FLOOR: lambda q: False,
    Round.HALF_TRUNCATE: lambda q: q < 0,
    Round.HALF_AWAY_FROM_ZERO: lambda q: q >= 0,
}

_DIRECTED: Dict[Round, Callable[[int], bool]] = {
    Round.CEILING: lambda q: True,
    Round.FLOOR: lambda q: False,
    Round.TRUNCATE: lambda q: q < 0,
    Round.AWAY_FROM_ZERO: lambda q: q >= 0,
}

#: Rounding constants of the standard ``decimal`` module, where one exists.
STD_ROUNDING: Dict[Round, str] = {
    Round.HALF_EVEN: ROUND_HALF_EVEN,
    Round.HALF_TRUNCATE: ROUND_HALF_DOWN,
    Round.HALF_AWAY_FROM_ZERO: ROUND_HALF_UP,
    Round.CEILING: ROUND_CEILING,
    Round.FLOOR: ROUND_FLOOR,
    Round.TRUNCATE: ROUND_DOWN,
    Round.AWAY_FROM_ZERO: ROUND_UP,
}


def round_increment(q: int, r: int, unit: int, mode: Round) -> int:
    """Return 1 if the floored quotient ``q`` must be stepped up, else 0.

    Preconditions:
    - ``0 < r < unit`` (callers handle the exact case r == 0 themselves)
    - ``unit`` is the power of ten that was divided out
    """
    if mode.is_half:
        # Compare r with unit/2 without leaving the integers.
        twice = 2 * r
        if twice > unit:
            step = True
        elif twice < unit:
            step = False
        else:
            step = _TIE_BREAK[mode](q)
            if DEBUG_ROUNDING:
                _dbg(f"round_increment: tie, q odd={q % 2 == 1}, q<0={q < 0}, mode={mode.value} -> {step}")
    else:
        step = _DIRECTED[mode](q)
    return 1 if step else 0


def coerce_round(mode) -> Round:
    """Accept a Round or its string value (e.g. "half-even")."""
    if isinstance(mode, Round):
        return mode
    try:
        return Round(mode)
    except ValueError:
        raise DecimalDomainError(f"unknown rounding mode: {mode!r}") from None


__all__ = [
    "Round",
    "STD_ROUNDING",
    "round_increment",
    "coerce_round",
]
