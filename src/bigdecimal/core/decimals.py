"""
BigDecimal: exact decimal values as an integer mantissa and a power-of-ten exponent.

- A value is ``num * 10**exp`` with ``num`` an unbounded int.
- Exponents are kept on multiples of EXP_BLOCK (floor-aligned), so operands in
  the same block add and compare without rescaling. The encoding is not
  unique: equality, ordering and hashing are by value only.
- Add, subtract, multiply and non-negative powers are exact. Division and
  negative powers carry a bounded number of extra digits and truncate.
- Rounding goes through one primitive, ``round_to_prec``, parameterised by
  ``Round``.

# Alignment notes:
# - canonical_exponent uses floor division, so the canonical exponent is never
#   above the requested one (also for negative exponents).
# - Raw ``div`` truncates toward zero in its last digit; call round_to_prec
#   afterwards for a mode-controlled last digit.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Optional, Tuple, Union

from .constants import (
    EXP_BLOCK,
    DEFAULT_DIV_PRECISION,
    POW_EXTRA_PRECISION,
)
from .exc import DecimalDomainError, DivisionByZero, InvariantViolation
from .intmath import (
    count_digits,
    div_exp10,
    int_to_str,
    mul_exp10,
    str_to_int,
    ten_pow,
    trailing_zeros,
    trunc_div,
)
from .rounding import Round, coerce_round, round_increment

# Debug printing control
DEBUG_DECIMALS = False

def _dbg(msg: str) -> None:
    if DEBUG_DECIMALS:
        print(msg)


# Numeric hash parameters, shared with int/Fraction/float (see sys.hash_info).
_HASH_MODULUS = sys.hash_info.modulus
_HASH_10INV = pow(10, _HASH_MODULUS - 2, _HASH_MODULUS)


def canonical_exponent(exp: int) -> int:
    """Greatest multiple of EXP_BLOCK that is <= exp."""
    return EXP_BLOCK * (exp // EXP_BLOCK)


@dataclass(frozen=True, eq=False, repr=False)
class BigDecimal:
    """Exact decimal value ``num * 10**exp``.

    Build values with the classmethods (``from_components``, ``from_int``,
    ``from_float``, ``from_str``, ``from_decimal``); the raw constructor keeps
    whatever encoding it is given.
    """
    num: int
    exp: int = 0

    def __post_init__(self):
        # bool is an int subclass but never a meaningful mantissa/exponent.
        for name in ("num", "exp"):
            v = getattr(self, name)
            if not isinstance(v, int) or isinstance(v, bool):
                raise DecimalDomainError(f"BigDecimal.{name} must be int, got {type(v).__name__}")

    # ------------- constructors -------------

    @staticmethod
    def zero() -> "BigDecimal":
        return BigDecimal(0, 0)

    @classmethod
    def from_components(cls, num: int, exp: int = 0) -> "BigDecimal":
        """Value ``num * 10**exp`` with a canonical exponent."""
        if num == 0:
            return cls(0, 0)
        x = canonical_exponent(exp)
        if x == exp:
            return cls(num, exp)
        return cls(mul_exp10(num, exp - x), x)

    @classmethod
    def from_int(cls, i: int) -> "BigDecimal":
        return cls.from_components(i, 0)

    @classmethod
    def from_float(cls, f: float, max_prec: int = -1) -> "BigDecimal":
        """Decimal value of a binary float.

        With ``max_prec < 0`` the result is exact (every finite float is a
        finite decimal). Otherwise at most ``max_prec`` extra digits are kept
        by the division, truncating the rest.
        """
        if isinstance(f, int):
            return cls.from_int(f)
        if not math.isfinite(f):
            raise DecimalDomainError(f"cannot convert {f!r} to BigDecimal")
        n, d = f.as_integer_ratio()
        if d == 1:
            return cls.from_int(n)
        k = d.bit_length() - 1  # d == 2**k
        prec = k if max_prec < 0 else min(k, max_prec)
        if DEBUG_DECIMALS:
            _dbg(f"from_float: {f!r} = {n}/2**{k}, prec={prec}")
        return cls.from_int(n).div(cls.from_int(d), prec)

    @classmethod
    def from_decimal(cls, x: Decimal) -> "BigDecimal":
        """Bridge from the standard library Decimal (finite values only); exact."""
        if not x.is_finite():
            raise DecimalDomainError("invalid Decimal for BigDecimal")
        sign, digits, exp = x.as_tuple()
        num = str_to_int("".join(map(str, digits))) if digits else 0
        return cls.from_components(-num if sign else num, exp)

    @classmethod
    def from_str(cls, s: str) -> "BigDecimal":
        """Parse a decimal literal, raising DecimalSyntaxError when malformed."""
        from .parse import decimal_from_str
        return decimal_from_str(s)

    # ------------- encoding -------------

    def expand(self, target_exp: int) -> "BigDecimal":
        """Same value re-encoded with exactly ``target_exp`` (must be <= exp)."""
        if target_exp > self.exp:
            raise InvariantViolation(
                f"expand: target exponent {target_exp} above current exponent {self.exp}"
            )
        if target_exp == self.exp:
            return self
        return BigDecimal(mul_exp10(self.num, self.exp - target_exp), target_exp)

    def reduce(self) -> "BigDecimal":
        """Move trailing mantissa zeros into the exponent (value unchanged).

        The encoding only changes when the stripped exponent lands in a
        different canonical block; otherwise ``self`` is returned.
        """
        p = trailing_zeros(self.num)
        if p <= 0:
            return self
        expp = self.exp + p
        if canonical_exponent(expp) == self.exp:
            return self
        if DEBUG_DECIMALS:
            _dbg(f"reduce: {count_digits(self.num)} digits, exp {self.exp}: strip {p} zeros -> exp {expp}")
        return BigDecimal.from_components(div_exp10(self.num, p), expp)

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.num == 0

    def is_pos(self) -> bool:
        return self.num > 0

    def is_neg(self) -> bool:
        return self.num < 0

    def sign(self) -> int:
        return (self.num > 0) - (self.num < 0)

    def is_int(self) -> bool:
        if self.exp >= 0:
            return True
        return self.num % ten_pow(-self.exp) == 0

    def sci_exponent(self) -> int:
        """Exponent of the value in scientific notation (d.ddd × 10^e)."""
        return count_digits(self.num) + self.exp - 1

    def __bool__(self) -> bool:
        return self.num != 0

    # ------------- comparisons -------------

    def _cmp_core(self, other: "BigDecimal") -> int:
        e = min(self.exp, other.exp)
        m1 = self.expand(e).num
        m2 = other.expand(e).num
        return (m1 > m2) - (m1 < m2)

    def _cmp_other(self, other) -> Optional[int]:
        """Three-way comparison with any supported operand, None for the rest."""
        if isinstance(other, Fraction):
            # Fractions such as 1/3 have no finite decimal form.
            f = self.to_fraction()
            return (f > other) - (f < other)
        o = _coerce_or_none(other, allow_float=True)
        if o is None:
            return None
        return self._cmp_core(o)

    def compare(self, other: "BigDecimal") -> int:
        """-1, 0 or 1 as self is below, equal to or above other."""
        c = self._cmp_other(other)
        if c is None:
            raise DecimalDomainError(f"cannot compare BigDecimal with {type(other).__name__}")
        return c

    def __eq__(self, other: object) -> bool:
        c = self._cmp_other(other)
        if c is None:
            return NotImplemented
        return c == 0

    def __lt__(self, other) -> bool:
        c = self._cmp_other(other)
        if c is None:
            return NotImplemented
        return c < 0

    def __le__(self, other) -> bool:
        c = self._cmp_other(other)
        if c is None:
            return NotImplemented
        return c <= 0

    def __gt__(self, other) -> bool:
        c = self._cmp_other(other)
        if c is None:
            return NotImplemented
        return c > 0

    def __ge__(self, other) -> bool:
        c = self._cmp_other(other)
        if c is None:
            return NotImplemented
        return c >= 0

    def __hash__(self) -> int:
        # Same scheme as int, Fraction and float, so equal numbers hash equal.
        if self.exp >= 0:
            exp_hash = pow(10, self.exp, _HASH_MODULUS)
        else:
            exp_hash = pow(_HASH_10INV, -self.exp, _HASH_MODULUS)
        h = abs(self.num) * exp_hash % _HASH_MODULUS
        h = h if self.num >= 0 else -h
        return -2 if h == -1 else h

    # ------------- arithmetic (exact) -------------

    def _add_sub(self, other: "BigDecimal", sign_other: int) -> "BigDecimal":
        # Align to the smaller exponent to avoid fractions.
        e = min(self.exp, other.exp)
        m1 = self.expand(e).num
        m2 = other.expand(e).num
        return BigDecimal.from_components(m1 + sign_other * m2, e)

    def __add__(self, other) -> "BigDecimal":
        o = _coerce_or_none(other)
        if o is None:
            return NotImplemented
        return self._add_sub(o, +1)

    def __radd__(self, other) -> "BigDecimal":
        return self.__add__(other)

    def __sub__(self, other) -> "BigDecimal":
        o = _coerce_or_none(other)
        if o is None:
            return NotImplemented
        return self._add_sub(o, -1)

    def __rsub__(self, other) -> "BigDecimal":
        o = _coerce_or_none(other)
        if o is None:
            return NotImplemented
        return o._add_sub(self, -1)

    def __neg__(self) -> "BigDecimal":
        return BigDecimal(-self.num, self.exp)

    def __pos__(self) -> "BigDecimal":
        return self

    def __abs__(self) -> "BigDecimal":
        return self if self.num >= 0 else -self

    def __mul__(self, other) -> "BigDecimal":
        o = _coerce_or_none(other)
        if o is None:
            return NotImplemented
        z = BigDecimal.from_components(self.num * o.num, self.exp + o.exp)
        # Keep mantissas small when fractional digits accumulate.
        return z.reduce() if z.exp < 0 else z

    def __rmul__(self, other) -> "BigDecimal":
        return self.__mul__(other)

    def pow(self, n: int) -> "BigDecimal":
        """Integer power; exact for n >= 0, bounded-precision division for n < 0."""
        if not isinstance(n, int) or isinstance(n, bool):
            raise DecimalDomainError(f"pow expects an int exponent, got {type(n).__name__}")
        m = abs(n)
        y = BigDecimal.from_components(self.num ** m, self.exp * m)
        if n >= 0:
            return y
        return ONE.div(y, POW_EXTRA_PRECISION + m)

    def __pow__(self, n, modulo=None) -> "BigDecimal":
        if modulo is not None or not isinstance(n, int) or isinstance(n, bool):
            return NotImplemented
        return self.pow(n)

    # ------------- arithmetic (bounded precision) -------------

    def div(self, other, min_prec: int = DEFAULT_DIV_PRECISION) -> "BigDecimal":
        """self / other carrying ``min_prec`` extra digits; last digit truncated."""
        y = _coerce(other)
        if y.is_zero():
            raise DivisionByZero(self)
        if self.is_zero():
            return ZERO
        e = self.exp - y.exp
        extra = max(0, count_digits(y.num) - count_digits(self.num)) + min_prec
        if DEBUG_DECIMALS:
            _dbg(f"div: {count_digits(self.num)} digits e{self.exp} / {count_digits(y.num)} digits e{y.exp}, extra={extra}")
        if extra > 0:
            q = trunc_div(mul_exp10(self.num, extra), y.num)
            return BigDecimal.from_components(q, e - extra).reduce()
        return BigDecimal.from_components(trunc_div(self.num, y.num), e).reduce()

    def __truediv__(self, other) -> "BigDecimal":
        o = _coerce_or_none(other)
        if o is None:
            return NotImplemented
        return self.div(o)

    def __rtruediv__(self, other) -> "BigDecimal":
        o = _coerce_or_none(other)
        if o is None:
            return NotImplemented
        return o.div(self)

    # ------------- rounding -------------

    def round_to_prec(self, prec: int = 0, mode: Union[Round, str] = Round.HALF_EVEN) -> "BigDecimal":
        """Round to at most ``prec`` digits after the decimal point.

        ``prec`` may be negative (round to tens, hundreds, ...). Values that
        already fit are returned unchanged.
        """
        mode = coerce_round(mode)
        if self.exp >= -prec:
            return self
        cx = self.reduce()
        p = -cx.exp - prec
        if p <= 0:
            return cx
        unit = ten_pow(p)
        q, r = divmod(cx.num, unit)  # floored: 0 <= r < unit
        if r != 0:
            q += round_increment(q, r, unit, mode)
        if DEBUG_DECIMALS:
            _dbg(f"round_to_prec: {count_digits(cx.num)} digits e{cx.exp} prec={prec} mode={mode.value} -> {count_digits(q)} digits")
        return BigDecimal.from_components(q, -prec)

    def round(self, mode: Union[Round, str] = Round.HALF_EVEN) -> "BigDecimal":
        """Round to an integral value."""
        return self.round_to_prec(0, mode)

    def floor(self) -> "BigDecimal":
        return self.round_to_prec(0, Round.FLOOR)

    def ceiling(self) -> "BigDecimal":
        return self.round_to_prec(0, Round.CEILING)

    def truncate(self) -> "BigDecimal":
        return self.round_to_prec(0, Round.TRUNCATE)

    def fraction(self) -> "BigDecimal":
        """Fractional part with the sign of self: x - truncate(x)."""
        return self - self.truncate()

    def ffraction(self) -> "BigDecimal":
        """Floored fractional part, always in [0, 1): x - floor(x)."""
        return self - self.floor()

    def to_int(self, mode: Union[Round, str] = Round.HALF_EVEN) -> int:
        """Round to an integer with ``mode``; never fails."""
        y = self.round_to_prec(0, mode)
        return mul_exp10(y.num, y.exp) if y.exp > 0 else y.num

    def __round__(self, ndigits=None):
        if ndigits is None:
            return self.to_int(Round.HALF_EVEN)
        return self.round_to_prec(ndigits, Round.HALF_EVEN)

    def __trunc__(self) -> int:
        return self.to_int(Round.TRUNCATE)

    def __floor__(self) -> int:
        return self.to_int(Round.FLOOR)

    def __ceil__(self) -> int:
        return self.to_int(Round.CEILING)

    def __int__(self) -> int:
        return self.to_int(Round.TRUNCATE)

    # ------------- conversions -------------

    def as_integer_ratio(self) -> Tuple[int, int]:
        """Exact (numerator, denominator) in lowest terms, denominator > 0."""
        f = self.to_fraction()
        return f.numerator, f.denominator

    def to_fraction(self) -> Fraction:
        if self.exp >= 0:
            return Fraction(mul_exp10(self.num, self.exp), 1)
        return Fraction(self.num, ten_pow(-self.exp))

    def to_float(self) -> float:
        """Nearest float (correctly rounded); OverflowError beyond float range."""
        if self.exp >= 0:
            return float(mul_exp10(self.num, self.exp))
        # int / int is correctly rounded by the interpreter.
        return self.num / ten_pow(-self.exp)

    def __float__(self) -> float:
        return self.to_float()

    def to_decimal(self) -> Decimal:
        """Exact standard library Decimal, independent of the decimal context."""
        sign = 1 if self.num < 0 else 0
        digits = tuple(int(c) for c in int_to_str(abs(self.num)))
        return Decimal((sign, digits, self.exp))

    # ------------- text -------------

    def __repr__(self) -> str:
        return f"BigDecimal(num={int_to_str(self.num)}, exp={self.exp})"

    def __str__(self) -> str:
        from .fmt import show
        return show(self)

    def __format__(self, spec: str) -> str:
        from .fmt import format_decimal
        return format_decimal(self, spec)


ZERO = BigDecimal(0, 0)
ONE = BigDecimal(1, 0)


def _coerce_or_none(x, allow_float: bool = False):
    """BigDecimal for supported operands, None for the rest."""
    if isinstance(x, BigDecimal):
        return x
    if isinstance(x, bool):
        return None
    if isinstance(x, int):
        return BigDecimal.from_int(x)
    if allow_float and isinstance(x, Decimal):
        return BigDecimal.from_decimal(x) if x.is_finite() else None
    if allow_float and isinstance(x, float):
        # Comparisons with nan/inf fall back to Python's default handling.
        if not math.isfinite(x):
            return None
        return BigDecimal.from_float(x)
    return None


def _coerce(x, allow_float: bool = False) -> BigDecimal:
    o = _coerce_or_none(x, allow_float=allow_float)
    if o is None:
        raise DecimalDomainError(f"unsupported operand type for BigDecimal: {type(x).__name__}")
    return o


def div(x: BigDecimal, y: BigDecimal, min_prec: int = DEFAULT_DIV_PRECISION) -> BigDecimal:
    """Module-level alias of BigDecimal.div."""
    return _coerce(x).div(y, min_prec)


def round_to_prec(x: BigDecimal, prec: int = 0, mode: Union[Round, str] = Round.HALF_EVEN) -> BigDecimal:
    """Module-level alias of BigDecimal.round_to_prec."""
    return _coerce(x).round_to_prec(prec, mode)


__all__ = [
    "BigDecimal",
    "ZERO",
    "ONE",
    "canonical_exponent",
    "div",
    "round_to_prec",
]
