"""
Decimal-digit helpers over Python's arbitrary-precision int.

These are the only places where core code counts, strips or shifts decimal
digits of a mantissa. All helpers are exact and never overflow.
"""

from __future__ import annotations

from .constants import STR_CHUNK_DIGITS

# log10(2), used for a lower estimate of the digit count from bit_length().
_LOG10_2 = 0.30102999566398120


def ten_pow(n: int) -> int:
    """Return 10**n for n >= 0 (internal helper)."""
    if n < 0:
        raise ValueError("ten_pow expects non-negative exponent")
    return 10 ** n


def count_digits(i: int) -> int:
    """Number of decimal digits of |i|; zero has one digit."""
    i = abs(i)
    if i.bit_length() < 64:
        return len(str(i))
    n = int((i.bit_length() - 1) * _LOG10_2)
    p = ten_pow(n)
    # The estimate is off by at most one in either direction.
    while p > i:
        n -= 1
        p //= 10
    while p * 10 <= i:
        n += 1
        p *= 10
    return n + 1


def trailing_zeros(i: int) -> int:
    """Number of trailing decimal zeros of i (0 for i == 0)."""
    if i == 0:
        return 0
    i = abs(i)
    n = 0
    # Strip in blocks of 8 first; mantissas often carry long zero tails.
    while i % 100_000_000 == 0:
        i //= 100_000_000
        n += 8
    while i % 10 == 0:
        i //= 10
        n += 1
    return n


def mul_exp10(i: int, n: int) -> int:
    """i * 10**n for n >= 0."""
    if n == 0:
        return i
    return i * ten_pow(n)


def trunc_div(a: int, b: int) -> int:
    """Integer division truncating toward zero (Python's // floors)."""
    if b == 0:
        raise ZeroDivisionError("trunc_div by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def div_exp10(i: int, n: int) -> int:
    """i / 10**n truncated toward zero, for n >= 0."""
    if n == 0:
        return i
    return trunc_div(i, ten_pow(n))


def int_to_str(i: int) -> str:
    """Decimal digits of i without the int_max_str_digits limit."""
    if i < 0:
        return "-" + int_to_str(-i)
    if i.bit_length() < STR_CHUNK_DIGITS * 3:
        return str(i)
    k = count_digits(i) // 2
    hi, lo = divmod(i, ten_pow(k))
    return int_to_str(hi) + int_to_str(lo).rjust(k, "0")


def str_to_int(s: str) -> int:
    """Parse a run of ASCII digits without the int_max_str_digits limit."""
    if len(s) <= STR_CHUNK_DIGITS:
        return int(s)
    k = len(s) // 2
    return str_to_int(s[:-k]) * ten_pow(k) + str_to_int(s[-k:])


__all__ = [
    "ten_pow",
    "count_digits",
    "trailing_zeros",
    "mul_exp10",
    "trunc_div",
    "div_exp10",
    "int_to_str",
    "str_to_int",
]
