"""
Rendering of BigDecimal values as fixed-point or scientific text.

Precision convention for every function here:
- negative ``prec``: at most ``|prec|`` digits, trailing zeros trimmed
- non-negative ``prec``: exactly ``prec`` digits, zero-padded

Output is always parseable by ``parse_decimal``, e.g.:
  show(BigDecimal.from_components(123, -6))  -> '0.000123'
  show(BigDecimal.from_components(123, 18))  -> '1.23e+20'
  show_fixed(BigDecimal.from_int(5), 2)      -> '5.00'
"""

from __future__ import annotations

import re

from .constants import DEFAULT_SHOW_PRECISION, FIXED_MIN_EXPONENT, FIXED_MAX_EXPONENT
from .decimals import BigDecimal
from .intmath import count_digits, int_to_str, ten_pow

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


def _show_frac(frac: str, prec: int) -> str:
    """Trim trailing zeros, re-pad to ``prec`` if non-negative, add the point."""
    frac_trim = frac.rstrip("0")
    frac_full = frac_trim.ljust(prec, "0") if prec >= 0 else frac_trim
    return "." + frac_full if frac_full else ""


def show_fixed(d: BigDecimal, prec: int = DEFAULT_SHOW_PRECISION) -> str:
    """Fixed-point notation, rounded half-even to ``|prec|`` fractional digits."""
    x = d.round_to_prec(abs(prec))
    if x.exp >= 0:
        return int_to_str(x.num) + "0" * x.exp + ("." + "0" * prec if prec > 0 else "")
    digits = -x.exp
    sign = "-" if x.num < 0 else ""
    man, frac = divmod(abs(x.num), ten_pow(digits))
    if DEBUG_FMT:
        _dbg(f"show_fixed: {count_digits(man)} integer digits, {digits} fraction digits, prec={prec}")
    return sign + int_to_str(man) + _show_frac(int_to_str(frac).rjust(digits, "0"), prec)


def show_exp(d: BigDecimal, prec: int = DEFAULT_SHOW_PRECISION) -> str:
    """Scientific notation ``d.ddd[e±N]`` with ``|prec|`` digits after the point."""
    x = d.round_to_prec(abs(prec) - d.sci_exponent())
    s = int_to_str(abs(x.num))
    exp = x.exp + len(s) - 1
    sign = "-" if x.num < 0 else ""
    if DEBUG_FMT:
        _dbg(f"show_exp: digits={s[:20]}..., exp={exp}, prec={prec}")
    suffix = "" if exp == 0 else "e" + ("+" if exp > 0 else "-") + str(abs(exp))
    return sign + s[0] + _show_frac(s[1:], prec) + suffix


def show(d: BigDecimal, prec: int = DEFAULT_SHOW_PRECISION) -> str:
    """Fixed notation for moderate exponents, scientific otherwise."""
    e = d.sci_exponent()
    upper = FIXED_MAX_EXPONENT if prec < 0 else prec
    if FIXED_MIN_EXPONENT < e < upper:
        return show_fixed(d, prec)
    return show_exp(d, prec)


_FORMAT_SPEC = re.compile(r"(?:\.(\d+))?([fFeE]?)")


def format_decimal(d: BigDecimal, spec: str) -> str:
    """``format()`` support: '', '.Nf', '.Ne', 'f', 'e' (upper-case variants too)."""
    m = _FORMAT_SPEC.fullmatch(spec)
    if m is None:
        raise ValueError(f"invalid format specifier {spec!r} for BigDecimal")
    digits, kind = m.groups()
    prec = int(digits) if digits is not None else DEFAULT_SHOW_PRECISION
    if kind in ("f", "F"):
        return show_fixed(d, prec)
    if kind == "e":
        return show_exp(d, prec)
    if kind == "E":
        return show_exp(d, prec).upper()
    return show(d, prec)


__all__ = [
    "show",
    "show_fixed",
    "show_exp",
    "format_decimal",
]
