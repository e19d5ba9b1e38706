"""
Parsing decimal literals, and the ``decimal()`` convenience factory.

Grammar (no surrounding whitespace, ASCII digits only):

    [sign] digits ['.' digits] [('e' | 'E') [sign] digits]

``parse_decimal`` never raises on bad text; it returns None. Callers that
prefer an exception use ``decimal_from_str`` (or ``BigDecimal.from_str``).
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Optional, Union

from .decimals import BigDecimal
from .exc import DecimalDomainError, DecimalSyntaxError
from .intmath import str_to_int

_DECIMAL_LITERAL = re.compile(
    r"(?P<sign>[+-]?)"
    r"(?P<whole>[0-9]+)"
    r"(?:\.(?P<frac>[0-9]+))?"
    r"(?:[eE](?P<exp>[+-]?[0-9]+))?"
)


def parse_decimal(s: str) -> Optional[BigDecimal]:
    """Parse a decimal literal; None when ``s`` is not one."""
    if not isinstance(s, str):
        return None
    m = _DECIMAL_LITERAL.fullmatch(s)
    if m is None:
        return None
    frac = m.group("frac") or ""
    num = str_to_int(m.group("whole") + frac)
    if m.group("sign") == "-":
        num = -num
    exp_txt = m.group("exp")
    exp = 0
    if exp_txt is not None:
        exp = str_to_int(exp_txt.lstrip("+-"))
        if exp_txt.startswith("-"):
            exp = -exp
    return BigDecimal.from_components(num, exp - len(frac))


def decimal_from_str(s: str) -> BigDecimal:
    """Parse a decimal literal, raising DecimalSyntaxError when malformed."""
    d = parse_decimal(s)
    if d is None:
        raise DecimalSyntaxError(s)
    return d


def decimal(value: Union[BigDecimal, int, float, str, Decimal], exp: int = 0) -> BigDecimal:
    """Build a BigDecimal from any supported source.

    - int: ``value * 10**exp``
    - float: exact binary value (``exp`` must be 0)
    - str: decimal literal (``exp`` must be 0)
    - decimal.Decimal: exact bridge (``exp`` must be 0)
    """
    if isinstance(value, bool):
        raise DecimalDomainError("bool is not a decimal value")
    if isinstance(value, int):
        return BigDecimal.from_components(value, exp)
    if exp != 0:
        raise DecimalDomainError("exp is only supported for int values")
    if isinstance(value, BigDecimal):
        return value
    if isinstance(value, float):
        return BigDecimal.from_float(value)
    if isinstance(value, str):
        return decimal_from_str(value)
    if isinstance(value, Decimal):
        return BigDecimal.from_decimal(value)
    raise DecimalDomainError(f"cannot build BigDecimal from {type(value).__name__}")


__all__ = [
    "parse_decimal",
    "decimal_from_str",
    "decimal",
]
