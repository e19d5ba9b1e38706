# Top-level API for bigdecimal.
"""
Top-level API for bigdecimal.

Exact arbitrary-precision decimal arithmetic:
  - BigDecimal: immutable value ``num * 10**exp``
  - Round: the nine rounding modes used by round_to_prec / to_int
  - decimal / parse_decimal / show: construction and text I/O

Everything here is re-exported from ``bigdecimal.core``; lower-level helpers
(canonicalisation, digit arithmetic) stay importable from there.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .core import (
    BigDecimal,
    ZERO,
    ONE,
    Round,
    decimal,
    parse_decimal,
    show,
    show_fixed,
    show_exp,
    div,
    round_to_prec,
    compare,
    min_of,
    max_of,
    sum_of,
    DecimalError,
    DivisionByZero,
    DecimalDomainError,
    DecimalSyntaxError,
)

__all__ = [
    # value type
    "BigDecimal",
    "ZERO",
    "ONE",
    "Round",
    # construction and text
    "decimal",
    "parse_decimal",
    "show",
    "show_fixed",
    "show_exp",
    # operations
    "div",
    "round_to_prec",
    "compare",
    "min_of",
    "max_of",
    "sum_of",
    # exceptions
    "DecimalError",
    "DivisionByZero",
    "DecimalDomainError",
    "DecimalSyntaxError",
]
