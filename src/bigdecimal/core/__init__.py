"""
bigdecimal Core
===============

Unified exports for the exact decimal value type and its helpers.
All arithmetic is performed on integer mantissas with power-of-ten exponents;
the standard library Decimal appears only in I/O bridges.
"""

# NOTE:
#   Values are immutable and every operation returns a new BigDecimal.
#   Only round_to_prec and its derivatives, div, negative pow and
#   from_float(max_prec >= 0) can lose digits; everything else is exact.

# Constants
from .constants import (
    EXP_BLOCK,
    DEFAULT_DIV_PRECISION,
    POW_EXTRA_PRECISION,
    DEFAULT_SHOW_PRECISION,
    FIXED_MIN_EXPONENT,
    FIXED_MAX_EXPONENT,
)

# Value type and representation helpers
from .decimals import (
    BigDecimal,
    ZERO,
    ONE,
    canonical_exponent,
    div,
    round_to_prec,
)

# Rounding modes
from .rounding import (
    Round,
    STD_ROUNDING,
    round_increment,
)

# Ordering and aggregation
from .ordering import (
    compare,
    min_of,
    max_of,
    sum_of,
)

# Text I/O
from .fmt import (
    show,
    show_fixed,
    show_exp,
)
from .parse import (
    parse_decimal,
    decimal_from_str,
    decimal,
)

# Core exceptions
from .exc import (
    DecimalError,
    DivisionByZero,
    DecimalDomainError,
    DecimalSyntaxError,
    InvariantViolation,
)

__all__ = [
    # constants
    "EXP_BLOCK",
    "DEFAULT_DIV_PRECISION",
    "POW_EXTRA_PRECISION",
    "DEFAULT_SHOW_PRECISION",
    "FIXED_MIN_EXPONENT",
    "FIXED_MAX_EXPONENT",
    # values
    "BigDecimal",
    "ZERO",
    "ONE",
    "canonical_exponent",
    "div",
    "round_to_prec",
    # rounding
    "Round",
    "STD_ROUNDING",
    "round_increment",
    # ordering
    "compare",
    "min_of",
    "max_of",
    "sum_of",
    # text
    "show",
    "show_fixed",
    "show_exp",
    "parse_decimal",
    "decimal_from_str",
    "decimal",
    # exceptions
    "DecimalError",
    "DivisionByZero",
    "DecimalDomainError",
    "DecimalSyntaxError",
    "InvariantViolation",
]
