"""
bigdecimal Core Constants
=========================

Tuning constants for canonicalisation, division and rendering. Everything
here is a plain integer; no module in core reads configuration at runtime.
"""

# NOTE: EXP_BLOCK only affects the encoding of a value, never the value itself.

# ---------------------------------------------------------------------------
# Representation
# ---------------------------------------------------------------------------

#: Canonical exponents are multiples of this block size. Operands inside one
#: block share an exponent, so add/compare rarely need to rescale.
EXP_BLOCK: int = 7


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------

#: Extra significant digits carried by an inexact division (div / `/`).
DEFAULT_DIV_PRECISION: int = 15

#: Extra digits added on top of |n| when pow() divides for a negative n.
POW_EXTRA_PRECISION: int = 3


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

#: Default precision for show(); negative means "at most 1000 digits, trimmed".
DEFAULT_SHOW_PRECISION: int = -1000

#: show() uses fixed notation when FIXED_MIN_EXPONENT < e < FIXED_MAX_EXPONENT
#: (the upper bound is the precision itself when that is non-negative).
FIXED_MIN_EXPONENT: int = -5
FIXED_MAX_EXPONENT: int = 15

#: int<->str conversions above this many digits are split recursively, which
#: keeps them under the interpreter's int_max_str_digits limit.
STR_CHUNK_DIGITS: int = 4000


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "EXP_BLOCK",
    "DEFAULT_DIV_PRECISION",
    "POW_EXTRA_PRECISION",
    "DEFAULT_SHOW_PRECISION",
    "FIXED_MIN_EXPONENT",
    "FIXED_MAX_EXPONENT",
    "STR_CHUNK_DIGITS",
]
