"""
Core exception types for bigdecimal.core.

These are dependency-free and may be imported by all core modules.
"""

__all__ = [
    "DecimalError",
    "DivisionByZero",
    "DecimalDomainError",
    "DecimalSyntaxError",
    "InvariantViolation",
]


class DecimalError(Exception):
    """Base class for every error raised by bigdecimal."""
    pass


class DivisionByZero(DecimalError, ZeroDivisionError):
    """Raised when dividing by an exactly-zero decimal.

    Attributes
    ----------
    dividend : Any
        The numerator of the failed division, for context.
    """

    def __init__(self, dividend=None):
        super().__init__(f"division of {dividend} by zero" if dividend is not None else "division by zero")
        self.dividend = dividend


class DecimalDomainError(DecimalError, ValueError):
    """Raised when inputs fall outside the exact decimal domain (NaN, inf, non-integers)."""
    pass


class DecimalSyntaxError(DecimalError, ValueError):
    """Raised when text is not a decimal literal.

    Attributes
    ----------
    text : str
        The rejected input.
    """

    def __init__(self, text):
        super().__init__(f"invalid decimal literal: {text!r}")
        self.text = text


class InvariantViolation(DecimalError):
    """Raised when an internal precondition of the representation would break."""
    pass
