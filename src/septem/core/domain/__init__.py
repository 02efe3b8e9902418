"""
Domain models and value objects.

Contains Digit, RomanNumeral and the conversion error taxonomy.
"""

from septem.core.domain.digit import Digit
from septem.core.domain.errors import (
    InvalidDigit,
    InvalidMagnitude,
    OutOfRange,
    RomanError,
)
from septem.core.domain.roman import (
    MAX_CLASSICAL_VALUE,
    MIN_CLASSICAL_VALUE,
    RomanNumeral,
)

__all__ = [
    # Digit
    "Digit",
    # Errors
    "RomanError",
    "InvalidDigit",
    "InvalidMagnitude",
    "OutOfRange",
    # RomanNumeral
    "RomanNumeral",
    "MIN_CLASSICAL_VALUE",
    "MAX_CLASSICAL_VALUE",
]
