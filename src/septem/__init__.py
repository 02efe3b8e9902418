"""
septem — bidirectional conversion between integers and Roman numerals.

    >>> from septem import RomanNumeral
    >>> str(RomanNumeral.parse("dxxxii"))
    'DXXXII'
    >>> RomanNumeral.from_checked(7).to_lower_string()
    'vii'
"""

from septem._version import __version__
from septem.core.domain import (
    Digit,
    InvalidDigit,
    InvalidMagnitude,
    OutOfRange,
    RomanError,
    RomanNumeral,
)
from septem.core.math import decode, encode

__all__ = [
    "__version__",
    "Digit",
    "RomanNumeral",
    "RomanError",
    "InvalidDigit",
    "InvalidMagnitude",
    "OutOfRange",
    "encode",
    "decode",
]
