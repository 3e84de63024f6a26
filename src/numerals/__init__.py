"""
numerals — Roman numeral rendering for integers.

    >>> from numerals import RomanNumeral
    >>> f"{RomanNumeral.from_int(1994):X}"
    'MCMXCIV'
"""

from numerals.core.domain import ROMAN_FORMAT_SPEC, RomanNumeral
from numerals.core.math import (
    ROMAN_MAX_VALUE,
    ROMAN_MIN_VALUE,
    InvalidNumeralInput,
    NumeralOutOfRange,
    RomanNumeralError,
    encode_roman,
)

__version__ = "0.1.0"

__all__ = [
    "RomanNumeral",
    "ROMAN_FORMAT_SPEC",
    "ROMAN_MIN_VALUE",
    "ROMAN_MAX_VALUE",
    "RomanNumeralError",
    "InvalidNumeralInput",
    "NumeralOutOfRange",
    "encode_roman",
]
