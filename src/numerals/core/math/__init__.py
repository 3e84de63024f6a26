"""
Core math modules: numeral encoding algorithms.
"""

from numerals.core.math.roman_encoder import (
    # Range constants
    ROMAN_MAX_VALUE,
    ROMAN_MIN_VALUE,
    # Symbols
    SYMBOL_TABLE,
    Numeral,
    # Exceptions
    InvalidNumeralInput,
    NumeralOutOfRange,
    RomanNumeralError,
    # Functions
    encode_roman,
    validate_roman_range,
)

__all__ = [
    # Range constants
    "ROMAN_MIN_VALUE",
    "ROMAN_MAX_VALUE",
    # Symbols
    "SYMBOL_TABLE",
    "Numeral",
    # Exceptions
    "RomanNumeralError",
    "InvalidNumeralInput",
    "NumeralOutOfRange",
    # Functions
    "encode_roman",
    "validate_roman_range",
]
