"""
Domain models and value objects.
"""

from numerals.core.domain.numeral_value import ROMAN_FORMAT_SPEC, RomanNumeral

__all__ = [
    "RomanNumeral",
    "ROMAN_FORMAT_SPEC",
]
