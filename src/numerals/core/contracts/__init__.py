"""
Contract Validation Module

Validation of serialized numeral records against JSON Schema contracts.
"""

from .validators import (
    ContractValidator,
    RomanNumeralValidator,
    SchemaLoader,
    validate_roman_numeral,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RomanNumeralValidator",
    # Functions
    "validate_roman_numeral",
]
