"""
Roman Encoder — integer → Roman numeral text

Greedy reduction over a fixed symbol table that carries the six subtractive
compounds (CM, CD, XC, XL, IX, IV) as first-class entries next to the seven
base symbols. With the compounds present the greedy walk yields the
canonical, minimal-symbol-count form ("IX", never "VIIII").

INVARIANTS:
1. SYMBOL_TABLE is strictly decreasing by weight, no weight repeats
2. For every n in [ROMAN_MIN_VALUE, ROMAN_MAX_VALUE] the reduction ends at 0
3. Out-of-range input raises before any text is produced (all-or-nothing)
4. Pure and deterministic: same input, same output, no shared state
"""

import logging
from enum import Enum
from typing import Final

logger = logging.getLogger(__name__)


# =============================================================================
# RANGE PARAMETERS
# =============================================================================

# No symbol for zero or sign
ROMAN_MIN_VALUE: Final[int] = 1

# MMMCMXCIX; 4000 would need a fourth M or overline notation
ROMAN_MAX_VALUE: Final[int] = 3999


# =============================================================================
# SYMBOLS
# =============================================================================


class Numeral(str, Enum):
    """Seven classical base symbols."""

    I = "I"
    V = "V"
    X = "X"
    L = "L"
    C = "C"
    D = "D"
    M = "M"

    @property
    def weight(self) -> int:
        return _BASE_WEIGHTS[self.value]


_BASE_WEIGHTS: Final[dict[str, int]] = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

# (weight, symbol), strictly decreasing by weight
SYMBOL_TABLE: Final[tuple[tuple[int, str], ...]] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RomanNumeralError(ValueError):
    """Base class for values that cannot be rendered as Roman numerals."""

    def __init__(self, value: int, message: str):
        super().__init__(message)
        self.value = value


class InvalidNumeralInput(RomanNumeralError):
    """
    Value has no Roman representation in principle: zero or negative.

    Roman numerals carry no zero symbol and no sign.
    """
    pass


class NumeralOutOfRange(RomanNumeralError):
    """
    Value is a valid count but exceeds ROMAN_MAX_VALUE.

    Representing it would need non-standard notation (overline multipliers
    or four repeated M), so it is rejected rather than rendered ambiguously.
    """
    pass


# =============================================================================
# VALIDATION
# =============================================================================


def validate_roman_range(value: int) -> None:
    """
    Check that value can be rendered with the classical symbol set.

    Args:
        value: Integer to check

    Raises:
        TypeError: If value is not an int (bool included)
        InvalidNumeralInput: If value < ROMAN_MIN_VALUE
        NumeralOutOfRange: If value > ROMAN_MAX_VALUE
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"Roman numerals encode integers only, got {type(value).__name__}: {value!r}"
        )

    if value < ROMAN_MIN_VALUE:
        logger.debug("rejecting %d: below %d", value, ROMAN_MIN_VALUE)
        raise InvalidNumeralInput(
            value,
            f"{value} has no Roman numeral representation "
            f"(zero and negative values are not expressible, minimum is {ROMAN_MIN_VALUE})",
        )

    if value > ROMAN_MAX_VALUE:
        logger.debug("rejecting %d: above %d", value, ROMAN_MAX_VALUE)
        raise NumeralOutOfRange(
            value,
            f"{value} exceeds the largest classical Roman numeral "
            f"{ROMAN_MAX_VALUE} (supported range [{ROMAN_MIN_VALUE}, {ROMAN_MAX_VALUE}])",
        )


# =============================================================================
# ENCODER
# =============================================================================


def encode_roman(value: int) -> str:
    """
    Encode an integer as canonical uppercase Roman numeral text.

    Args:
        value: Integer in [ROMAN_MIN_VALUE, ROMAN_MAX_VALUE]

    Returns:
        Roman numeral string, e.g. "MCMXCIV" for 1994

    Raises:
        TypeError: If value is not an int
        InvalidNumeralInput: If value is zero or negative
        NumeralOutOfRange: If value is greater than ROMAN_MAX_VALUE

    Examples:
        >>> encode_roman(134)
        'CXXXIV'
        >>> encode_roman(3999)
        'MMMCMXCIX'
    """
    validate_roman_range(value)

    remaining = value
    parts: list[str] = []
    for weight, symbol in SYMBOL_TABLE:
        while remaining >= weight:
            parts.append(symbol)
            remaining -= weight

    return "".join(parts)
