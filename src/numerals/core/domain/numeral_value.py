"""
RomanNumeral — value object for Roman numeral rendering

Immutable Pydantic model holding one integer. Construction only captures the
value: out-of-range integers can be held, they fail when rendered. Text is
computed on every formatting request and never cached on the instance.

Formatting:
    f"{RomanNumeral.from_int(1994):X}"  ->  "MCMXCIV"
    f"{RomanNumeral.from_int(7):03d}"   ->  "007"
"""

from typing import Any, Final

from pydantic import BaseModel, Field

from numerals.core.math.roman_encoder import encode_roman


# Format spec selecting uppercase Roman text
ROMAN_FORMAT_SPEC: Final[str] = "X"


# =============================================================================
# ROMAN NUMERAL MODEL
# =============================================================================


class RomanNumeral(BaseModel):
    """
    Integer wrapper rendered as Roman numeral text on demand.

    Immutable model (frozen=True); safe to share between threads without
    synchronisation. Strict int validation: "5", 5.0 and True are rejected,
    any int (including 0, negatives and values above 3999) is accepted.
    """

    value: int = Field(..., strict=True, description="Integer to render")

    model_config = {"frozen": True}

    @classmethod
    def from_int(cls, value: int) -> "RomanNumeral":
        """
        Conversion entry point. Never fails for an int.

        Args:
            value: Integer to wrap

        Returns:
            RomanNumeral holding value
        """
        return cls(value=value)

    def to_roman_text(self) -> str:
        """
        Render the held integer as uppercase Roman numeral text.

        Returns:
            Canonical Roman numeral string

        Raises:
            InvalidNumeralInput: If the held value is zero or negative
            NumeralOutOfRange: If the held value is above 3999
        """
        return encode_roman(self.value)

    def to_contract(self) -> dict[str, Any]:
        """Interop record matching the roman_numeral JSON schema."""
        return {"value": self.value, "numeral": self.to_roman_text()}

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", ROMAN_FORMAT_SPEC):
            return self.to_roman_text()
        # Anything else formats the underlying integer
        return format(self.value, format_spec)

    def __str__(self) -> str:
        return self.to_roman_text()

    def __int__(self) -> int:
        return self.value
