"""
Tests for the Roman Encoder

Checks:
1. Literal boundary scenarios (I, IV, IX, XL, XC, CXXXIV, MCMXCIV, MMMCMXCIX)
2. Symbol table invariants (ordering, uniqueness, contents)
3. Round-trip through table weights for the whole supported range
4. Canonical form (no IIII, compounds never absorbable)
5. Injectivity over [1, 3999]
6. Rejection of zero, negatives, values >= 4000 and non-int input
"""

import logging
import re

import pytest

from numerals.core.math import (
    ROMAN_MAX_VALUE,
    ROMAN_MIN_VALUE,
    SYMBOL_TABLE,
    InvalidNumeralInput,
    Numeral,
    NumeralOutOfRange,
    RomanNumeralError,
    encode_roman,
    validate_roman_range,
)

CANONICAL_RE = re.compile(r"^M{0,3}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})$")

SUPPORTED_RANGE = range(ROMAN_MIN_VALUE, ROMAN_MAX_VALUE + 1)


def _table_weight(text: str) -> int:
    """Sum table weights of text, consuming symbols in table order."""
    total = 0
    pos = 0
    for weight, symbol in SYMBOL_TABLE:
        while text.startswith(symbol, pos):
            total += weight
            pos += len(symbol)
    assert pos == len(text), f"unconsumed tail in {text!r}"
    return total


class TestLiteralScenarios:
    """Known encodings"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1, "I"),
            (4, "IV"),
            (9, "IX"),
            (40, "XL"),
            (90, "XC"),
            (134, "CXXXIV"),
            (1994, "MCMXCIV"),
            (3999, "MMMCMXCIX"),
        ],
    )
    def test_boundary_scenarios(self, value: int, expected: str) -> None:
        assert encode_roman(value) == expected

    def test_every_table_weight_encodes_to_its_symbol(self) -> None:
        """Each table weight on its own yields exactly its symbol"""
        for weight, symbol in SYMBOL_TABLE:
            assert encode_roman(weight) == symbol

    def test_longest_numeral(self) -> None:
        assert encode_roman(3888) == "MMMDCCCLXXXVIII"


class TestSymbolTable:
    """Symbol table invariants"""

    def test_strictly_decreasing(self) -> None:
        weights = [weight for weight, _ in SYMBOL_TABLE]
        assert all(a > b for a, b in zip(weights, weights[1:]))

    def test_no_duplicate_weights_or_symbols(self) -> None:
        assert len({w for w, _ in SYMBOL_TABLE}) == len(SYMBOL_TABLE)
        assert len({s for _, s in SYMBOL_TABLE}) == len(SYMBOL_TABLE)

    def test_contains_base_and_subtractive_forms(self) -> None:
        symbols = {s for _, s in SYMBOL_TABLE}
        assert {n.value for n in Numeral} <= symbols
        assert {"CM", "CD", "XC", "XL", "IX", "IV"} <= symbols
        assert len(SYMBOL_TABLE) == 13

    def test_base_weights_match_table(self) -> None:
        table = dict((s, w) for w, s in SYMBOL_TABLE)
        for numeral in Numeral:
            assert table[numeral.value] == numeral.weight

    def test_compound_weight_is_difference_of_its_symbols(self) -> None:
        for weight, symbol in SYMBOL_TABLE:
            if len(symbol) == 2:
                smaller, larger = Numeral(symbol[0]), Numeral(symbol[1])
                assert weight == larger.weight - smaller.weight


class TestSupportedRange:
    """Properties over the whole range [1, 3999]"""

    def test_roundtrip_via_table_weights(self) -> None:
        """Summing symbol weights gives back the input"""
        for n in SUPPORTED_RANGE:
            assert _table_weight(encode_roman(n)) == n

    def test_injective(self) -> None:
        encodings = [encode_roman(n) for n in SUPPORTED_RANGE]
        assert len(set(encodings)) == len(encodings)

    def test_canonical_form(self) -> None:
        for n in SUPPORTED_RANGE:
            text = encode_roman(n)
            assert CANONICAL_RE.match(text), text
            for numeral in Numeral:
                assert numeral.value * 4 not in text

    def test_no_absorbable_subtractive_pair(self) -> None:
        """VIV, IXI, XCX style sequences never appear"""
        for n in SUPPORTED_RANGE:
            text = encode_roman(n)
            assert "VIV" not in text
            assert "LXL" not in text
            assert "DCD" not in text
            assert "IXI" not in text
            assert "XCX" not in text
            assert "CMC" not in text

    def test_only_uppercase_symbols(self) -> None:
        allowed = set("IVXLCDM")
        for n in SUPPORTED_RANGE:
            assert set(encode_roman(n)) <= allowed

    def test_deterministic(self) -> None:
        assert encode_roman(2024) == encode_roman(2024) == "MMXXIV"


class TestRejection:
    """Values outside [1, 3999]"""

    def test_zero_is_invalid_input(self) -> None:
        with pytest.raises(InvalidNumeralInput, match="no Roman numeral representation"):
            encode_roman(0)

    def test_negative_is_invalid_input(self) -> None:
        with pytest.raises(InvalidNumeralInput) as exc_info:
            encode_roman(-5)
        assert exc_info.value.value == -5

    def test_4000_is_out_of_range(self) -> None:
        with pytest.raises(NumeralOutOfRange, match="3999"):
            encode_roman(4000)

    def test_huge_value_is_out_of_range(self) -> None:
        with pytest.raises(NumeralOutOfRange):
            encode_roman(10**30)

    def test_errors_are_value_errors(self) -> None:
        assert issubclass(InvalidNumeralInput, RomanNumeralError)
        assert issubclass(NumeralOutOfRange, RomanNumeralError)
        assert issubclass(RomanNumeralError, ValueError)

    def test_kinds_are_distinct(self) -> None:
        assert not issubclass(InvalidNumeralInput, NumeralOutOfRange)
        assert not issubclass(NumeralOutOfRange, InvalidNumeralInput)

    @pytest.mark.parametrize("bad", [1.0, "5", True, None])
    def test_non_int_rejected(self, bad) -> None:
        with pytest.raises(TypeError, match="integers only"):
            encode_roman(bad)

    def test_validate_range_accepts_bounds(self) -> None:
        validate_roman_range(ROMAN_MIN_VALUE)
        validate_roman_range(ROMAN_MAX_VALUE)

    def test_rejection_logged_at_debug(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="numerals.core.math.roman_encoder"):
            with pytest.raises(NumeralOutOfRange):
                encode_roman(5000)
        assert "rejecting 5000" in caplog.text
