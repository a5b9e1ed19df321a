"""Conversion between Arabic numbers and Roman numerals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

MIN_ROMAN = 1
MAX_ROMAN = 3999


@dataclass(frozen=True)
class RomanNumeral:
    """A numeral symbol and the value it stands for."""

    value: int
    symbol: str


ALL_ROMAN_NUMERALS: Tuple[RomanNumeral, ...] = (
    RomanNumeral(1000, "M"),
    RomanNumeral(900, "CM"),
    RomanNumeral(500, "D"),
    RomanNumeral(400, "CD"),
    RomanNumeral(100, "C"),
    RomanNumeral(90, "XC"),
    RomanNumeral(50, "L"),
    RomanNumeral(40, "XL"),
    RomanNumeral(10, "X"),
    RomanNumeral(9, "IX"),
    RomanNumeral(5, "V"),
    RomanNumeral(4, "IV"),
    RomanNumeral(1, "I"),
)


def _to_symbols(arabic: int) -> str:
    parts = []
    for numeral in ALL_ROMAN_NUMERALS:
        count, arabic = divmod(arabic, numeral.value)
        parts.append(numeral.symbol * count)
    return "".join(parts)


@dataclass(frozen=True)
class Roman:
    """A number in the range 1-3999 that renders as a Roman numeral."""

    value: int

    def __post_init__(self) -> None:
        if not MIN_ROMAN <= self.value <= MAX_ROMAN:
            raise ValueError(
                "cannot create a roman numeral for numbers outside the range 1-3999"
            )

    def __str__(self) -> str:
        return _to_symbols(self.value)

    def __int__(self) -> int:
        return self.value


def convert_to_roman(arabic: int) -> str:
    """Return the Roman numeral for ``arabic``; zero gives an empty string."""
    if arabic < 0:
        raise ValueError(f"value {arabic} is negative, must be at least 0")
    if arabic > MAX_ROMAN:
        raise ValueError(f"value {arabic} is too large, must be less than 4000")
    return _to_symbols(arabic)


def convert_to_arabic(roman: str) -> int:
    """Return the value of the Roman numeral ``roman``."""
    arabic = 0
    for numeral in ALL_ROMAN_NUMERALS:
        while roman.startswith(numeral.symbol):
            arabic += numeral.value
            roman = roman[len(numeral.symbol):]
    return arabic