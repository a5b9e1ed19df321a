import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tddkata.roman import Roman, convert_to_arabic, convert_to_roman

CASES = [
    (1, "I"),
    (2, "II"),
    (3, "III"),
    (4, "IV"),
    (5, "V"),
    (6, "VI"),
    (7, "VII"),
    (8, "VIII"),
    (9, "IX"),
    (10, "X"),
    (14, "XIV"),
    (18, "XVIII"),
    (20, "XX"),
    (39, "XXXIX"),
    (40, "XL"),
    (47, "XLVII"),
    (49, "XLIX"),
    (50, "L"),
    (100, "C"),
    (90, "XC"),
    (400, "CD"),
    (500, "D"),
    (900, "CM"),
    (1000, "M"),
    (1984, "MCMLXXXIV"),
    (3999, "MMMCMXCIX"),
    (2014, "MMXIV"),
    (1006, "MVI"),
    (798, "DCCXCVIII"),
]


@pytest.mark.parametrize("arabic,roman", CASES)
def test_roman_numerals(arabic, roman):
    assert str(Roman(arabic)) == roman


@pytest.mark.parametrize("arabic,roman", CASES)
def test_converting_to_arabic(arabic, roman):
    assert convert_to_arabic(str(Roman(arabic))) == arabic


@pytest.mark.parametrize("arabic,roman", CASES)
def test_convert_to_roman(arabic, roman):
    assert convert_to_roman(arabic) == roman


@settings(max_examples=1000)
@given(st.integers(min_value=1, max_value=3999))
def test_properties_of_conversion(arabic):
    assert convert_to_arabic(str(Roman(arabic))) == arabic


@pytest.mark.parametrize("value", [0, 4000, -1])
def test_roman_rejects_out_of_range(value):
    with pytest.raises(ValueError, match="range 1-3999"):
        Roman(value)


def test_roman_int():
    assert int(Roman(1984)) == 1984


def test_convert_to_roman_too_large():
    with pytest.raises(ValueError, match="too large"):
        convert_to_roman(4000)


def test_convert_to_roman_zero_is_empty():
    assert convert_to_roman(0) == ""


def test_convert_to_arabic_empty():
    assert convert_to_arabic("") == 0