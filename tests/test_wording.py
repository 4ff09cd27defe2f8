"""Tests for English and Roman numeral rendering."""

import pytest

from wording import ROMAN_OUT_OF_RANGE, number_to_english, number_to_roman


class TestEnglish:
    """Test number_to_english."""

    @pytest.mark.parametrize("n, words", [
        (0, "zero"),
        (7, "seven"),
        (13, "thirteen"),
        (20, "twenty"),
        (42, "forty-two"),
        (100, "one hundred"),
        (123, "one hundred twenty-three"),
        (1000, "one thousand"),
        (1001, "one thousand one"),
        (1000000, "one million"),
        (2500019, "two million five hundred thousand nineteen"),
    ])
    def test_small_and_medium(self, n, words):
        assert number_to_english(n) == words

    def test_negative(self):
        assert number_to_english(-15) == "negative fifteen"

    def test_trillion(self):
        assert number_to_english(3 * 10 ** 12) == "three trillion"

    def test_largest_64_bit_value(self):
        words = number_to_english(2 ** 64 - 1)
        assert words.startswith("eighteen quintillion four hundred forty-six quadrillion")
        assert words.endswith("six hundred fifteen")

    def test_beyond_scale_table(self):
        assert number_to_english(10 ** 36) == "one thousand decillion"
        assert number_to_english(10 ** 36 + 2) == "one thousand decillion two"


class TestRoman:
    """Test number_to_roman."""

    @pytest.mark.parametrize("n, numeral", [
        (1, "I"),
        (4, "IV"),
        (9, "IX"),
        (14, "XIV"),
        (40, "XL"),
        (1994, "MCMXCIV"),
        (3999, "MMMCMXCIX"),
    ])
    def test_in_range(self, n, numeral):
        assert number_to_roman(n) == numeral

    @pytest.mark.parametrize("n", [0, -1, 4000, 2 ** 32])
    def test_out_of_range(self, n):
        assert number_to_roman(n) == ROMAN_OUT_OF_RANGE
        assert number_to_roman(n) == "Number out of range (1-3999)"
