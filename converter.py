"""Number parsing, formatting and fixed-width bit manipulation."""

from __future__ import annotations

import re
from itertools import takewhile
from typing import List

from errors import InvalidBitWidthError, UnknownBaseError
from wording import number_to_english, number_to_roman

MIN_BIT_WIDTH = 1
MAX_BIT_WIDTH = 64
DEFAULT_BIT_WIDTH = 32

DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'
NON_HEX_RE = re.compile(r'[^0-9a-fA-F]')


def parse_number(text: str, radix: int = 10) -> int:
    """Parse text leniently: junk is stripped and bad input gives 0."""
    cleaned = NON_HEX_RE.sub('', text).lower()
    valid = DIGITS[:radix]
    digits = ''.join(takewhile(lambda c: c in valid, cleaned))
    if not digits:
        return 0
    return int(digits, radix)


def format_number(value: int, base: str, width: int = DEFAULT_BIT_WIDTH) -> str:
    sign = '-' if value < 0 else ''
    value = abs(value)
    if base == 'dec':
        return f"{sign}{value}"
    if base == 'hex':
        digits = max(1, -(-width // 4))
        return f"{sign}0x{value:0{digits}X}"
    if base == 'bin':
        return f"{sign}{value:0{width}b}"
    if base == 'oct':
        digits = max(1, -(-width // 3))
        return f"{sign}0o{value:0{digits}o}"
    raise UnknownBaseError(base)


def integer_to_bit_array(value: int) -> List[int]:
    """MSB-first bits of abs(value); zero is [0]."""
    value = abs(value)
    if value == 0:
        return [0]
    return [int(b) for b in format(value, 'b')]


def bit_array_to_integer(bits: List[int]) -> int:
    result = 0
    for bit in bits:
        result = result * 2 + bit
    return result


def pad_bit_array(bits: List[int], width: int) -> List[int]:
    """Left-pad with zeros, then keep the rightmost width bits."""
    if len(bits) < width:
        return [0] * (width - len(bits)) + list(bits)
    return list(bits[len(bits) - width:])


class NumberConverter:
    def __init__(self, bit_width: int = DEFAULT_BIT_WIDTH) -> None:
        if isinstance(bit_width, bool) or not isinstance(bit_width, int):
            raise InvalidBitWidthError(bit_width)
        if not MIN_BIT_WIDTH <= bit_width <= MAX_BIT_WIDTH:
            raise InvalidBitWidthError(bit_width)
        self.bit_width = bit_width

    def __repr__(self) -> str:
        return f"NumberConverter(bit_width={self.bit_width})"

    @property
    def mask(self) -> int:
        return (1 << self.bit_width) - 1

    def bits(self, value: int) -> List[int]:
        """Padded bit array for value, negatives taken in two's complement."""
        return pad_bit_array(integer_to_bit_array(value & self.mask), self.bit_width)

    def parse_number(self, text: str, radix: int = 10) -> int:
        return parse_number(text, radix)

    def format_number(self, value: int, base: str) -> str:
        return format_number(value, base, self.bit_width)

    def invert(self, value: int) -> int:
        return bit_array_to_integer([bit ^ 1 for bit in self.bits(value)])

    def shift_right(self, value: int) -> int:
        bits = self.bits(value)
        return bit_array_to_integer([0] + bits[:-1])

    def shift_left(self, value: int) -> int:
        bits = self.bits(value)
        return bit_array_to_integer(bits[1:] + [0])

    def reverse_bits(self, value: int) -> int:
        return bit_array_to_integer(self.bits(value)[::-1])

    def number_to_english(self, value: int) -> str:
        return number_to_english(value)

    def number_to_roman(self, value: int) -> str:
        return number_to_roman(value)

    def representations(self, value: int) -> dict:
        return {
            "decimal": self.format_number(value, 'dec'),
            "hexadecimal": self.format_number(value, 'hex'),
            "binary": self.format_number(value, 'bin'),
            "octal": self.format_number(value, 'oct'),
            "english": self.number_to_english(value),
            "roman": self.number_to_roman(value),
        }
