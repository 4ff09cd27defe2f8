"""Shared converter state: current number, input mode and bit width."""

from __future__ import annotations

import logging
import threading
from typing import Optional

from converter import DEFAULT_BIT_WIDTH, NumberConverter
from errors import InvalidModeError, UnknownOperationError

MODES = {'dec': 10, 'hex': 16, 'bin': 2}
DEFAULT_MODE = 'dec'

OPERATIONS = {
    'invert': NumberConverter.invert,
    'shift-left': NumberConverter.shift_left,
    'shift-right': NumberConverter.shift_right,
    'reverse-bits': NumberConverter.reverse_bits,
}


class ConverterState:
    """
    Single mutable record behind the API.

    All changes go through the set_* methods and apply(); handlers never
    assign the attributes directly. Handlers that mutate and then read back
    hold `lock` across both steps so the response matches their own change.
    """

    def __init__(self, bit_width: int = DEFAULT_BIT_WIDTH, mode: str = DEFAULT_MODE) -> None:
        if mode not in MODES:
            raise InvalidModeError(mode)
        self.lock = threading.RLock()
        self.converter = NumberConverter(bit_width)
        self.number = 0
        self.mode = mode

    @property
    def bit_width(self) -> int:
        return self.converter.bit_width

    def set_number(self, text: str, mode: Optional[str] = None) -> int:
        with self.lock:
            # An unrecognised mode here parses as decimal rather than failing.
            radix = MODES.get(mode or self.mode, 10)
            self.number = self.converter.parse_number(text, radix)
            logging.debug(f"Parsed {text!r} in base {radix} as {self.number}")
            return self.number

    def set_mode(self, mode: str) -> str:
        if mode not in MODES:
            raise InvalidModeError(mode)
        with self.lock:
            self.mode = mode
        logging.info(f"Input mode set to {mode}")
        return mode

    def set_bit_width(self, width: int) -> int:
        converter = NumberConverter(width)
        with self.lock:
            self.converter = converter
        logging.info(f"Bit width set to {width}")
        return converter.bit_width

    def apply(self, operation: str) -> int:
        transform = OPERATIONS.get(operation)
        if transform is None:
            raise UnknownOperationError(operation, list(OPERATIONS))
        with self.lock:
            before = self.number
            self.number = transform(self.converter, self.number)
            logging.debug(f"{operation}: {before} -> {self.number} ({self.bit_width} bits)")
            return self.number

    def representations(self) -> dict:
        with self.lock:
            return self.converter.representations(self.number)

    def snapshot(self) -> dict:
        with self.lock:
            return {
                "number": self.number,
                "mode": self.mode,
                "bitWidth": self.bit_width,
                "representations": self.representations(),
            }
