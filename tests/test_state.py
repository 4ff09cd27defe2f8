"""Tests for the shared converter state."""

import threading

import pytest

from errors import InvalidBitWidthError, InvalidModeError, UnknownOperationError
from state import OPERATIONS, ConverterState


@pytest.fixture
def state():
    return ConverterState(bit_width=8)


class TestConverterState:
    """Test controlled mutation of number, mode and bit width."""

    def test_defaults(self):
        s = ConverterState()
        assert s.number == 0
        assert s.mode == "dec"
        assert s.bit_width == 32

    def test_rejects_bad_initial_mode(self):
        with pytest.raises(InvalidModeError):
            ConverterState(mode="oct")

    def test_set_number_uses_current_mode(self, state):
        state.set_mode("hex")
        assert state.set_number("ff") == 255
        assert state.number == 255

    def test_set_number_explicit_mode_does_not_change_mode(self, state):
        assert state.set_number("101", "bin") == 5
        assert state.mode == "dec"

    def test_set_number_unknown_mode_parses_decimal(self, state):
        state.set_mode("bin")
        assert state.set_number("19", "octal") == 19

    def test_set_mode(self, state):
        assert state.set_mode("bin") == "bin"
        with pytest.raises(InvalidModeError):
            state.set_mode("base3")
        assert state.mode == "bin"

    def test_set_bit_width_keeps_number(self, state):
        state.set_number("300")
        assert state.set_bit_width(16) == 16
        assert state.number == 300
        assert state.converter.bit_width == 16

    def test_bad_bit_width_leaves_state_untouched(self, state):
        with pytest.raises(InvalidBitWidthError):
            state.set_bit_width(65)
        assert state.bit_width == 8

    def test_apply_each_operation(self, state):
        state.set_number("1")
        assert state.apply("shift-left") == 2
        assert state.apply("shift-right") == 1
        assert state.apply("reverse-bits") == 128
        assert state.apply("invert") == 127
        assert state.number == 127

    def test_apply_unknown_operation(self, state):
        with pytest.raises(UnknownOperationError) as exc_info:
            state.apply("rotate")
        assert exc_info.value.valid == list(OPERATIONS)

    def test_snapshot(self, state):
        state.set_number("10")
        snap = state.snapshot()
        assert snap["number"] == 10
        assert snap["mode"] == "dec"
        assert snap["bitWidth"] == 8
        assert snap["representations"]["binary"] == "00001010"
        assert snap["representations"]["roman"] == "X"

    def test_concurrent_apply_keeps_every_update(self):
        s = ConverterState(bit_width=64)
        s.set_number("1")
        barrier = threading.Barrier(16)

        def shift():
            barrier.wait()
            for _ in range(3):
                s.apply("shift-left")

        threads = [threading.Thread(target=shift) for _ in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert s.number == 2 ** 48

    def test_lock_is_reentrant(self, state):
        with state.lock:
            state.set_number("7")
            assert state.snapshot()["number"] == 7
