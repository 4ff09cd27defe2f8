"""Error types for the number converter app."""

from __future__ import annotations


class NumError(Exception):
    """Base exception for errors reported back to API clients."""

    pass


class InvalidModeError(NumError):
    def __init__(self, mode) -> None:
        self.mode = mode
        super().__init__("Invalid mode. Must be dec, hex, or bin")


class InvalidBitWidthError(NumError):
    def __init__(self, width) -> None:
        self.width = width
        super().__init__("Bit width must be between 1 and 64")


class InvalidValueError(NumError):
    def __init__(self, value) -> None:
        self.value = value
        super().__init__("Value must be a string or a number")


class UnknownBaseError(NumError, ValueError):
    def __init__(self, base: str) -> None:
        self.base = base
        super().__init__(f"Unknown base: {base}")


class UnknownOperationError(NumError):
    def __init__(self, operation: str, valid: list[str]) -> None:
        self.operation = operation
        self.valid = valid
        super().__init__(
            f"Unknown operation '{operation}', must be one of: {', '.join(valid)}"
        )
