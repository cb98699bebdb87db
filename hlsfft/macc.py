"""Multiply-accumulate block with a clearable accumulator register."""

from __future__ import annotations

_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    span = 1 << _INT_BITS
    half = 1 << (_INT_BITS - 1)
    return (value + half) % span - half


class Macc:
    """Accumulates ``a * b`` into a 32-bit register that can be cleared per call."""

    def __init__(self) -> None:
        self.accumulator = 0

    def __call__(self, a: int, b: int, clear: bool = False) -> int:
        """Clear the register if asked, add ``a * b`` and return the new total."""
        if clear:
            self.accumulator = 0
        self.accumulator = _wrap_int32(self.accumulator + int(a) * int(b))
        return self.accumulator

    def reset(self) -> None:
        """Set the accumulator back to zero."""
        self.accumulator = 0