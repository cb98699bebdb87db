"""Fixed-point number formats and stream beat types used by the FFT datapath."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass


class Overflow(enum.Enum):
    """What happens when a value falls outside the representable range."""

    WRAP = "wrap"
    SATURATE = "saturate"


@dataclass(frozen=True)
class FixedFormat:
    """A signed fixed-point format with ``width`` bits, ``int_bits`` of them integer.

    Quantisation always truncates towards minus infinity. Out-of-range values
    either wrap (two's complement) or saturate, as chosen by ``overflow``.
    """

    width: int
    int_bits: int
    overflow: Overflow = Overflow.WRAP

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError(f"width must be positive, got {self.width}")

    @property
    def frac_bits(self) -> int:
        return self.width - self.int_bits

    @property
    def lsb(self) -> float:
        """Value of one unit in the last place."""
        return math.ldexp(1.0, -self.frac_bits)

    @property
    def raw_min(self) -> int:
        return -(1 << (self.width - 1))

    @property
    def raw_max(self) -> int:
        return (1 << (self.width - 1)) - 1

    @property
    def min_value(self) -> float:
        return math.ldexp(self.raw_min, -self.frac_bits)

    @property
    def max_value(self) -> float:
        return math.ldexp(self.raw_max, -self.frac_bits)

    def _signed_raw(self, value: float) -> int:
        if math.isnan(value):
            raise ValueError("cannot quantize NaN")
        if math.isinf(value):
            if self.overflow is Overflow.SATURATE:
                return self.raw_max if value > 0 else self.raw_min
            raise OverflowError("cannot wrap an infinite value")
        raw = math.floor(math.ldexp(value, self.frac_bits))
        if self.raw_min <= raw <= self.raw_max:
            return raw
        if self.overflow is Overflow.SATURATE:
            return self.raw_max if raw > self.raw_max else self.raw_min
        span = 1 << self.width
        return (raw - self.raw_min) % span + self.raw_min

    def quantize(self, value: float) -> float:
        """Return ``value`` as it would be stored in this format."""
        return math.ldexp(self._signed_raw(float(value)), -self.frac_bits)

    def quantize_complex(self, value: complex) -> complex:
        """Quantize the real and imaginary parts separately."""
        value = complex(value)
        return complex(self.quantize(value.real), self.quantize(value.imag))

    def to_raw(self, value: float) -> int:
        """Return the unsigned bit pattern of ``value`` in this format."""
        return self._signed_raw(float(value)) & ((1 << self.width) - 1)

    def from_raw(self, raw: int) -> float:
        """Interpret an unsigned bit pattern of this format's width."""
        if not 0 <= raw < (1 << self.width):
            raise ValueError(f"raw value {raw} does not fit in {self.width} bits")
        if raw > self.raw_max:
            raw -= 1 << self.width
        return math.ldexp(raw, -self.frac_bits)


@dataclass(frozen=True)
class AxisBeat:
    """One transfer on a streaming interface: complex data plus end-of-frame flag."""

    data: complex
    last: bool = False


DIN_W = 16
DOUT_W = DIN_W
REAL_FFT_LEN = 1024
LOG2_REAL_FFT_LEN = 10

DIN = FixedFormat(DIN_W, 1)
DOUT = FixedFormat(DOUT_W, 1)
COEFF = FixedFormat(DIN_W, 1, Overflow.SATURATE)