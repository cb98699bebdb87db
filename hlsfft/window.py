"""Window functions applied to blocks of samples before transformation."""

from __future__ import annotations

import enum
import math
from collections.abc import Sequence

from hlsfft.formats import COEFF, DIN, FixedFormat


class WindowType(enum.Enum):
    RECT = 0
    HANN = 1
    HAMMING = 2
    GAUSSIAN = 3


_GAUSSIAN_SIGMA = 0.5


def coefficient(index: int, size: int, kind: WindowType) -> float:
    """Return the window coefficient at ``index`` for a window of ``size`` points."""
    if size <= 0:
        raise ValueError(f"window size must be positive, got {size}")
    if kind is WindowType.RECT:
        return 1.0
    if kind is WindowType.HANN:
        return 0.5 * (1.0 - math.cos(2.0 * math.pi * index / size))
    if kind is WindowType.HAMMING:
        return 0.54 - 0.46 * math.cos(2.0 * math.pi * index / size)
    if kind is WindowType.GAUSSIAN:
        half = size // 2
        if half == 0:
            raise ValueError("a Gaussian window needs at least two points")
        x = (index - half) / (_GAUSSIAN_SIGMA * half)
        return math.exp(-0.5 * x * x)
    raise ValueError(f"unknown window type {kind!r}")


def coefficient_table(
    size: int, kind: WindowType, fmt: FixedFormat = COEFF
) -> list[float]:
    """Return all ``size`` coefficients, quantized to ``fmt``."""
    return [fmt.quantize(coefficient(i, size, kind)) for i in range(size)]


def apply_window(
    samples: Sequence[float],
    kind: WindowType = WindowType.HAMMING,
    coeff_fmt: FixedFormat = COEFF,
    out_fmt: FixedFormat = DIN,
) -> list[float]:
    """Multiply each sample by its window coefficient and quantize the result."""
    table = coefficient_table(len(samples), kind, coeff_fmt)
    return [out_fmt.quantize(c * s) for c, s in zip(table, samples)]