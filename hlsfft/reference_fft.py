"""Reference fixed-point radix-2 decimation-in-time FFT."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

from hlsfft.formats import COEFF, DOUT_W, FixedFormat, Overflow

T = TypeVar("T")


def _require_power_of_two(n: int) -> None:
    if n < 1 or n & (n - 1):
        raise ValueError(f"length must be a power of two, got {n}")


def _bit_reverse(index: int, bits: int) -> int:
    if bits == 0:
        return 0
    return int(format(index, f"0{bits}b")[::-1], 2)


def bitrev_sort(values: Sequence[T]) -> list[T]:
    """Return ``values`` reordered with bit-reversed addressing."""
    items = list(values)
    n = len(items)
    if n == 0:
        return []
    _require_power_of_two(n)
    bits = n.bit_length() - 1
    # Bit reversal is its own inverse, so gathering equals scattering.
    return [items[_bit_reverse(i, bits)] for i in range(n)]


def twiddles(n_points: int, fmt: FixedFormat = COEFF) -> list[complex]:
    """Return the first ``n_points // 2`` twiddle factors in natural order."""
    _require_power_of_two(n_points)
    step = 2.0 * math.pi / n_points
    return [
        complex(fmt.quantize(math.cos(step * i)), fmt.quantize(-math.sin(step * i)))
        for i in range(n_points // 2)
    ]


def fft_radix2_dit(
    x: Sequence[complex],
    ifft: bool = False,
    io_width: int = DOUT_W,
    twiddle_width: int = 16,
) -> list[complex]:
    """Transform ``x`` with a scaled fixed-point FFT.

    Data is normalised to one integer (sign) bit. Every stage halves its
    result, so the output is the transform divided by the length. Output
    bins are in bit-reversed order.
    """
    n = len(x)
    _require_power_of_two(n)
    io_fmt = FixedFormat(io_width, 1)
    acc_fmt = FixedFormat(io_width + 1, 2)
    twiddle_store = FixedFormat(twiddle_width, 1, Overflow.SATURATE)
    twiddle_fmt = FixedFormat(twiddle_width, 1)

    w = bitrev_sort(twiddles(n, twiddle_store))
    y = [io_fmt.quantize_complex(v) for v in x]

    groups, dist = 1, n // 2
    while groups < n:
        for k, wk in enumerate(w[:groups]):
            wr = twiddle_fmt.quantize(wk.real)
            wi = twiddle_fmt.quantize(-wk.imag if ifft else wk.imag)
            for j in range(2 * k * dist, (2 * k + 1) * dist):
                top, bottom = y[j], y[j + dist]
                a = acc_fmt.quantize(wr * bottom.real - wi * bottom.imag)
                b = acc_fmt.quantize(wr * bottom.imag + wi * bottom.real)
                y[j + dist] = complex(
                    io_fmt.quantize((top.real - a) / 2),
                    io_fmt.quantize((top.imag - b) / 2),
                )
                y[j] = complex(
                    io_fmt.quantize((top.real + a) / 2),
                    io_fmt.quantize((top.imag + b) / 2),
                )
        groups *= 2
        dist //= 2
    return y