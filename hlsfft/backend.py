"""Back end of a real-input FFT: recover N real-input bins from an N/2-point complex FFT."""

from __future__ import annotations

import math
from collections.abc import Iterable

from hlsfft.formats import COEFF, DOUT, LOG2_REAL_FFT_LEN, AxisBeat
from hlsfft.reference_fft import bitrev_sort


def _check_size(size: int) -> None:
    if size < 4 or size & (size - 1):
        raise ValueError(f"size must be a power of two of at least 4, got {size}")


def quarter_twiddles(size: int) -> list[complex]:
    """Return the first quarter of the ``size``-point twiddle factors, in coefficient format."""
    _check_size(size)
    step = 2.0 * math.pi / size
    return [
        complex(COEFF.quantize(math.cos(step * i)), COEFF.quantize(-math.sin(step * i)))
        for i in range(size // 4)
    ]


def _q(value: float) -> float:
    return DOUT.quantize(value)


def _conj(z: complex) -> complex:
    return complex(z.real, _q(-z.imag))


def xfft2real(
    beats: Iterable[AxisBeat],
    log2_size: int = LOG2_REAL_FFT_LEN,
    bitrev: bool = True,
) -> list[AxisBeat]:
    """Turn one frame of N/2 complex FFT outputs into N/2 bins of an N-point real FFT.

    ``beats`` carry the transform of the real signal packed in pairs (even
    samples real, odd samples imaginary). With ``bitrev`` the input is taken
    to be in bit-reversed order. The first output holds bin 0 in its real part
    and bin N/2 in its imaginary part; every value is halved once more.
    """
    if log2_size < 2:
        raise ValueError(f"log2_size must be at least 2, got {log2_size}")
    size = 1 << log2_size
    half, quarter = size // 2, size // 4

    data = [DOUT.quantize_complex(beat.data) for beat in beats]
    if len(data) != half:
        raise ValueError(f"expected {half} beats, got {len(data)}")
    # Bit reversal is an involution, so gathering equals the scatter it describes.
    buf = bitrev_sort(data) if bitrev else data

    twid = quarter_twiddles(size)
    low: list[complex] = []
    high: list[complex] = [0j] * quarter

    for i in range(quarter):
        y1 = buf[i]
        if i == 0:
            c1 = complex(_q(y1.real + y1.imag), _q(y1.real - y1.imag))
            c2 = buf[quarter]
        else:
            y2 = _conj(buf[half - i])
            f = complex(_q((y1.real + y2.real) / 2), _q((y1.imag + y2.imag) / 2))
            g = complex(_q(-(y2.imag - y1.imag) / 2), _q((y2.real - y1.real) / 2))
            w = DOUT.quantize_complex(twid[i])
            wg = complex(
                _q(w.real * g.real - w.imag * g.imag),
                _q(w.real * g.imag + w.imag * g.real),
            )
            c1 = complex(_q(f.real + wg.real), _q(f.imag + wg.imag))
            c2 = _conj(complex(_q(f.real - wg.real), _q(f.imag - wg.imag)))
        low.append(complex(_q(c1.real / 2), _q(c1.imag / 2)))
        high[(half - i) % quarter] = complex(_q(c2.real / 2), _q(c2.imag / 2))

    return [
        AxisBeat(value, last=(k == half - 1)) for k, value in enumerate(low + high)
    ]