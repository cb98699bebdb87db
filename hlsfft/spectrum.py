"""Test program for the real FFT accelerator: feed a tone, report bins with energy."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable, Sequence
from typing import NamedTuple

from hlsfft.backend import xfft2real
from hlsfft.formats import DOUT, LOG2_REAL_FFT_LEN, REAL_FFT_LEN, AxisBeat
from hlsfft.frontend import RealFftFrontend
from hlsfft.reference_fft import fft_radix2_dit

DEFAULT_THRESHOLD = 0.00390625
_S15_SCALE = 32767.0


class EnergyBin(NamedTuple):
    index: int
    real: float
    imag: float
    magnitude: float


def generate_waveform(
    num_samples: int,
    cycles_per_window: float = 192.0,
    amplitude: float = 0.9,
    phase: float = 0.0,
) -> list[int]:
    """Return one period of a cosine as 16-bit signed s.15 samples."""
    if num_samples <= 0:
        raise ValueError(f"num_samples must be positive, got {num_samples}")
    return [
        int(
            _S15_SCALE
            * amplitude
            * math.cos(i * 2 * math.pi * cycles_per_window / num_samples + phase)
        )
        for i in range(num_samples)
    ]


def detect_energy(
    spectrum: Iterable[complex], threshold: float = DEFAULT_THRESHOLD
) -> list[EnergyBin]:
    """Return the bins whose magnitude exceeds ``threshold``.

    Each spectrum value holds raw s.15 integers in its real and imaginary parts.
    """
    found = []
    for index, value in enumerate(spectrum):
        real = value.real / _S15_SCALE
        imag = value.imag / _S15_SCALE
        mag = math.sqrt(real * real + imag * imag)
        if mag > threshold:
            found.append(EnergyBin(index, real, imag, mag))
    return found


def format_frame(bins: Iterable[EnergyBin]) -> str:
    """Render one frame report."""
    lines = ["", "Frame received:"]
    lines.extend(
        f"Energy detected in bin {b.index:3d} - "
        f"{{{b.real:8.5f}, {b.imag:8.5f}}}; mag = {b.magnitude:8.5f}"
        for b in bins
    )
    lines.append("End of frame.")
    return "\n".join(lines) + "\n"


def _to_s15(value: float) -> int:
    return round(math.ldexp(value, DOUT.frac_bits))


def _run_accelerator(frontend: RealFftFrontend, block: Sequence[int]) -> list[complex]:
    samples = [math.ldexp(s, -DOUT.frac_bits) for s in block]
    beats = frontend.process(samples)
    spectrum = fft_radix2_dit([b.data for b in beats])
    half = len(spectrum)
    out = xfft2real(
        [AxisBeat(v, last=(i == half - 1)) for i, v in enumerate(spectrum)],
        LOG2_REAL_FFT_LEN,
        True,
    )
    return [complex(_to_s15(b.data.real), _to_s15(b.data.imag)) for b in out]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Real FFT accelerator test program")
    parser.add_argument("--frames", type=int, default=8, help="number of frames to process")
    parser.add_argument(
        "--threshold", type=float, default=DEFAULT_THRESHOLD, help="magnitude threshold"
    )
    args = parser.parse_args(argv)
    if args.frames < 0:
        parser.error("--frames must not be negative")

    out = sys.stdout
    out.write("---------------------------------------\n")
    out.write("- RealFFT PL accelerator test program -\n")
    out.write("---------------------------------------\n")

    waveform = generate_waveform(REAL_FFT_LEN)
    half = REAL_FFT_LEN // 2
    blocks = [waveform[:half], waveform[half:]]
    frontend = RealFftFrontend(REAL_FFT_LEN)

    for frame in range(args.frames):
        spectrum = _run_accelerator(frontend, blocks[frame % 2])
        out.write(format_frame(detect_energy(spectrum, args.threshold)))
        out.flush()

    out.write("***************\n")
    out.write("* End of test *\n")
    out.write("***************\n\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())