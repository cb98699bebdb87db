"""Front end of a real-input FFT: sliding window, window function, pair packing."""

from __future__ import annotations

from collections.abc import Iterable

from hlsfft.formats import COEFF, DIN, REAL_FFT_LEN, AxisBeat
from hlsfft.sliding import SlidingWindow
from hlsfft.window import WindowType, apply_window


class RealFftFrontend:
    """Turns blocks of real samples into complex beats for an N/2-point FFT.

    Each block of ``length // 2`` new samples is joined to the previous block,
    windowed, and sent out as pairs packed into complex values (even sample
    real, odd sample imaginary), with ``last`` set on the final beat.
    """

    def __init__(self, length: int = REAL_FFT_LEN, window: WindowType = WindowType.HAMMING) -> None:
        self.length = length
        self.window = window
        self._sliding = SlidingWindow(length)

    def process(self, samples: Iterable[float]) -> list[AxisBeat]:
        """Consume one half-window of samples and return ``length // 2`` beats."""
        block = [DIN.quantize(s) for s in samples]
        frame = self._sliding.push(block)
        windowed = apply_window(frame, self.window, COEFF, DIN)
        last_index = self.length // 2 - 1
        return [
            AxisBeat(complex(re, im), last=(i == last_index))
            for i, (re, im) in enumerate(zip(windowed[0::2], windowed[1::2]))
        ]