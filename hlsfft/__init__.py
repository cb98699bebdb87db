"""Bit-accurate models of a fixed-point MAC block and a real-input FFT pipeline."""

__version__ = "0.1.0"

__all__ = [
    "formats",
    "macc",
    "window",
    "sliding",
    "reference_fft",
    "frontend",
    "backend",
    "spectrum",
]