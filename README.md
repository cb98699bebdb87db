# hlsfft

Bit-accurate models, in pure Python, of small fixed-point signal-processing
blocks. There is a multiply-accumulate unit. There is also a real-input FFT
built from a half-size complex FFT. The package needs nothing beyond the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `hlsfft.formats`
  - `FixedFormat(width, int_bits, overflow)` is a signed fixed-point format.
    Quantisation truncates towards minus infinity.
  - `Overflow.WRAP` and `Overflow.SATURATE` choose what happens to
    out-of-range values.
  - Methods: `quantize`, `quantize_complex`, `to_raw` (unsigned bit pattern)
    and `from_raw`.
  - `AxisBeat(data, last)` is one complex stream sample with its
    end-of-frame flag.
  - The constants `DIN`, `DOUT` and `COEFF` are 16-bit formats with one
    integer bit. `COEFF` saturates.
  - `REAL_FFT_LEN` is 1024.
- `hlsfft.macc`
  - `Macc` holds a 32-bit wrapping multiply-accumulate register.
  - `macc(a, b, clear)` adds `a * b` and returns the running total. When
    `clear` is true, the total is zeroed before the product is added.
  - `reset()` sets the register to zero.
- `hlsfft.window`
  - `WindowType`: `RECT`, `HANN`, `HAMMING`, `GAUSSIAN`.
  - `coefficient(index, size, kind)` returns one window coefficient.
  - `coefficient_table(size, kind, fmt)` returns the quantized coefficient
    table.
  - `apply_window(samples, kind, coeff_fmt, out_fmt)` applies a window to a
    block of samples.
- `hlsfft.sliding`
  - `SlidingWindow(length)` builds a window from the previous half block and
    the new one.
  - `push(block)` takes `length // 2` samples and returns `length` samples.
  - The older half is zero until history exists.
- `hlsfft.reference_fft`
  - `bitrev_sort(values)` reorders values by bit-reversed index.
  - `twiddles(n_points, fmt)` returns the twiddle factors.
  - `fft_radix2_dit(x, ifft, io_width, twiddle_width)` is a fixed-point
    radix-2 decimation-in-time FFT.
  - The FFT halves the data at every stage, so its output is the transform
    divided by the length. Its bins come out in bit-reversed order.
- `hlsfft.frontend`
  - `RealFftFrontend(length, window)` combines the sliding window and the
    window function.
  - `process(samples)` windows each frame and packs adjacent samples into
    complex beats: even samples in the real part, odd samples in the
    imaginary part. It returns `length // 2` beats.
- `hlsfft.backend`
  - `quarter_twiddles(size)` returns the first quarter of the twiddle
    factors.
  - `xfft2real(beats, log2_size, bitrev)` turns one frame of N/2-point
    complex FFT output into N/2 bins of the N-point real spectrum.
  - In the first output bin, the real part holds the DC value and the
    imaginary part holds the Nyquist value.
- `hlsfft.spectrum`
  - `generate_waveform(num_samples, cycles_per_window, amplitude, phase)`
    returns a cosine as s.15 integers.
  - `detect_energy(spectrum, threshold)` returns `EnergyBin` tuples for the
    bins above the threshold. Its input holds raw s.15 values.
  - `format_frame(bins)` renders one frame report.
  - `main(argv)` runs the command described below.

## Example

```python
from hlsfft.macc import Macc

macc = Macc()
macc(2, 21, True)   # 42
macc(2, 21, False)  # 84
```

## Command line

```
hlsfft-spectrum [--frames N] [--threshold T]
```

The command first builds a 1024-sample cosine with 192 cycles per window. It
then sends the two halves of that waveform through the pipeline in turn:
frontend, reference FFT, backend. For each frame it prints the bins whose
magnitude is above the threshold.

- `--frames` sets the number of frames. The default is 8.
- `--threshold` sets the detection threshold. The default is 0.00390625.

## What it does not do

Everything runs in software. The package does not drive any accelerator,
DMA engine or interrupt controller. It writes no test-vector files.