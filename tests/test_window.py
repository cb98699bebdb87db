import pytest

from hlsfft.formats import COEFF, DIN
from hlsfft.window import WindowType, apply_window, coefficient, coefficient_table


def test_hann_ends_at_zero_and_peaks_at_centre():
    assert coefficient(0, 16, WindowType.HANN) == pytest.approx(0.0)
    assert coefficient(8, 16, WindowType.HANN) == pytest.approx(1.0)


def test_hamming_edge_value():
    assert coefficient(0, 1024, WindowType.HAMMING) == pytest.approx(0.54 - 0.46)


def test_gaussian_peaks_at_centre():
    assert coefficient(512, 1024, WindowType.GAUSSIAN) == 1.0
    assert coefficient(0, 1024, WindowType.GAUSSIAN) < coefficient(256, 1024, WindowType.GAUSSIAN)


@pytest.mark.parametrize("kind", [WindowType.HANN, WindowType.HAMMING, WindowType.GAUSSIAN])
def test_windows_are_symmetric(kind):
    size = 64
    for i in range(1, size // 2):
        assert coefficient(i, size, kind) == pytest.approx(coefficient(size - i, size, kind))


def test_rect_table_saturates_to_format_max():
    assert coefficient_table(8, WindowType.RECT, COEFF) == [COEFF.max_value] * 8


def test_table_values_are_quantized():
    table = coefficient_table(32, WindowType.HAMMING, COEFF)
    assert all(COEFF.quantize(c) == c for c in table)
    assert len(table) == 32


def test_apply_window_never_grows_magnitude():
    samples = [DIN.quantize((i % 7 - 3) / 4) for i in range(64)]
    out = apply_window(samples, WindowType.HAMMING)
    assert len(out) == len(samples)
    for s, o in zip(samples, out):
        assert abs(o) <= abs(s) + DIN.lsb
        assert DIN.quantize(o) == o


def test_rect_window_of_zero_is_zero():
    assert apply_window([0.0] * 8, WindowType.RECT) == [0.0] * 8


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        coefficient(0, 0, WindowType.HANN)
    with pytest.raises(ValueError):
        coefficient(0, 1, WindowType.GAUSSIAN)