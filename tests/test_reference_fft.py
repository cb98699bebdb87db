import cmath
import random

import pytest

from hlsfft.formats import COEFF, DOUT
from hlsfft.reference_fft import bitrev_sort, fft_radix2_dit, twiddles


def _dft(x, sign):
    n = len(x)
    return [
        sum(v * cmath.exp(sign * 2j * cmath.pi * k * m / n) for m, v in enumerate(x)) / n
        for k in range(n)
    ]


def _random_signal(n, seed):
    rng = random.Random(seed)
    return [
        complex(DOUT.quantize(rng.uniform(-0.5, 0.5)), DOUT.quantize(rng.uniform(-0.5, 0.5)))
        for _ in range(n)
    ]


def test_bitrev_sort_eight_points():
    assert bitrev_sort(list(range(8))) == [0, 4, 2, 6, 1, 5, 3, 7]


@pytest.mark.parametrize("n", [1, 2, 4, 16, 64])
def test_bitrev_sort_is_involution(n):
    values = list(range(n))
    assert bitrev_sort(bitrev_sort(values)) == values


def test_bitrev_sort_keeps_elements():
    values = ["a", "b", "c", "d"]
    assert sorted(bitrev_sort(values)) == values
    assert bitrev_sort(values)[0] == "a"


def test_bitrev_sort_rejects_non_power_of_two():
    with pytest.raises(ValueError):
        bitrev_sort([1, 2, 3])


def test_twiddles_first_saturates():
    w = twiddles(8)
    assert len(w) == 4
    assert w[0] == complex(COEFF.max_value, 0.0)


def test_twiddles_quarter_turn():
    w = twiddles(4)
    assert w[1].imag == -1.0
    assert abs(w[1].real) <= COEFF.lsb


def test_twiddles_on_unit_circle():
    for w in twiddles(64):
        assert abs(abs(w) - 1.0) < 4 * COEFF.lsb


def test_twiddles_rejects_bad_length():
    with pytest.raises(ValueError):
        twiddles(12)


def test_fft_of_impulse_is_flat():
    x = [0.5] + [0.0] * 7
    y = fft_radix2_dit(x)
    assert all(v == complex(0.0625, 0.0) for v in y)


@pytest.mark.parametrize("n", [8, 16, 32])
def test_fft_matches_scaled_dft(n):
    x = _random_signal(n, n)
    got = bitrev_sort(fft_radix2_dit(x))
    expected = _dft(x, -1)
    for g, e in zip(got, expected):
        assert abs(g - e) < 2e-3


def test_fft_outputs_are_on_io_grid():
    x = _random_signal(16, 3)
    for v in fft_radix2_dit(x):
        assert DOUT.quantize(v.real) == v.real
        assert DOUT.quantize(v.imag) == v.imag


def test_fft_does_not_modify_input():
    x = _random_signal(8, 5)
    copy = list(x)
    fft_radix2_dit(x)
    assert x == copy


def test_fft_rejects_bad_length():
    with pytest.raises(ValueError):
        fft_radix2_dit([0.0] * 6)