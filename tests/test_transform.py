import numpy as np
import pandas as pd
import pytest

from fftlite.analysis.transform import build
from fftlite.analysis.peaks import find_dominant_indices
from fftlite.core.errors import InvalidArgumentError, InvalidInputError


@pytest.mark.parametrize("n", [1, 2, 7, 8, 101])
def test_real_signal_gives_one_sided_spectrum(n):
    rng = np.random.default_rng(n)
    spec = build(rng.normal(size=n), sample_rate=10)
    assert len(spec) == n // 2 + 1
    assert spec.frequencies[0] == 0.0
    assert np.all(np.diff(spec.frequencies) > 0)
    assert spec.one_sided
    assert spec.n_samples == n


@pytest.mark.parametrize("n", [1, 6, 9])
def test_complex_signal_gives_full_spectrum(n):
    rng = np.random.default_rng(n)
    s = rng.normal(size=n) + 1j * rng.normal(size=n)
    spec = build(s, sample_rate=4)
    assert len(spec) == n
    assert not spec.one_sided
    assert np.all(np.diff(spec.frequencies) > 0)
    expected = np.fft.fftshift(np.fft.fft(s)) / n
    assert np.allclose(spec.response, expected)


def test_frequency_axis_uses_sample_rate():
    spec = build(np.ones(8), sample_rate=100)
    assert spec.frequencies.tolist() == pytest.approx([0, 12.5, 25, 37.5, 50])
    assert spec.resolution == pytest.approx(12.5)


def test_dc_and_nyquist_not_doubled():
    # alternating signal has all its energy in the Nyquist bin
    s = np.array([1.0, -1.0] * 4) + 3.0
    spec = build(s)
    assert spec.response[0] == pytest.approx(3.0)
    assert spec.response[-1] == pytest.approx(1.0)
    assert np.allclose(spec.response[1:-1], 0)


def test_unit_sinusoid_amplitude():
    t = np.arange(64) / 64
    spec = build(np.cos(2 * np.pi * 4 * t), sample_rate=64)
    assert spec.magnitude[4] == pytest.approx(1.0)


def test_unscaled_keeps_one_sided_doubling():
    s = np.arange(10, dtype=float)
    spec = build(s, scale_by_length=False)
    raw = np.fft.rfft(s)
    assert spec.response[0] == pytest.approx(raw[0])
    assert spec.response[-1] == pytest.approx(raw[-1])
    assert np.allclose(spec.response[1:-1], 2 * raw[1:-1])


def test_accepts_series_and_integers():
    spec = build(pd.Series([1, 2, 3, 4]))
    assert spec.response[0] == pytest.approx(2.5)


def test_single_tone_scenario():
    # 101 samples of a 2 Hz sine over 0..1 s inclusive
    t = np.linspace(0, 1, 101)
    spec = build(np.sin(2 * np.pi * 2 * t), 100)
    peaks = find_dominant_indices(spec)
    assert len(peaks) == 1
    assert spec.frequencies[peaks[0]] == pytest.approx(1.98, abs=0.01)
    assert spec.magnitude[peaks[0]] == pytest.approx(0.98, abs=0.025)


@pytest.mark.parametrize("signal", [[], np.zeros((2, 2)), ["a", "b"], [True, False]])
def test_invalid_signal(signal):
    with pytest.raises(InvalidInputError):
        build(signal)


@pytest.mark.parametrize("fs", [0, -1, float("inf"), float("nan"), "fast"])
def test_invalid_sample_rate(fs):
    with pytest.raises(InvalidArgumentError):
        build([1.0, 2.0], sample_rate=fs)
