"""Build a Spectrum from a sampled time-domain signal."""
from __future__ import annotations

import logging
import math
from typing import Sequence, Union
import numpy as np
import pandas as pd

from ..constants import DEFAULT_SAMPLE_RATE
from ..core.errors import InvalidArgumentError, InvalidInputError
from ..core.spectrum import Spectrum

logger = logging.getLogger(__name__)

Signal = Union[Sequence[float], Sequence[complex], np.ndarray, pd.Series]


def _as_signal(signal: Signal) -> np.ndarray:
    values = signal.values if isinstance(signal, pd.Series) else np.asarray(signal)
    if values.ndim != 1:
        raise InvalidInputError(f"Signal must be one-dimensional, got shape {values.shape}")
    if values.size == 0:
        raise InvalidInputError("Signal is empty")
    if values.dtype == bool or not np.issubdtype(values.dtype, np.number):
        raise InvalidInputError(f"Signal must be numeric, got dtype {values.dtype}")
    return values


def _check_sample_rate(sample_rate: float) -> float:
    try:
        fs = float(sample_rate)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"sample_rate must be a number: {sample_rate!r}") from exc
    if not math.isfinite(fs) or fs <= 0:
        raise InvalidArgumentError(f"sample_rate must be positive and finite, got {fs}")
    return fs


def build(
    signal: Signal,
    sample_rate: float = DEFAULT_SAMPLE_RATE,
    scale_by_length: bool = True,
) -> Spectrum:
    """Transform *signal* into a Spectrum.

    Real input gives a one-sided spectrum of ``N // 2 + 1`` bins starting at
    0. Every bin except DC (and the Nyquist bin of an even-length signal) is
    doubled to fold in the discarded negative half; :func:`mirror` undoes the
    doubling. With ``scale_by_length`` the response is also divided by N, so
    magnitudes read as sinusoid amplitudes.

    Complex input gives the full N-bin spectrum, reordered so frequencies
    ascend from the most negative bin.

    The unit of ``sample_rate`` sets the unit of the frequency axis.
    """
    values = _as_signal(signal)
    fs = _check_sample_rate(sample_rate)
    n = values.size

    if np.iscomplexobj(values):
        response = np.fft.fftshift(np.fft.fft(values))
        freqs = (np.arange(n) - n // 2) * fs / n
        one_sided = False
    else:
        response = np.fft.rfft(values.astype(float))
        freqs = np.arange(len(response)) * fs / n
        one_sided = True

    if scale_by_length:
        response = response / n
    if one_sided:
        # DC and Nyquist have no mirror partner to fold in
        stop = len(response) - 1 if n % 2 == 0 else len(response)
        response[1:stop] *= 2

    logger.debug(
        "built %s spectrum: %d samples -> %d bins at %g Hz",
        "one-sided" if one_sided else "two-sided", n, len(response), fs,
    )
    return Spectrum(freqs, response, n_samples=n, one_sided=one_sided)


__all__ = ["build", "Signal"]
