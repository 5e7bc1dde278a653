"""Two-sided reconstruction of a one-sided spectrum."""
from __future__ import annotations

import logging
from typing import Optional, Sequence, Union
import numpy as np

from ..core.errors import InvalidInputError
from ..core.spectrum import Spectrum, is_integral

logger = logging.getLogger(__name__)


def _nyquist_stop(length: int, n_samples: Optional[int]) -> int:
    """Index one past the last bin that gets a mirrored partner."""
    if n_samples is None:
        return length
    if not is_integral(n_samples) or n_samples < 1:
        raise InvalidInputError(
            f"n_samples must be a positive integer, got {n_samples!r}"
        )
    if n_samples // 2 + 1 != length:
        raise InvalidInputError(
            f"{length} one-sided bins cannot come from a {n_samples}-sample signal"
        )
    return length - 1 if n_samples % 2 == 0 else length


def _mirror_response(response: np.ndarray, stop: int) -> np.ndarray:
    positive = response[1:stop] / 2
    return np.concatenate([
        np.conj(positive[::-1]),
        response[:1],
        positive,
        response[stop:],
    ])


def mirror(
    spectrum: Union[Spectrum, Sequence[complex], np.ndarray],
    n_samples: Optional[int] = None,
) -> Union[Spectrum, np.ndarray]:
    """Rebuild the two-sided spectrum of a real signal from its one-sided half.

    Every bin after DC gets a complex-conjugate partner at the negated
    frequency, and both halves carry half the one-sided amplitude. DC is kept
    as is, and so is the Nyquist bin of an even-length signal, which stays
    last at ``+sample_rate / 2``. The result is ordered by ascending frequency.

    Accepts a Spectrum (returns a Spectrum) or a bare response sequence
    (returns an array). The signal length used to spot the Nyquist bin comes
    from ``spectrum.n_samples``, or ``n_samples`` when given; without either
    the length is taken to be odd.

    Mirroring an already two-sided spectrum is an error.
    """
    if isinstance(spectrum, Spectrum):
        if len(spectrum) == 0:
            raise InvalidInputError("Cannot mirror an empty spectrum")
        freqs = spectrum.frequencies
        if freqs[0] < 0:
            raise InvalidInputError(
                "Spectrum has negative frequencies; it is already two-sided"
            )
        if freqs[0] != 0:
            raise InvalidInputError("One-sided spectrum must start at the 0 Hz bin")
        if n_samples is None:
            n_samples = spectrum.n_samples
        stop = _nyquist_stop(len(spectrum), n_samples)
        mirrored_freqs = np.concatenate([-freqs[1:stop][::-1], freqs])
        mirrored = Spectrum(
            mirrored_freqs,
            _mirror_response(spectrum.response, stop),
            n_samples=n_samples,
            one_sided=False,
        )
        logger.debug("mirrored %d one-sided bins into %d", len(spectrum), len(mirrored))
        return mirrored

    try:
        response = np.asarray(spectrum, dtype=complex)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Response must be numeric: {exc}") from exc
    if response.ndim != 1 or response.size == 0:
        raise InvalidInputError("Response must be a non-empty one-dimensional sequence")
    stop = _nyquist_stop(response.size, n_samples)
    return _mirror_response(response, stop)


__all__ = ["mirror"]
