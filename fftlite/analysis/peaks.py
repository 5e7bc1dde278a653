"""Peak detection on a spectrum's magnitude profile.

Two flavours:
 - ``find_dominant_indices`` / ``find_dominant_frequencies``: a bounded set of
   tall, well separated components (relative threshold + greedy suppression).
 - ``detect_local_peaks``: every strict local maximum, via scipy.
"""
from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional
import numpy as np
from scipy.signal import find_peaks

from ..constants import (
    DEFAULT_PEAK_COUNT,
    DEFAULT_PEAK_THRESHOLD,
    PEAK_WINDOW_DIVISOR,
)
from ..core.errors import InvalidArgumentError
from ..core.spectrum import Spectrum, is_integral

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PeakConfig:
    """Options for the dominant peak search.

    n: maximum number of peaks returned (>= 1)
    t: relative threshold in [0, 1); a bin qualifies when its magnitude is at
       least ``t * max(magnitude)``
    window: suppression radius in bins (>= 0); None derives it from the
       spectrum length as ``len(spectrum) // PEAK_WINDOW_DIVISOR``
    """

    n: int = DEFAULT_PEAK_COUNT
    t: float = DEFAULT_PEAK_THRESHOLD
    window: Optional[int] = None

    def validate(self) -> "PeakConfig":
        if not is_integral(self.n) or self.n < 1:
            raise InvalidArgumentError(f"n must be an integer >= 1, got {self.n!r}")
        if isinstance(self.t, (bool, np.bool_)) or not isinstance(self.t, numbers.Real):
            raise InvalidArgumentError(f"t must be a real number, got {self.t!r}")
        if not 0 <= self.t < 1:
            raise InvalidArgumentError(f"t must lie in [0, 1), got {self.t!r}")
        if self.window is not None and (not is_integral(self.window) or self.window < 0):
            raise InvalidArgumentError(
                f"window must be an integer >= 0, got {self.window!r}"
            )
        return self

    def window_for(self, length: int) -> int:
        if self.window is None:
            return length // PEAK_WINDOW_DIVISOR
        return int(self.window)


def _resolve_config(
    config: Optional[PeakConfig],
    n: Optional[int],
    t: Optional[float],
    window: Optional[int],
) -> PeakConfig:
    base = config or PeakConfig()
    overrides = {
        k: v for k, v in (("n", n), ("t", t), ("window", window)) if v is not None
    }
    if overrides:
        base = replace(base, **overrides)
    return base.validate()


def find_dominant_indices(
    spectrum: Spectrum,
    n: Optional[int] = None,
    t: Optional[float] = None,
    window: Optional[int] = None,
    config: Optional[PeakConfig] = None,
) -> np.ndarray:
    """Return indices of at most ``n`` dominant peaks in ascending order.

    Candidates are the bins whose magnitude reaches ``t * max(magnitude)``.
    They are visited tallest first (ties: lower index first) and a candidate is
    kept only if it is farther than ``window`` bins from every peak already
    kept, so the tallest bin of a broad lobe wins. ``window=0`` disables the
    suppression. Explicit ``n``/``t``/``window`` override the ``config`` values.
    """
    cfg = _resolve_config(config, n, t, window)
    mag = spectrum.magnitude
    if mag.size == 0:
        return np.array([], dtype=int)
    radius = cfg.window_for(mag.size)

    candidates = np.flatnonzero(mag >= cfg.t * mag.max())
    order = candidates[np.argsort(-mag[candidates], kind="stable")]

    accepted = []
    for idx in order:
        if all(abs(idx - kept) > radius for kept in accepted):
            accepted.append(int(idx))
            if len(accepted) == cfg.n:
                break

    logger.debug(
        "%d of %d candidates accepted (n=%d, t=%g, window=%d)",
        len(accepted), len(candidates), cfg.n, cfg.t, radius,
    )
    return np.array(sorted(accepted), dtype=int)


def find_dominant_frequencies(
    spectrum: Spectrum,
    n: Optional[int] = None,
    t: Optional[float] = None,
    window: Optional[int] = None,
    config: Optional[PeakConfig] = None,
) -> np.ndarray:
    """Frequencies of :func:`find_dominant_indices`, in the same order."""
    indices = find_dominant_indices(spectrum, n=n, t=t, window=window, config=config)
    return spectrum.frequencies[indices]


def detect_local_peaks(
    spectrum: Spectrum, prominence: float = 0.0, height: float = 0.0
) -> Dict[str, Any]:
    """Detect local maxima of the magnitude profile.

    Returns indices, frequencies and magnitudes, plus selected peak properties.
    """
    if prominence < 0 or height < 0:
        raise InvalidArgumentError("prominence and height must be >= 0")
    mag = spectrum.magnitude
    peaks, props = find_peaks(
        mag,
        prominence=prominence if prominence > 0 else None,
        height=height if height > 0 else None,
    )
    result: Dict[str, Any] = {
        "indices": peaks.tolist(),
        "frequencies": spectrum.frequencies[peaks].tolist(),
        "magnitudes": mag[peaks].tolist(),
    }
    for k, v in props.items():
        if hasattr(v, "tolist"):
            result[k] = v.tolist()
    return result


__all__ = [
    "PeakConfig",
    "find_dominant_indices",
    "find_dominant_frequencies",
    "detect_local_peaks",
]
