"""Spectral analysis: transform builder, peaks, mirror, frequency lookup."""
from .transform import build  # noqa: F401
from .peaks import (  # noqa: F401
    PeakConfig,
    find_dominant_indices,
    find_dominant_frequencies,
    detect_local_peaks,
)
from .mirror import mirror  # noqa: F401
from .resolve import response_at  # noqa: F401
