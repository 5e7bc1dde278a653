"""fftlite package root.

Exposes high-level API surface for convenience.
"""
import logging

from .core import (  # noqa: F401
    Spectrum,
    SpectrumError,
    InvalidInputError,
    InvalidArgumentError,
    EmptySpectrumError,
)
from .analysis import (  # noqa: F401
    build,
    PeakConfig,
    find_dominant_indices,
    find_dominant_frequencies,
    detect_local_peaks,
    mirror,
    response_at,
)
from .core.operations import apply_operation  # noqa: F401

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
