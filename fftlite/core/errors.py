"""Error types raised by spectrum construction and analysis."""
from __future__ import annotations


class SpectrumError(ValueError):
    """Base class for every error raised by fftlite."""
    pass


class InvalidInputError(SpectrumError):
    """Raised for an empty or malformed signal or spectrum."""
    pass


class InvalidArgumentError(SpectrumError):
    """Raised when an option (``n``, ``t``, ``window``, ...) is out of range."""
    pass


class EmptySpectrumError(SpectrumError):
    """Raised when looking up a frequency in a zero-length spectrum."""
    pass


__all__ = [
    "SpectrumError",
    "InvalidInputError",
    "InvalidArgumentError",
    "EmptySpectrumError",
]
