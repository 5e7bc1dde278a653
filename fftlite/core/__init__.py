"""Core spectrum value and error types."""
from .errors import (  # noqa: F401
    SpectrumError,
    InvalidInputError,
    InvalidArgumentError,
    EmptySpectrumError,
)
from .spectrum import Spectrum  # noqa: F401
