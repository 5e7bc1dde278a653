"""Named spectrum operations + registry.

Each operation is a function(spectrum, **kwargs) -> result, so callers can
drive an analysis from configuration by name.
"""
from __future__ import annotations
from typing import Callable, Dict
import numpy as np

from .errors import InvalidArgumentError
from .spectrum import Spectrum
from ..analysis.mirror import mirror
from ..analysis.peaks import (
    detect_local_peaks,
    find_dominant_frequencies,
    find_dominant_indices,
)
from ..analysis.resolve import response_at

Registry: Dict[str, Callable] = {}

def register(name: str):
    def deco(fn: Callable):
        Registry[name] = fn
        return fn
    return deco

@register("magnitude")
def op_magnitude(spectrum: Spectrum) -> np.ndarray:
    return spectrum.magnitude

@register("phase")
def op_phase(spectrum: Spectrum, degrees: bool = False) -> np.ndarray:
    return spectrum.phase_degrees if degrees else spectrum.phase

@register("mirror")
def op_mirror(spectrum: Spectrum, n_samples=None) -> Spectrum:
    return mirror(spectrum, n_samples=n_samples)

@register("dominant_indices")
def op_dominant_indices(spectrum: Spectrum, **options) -> np.ndarray:
    return find_dominant_indices(spectrum, **options)

@register("dominant_frequencies")
def op_dominant_frequencies(spectrum: Spectrum, **options) -> np.ndarray:
    return find_dominant_frequencies(spectrum, **options)

@register("response_at")
def op_response_at(spectrum: Spectrum, query):
    return response_at(spectrum, query)

@register("local_peaks")
def op_local_peaks(spectrum: Spectrum, prominence: float = 0.0, height: float = 0.0):
    return detect_local_peaks(spectrum, prominence=prominence, height=height)

def apply_operation(spectrum: Spectrum, name: str, **kwargs):
    if name not in Registry:
        known = ", ".join(sorted(Registry))
        raise InvalidArgumentError(f"Unknown operation '{name}' (known: {known})")
    return Registry[name](spectrum, **kwargs)

__all__ = ["Registry", "register", "apply_operation"]
