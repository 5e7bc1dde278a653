"""Nearest-bin lookup of arbitrary query frequencies."""
from __future__ import annotations

from typing import List, Sequence, Union
import numpy as np

from ..core.errors import EmptySpectrumError, InvalidArgumentError
from ..core.spectrum import Pair, Spectrum


def nearest_indices(frequencies: np.ndarray, queries: np.ndarray) -> np.ndarray:
    """Index of the closest entry of the sorted *frequencies* for each query.

    Equidistant queries resolve to the lower index. Queries outside the axis
    clamp to the boundary bins.
    """
    last = len(frequencies) - 1
    pos = np.searchsorted(frequencies, queries, side="left")
    right = np.clip(pos, 0, last)
    left = np.clip(pos - 1, 0, last)
    take_left = np.abs(queries - frequencies[left]) <= np.abs(frequencies[right] - queries)
    return np.where(take_left, left, right)


def response_at(
    spectrum: Spectrum, query: Union[float, Sequence[float], np.ndarray]
) -> Union[Pair, List[Pair]]:
    """Resolve *query* to the spectrum's nearest (frequency, response) pair.

    A scalar query gives one pair; a sequence gives one pair per query, in
    input order. The returned frequency is the bin's own frequency, not the
    query.
    """
    if len(spectrum) == 0:
        raise EmptySpectrumError("Cannot resolve a frequency in an empty spectrum")
    try:
        queries = np.asarray(query, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Query frequencies must be numeric: {query!r}") from exc
    if queries.ndim > 1:
        raise InvalidArgumentError("Query must be a scalar or a one-dimensional sequence")
    if np.isnan(queries).any():
        raise InvalidArgumentError("Query frequencies must not be NaN")

    indices = nearest_indices(spectrum.frequencies, np.atleast_1d(queries))
    pairs = [spectrum[int(i)] for i in indices]
    if queries.ndim == 0:
        return pairs[0]
    return pairs


__all__ = ["response_at", "nearest_indices"]
