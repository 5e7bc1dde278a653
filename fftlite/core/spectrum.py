"""Core spectrum value.

A Spectrum pairs a strictly increasing frequency axis with the complex
transform response at each frequency. Both columns are stored as read-only
numpy arrays; derived views (magnitude, phase) are computed on demand.
"""
from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple
import numpy as np
import pandas as pd

from .errors import InvalidInputError

Pair = Tuple[float, complex]


def is_integral(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


def _readonly(values: np.ndarray) -> np.ndarray:
    values.setflags(write=False)
    return values


@dataclass(frozen=True, eq=False)
class Spectrum:
    frequencies: np.ndarray
    response: np.ndarray
    n_samples: Optional[int] = None
    one_sided: bool = False

    def __post_init__(self):
        try:
            freqs = np.array(self.frequencies, dtype=float)
            resp = np.array(self.response, dtype=complex)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"Spectrum columns must be numeric: {exc}") from exc
        if freqs.ndim != 1 or resp.ndim != 1:
            raise InvalidInputError("Spectrum columns must be one-dimensional")
        if len(freqs) != len(resp):
            raise InvalidInputError(
                f"Length mismatch: {len(freqs)} frequencies vs {len(resp)} responses"
            )
        if len(freqs) > 1 and not np.all(np.diff(freqs) > 0):
            raise InvalidInputError("Frequencies must be strictly increasing")
        if self.n_samples is not None and (
            not is_integral(self.n_samples) or self.n_samples < 1
        ):
            raise InvalidInputError(
                f"n_samples must be a positive integer, got {self.n_samples!r}"
            )
        object.__setattr__(self, "frequencies", _readonly(freqs))
        object.__setattr__(self, "response", _readonly(resp))
        if self.n_samples is not None:
            object.__setattr__(self, "n_samples", int(self.n_samples))

    # --- Sequence protocol ---
    def __len__(self) -> int:
        return len(self.frequencies)

    def __iter__(self) -> Iterator[Pair]:
        for f, r in zip(self.frequencies, self.response):
            yield float(f), complex(r)

    def __getitem__(self, index: int) -> Pair:
        return float(self.frequencies[index]), complex(self.response[index])

    def __repr__(self) -> str:
        kind = "one-sided" if self.one_sided else "two-sided"
        if len(self) == 0:
            return f"Spectrum(empty, {kind})"
        return (
            f"Spectrum({len(self)} bins, {kind}, "
            f"{self.frequencies[0]:.4g}..{self.frequencies[-1]:.4g})"
        )

    # --- Derived views ---
    @property
    def magnitude(self) -> np.ndarray:
        return np.abs(self.response)

    @property
    def phase(self) -> np.ndarray:
        """Phase angle in radians."""
        return np.angle(self.response)

    @property
    def phase_degrees(self) -> np.ndarray:
        return np.angle(self.response, deg=True)

    @property
    def resolution(self) -> float:
        """Frequency spacing between neighbouring bins (0.0 with fewer than two bins)."""
        if len(self) < 2:
            return 0.0
        return float(self.frequencies[1] - self.frequencies[0])

    # --- Export helpers ---
    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({
            "freq": self.frequencies,
            "response": self.response,
            "magnitude": self.magnitude,
            "phase": self.phase,
        })

    def to_dict(self) -> Dict[str, Any]:
        return {
            "frequencies": self.frequencies.tolist(),
            "real": self.response.real.tolist(),
            "imag": self.response.imag.tolist(),
            "n_samples": self.n_samples,
            "one_sided": self.one_sided,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Spectrum":
        try:
            real = np.asarray(d["real"], dtype=float)
            imag = np.asarray(d["imag"], dtype=float)
            freqs = d["frequencies"]
        except KeyError as exc:
            raise InvalidInputError(f"Missing spectrum field: {exc}") from exc
        if real.shape != imag.shape:
            raise InvalidInputError("Real and imaginary parts differ in length")
        return cls(
            freqs,
            real + 1j * imag,
            n_samples=d.get("n_samples"),
            one_sided=bool(d.get("one_sided", False)),
        )


__all__ = ["Spectrum", "Pair", "is_integral"]
