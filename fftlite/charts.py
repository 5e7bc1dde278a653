from typing import Optional, Sequence
import numpy as np
import plotly.graph_objs as go

from .constants import PALETTE, SPECTRUM_VIEWS
from .core.errors import InvalidArgumentError
from .core.spectrum import Spectrum


def view_values(spectrum: Spectrum, view: str) -> np.ndarray:
    if view not in SPECTRUM_VIEWS:
        raise InvalidArgumentError(
            f"Unknown view: {view} (expected one of {', '.join(SPECTRUM_VIEWS)})"
        )
    return getattr(spectrum, view)


def spectrum_chart(
    spectrum: Spectrum,
    view: str = "magnitude",
    peaks: Optional[Sequence[int]] = None,
    title: Optional[str] = None,
    color: Optional[str] = None,
    freq_unit: str = "Hz",
):
    y = view_values(spectrum, view)
    line_color = color or PALETTE[0]
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=spectrum.frequencies,
        y=y,
        mode="lines",
        name=SPECTRUM_VIEWS[view],
        line=dict(color=line_color),
    ))
    if peaks is not None and len(peaks):
        idx = np.asarray(peaks, dtype=int)
        fig.add_trace(go.Scatter(
            x=spectrum.frequencies[idx],
            y=y[idx],
            mode="markers+text",
            name="Peaks",
            text=[f"{f:.4g}" for f in spectrum.frequencies[idx]],
            textposition="top center",
            marker=dict(color=PALETTE[3], size=9, symbol="x"),
        ))
    fig.update_layout(
        title=title,
        xaxis_title=f"Frequency ({freq_unit})",
        yaxis_title=SPECTRUM_VIEWS[view],
        showlegend=bool(peaks is not None and len(peaks)),
    )
    return fig
