"""High-level visualization builder for multi-panel spectrum layouts."""
from __future__ import annotations
from typing import List, Optional, Sequence, Tuple
import plotly.graph_objs as go
from plotly.subplots import make_subplots

from ..charts import spectrum_chart
from ..constants import SPECTRUM_VIEWS
from ..core.spectrum import Spectrum


def combine_subplots(
    figs: List[go.Figure],
    y_titles: Optional[List[str]] = None,
    x_title: Optional[str] = None,
    y_ranges: Optional[Sequence[Optional[Tuple[float, float]]]] = None,
    vertical_spacing: float = 0.07,
):
    """Stack a list of figures vertically on a shared frequency axis."""
    if not figs:
        return go.Figure()
    n = len(figs)
    sp = make_subplots(
        rows=n,
        cols=1,
        shared_xaxes=True,
        vertical_spacing=vertical_spacing,
    )
    for i, f in enumerate(figs, start=1):
        for tr in f.data:
            sp.add_trace(tr, row=i, col=1)
        if y_titles and i <= len(y_titles) and y_titles[i - 1]:
            sp.update_yaxes(title_text=y_titles[i - 1], row=i, col=1)
        if y_ranges and i <= len(y_ranges) and y_ranges[i - 1]:
            sp.update_yaxes(range=list(y_ranges[i - 1]), row=i, col=1)
    if x_title:
        sp.update_xaxes(title_text=x_title, row=n, col=1)
    sp.update_layout(height=300 * n, showlegend=False)
    return sp


def spectrum_panels(
    spectrum: Spectrum,
    views: Sequence[str] = ("magnitude", "phase"),
    peaks: Optional[Sequence[int]] = None,
    freq_unit: str = "Hz",
):
    """One panel per view of *spectrum* (e.g. magnitude over phase)."""
    figs = [spectrum_chart(spectrum, view=v, peaks=peaks) for v in views]
    return combine_subplots(
        figs,
        y_titles=[SPECTRUM_VIEWS[v] for v in views],
        x_title=f"Frequency ({freq_unit})",
    )
