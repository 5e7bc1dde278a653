import numpy as np
import pytest
import plotly.graph_objs as go

from fftlite.analysis.peaks import find_dominant_indices
from fftlite.analysis.transform import build
from fftlite.charts import spectrum_chart
from fftlite.core.errors import InvalidArgumentError
from fftlite.viz.builder import combine_subplots, spectrum_panels


def sample_spectrum():
    t = np.arange(64) / 64
    return build(np.sin(2 * np.pi * 8 * t), 64)


def test_magnitude_chart_with_peaks():
    spec = sample_spectrum()
    peaks = find_dominant_indices(spec)
    fig = spectrum_chart(spec, peaks=peaks)
    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 2
    assert list(fig.data[1].x) == [8.0]
    assert fig.layout.yaxis.title.text == 'Magnitude'


def test_phase_chart_degrees():
    spec = sample_spectrum()
    fig = spectrum_chart(spec, view='phase_degrees')
    assert np.allclose(fig.data[0].y, spec.phase_degrees)


def test_unknown_view():
    with pytest.raises(InvalidArgumentError):
        spectrum_chart(sample_spectrum(), view='power')


def test_panels_stack_views():
    fig = spectrum_panels(sample_spectrum(), views=('magnitude', 'phase'))
    assert len(fig.data) == 2
    assert fig.layout.yaxis2.title.text == 'Phase (rad)'


def test_combine_empty():
    assert len(combine_subplots([]).data) == 0


def test_empty_peaks_draw_no_marker_or_legend():
    fig = spectrum_chart(sample_spectrum(), peaks=[])
    assert len(fig.data) == 1
    assert fig.layout.showlegend is False
