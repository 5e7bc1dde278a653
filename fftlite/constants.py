"""Central constants & defaults."""

DEFAULT_SAMPLE_RATE = 1.0

# Peak finder defaults; the window defaults to len(spectrum) // PEAK_WINDOW_DIVISOR
DEFAULT_PEAK_COUNT = 5
DEFAULT_PEAK_THRESHOLD = 0.1
PEAK_WINDOW_DIVISOR = 50

# view name -> axis title
SPECTRUM_VIEWS = {
    "magnitude": "Magnitude",
    "phase": "Phase (rad)",
    "phase_degrees": "Phase (deg)",
}

PALETTE = [
    "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
    "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf"
]

__all__ = [
    "DEFAULT_SAMPLE_RATE",
    "DEFAULT_PEAK_COUNT",
    "DEFAULT_PEAK_THRESHOLD",
    "PEAK_WINDOW_DIVISOR",
    "SPECTRUM_VIEWS",
    "PALETTE",
]
