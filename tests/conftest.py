import sys
from pathlib import Path

import numpy as np
import pytest

# Make the package importable without installing it
PROJECT_DIR = Path(__file__).resolve().parents[1]  # directory containing 'fftlite'
if str(PROJECT_DIR) not in sys.path:
    sys.path.insert(0, str(PROJECT_DIR))


@pytest.fixture
def two_tone():
    """1 s at 100 Hz: 10 Hz at amplitude 1 plus 30 Hz at amplitude 0.25."""
    t = np.arange(100) / 100
    return np.sin(2 * np.pi * 10 * t) + 0.25 * np.sin(2 * np.pi * 30 * t)
