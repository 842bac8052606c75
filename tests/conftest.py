"""
Pytest configuration and shared fixtures.

This module provides common fixtures for all test modules.
"""

import pytest
import numpy as np
from typing import List, Tuple


# Sample stress-time history fixtures
@pytest.fixture
def sample_history() -> List[float]:
    """Short irregular history with interior points that are not reversals."""
    return [0, 2, 5, 3, -1, 2, 4, 1]


@pytest.fixture
def constant_amplitude_history() -> List[float]:
    """Two repetitions of a 1 -> 5 -> 1 load block."""
    return [1, 5, 1, 5, 1]


@pytest.fixture
def random_history() -> np.ndarray:
    """Random stress-time history: 250 values between 100 and 600 MPa."""
    rng = np.random.default_rng(42)
    return 100 + (600 - 100) * rng.random(250)


# ASTM E1049 standard test fixture
@pytest.fixture
def astm_standard_sequence() -> List[float]:
    """ASTM E1049 standard test sequence.

    From ASTM E1049-85, Section 5.4.4, Fig. 6.
    """
    return [-2, 1, -3, 5, -1, 3, -4, 4, -2]


@pytest.fixture
def astm_expected_cycles() -> List[Tuple[float, float, float]]:
    """Expected cycle table (count, range, mean) for the ASTM sequence,
    in extraction order."""
    return [
        (0.5, 3.0, -0.5),
        (0.5, 4.0, -1.0),
        (1.0, 4.0, 1.0),
        (0.5, 8.0, 1.0),
        (0.5, 9.0, 0.5),
        (0.5, 8.0, 0.0),
        (0.5, 6.0, 1.0),
    ]


@pytest.fixture
def astm_expected_totals() -> dict:
    """Cycle counts per range from ASTM E1049-85 Table 4."""
    return {3.0: 0.5, 4.0: 1.5, 6.0: 0.5, 8.0: 1.0, 9.0: 0.5}


# Curve fixtures
@pytest.fixture
def detail_category() -> float:
    """Detail category 160 (EN 1993-1-9 base material)."""
    return 160.0
