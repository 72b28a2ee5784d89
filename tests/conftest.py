"""
Pytest configuration and shared fixtures for shellIGA tests.
"""

import pytest
import numpy as np
import sys
from pathlib import Path

# Add the parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from shellIGA.geometry.primitives import make_nurbs_unit_square
from shellIGA.geometry.surface_map import MultiPatch


@pytest.fixture
def tolerance():
    """Default tolerance for floating point comparisons."""
    return 1e-12


@pytest.fixture
def loose_tolerance():
    """Looser tolerance for numerical integration tests."""
    return 1e-8


@pytest.fixture
def flat_square():
    """Bilinear unit square embedded in 3D (z = 0)."""
    return MultiPatch([make_nurbs_unit_square(p=1, n_elem_xi=1, n_elem_eta=1)]).embed(3)
