"""
Unit tests for knot vector utilities.
"""

import pytest
import numpy as np
from numpy.testing import assert_array_equal, assert_array_almost_equal

from shellIGA.discretization.knot_vector import (
    KnotVector, make_open_knot_vector, make_uniform_knot_vector
)


class TestKnotVector:
    """Tests for KnotVector class."""

    def test_open_knot_vector_creation(self):
        """Test creating an open (clamped) uniform knot vector."""
        kv = make_open_knot_vector(n_basis=5, degree=2, domain=(0.0, 1.0))

        assert kv.degree == 2
        assert kv.n_basis == 5
        assert len(kv.knots) == 5 + 2 + 1  # n + p + 1

        # Open knot vector structure: p+1 repeated at ends
        assert_array_equal(kv.knots[:3], [0.0, 0.0, 0.0])
        assert_array_equal(kv.knots[-3:], [1.0, 1.0, 1.0])

    def test_knot_vector_domain(self):
        """Test that domain is correctly computed."""
        kv = make_open_knot_vector(n_basis=4, degree=2, domain=(0.0, 1.0))
        assert kv.domain == (0.0, 1.0)

        kv2 = make_open_knot_vector(n_basis=4, degree=2, domain=(-1.0, 2.0))
        assert kv2.domain == (-1.0, 2.0)

    def test_n_elements(self):
        """Test counting number of elements (non-zero knot spans)."""
        # Degree 2, 4 basis functions: knots = [0,0,0,0.5,1,1,1]
        kv = make_open_knot_vector(n_basis=4, degree=2, domain=(0.0, 1.0))
        assert kv.n_elements == 2

        kv = make_open_knot_vector(n_basis=6, degree=2, domain=(0.0, 1.0))
        assert kv.n_elements == 4

    def test_elements_list(self):
        """Test that element intervals are correct."""
        kv = make_open_knot_vector(n_basis=4, degree=2, domain=(0.0, 1.0))
        elements = kv.elements

        assert len(elements) == 2
        assert elements[0] == (0.0, 0.5)
        assert elements[1] == (0.5, 1.0)

    def test_find_span_interior(self):
        """Test finding knot span for interior points."""
        kv = make_open_knot_vector(n_basis=4, degree=2, domain=(0.0, 1.0))

        assert kv.find_span(0.25) == 2
        assert kv.find_span(0.75) == 3
        # Interior knot belongs to the span on its right
        assert kv.find_span(0.5) == 3

    def test_find_span_boundaries(self):
        """Test finding knot span at domain boundaries."""
        kv = make_open_knot_vector(n_basis=4, degree=2, domain=(0.0, 1.0))

        assert kv.find_span(0.0) == 2
        assert kv.find_span(1.0) == 3

    def test_greville_abscissae(self):
        """Test Greville abscissae computation."""
        # [0,0,0,0.5,1,1,1] with p=2
        kv = make_open_knot_vector(n_basis=4, degree=2, domain=(0.0, 1.0))
        greville = kv.greville_abscissae()

        assert_array_almost_equal(greville, [0.0, 0.25, 0.75, 1.0])

    def test_unique_knots(self):
        """Test unique knots (breakpoints)."""
        kv = make_open_knot_vector(n_basis=4, degree=2, domain=(0.0, 1.0))
        assert_array_almost_equal(kv.unique_knots, [0.0, 0.5, 1.0])

    def test_invalid_knot_vector(self):
        """Test that invalid knot vectors raise errors."""
        with pytest.raises(ValueError):
            KnotVector(np.array([0.0, 1.0]), degree=2)

        with pytest.raises(ValueError):
            KnotVector(np.array([0.0, 0.0, 0.5, 0.3, 1.0, 1.0]), degree=1)

    def test_degree_3(self):
        """Test with cubic (degree 3) basis."""
        kv = make_open_knot_vector(n_basis=6, degree=3, domain=(0.0, 1.0))

        assert kv.n_elements == 3
        assert_array_equal(kv.knots[:4], [0.0, 0.0, 0.0, 0.0])
        assert_array_equal(kv.knots[-4:], [1.0, 1.0, 1.0, 1.0])


class TestUniformKnotVector:
    """Tests for make_uniform_knot_vector (interior knots + end multiplicity)."""

    def test_one_interior_knot_order_2(self):
        kv = make_uniform_knot_vector(-0.5, 0.5, 1, 2)

        assert kv.degree == 1
        assert_array_almost_equal(kv.knots, [-0.5, -0.5, 0.0, 0.5, 0.5])
        assert kv.n_elements == 2

    def test_two_interior_knots(self):
        kv = make_uniform_knot_vector(-1.5, 1.5, 2, 2)

        assert_array_almost_equal(kv.unique_knots, [-1.5, -0.5, 0.5, 1.5])
        assert kv.n_elements == 3

    def test_no_interior_knots(self):
        kv = make_uniform_knot_vector(0.0, 2.0, 0, 3)

        assert kv.degree == 2
        assert kv.elements == [(0.0, 2.0)]

    def test_zero_length_interval_has_no_elements(self):
        kv = make_uniform_knot_vector(0.0, 0.0, 1, 2)
        assert kv.n_elements == 0

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            make_uniform_knot_vector(0.0, 1.0, 1, 0)
        with pytest.raises(ValueError):
            make_uniform_knot_vector(0.0, 1.0, -1, 2)
