"""
Unit tests for the z-extension adapter IntegrandZ.
"""

import pytest
import numpy as np
from numpy.testing import assert_array_almost_equal, assert_array_equal

from shellIGA.core.function import ConstantFunction, FunctionExpr
from shellIGA.exceptions import PreconditionError
from shellIGA.thickness.integrand import IntegrandZ


@pytest.fixture
def field():
    """f(x, y, z) = (x, 2y, x*y*z^2)."""
    return FunctionExpr(lambda x, y, z: x,
                        lambda x, y, z: 2 * y,
                        lambda x, y, z: x * y * z**2,
                        domain_dim=3)


class TestIntegrandZ:
    """Tests for IntegrandZ."""

    def test_dimensions(self, field):
        g = IntegrandZ(field)
        assert g.domain_dim == 1
        assert g.target_dim == 3

    def test_matches_underlying(self, field):
        g = IntegrandZ(field)
        z = np.array([[-0.5, -0.1, 0.0, 0.25, 0.5]])

        for point in ([0.25, 0.25], [0.1, 0.1], [1.0, -2.0]):
            g.set_point(point)
            full = np.vstack([np.tile(np.reshape(point, (2, 1)), (1, z.shape[1])), z])
            assert_array_equal(g.eval(z), field.eval(full))

    def test_known_values(self, field):
        g = IntegrandZ(field)
        g.set_point([0.25, 0.25])
        assert_array_almost_equal(g.eval(0.25).ravel(), [0.25, 0.5, 0.25**4])

        g.set_point([0.1, 0.1])
        assert_array_almost_equal(g.eval(0.25).ravel(), [0.1, 0.2, 0.01 * 0.0625])

    def test_point_accepts_column(self, field):
        g = IntegrandZ(field)
        g.set_point(np.array([[0.3], [0.4]]))
        assert_array_equal(g.point, [[0.3], [0.4]])

    def test_point_is_copy(self, field):
        g = IntegrandZ(field)
        point = np.array([0.3, 0.4])
        g.set_point(point)
        point[0] = 10.0

        assert g.point[0, 0] == 0.3

    def test_wraps_a_clone(self):
        f = ConstantFunction(1.0, domain_dim=2)
        g = IntegrandZ(f)
        assert g.function is not f

    def test_more_than_one_row(self, field):
        g = IntegrandZ(field)
        g.set_point([0.1, 0.1])
        with pytest.raises(PreconditionError, match="not 1 but 2"):
            g.eval(np.zeros((2, 3)))

    def test_point_not_set(self, field):
        g = IntegrandZ(field)
        with pytest.raises(PreconditionError):
            g.eval(0.0)
        with pytest.raises(PreconditionError):
            g.point

    def test_domain_mismatch(self, field):
        g = IntegrandZ(field)
        g.set_point([0.1, 0.1, 0.1])
        with pytest.raises(PreconditionError, match="domain dimensions"):
            g.eval(0.0)

    def test_multiple_base_points(self, field):
        g = IntegrandZ(field)
        g.set_point(np.array([[0.1, 0.2], [0.3, 0.4]]))
        with pytest.raises(PreconditionError, match="accepts only 1"):
            g.eval(0.0)
