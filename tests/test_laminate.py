"""
Unit tests for the laminate membrane stiffness.
"""

import math

import pytest
import numpy as np
from numpy.testing import assert_allclose, assert_array_equal

from shellIGA.exceptions import PreconditionError
from shellIGA.materials import laminate
from shellIGA.materials.laminate import (MaterialMatrixLaminate, Ply, ply_stiffness,
                                         rotation_matrix)


@pytest.fixture
def ply():
    """Ply with E1=300, E2=200, G12=100, nu12=0.3, nu21=0.2, t=0.1."""
    return Ply(E1=300.0, E2=200.0, G12=100.0, nu12=0.3, nu21=0.2, thickness=0.1)


def stiffness(mm):
    return mm.eval([0.25, 0.25])[:, 0].reshape(3, 3)


class TestPly:
    """Tests for single plies."""

    def test_symmetry(self, ply):
        assert ply.nu21 * ply.E1 == 60.0
        assert ply.nu12 * ply.E2 == 60.0
        assert ply.check_symmetry()

    def test_symmetry_violated(self):
        assert not Ply(300.0, 200.0, 100.0, 0.3, 0.25, 0.1).check_symmetry()

    def test_symmetry_tolerance(self):
        p = Ply(300.0, 200.0, 100.0, 0.3, 0.2 * (1 + 1e-9), 0.1)
        assert not p.check_symmetry()
        assert p.check_symmetry(rtol=1e-6)

    def test_local_stiffness(self, ply):
        D = ply_stiffness(ply)
        denom = 1.0 - 0.3 * 0.2

        assert_allclose(D[0, 0], 300.0 / 0.94, rtol=1e-14)
        assert_allclose(D[0, 0], 319.1489361702, rtol=1e-10)
        assert_allclose(D[1, 1], 200.0 / denom, rtol=1e-14)
        assert_allclose(D[0, 1], 60.0 / denom, rtol=1e-14)
        assert_allclose(D[1, 0], 60.0 / denom, rtol=1e-14)
        assert D[2, 2] == 100.0
        assert D[0, 2] == D[2, 0] == D[1, 2] == D[2, 1] == 0.0

    def test_rotation_identity(self):
        assert_array_equal(rotation_matrix(0.0), np.eye(3))

    def test_rotation_quarter_turn(self):
        T = rotation_matrix(math.pi / 2)
        assert_allclose(T, [[0.0, 1.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, -1.0]], atol=1e-15)


class TestMaterialMatrixLaminate:
    """Tests for MaterialMatrixLaminate."""

    def test_dimensions(self, ply):
        mm = MaterialMatrixLaminate.from_plies([ply])
        assert mm.domain_dim == 2
        assert mm.target_dim == 9
        assert mm.n_plies == 1

    def test_single_unrotated_ply(self, ply):
        """phi = 0 gives exactly D * t."""
        mm = MaterialMatrixLaminate.from_plies([ply])
        assert_array_equal(stiffness(mm), ply_stiffness(ply) * ply.thickness)

    def test_quarter_turn_swaps_axes(self, ply):
        D = ply_stiffness(ply)
        mm = MaterialMatrixLaminate([(300.0, 200.0)], [100.0], [(0.3, 0.2)],
                                    [0.1], [math.pi / 2.0])
        A = stiffness(mm)

        assert_allclose(A[0, 0], D[1, 1] * 0.1, rtol=1e-12)
        assert_allclose(A[1, 1], D[0, 0] * 0.1, rtol=1e-12)
        assert_allclose(A[2, 2], D[2, 2] * 0.1, rtol=1e-12)
        assert_allclose(A[0, 2], 0.0, atol=1e-12)

    def test_half_turn_invariance(self, ply):
        for phi in [0.0, 0.3, math.pi / 4, 1.2]:
            a = MaterialMatrixLaminate.from_plies([Ply(300.0, 200.0, 100.0, 0.3, 0.2, 0.1, phi)])
            b = MaterialMatrixLaminate.from_plies([Ply(300.0, 200.0, 100.0, 0.3, 0.2, 0.1,
                                                       phi + math.pi)])
            assert_allclose(stiffness(a), stiffness(b), rtol=1e-12, atol=1e-12)

    def test_plies_add_up(self, ply):
        """A of a stack is the sum of the single-ply A matrices."""
        angles = [0.0, math.pi / 2, math.pi / 2, 0.0]
        stack = MaterialMatrixLaminate.from_plies(
            [Ply(300.0, 200.0, 100.0, 0.3, 0.2, 0.1, phi) for phi in angles])

        expected = sum(stiffness(MaterialMatrixLaminate.from_plies(
            [Ply(300.0, 200.0, 100.0, 0.3, 0.2, 0.1, phi)])) for phi in angles)
        assert_allclose(stiffness(stack), expected, rtol=1e-12)
        assert_allclose(stack.total_thickness, 0.4)

    def test_uneven_ply_thicknesses(self):
        """Thicknesses whose float sum depends on summation order are accepted."""
        thickness = [0.1, 0.2, 0.3]
        mm = MaterialMatrixLaminate([(300.0, 200.0)] * 3, [100.0] * 3, [(0.3, 0.2)] * 3,
                                    thickness, [0.0] * 3)

        assert mm.total_thickness == 0.1 + 0.2 + 0.3
        D = ply_stiffness(Ply(300.0, 200.0, 100.0, 0.3, 0.2, 1.0))
        assert_allclose(stiffness(mm), D * 0.6, rtol=1e-12)

        many = [0.1] * 10 + [1e-3, 0.7, 0.05]
        mm = MaterialMatrixLaminate([(300.0, 200.0)] * 13, [100.0] * 13, [(0.3, 0.2)] * 13,
                                    many, [0.0] * 13)
        assert_allclose(stiffness(mm), D * sum(many), rtol=1e-12)

    def test_same_matrix_at_every_point(self, ply):
        mm = MaterialMatrixLaminate.from_plies([ply])
        result = mm.eval(np.random.default_rng(0).random((2, 5)))

        assert result.shape == (9, 5)
        for j in range(5):
            assert_array_equal(result[:, j], result[:, 0])

    def test_symmetry_checked_before_computation(self, monkeypatch):
        def fail(phi):
            raise AssertionError("stiffness computed before validation")

        monkeypatch.setattr(laminate, "rotation_matrix", fail)
        mm = MaterialMatrixLaminate([(300.0, 200.0), (300.0, 200.0)], [100.0, 100.0],
                                    [(0.3, 0.2), (0.3, 0.25)], [0.1, 0.1], [0.0, 0.0])

        with pytest.raises(PreconditionError, match="ply 1"):
            mm.eval([0.0, 0.0])

    def test_symmetry_rtol(self):
        values = dict(youngs_moduli=[(300.0, 200.0)], shear_moduli=[100.0],
                      poisson_ratios=[(0.3, 0.2 * (1 + 1e-9))], thickness=[0.1], phi=[0.0])

        with pytest.raises(PreconditionError):
            MaterialMatrixLaminate(**values).eval([0.0, 0.0])
        MaterialMatrixLaminate(symmetry_rtol=1e-6, **values).eval([0.0, 0.0])

    @pytest.mark.parametrize("field,value", [
        ("shear_moduli", [100.0, 100.0]),
        ("poisson_ratios", [(0.3, 0.2), (0.3, 0.2)]),
        ("thickness", [0.1, 0.1]),
        ("phi", [0.0, 0.0]),
    ])
    def test_size_mismatch(self, field, value):
        values = dict(youngs_moduli=[(300.0, 200.0)], shear_moduli=[100.0],
                      poisson_ratios=[(0.3, 0.2)], thickness=[0.1], phi=[0.0])
        values[field] = value

        with pytest.raises(PreconditionError, match="is not equal"):
            MaterialMatrixLaminate(**values).eval([0.0, 0.0])

    def test_no_plies(self):
        with pytest.raises(PreconditionError, match="No laminates defined"):
            MaterialMatrixLaminate([], [], [], [], []).eval([0.0, 0.0])

    def test_wrong_query_rows(self, ply):
        with pytest.raises(PreconditionError):
            MaterialMatrixLaminate.from_plies([ply]).eval(np.zeros((3, 1)))
