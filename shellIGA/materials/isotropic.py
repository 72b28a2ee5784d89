"""
Isotropic linear-elastic material matrix for shells.

For a shell mid-surface with Jacobian J = [a_1 | a_2] and unit normal n,
the contravariant metric is obtained from the local frame

    F0 = [a_1 | a_2 | n]^{-1},    a^{ab} = (F0 F0^T)_{ab}

and the plane-stress St. Venant-Kirchhoff tensor in Voigt order (11, 22, 12)
is

    C^{abcd} = (C_constant / 2) a^{ab} a^{cd} + mu (a^{ac} a^{bd} + a^{ad} a^{bc})

with C_constant = 4 lambda mu / (lambda + 2 mu). On a flat, axis-aligned
patch this is the familiar plane-stress matrix

    E / (1 - nu^2) * [[1, nu, 0], [nu, 1, 0], [0, 0, (1 - nu) / 2]]

The third input coordinate scales the whole tensor. It is a plain
multiplicative factor (e.g. a thickness supplied by the caller), not a
through-thickness integral: integrating MaterialMatrix over a symmetric
interval with Integrate gives zero.
"""

import logging
import numpy as np
from typing import Tuple

from ..core.function import Function
from ..exceptions import (PreconditionError, DegenerateGeometryError,
                          DegenerateMaterialError)

logger = logging.getLogger(__name__)


def lame_parameters(E: float, nu: float) -> Tuple[float, float]:
    """
    Lame parameters (lambda, mu) from Young's modulus and Poisson's ratio.

    Raises:
        DegenerateMaterialError: nu == -1 or nu == 0.5
    """
    if (1.0 + nu) == 0.0 or (1.0 - 2.0 * nu) == 0.0:
        raise DegenerateMaterialError(
            f"Lame parameters undefined for E = {E}, nu = {nu}"
        )
    lam = E * nu / ((1.0 + nu) * (1.0 - 2.0 * nu))
    mu = E / (2.0 * (1.0 + nu))
    return lam, mu


def plane_stress_tensor(F0: np.ndarray, lam: float, mu: float) -> np.ndarray:
    """
    3x3 plane-stress material tensor for the contravariant metric F0.

    Parameters:
        F0: Contravariant metric (only the in-plane 2x2 block is used)
        lam, mu: Lame parameters

    Returns:
        Symmetric (3, 3) array in Voigt order (11, 22, 12)
    """
    if lam + 2.0 * mu == 0.0:
        raise DegenerateMaterialError(
            f"lambda + 2 mu vanishes (lambda = {lam}, mu = {mu})"
        )
    C_constant = 4.0 * lam * mu / (lam + 2.0 * mu)
    c = 0.5 * C_constant

    C = np.zeros((3, 3))
    C[0, 0] = c * F0[0, 0] * F0[0, 0] + mu * (2 * F0[0, 0] * F0[0, 0])
    C[1, 1] = c * F0[1, 1] * F0[1, 1] + mu * (2 * F0[1, 1] * F0[1, 1])
    C[2, 2] = c * F0[0, 1] * F0[0, 1] + mu * (F0[0, 0] * F0[1, 1] + F0[0, 1] * F0[0, 1])
    C[0, 1] = C[1, 0] = c * F0[0, 0] * F0[1, 1] + mu * (2 * F0[0, 1] * F0[0, 1])
    C[0, 2] = C[2, 0] = c * F0[0, 0] * F0[0, 1] + mu * (2 * F0[0, 0] * F0[0, 1])
    C[1, 2] = C[2, 1] = c * F0[0, 1] * F0[1, 1] + mu * (2 * F0[0, 1] * F0[1, 1])
    return C


class MaterialMatrix(Function):
    """
    Isotropic material matrix on a shell surface.

    Input points are (x, y, z): parametric surface coordinates (x, y) and
    a scale factor z. Each output column is the flattened 3x3 tensor.

    The geometry is used through piece(0); pass a MultiPatch or SurfaceMap
    embedded in 3D. Young's modulus and Poisson's ratio are scalar
    functions of the parametric point, or of the physical point when
    physical_coordinates is True.

    piece(k) returns an evaluator for patch k. It is kept in a single
    slot and replaced by the next piece(k) call, so an instance must not
    be shared between threads.
    """

    # |det([J | n])| <= singular_tol * |a_1| |a_2| is treated as a singular frame
    singular_tol = 1e-12

    def __init__(self, geometry, youngs_modulus: Function, poisson_ratio: Function,
                 physical_coordinates: bool = False):
        self._geometry = geometry
        self._youngs_modulus = youngs_modulus.clone()
        self._poisson_ratio = poisson_ratio.clone()
        self.physical_coordinates = physical_coordinates
        self._piece = None

    @property
    def domain_dim(self) -> int:
        return 3

    @property
    def target_dim(self) -> int:
        return 9

    def piece(self, k: int) -> 'MaterialMatrix':
        self._piece = MaterialMatrix(self._geometry.piece(k), self._youngs_modulus,
                                     self._poisson_ratio, self.physical_coordinates)
        return self._piece

    def local_frame(self, jacobian: np.ndarray, normal: np.ndarray) -> np.ndarray:
        """
        Contravariant metric F0 = inv([J | n]) inv([J | n])^T.

        Raises:
            DegenerateGeometryError: the frame is singular or not finite
        """
        F0 = np.empty((3, 3))
        F0[:, :2] = jacobian
        F0[:, 2] = normal

        det = np.linalg.det(F0)
        scale = np.linalg.norm(jacobian[:, 0]) * np.linalg.norm(jacobian[:, 1])
        if not np.isfinite(det) or abs(det) <= self.singular_tol * scale:
            raise DegenerateGeometryError(
                f"Singular surface frame [J | n], det = {det}:\n{F0}"
            )

        F0 = np.linalg.inv(F0)
        return F0 @ F0.T

    def eval(self, u) -> np.ndarray:
        u = self.check_points(u)
        geometry = self._geometry.piece(0)
        if geometry.target_dim != 3:
            raise PreconditionError(
                f"MaterialMatrix needs a surface embedded in 3D, got dimension "
                f"{geometry.target_dim}; use embed(3)"
            )

        data = geometry.compute_map(u[:2])
        where = data.values if self.physical_coordinates else data.points
        E = self._youngs_modulus.eval(where)[0]
        nu = self._poisson_ratio.eval(where)[0]

        n = u.shape[1]
        result = np.zeros((self.target_dim, n))
        for i in range(n):
            F0 = self.local_frame(data.jacobians[i], data.normals[:, i])
            lam, mu = lame_parameters(E[i], nu[i])
            C = plane_stress_tensor(F0, lam, mu)
            result[:, i] = (C * u[2, i]).reshape(-1)

        return result

    def __repr__(self) -> str:
        return (f"MaterialMatrix({self._geometry!r}, E={self._youngs_modulus!r}, "
                f"nu={self._poisson_ratio!r})")
