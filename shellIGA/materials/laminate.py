"""
Laminate (composite) material matrix by classical laminate theory.

Each ply k has orthotropic constants (E1, E2, G12, nu12, nu21), a
thickness t_k and a fiber angle phi_k (radians). The local stiffness

    D = 1 / (1 - nu12 nu21) * [[E1,        nu21 E1, 0                   ],
                               [nu12 E2,   E2,      0                   ],
                               [0,         0,       G12 (1 - nu12 nu21) ]]

is rotated with T(phi) to D_k = T^T D T and the membrane stiffness

    A = sum_k D_k t_k

is returned. Coupling (B) and bending (D) stiffness are not part of
this evaluator.

The laminate is uniform over the surface: the same matrix is returned
at every query point.
"""

import logging
import math
import numpy as np
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..core.function import Function
from ..exceptions import PreconditionError

logger = logging.getLogger(__name__)


@dataclass
class Ply:
    """
    One layer of a laminate.

    Attributes:
        E1, E2: Young's moduli along and across the fibers
        G12: In-plane shear modulus
        nu12, nu21: Major and minor Poisson's ratios
        thickness: Ply thickness
        phi: Fiber angle in radians
    """
    E1: float
    E2: float
    G12: float
    nu12: float
    nu21: float
    thickness: float
    phi: float = 0.0

    def check_symmetry(self, rtol: float = 0.0) -> bool:
        """nu21 * E1 == nu12 * E2, exactly unless rtol > 0."""
        return math.isclose(self.nu21 * self.E1, self.nu12 * self.E2,
                            rel_tol=rtol, abs_tol=0.0)


def ply_stiffness(ply: Ply) -> np.ndarray:
    """Local (unrotated) plane-stress stiffness of a ply, shape (3, 3)."""
    denom = 1.0 - ply.nu12 * ply.nu21
    D = np.zeros((3, 3))
    D[0, 0] = ply.E1 / denom
    D[1, 1] = ply.E2 / denom
    D[2, 2] = ply.G12
    D[0, 1] = ply.nu21 * ply.E1 / denom
    D[1, 0] = ply.nu12 * ply.E2 / denom
    return D


def rotation_matrix(phi: float) -> np.ndarray:
    """
    Transformation matrix T for a fiber angle phi (radians).

        [[ c^2,    s^2,    s c     ],
         [ s^2,    c^2,   -s c     ],
         [-2 s c,  2 s c,  c^2 - s^2]]
    """
    c = math.cos(phi)
    s = math.sin(phi)
    return np.array([
        [c * c, s * s, s * c],
        [s * s, c * c, -s * c],
        [-2.0 * s * c, 2.0 * s * c, c * c - s * s],
    ])


class MaterialMatrixLaminate(Function):
    """
    Membrane (A) stiffness of a laminate.

    Parameters are given per ply, in stacking order:
        youngs_moduli: sequence of (E1, E2)
        shear_moduli: sequence of G12
        poisson_ratios: sequence of (nu12, nu21)
        thickness: sequence of ply thicknesses
        phi: sequence of fiber angles (radians)

    The data is checked on every eval: all sequences must have the same,
    non-zero length and every ply must satisfy nu21 E1 == nu12 E2
    (within symmetry_rtol, exact by default). Violations raise
    PreconditionError before any stiffness is computed.

    Example:
        mm = MaterialMatrixLaminate([(300.0, 200.0)], [100.0], [(0.3, 0.2)],
                                    [0.1], [math.pi / 2])
        A = mm.eval([0.25, 0.25])[:, 0].reshape(3, 3)
    """

    def __init__(self,
                 youngs_moduli: Sequence[Tuple[float, float]],
                 shear_moduli: Sequence[float],
                 poisson_ratios: Sequence[Tuple[float, float]],
                 thickness: Sequence[float],
                 phi: Sequence[float],
                 symmetry_rtol: float = 0.0):
        self._youngs_moduli = [tuple(e) for e in youngs_moduli]
        self._shear_moduli = list(shear_moduli)
        self._poisson_ratios = [tuple(p) for p in poisson_ratios]
        self._thickness = list(thickness)
        self._phi = list(phi)
        self.symmetry_rtol = symmetry_rtol

    @classmethod
    def from_plies(cls, plies: Sequence[Ply], symmetry_rtol: float = 0.0) -> 'MaterialMatrixLaminate':
        return cls([(p.E1, p.E2) for p in plies],
                   [p.G12 for p in plies],
                   [(p.nu12, p.nu21) for p in plies],
                   [p.thickness for p in plies],
                   [p.phi for p in plies],
                   symmetry_rtol=symmetry_rtol)

    @property
    def domain_dim(self) -> int:
        return 2

    @property
    def target_dim(self) -> int:
        return 9

    @property
    def n_plies(self) -> int:
        return len(self._phi)

    @property
    def total_thickness(self) -> float:
        """Sum of the ply thicknesses, accumulated ply by ply in stacking order."""
        t_tot = 0.0
        for t in self._thickness:
            t_tot += t
        return t_tot

    def _check_sizes(self):
        sizes = [
            (len(self._youngs_moduli), len(self._poisson_ratios), "Youngs Moduli and Poisson Ratios"),
            (len(self._youngs_moduli), len(self._shear_moduli), "Youngs Moduli and Shear Moduli"),
            (len(self._thickness), len(self._phi), "thickness and angles"),
            (len(self._youngs_moduli), len(self._thickness), "material properties and laminate properties"),
        ]
        for a, b, what in sizes:
            if a != b:
                raise PreconditionError(f"Size of vectors of {what} is not equal: {a} & {b}")
        if not self._youngs_moduli:
            raise PreconditionError("No laminates defined")

    @property
    def plies(self) -> List[Ply]:
        """The ply data, validated for size and elastic symmetry."""
        self._check_sizes()
        plies = [Ply(E1, E2, G12, nu12, nu21, t, phi)
                 for (E1, E2), G12, (nu12, nu21), t, phi
                 in zip(self._youngs_moduli, self._shear_moduli, self._poisson_ratios,
                        self._thickness, self._phi)]

        for i, ply in enumerate(plies):
            if not ply.check_symmetry(self.symmetry_rtol):
                raise PreconditionError(
                    f"No symmetry in material properties for ply {i}. nu12*E2 != nu21*E1:\n"
                    f"\tnu12 = {ply.nu12}\t E2 = {ply.E2}\t nu12*E2 = {ply.nu12 * ply.E2}\n"
                    f"\tnu21 = {ply.nu21}\t E1 = {ply.E1}\t nu21*E1 = {ply.nu21 * ply.E1}"
                )
        return plies

    def membrane_stiffness(self) -> np.ndarray:
        """The A matrix, shape (3, 3)."""
        plies = self.plies

        t_tot = self.total_thickness
        z_mid = t_tot / 2.0
        t_temp = 0.0

        A = np.zeros((3, 3))
        for i, ply in enumerate(plies):
            T = rotation_matrix(ply.phi)
            D = T.T @ ply_stiffness(ply) @ T

            # Distance of the ply centre from the mid-plane
            z = abs(z_mid - (ply.thickness / 2.0 + t_temp))
            logger.debug("Ply %d: t = %g, phi = %g, z = %g", i, ply.thickness, ply.phi, z)

            A += D * ply.thickness
            t_temp += ply.thickness

        if t_tot != t_temp:
            raise PreconditionError(
                f"Total thickness after loop is wrong. t_temp = {t_temp} "
                f"and sum(thickness) = {t_tot}"
            )
        return A

    def eval(self, u) -> np.ndarray:
        u = self.check_points(u)
        A = self.membrane_stiffness()
        return np.tile(A.reshape(9, 1), (1, u.shape[1]))

    def __repr__(self) -> str:
        return f"MaterialMatrixLaminate(n_plies={self.n_plies})"
