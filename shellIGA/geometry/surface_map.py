"""
Surface parametrizations as Functions.

SurfaceMap turns a NURBSSurface into a Function (parametric (xi, eta) to
physical coordinates) and provides the per-point quantities needed by the
shell material evaluators: surface Jacobian and unit normal. MultiPatch
collects several patches; piece(k) returns the map of patch k.

Usage:
    surface = make_nurbs_unit_square(p=1, n_elem_xi=1, n_elem_eta=1)
    mp = MultiPatch([surface]).embed(3)
    data = mp.piece(0).compute_map(np.array([[0.5], [0.5]]))
    data.jacobians[0]      # (3, 2)
    data.normals[:, 0]     # unit normal
"""

import numpy as np
from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..core.function import Function
from ..exceptions import PreconditionError
from .nurbs import NURBSSurface


@dataclass
class MapData:
    """
    Geometric quantities at a set of parametric points.

    Attributes:
        points: Parametric points, shape (2, n)
        values: Mapped physical points, shape (d, n)
        jacobians: Surface Jacobians, shape (n, d, 2)
        normals: Unit normals, shape (3, n); zero where the tangents are
                 parallel. None for surfaces in 2D.
    """
    points: np.ndarray
    values: np.ndarray
    jacobians: np.ndarray
    normals: Optional[np.ndarray] = None

    @property
    def n_points(self) -> int:
        return self.points.shape[1]


def unit_normals(jacobians: np.ndarray) -> np.ndarray:
    """
    Unit normals from a stack of (n, 3, 2) surface Jacobians.

    Returns:
        Array of shape (3, n). Degenerate points (parallel tangents) give
        a zero vector rather than NaN.
    """
    normals = np.cross(jacobians[:, :, 0], jacobians[:, :, 1])
    lengths = np.linalg.norm(normals, axis=1, keepdims=True)
    unit = np.divide(normals, lengths, out=np.zeros_like(normals), where=lengths > 0)
    return unit.T


class SurfaceMap(Function):
    """
    A NURBS surface seen as a function R^2 -> R^d.

    Attributes:
        surface: The underlying NURBSSurface
    """

    def __init__(self, surface: NURBSSurface):
        self.surface = surface

    @property
    def domain_dim(self) -> int:
        return 2

    @property
    def target_dim(self) -> int:
        return self.surface.n_dim_physical

    def eval(self, u) -> np.ndarray:
        u = self.check_points(u)
        result = np.zeros((self.target_dim, u.shape[1]))
        for j, (xi, eta) in enumerate(u.T):
            result[:, j] = self.surface.eval_point((xi, eta))
        return result

    def deriv(self, u) -> np.ndarray:
        jac = self.jacobian(u)
        return jac.reshape(jac.shape[0], -1).T

    def jacobian(self, u) -> np.ndarray:
        """Exact surface Jacobians, shape (n, d, 2)."""
        u = self.check_points(u)
        jac = np.zeros((u.shape[1], self.target_dim, 2))
        for i, (xi, eta) in enumerate(u.T):
            _, dS_dxi, dS_deta = self.surface.eval_derivatives((xi, eta))
            jac[i, :, 0] = dS_dxi
            jac[i, :, 1] = dS_deta
        return jac

    def jacobian_at(self, point) -> np.ndarray:
        """Jacobian (d, 2) at a single parametric point."""
        return self.jacobian(np.asarray(point, dtype=np.float64).reshape(2, 1))[0]

    def normal_at(self, point, normalized: bool = True) -> np.ndarray:
        """
        Surface normal dS/dxi x dS/deta at a single parametric point.

        Only defined for surfaces in 3D.
        """
        if self.target_dim != 3:
            raise PreconditionError(
                f"Normals need a surface in 3D, got physical dimension {self.target_dim}"
            )
        jac = self.jacobian_at(point)
        if normalized:
            return unit_normals(jac[None])[:, 0]
        return np.cross(jac[:, 0], jac[:, 1])

    def compute_map(self, u) -> MapData:
        """Points, Jacobians and (for 3D surfaces) unit normals at u."""
        u = self.check_points(u)
        values = self.eval(u)
        jacobians = self.jacobian(u)
        normals = unit_normals(jacobians) if self.target_dim == 3 else None
        return MapData(points=u, values=values, jacobians=jacobians, normals=normals)

    def embed(self, dim: int) -> 'SurfaceMap':
        return SurfaceMap(self.surface.embed(dim))

    def __repr__(self) -> str:
        return (f"SurfaceMap(degrees={self.surface.degrees}, "
                f"control_points={self.surface.n_control_points_per_dir}, "
                f"dim={self.target_dim})")


class MultiPatch:
    """
    Collection of surface patches sharing one physical space.

    piece(k) returns the SurfaceMap of patch k, so a MultiPatch can be
    passed wherever a single SurfaceMap is accepted.
    """

    def __init__(self, patches: Optional[Iterable[NURBSSurface]] = None):
        self._patches: List[NURBSSurface] = []
        for patch in patches or []:
            self.add_patch(patch)

    def add_patch(self, surface: NURBSSurface) -> int:
        """Append a patch; returns its index."""
        if self._patches and surface.n_dim_physical != self.n_dim_physical:
            raise PreconditionError(
                f"Patch dimension {surface.n_dim_physical} differs from "
                f"multipatch dimension {self.n_dim_physical}"
            )
        self._patches.append(surface)
        return len(self._patches) - 1

    @property
    def n_patches(self) -> int:
        return len(self._patches)

    def __len__(self) -> int:
        return len(self._patches)

    @property
    def n_dim_physical(self) -> int:
        if not self._patches:
            raise PreconditionError("MultiPatch has no patches")
        return self._patches[0].n_dim_physical

    def patch(self, k: int) -> NURBSSurface:
        if not 0 <= k < len(self._patches):
            raise PreconditionError(f"Patch index {k} out of range (0..{len(self._patches) - 1})")
        return self._patches[k]

    def piece(self, k: int) -> SurfaceMap:
        return SurfaceMap(self.patch(k))

    def embed(self, dim: int) -> 'MultiPatch':
        """Copy with every patch embedded in dim-dimensional space."""
        return MultiPatch(p.embed(dim) for p in self._patches)

    def __repr__(self) -> str:
        return f"MultiPatch(n_patches={self.n_patches})"
