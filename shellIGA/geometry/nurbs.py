"""
NURBS (Non-Uniform Rational B-Spline) surfaces.

A NURBS surface point is computed as:

    S(xi, eta) = sum_{i,j} N_i(xi) N_j(eta) w_ij P_ij / sum_{i,j} N_i(xi) N_j(eta) w_ij

where N are B-spline basis functions, w_ij positive weights and P_ij the
control points. Shell mid-surfaces are NURBS surfaces embedded in 3D;
the material evaluators only need the point and its first derivatives
(the surface Jacobian).
"""

import numpy as np
from typing import Optional, Tuple

from ..discretization.knot_vector import KnotVector
from .bspline import eval_basis_ders_1d


class NURBSSurface:
    """
    NURBS surface in 2D or 3D space.

    A NURBS surface S(xi, eta) is defined by:
    - Two knot vectors (xi and eta directions)
    - Control points P_{i,j} arranged in a grid
    - Weights w_{i,j} > 0

    Control points are stored with xi varying fastest:
    [P_{0,0}, P_{1,0}, ..., P_{n_xi-1,0}, P_{0,1}, ...]
    """

    def __init__(self,
                 knot_vector_xi: KnotVector,
                 knot_vector_eta: KnotVector,
                 control_points: np.ndarray,
                 weights: Optional[np.ndarray] = None):
        """
        Initialize a NURBS surface.

        Parameters:
            knot_vector_xi: KnotVector for xi direction
            knot_vector_eta: KnotVector for eta direction
            control_points: Array of shape (n_xi * n_eta, d)
            weights: Array of shape (n_xi * n_eta,), defaults to 1.0
        """
        self._kv_xi = knot_vector_xi
        self._kv_eta = knot_vector_eta
        self._n_xi = knot_vector_xi.n_basis
        self._n_eta = knot_vector_eta.n_basis
        n_total = self._n_xi * self._n_eta

        control_points = np.atleast_2d(np.asarray(control_points, dtype=np.float64))
        if control_points.shape[0] != n_total:
            raise ValueError(
                f"Number of control points ({control_points.shape[0]}) "
                f"must equal n_xi * n_eta ({n_total})"
            )
        self._control_points = control_points

        if weights is None:
            self._weights = np.ones(n_total)
        else:
            weights = np.asarray(weights, dtype=np.float64).flatten()
            if len(weights) != n_total:
                raise ValueError(f"Weights length ({len(weights)}) must equal {n_total}")
            if np.any(weights <= 0):
                raise ValueError("All weights must be positive")
            self._weights = weights

    @property
    def n_dim_physical(self) -> int:
        return self._control_points.shape[1]

    @property
    def n_control_points(self) -> int:
        return self._n_xi * self._n_eta

    @property
    def n_control_points_per_dir(self) -> Tuple[int, int]:
        """Number of control points in each direction (n_xi, n_eta)."""
        return (self._n_xi, self._n_eta)

    @property
    def control_points(self) -> np.ndarray:
        return self._control_points.copy()

    @property
    def weights(self) -> np.ndarray:
        return self._weights.copy()

    @property
    def knot_vectors(self) -> Tuple[KnotVector, KnotVector]:
        return (self._kv_xi, self._kv_eta)

    @property
    def degrees(self) -> Tuple[int, int]:
        return (self._kv_xi.degree, self._kv_eta.degree)

    @property
    def domain(self) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        """Parametric domain as ((xi_min, xi_max), (eta_min, eta_max))."""
        return (self._kv_xi.domain, self._kv_eta.domain)

    def embed(self, dim: int) -> 'NURBSSurface':
        """
        Copy of the surface with control points in dim-dimensional space.

        Missing coordinates are set to zero, surplus ones are dropped.
        """
        d = self.n_dim_physical
        cps = np.zeros((self.n_control_points, dim))
        cps[:, :min(d, dim)] = self._control_points[:, :min(d, dim)]
        return NURBSSurface(self._kv_xi, self._kv_eta, cps, self._weights)

    def _local_data(self, xi_val: float, eta_val: float, n_ders: int):
        """Basis derivatives, control points and weights active at (xi, eta)."""
        span_xi = self._kv_xi.find_span(xi_val)
        span_eta = self._kv_eta.find_span(eta_val)
        p_xi, p_eta = self.degrees

        N_xi = eval_basis_ders_1d(self._kv_xi, xi_val, n_ders, span_xi)
        N_eta = eval_basis_ders_1d(self._kv_eta, eta_val, n_ders, span_eta)

        rows = slice(span_eta - p_eta, span_eta + 1)
        cols = slice(span_xi - p_xi, span_xi + 1)
        P = self._control_points.reshape(self._n_eta, self._n_xi, -1)[rows, cols]
        w = self._weights.reshape(self._n_eta, self._n_xi)[rows, cols]

        return N_xi, N_eta, P, w

    def eval_point(self, xi: Tuple[float, float]) -> np.ndarray:
        """
        Evaluate surface at parameter values.

        Parameters:
            xi: Parameter values (xi, eta)

        Returns:
            Point coordinates as (d,) array
        """
        N_xi, N_eta, P, w = self._local_data(xi[0], xi[1], 0)
        Nw = np.outer(N_eta[0], N_xi[0]) * w
        return np.einsum('ji,jid->d', Nw, P) / np.sum(Nw)

    def eval_derivatives(self, xi: Tuple[float, float]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Evaluate surface point and first derivatives.

        Parameters:
            xi: Parameter values (xi, eta)

        Returns:
            Tuple (S, dS/dxi, dS/deta) of (d,) arrays
        """
        N_xi, N_eta, P, w = self._local_data(xi[0], xi[1], 1)

        Nw = np.outer(N_eta[0], N_xi[0]) * w
        dNw_dxi = np.outer(N_eta[0], N_xi[1]) * w
        dNw_deta = np.outer(N_eta[1], N_xi[0]) * w

        A = np.einsum('ji,jid->d', Nw, P)
        dA_dxi = np.einsum('ji,jid->d', dNw_dxi, P)
        dA_deta = np.einsum('ji,jid->d', dNw_deta, P)
        W = np.sum(Nw)
        dW_dxi = np.sum(dNw_dxi)
        dW_deta = np.sum(dNw_deta)

        # Quotient rule: d/dxi(A/W) = (dA/dxi * W - A * dW/dxi) / W^2
        S = A / W
        dS_dxi = (dA_dxi * W - A * dW_dxi) / (W * W)
        dS_deta = (dA_deta * W - A * dW_deta) / (W * W)

        return (S, dS_dxi, dS_deta)
