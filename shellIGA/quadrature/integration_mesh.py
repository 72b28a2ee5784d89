"""
One-dimensional integration meshes for thickness integrals.

An IntegrationMesh1D splits an interval [a, b] into the knot spans of a
uniform open knot vector and places a Gauss-Legendre rule on every span.
By default each span gets degree + 1 points, so a mesh of degree 1
integrates polynomials up to degree 3 exactly.

Usage:
    mesh = IntegrationMesh1D.build(-0.5, 0.5, interior_knots=1, degree=1)
    value = mesh.integrate(f, component=0)   # f: 1D Function
"""

import logging
import numpy as np
from typing import Optional, Union

from ..discretization.knot_vector import KnotVector, make_uniform_knot_vector
from ..exceptions import PreconditionError
from .gauss import gauss_legendre_1d

logger = logging.getLogger(__name__)


class IntegrationMesh1D:
    """
    Quadrature nodes and weights over the elements of a 1D knot vector.

    Attributes:
        knot_vector: KnotVector whose spans are the integration elements
        n_gauss: Number of Gauss points per element
    """

    def __init__(self, knot_vector: KnotVector, n_gauss: Optional[int] = None):
        self.knot_vector = knot_vector
        self.n_gauss = knot_vector.degree + 1 if n_gauss is None else n_gauss

        ref_points, ref_weights = gauss_legendre_1d(self.n_gauss)
        elements = knot_vector.elements

        self._points = np.zeros(len(elements) * self.n_gauss)
        self._weights = np.zeros(len(elements) * self.n_gauss)

        for e, (a, b) in enumerate(elements):
            sl = slice(e * self.n_gauss, (e + 1) * self.n_gauss)
            self._points[sl] = a + (b - a) * ref_points
            self._weights[sl] = (b - a) * ref_weights

    @classmethod
    def build(cls, lower: float, upper: float, interior_knots: int = 1,
              degree: int = 1, n_gauss: Optional[int] = None) -> 'IntegrationMesh1D':
        """
        Build a mesh on [lower, upper].

        Parameters:
            lower, upper: Interval bounds (lower <= upper)
            interior_knots: Number of uniformly spaced interior knots
            degree: Spline degree; the end knots are repeated degree + 1 times
            n_gauss: Gauss points per element, defaults to degree + 1

        Returns:
            IntegrationMesh1D
        """
        if not upper >= lower:
            raise PreconditionError(
                f"Integration bounds must satisfy lower <= upper, got [{lower}, {upper}]"
            )
        kv = make_uniform_knot_vector(lower, upper, interior_knots, degree + 1)
        logger.debug("Integration mesh on [%g, %g]: %d element(s), %d point(s) each",
                     lower, upper, kv.n_elements,
                     degree + 1 if n_gauss is None else n_gauss)
        return cls(kv, n_gauss)

    @property
    def n_elements(self) -> int:
        return self.knot_vector.n_elements

    @property
    def n_points(self) -> int:
        """Total number of quadrature points."""
        return len(self._weights)

    @property
    def points(self) -> np.ndarray:
        """Quadrature points as a (1, n_points) row, ready for Function.eval."""
        return self._points.reshape(1, -1)

    @property
    def weights(self) -> np.ndarray:
        return self._weights.copy()

    def integrate(self, fun, component: Optional[int] = None) -> Union[float, np.ndarray]:
        """
        Integrate a function of one variable over the mesh.

        Parameters:
            fun: Function with domain_dim == 1
            component: Index of the component to integrate; all components
                       when None

        Returns:
            float for a single component, otherwise a (target_dim,) array
        """
        if fun.domain_dim != 1:
            raise PreconditionError(
                f"Can only integrate functions of one variable, got domain_dim={fun.domain_dim}"
            )
        if component is not None and not 0 <= component < fun.target_dim:
            raise PreconditionError(
                f"Component {component} out of range for target dimension {fun.target_dim}"
            )

        if self.n_points == 0:
            # Zero-length interval
            return 0.0 if component is not None else np.zeros(fun.target_dim)

        values = fun.eval(self.points)
        if component is not None:
            return float(values[component] @ self._weights)
        return values @ self._weights
