"""
Integration of functions through the shell thickness.

Two integrators reduce the domain of a function by integrating over a
symmetric interval [-t/2, t/2]:

- IntegrateZ: fixed thickness t, for functions of z alone (typically an
  IntegrandZ with its base point already set).
- Integrate: thickness given by a function of the in-plane coordinates;
  f(x, y, z) becomes F(x, y) = int_{-t(x,y)/2}^{t(x,y)/2} f(x, y, z) dz.

A fresh IntegrationMesh1D is built for every integral. For Integrate this
means one mesh per query point since the local thickness varies; meshes
are not cached between points.

Neither class is safe to share between threads: Integrate moves the base
point of its internal IntegrandZ during eval.
"""

import logging
import numpy as np

from ..core.function import Function
from ..exceptions import PreconditionError
from ..quadrature.integration_mesh import IntegrationMesh1D
from .integrand import IntegrandZ

logger = logging.getLogger(__name__)


class IntegrateZ(Function):
    """
    Integral of a function of z over [-t/2, t/2].

    The result does not depend on the query points; every column of
    eval(u) holds the same integral. Query points only fix the number of
    columns.

    Example:
        f = FunctionExpr(1.0, lambda z: z**2, domain_dim=1)
        IntegrateZ(f, 1.0).eval([0.0])   # [[1.0], [1/12]]
    """

    def __init__(self, fun: Function, thickness: float,
                 interior_knots: int = 1, degree: int = 1):
        """
        Parameters:
            fun: Function with domain_dim == 1 (cloned)
            thickness: Total thickness t
            interior_knots: Interior knots of the integration mesh
            degree: Degree of the integration mesh (degree + 1 Gauss points
                    per element)
        """
        if fun.domain_dim != 1:
            raise PreconditionError(
                f"IntegrateZ needs a function of z only (domain_dim 1), got {fun.domain_dim}; "
                f"wrap it in an IntegrandZ"
            )
        self._fun = fun.clone()
        self._t = float(thickness)
        self.interior_knots = interior_knots
        self.degree = degree

    @property
    def domain_dim(self) -> int:
        return 1

    @property
    def target_dim(self) -> int:
        return self._fun.target_dim

    @property
    def thickness(self) -> float:
        return self._t

    def set_point(self, point) -> None:
        """Move the base point of a wrapped IntegrandZ."""
        if not isinstance(self._fun, IntegrandZ):
            raise PreconditionError(
                f"set_point needs a wrapped IntegrandZ, got {type(self._fun).__name__}"
            )
        self._fun.set_point(point)

    def eval(self, u) -> np.ndarray:
        u = self.check_points(u)
        n = u.shape[1]
        result = np.zeros((self.target_dim, n))

        for i in range(self.target_dim):
            for j in range(n):
                mesh = IntegrationMesh1D.build(-self._t / 2.0, self._t / 2.0,
                                               self.interior_knots, self.degree)
                result[i, j] = mesh.integrate(self._fun, component=i)

        return result

    def __repr__(self) -> str:
        return f"IntegrateZ({self._fun!r}, thickness={self._t})"


class Integrate(Function):
    """
    Integral of f(x, z) over z in [-t(x)/2, t(x)/2].

    For a function f of domain dimension d and a scalar thickness function
    t of domain dimension d - 1, the result is a function of dimension
    d - 1 with the target dimension of f.
    """

    def __init__(self, fun: Function, thickness_fun: Function,
                 interior_knots: int = 2, degree: int = 1):
        """
        Parameters:
            fun: Function f(x, z) with domain_dim >= 2 (cloned)
            thickness_fun: Scalar function t(x) with domain_dim == fun.domain_dim - 1 (cloned)
            interior_knots: Interior knots of each integration mesh
            degree: Degree of each integration mesh
        """
        if fun.domain_dim < 2:
            raise PreconditionError(
                f"Integrate needs a function of at least 2 variables, got domain_dim {fun.domain_dim}"
            )
        if thickness_fun.domain_dim != fun.domain_dim - 1:
            raise PreconditionError(
                f"Thickness function domain dimension {thickness_fun.domain_dim} "
                f"must be fun.domain_dim - 1 = {fun.domain_dim - 1}"
            )
        if thickness_fun.target_dim != 1:
            raise PreconditionError(
                f"Thickness function must be scalar, got target_dim {thickness_fun.target_dim}"
            )
        self._integrand = IntegrandZ(fun)
        self._thickness_fun = thickness_fun.clone()
        self.interior_knots = interior_knots
        self.degree = degree

    @property
    def domain_dim(self) -> int:
        return self._integrand.function.domain_dim - 1

    @property
    def target_dim(self) -> int:
        return self._integrand.target_dim

    def eval(self, u) -> np.ndarray:
        u = self.check_points(u)
        thickness = self._thickness_fun.eval(u)[0]
        n = u.shape[1]
        result = np.zeros((self.target_dim, n))

        for j in range(n):
            t_half = thickness[j] / 2.0
            mesh = IntegrationMesh1D.build(-t_half, t_half,
                                           self.interior_knots, self.degree)
            self._integrand.set_point(u[:, j])
            result[:, j] = mesh.integrate(self._integrand)

        logger.debug("Integrated %s through thickness at %d point(s)",
                     type(self._integrand.function).__name__, n)
        return result

    def __repr__(self) -> str:
        return f"Integrate({self._integrand.function!r}, {self._thickness_fun!r})"
