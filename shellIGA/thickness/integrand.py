"""
Z-extension of a function for thickness integration.

A shell quantity f(x, y, z) is integrated through the thickness at a fixed
in-plane point (x, y). IntegrandZ freezes the in-plane coordinates and
exposes z as the only variable:

    g = IntegrandZ(f)
    g.set_point([x, y])
    g.eval(z) == f.eval([x, y, z])

so that g can be handed to a 1D integration mesh.
"""

import numpy as np

from ..core.function import Function, as_points
from ..exceptions import PreconditionError


class IntegrandZ(Function):
    """
    f(x_1, ..., x_{d-1}, z) restricted to z at a settable base point.

    The wrapped function is cloned on construction. The base point may
    be changed between evaluations with set_point.
    """

    def __init__(self, fun: Function):
        self._fun = fun.clone()
        self._point = None

    @property
    def domain_dim(self) -> int:
        return 1

    @property
    def target_dim(self) -> int:
        return self._fun.target_dim

    @property
    def function(self) -> Function:
        return self._fun

    def set_point(self, point) -> None:
        """Set the in-plane base point; a (d-1,) vector or (d-1, 1) column."""
        point = np.asarray(point, dtype=np.float64)
        if point.ndim < 2:
            point = point.reshape(-1, 1)
        self._point = point.copy()

    @property
    def point(self) -> np.ndarray:
        if self._point is None:
            raise PreconditionError("No base point set; call set_point first")
        return self._point.copy()

    def eval(self, u) -> np.ndarray:
        u = as_points(u, 1)
        if u.shape[0] != 1:
            raise PreconditionError(
                f"The number of rows for the 1D coordinate is not 1 but {u.shape[0]}!"
            )
        if self._point is None:
            raise PreconditionError("No base point set; call set_point first")
        if self._fun.domain_dim != self._point.shape[0] + 1:
            raise PreconditionError(
                f"The domain dimensions do not match! fun.domain_dim != point rows + 1 "
                f"({self._fun.domain_dim} != {self._point.shape[0] + 1})"
            )
        if self._point.shape[1] != 1:
            raise PreconditionError(
                f"Multiple ({self._point.shape[1]}) base points given, accepts only 1"
            )

        n = u.shape[1]
        full = np.vstack([np.repeat(self._point, n, axis=1), u])
        return self._fun.eval(full)

    def __repr__(self) -> str:
        return f"IntegrandZ({self._fun!r})"
