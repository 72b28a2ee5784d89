"""
Vector-valued functions on a parametric domain.

A function f maps points of a domain of dimension d (domain_dim) to values
of dimension D (target_dim). Points are passed column-wise:

    u.shape == (domain_dim, n_points)
    f.eval(u).shape == (target_dim, n_points)

Everything evaluated in shellIGA (geometry maps, thickness integrals,
material matrices) is a Function, so evaluators can be nested: a material
matrix can be integrated through the thickness, an integrated field can be
extended again, and so on.

Derived classes implement domain_dim, target_dim and eval. Derivatives
default to central finite differences and should be overridden where an
exact expression is available.
"""

import copy
import numpy as np
from abc import ABC, abstractmethod
from typing import Callable, Sequence, Union

from ..exceptions import PreconditionError


def as_points(u, domain_dim: int) -> np.ndarray:
    """
    Convert user input to a (rows, n_points) float array.

    A scalar is a single 1D point. A 1D array is a row of scalar points
    when domain_dim == 1 and a single point (one column) otherwise.
    The number of rows is not checked here.
    """
    u = np.asarray(u, dtype=np.float64)
    if u.ndim == 0:
        return u.reshape(1, 1)
    if u.ndim == 1:
        return u.reshape(1, -1) if domain_dim == 1 else u.reshape(-1, 1)
    if u.ndim > 2:
        raise PreconditionError(f"Points must be at most 2-dimensional, got shape {u.shape}")
    return u


class Function(ABC):
    """
    Abstract base class for functions R^d -> R^D.

    Subclasses must implement:
    - domain_dim: number of input coordinates
    - target_dim: number of output components
    - eval: evaluation at a (domain_dim, n) array of points
    """

    # Step for the default finite-difference derivatives
    fd_step = 1e-5

    @property
    @abstractmethod
    def domain_dim(self) -> int:
        pass

    @property
    @abstractmethod
    def target_dim(self) -> int:
        pass

    @abstractmethod
    def eval(self, u) -> np.ndarray:
        """
        Evaluate the function at points u.

        Parameters:
            u: Array of shape (domain_dim, n), one point per column

        Returns:
            Array of shape (target_dim, n)
        """
        pass

    def __call__(self, u) -> np.ndarray:
        return self.eval(u)

    def check_points(self, u) -> np.ndarray:
        """Convert u to a point array and verify it has domain_dim rows."""
        u = as_points(u, self.domain_dim)
        if u.shape[0] != self.domain_dim:
            raise PreconditionError(
                f"{type(self).__name__} expects points with {self.domain_dim} "
                f"row(s), got {u.shape[0]}"
            )
        return u

    def eval_component(self, u, comp: int) -> np.ndarray:
        """Evaluate component comp only; returns shape (1, n)."""
        if not 0 <= comp < self.target_dim:
            raise PreconditionError(
                f"Component {comp} out of range for target dimension {self.target_dim}"
            )
        return self.eval(u)[comp:comp + 1, :]

    def clone(self) -> 'Function':
        """Independent deep copy of this function."""
        return copy.deepcopy(self)

    def piece(self, k: int) -> 'Function':
        """A single function is a function set with one piece: itself."""
        return self

    def deriv(self, u) -> np.ndarray:
        """
        First derivatives at points u.

        Row i*d + k of the result holds d f_i / d x_k, i.e. for d = 2:
            [df_1/dx, df_1/dy, df_2/dx, df_2/dy, ...]

        Uses central finite differences with step fd_step unless a
        subclass overrides it.

        Returns:
            Array of shape (target_dim * domain_dim, n)
        """
        u = self.check_points(u)
        d, n = u.shape
        h = self.fd_step
        result = np.zeros((self.target_dim * d, n))

        for k in range(d):
            u_plus = u.copy()
            u_minus = u.copy()
            u_plus[k] += h
            u_minus[k] -= h
            result[k::d, :] = (self.eval(u_plus) - self.eval(u_minus)) / (2.0 * h)

        return result

    def jacobian(self, u) -> np.ndarray:
        """
        Jacobian matrices at points u.

        Returns:
            Array of shape (n, target_dim, domain_dim)
        """
        ders = self.deriv(u)
        n = ders.shape[1]
        return ders.T.reshape(n, self.target_dim, self.domain_dim)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(domain_dim={self.domain_dim}, "
                f"target_dim={self.target_dim})")


class ConstantFunction(Function):
    """
    Function with the same value everywhere.

    Example:
        thickness = ConstantFunction(0.01, domain_dim=2)
    """

    def __init__(self, value: Union[float, Sequence[float]], domain_dim: int = 1):
        self._value = np.atleast_1d(np.asarray(value, dtype=np.float64)).ravel()
        self._domain_dim = domain_dim

    @property
    def domain_dim(self) -> int:
        return self._domain_dim

    @property
    def target_dim(self) -> int:
        return len(self._value)

    @property
    def value(self) -> np.ndarray:
        return self._value.copy()

    def eval(self, u) -> np.ndarray:
        u = self.check_points(u)
        return np.tile(self._value[:, None], (1, u.shape[1]))

    def deriv(self, u) -> np.ndarray:
        u = self.check_points(u)
        return np.zeros((self.target_dim * self.domain_dim, u.shape[1]))

    def __repr__(self) -> str:
        return f"ConstantFunction({self._value.tolist()}, domain_dim={self._domain_dim})"


Component = Union[float, Callable[..., np.ndarray]]


class FunctionExpr(Function):
    """
    Function given by one expression per output component.

    Each component is either a number or a vectorized callable taking
    domain_dim coordinate arrays (x, y, z, ...) and returning an array of
    point values.

    Example:
        # f(x, y, z) = (x, 2y, x*y*z^2)
        f = FunctionExpr(lambda x, y, z: x,
                         lambda x, y, z: 2 * y,
                         lambda x, y, z: x * y * z**2,
                         domain_dim=3)
    """

    def __init__(self, *components: Component, domain_dim: int = 1):
        if not components:
            raise PreconditionError("FunctionExpr needs at least one component")
        self._components = components
        self._domain_dim = domain_dim

    @property
    def domain_dim(self) -> int:
        return self._domain_dim

    @property
    def target_dim(self) -> int:
        return len(self._components)

    def eval(self, u) -> np.ndarray:
        u = self.check_points(u)
        n = u.shape[1]
        coords = [u[k] for k in range(self._domain_dim)]
        result = np.empty((self.target_dim, n))

        for i, comp in enumerate(self._components):
            value = comp(*coords) if callable(comp) else comp
            result[i] = np.broadcast_to(np.asarray(value, dtype=np.float64), (n,))

        return result
