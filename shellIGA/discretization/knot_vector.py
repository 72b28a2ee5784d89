"""
Knot vector utilities.

A knot vector is a non-decreasing sequence of real numbers that defines
the parametric domain and basis function support for B-splines/NURBS.

Mathematical background:
- Open knot vectors have p+1 repeated knots at each end (interpolatory at boundaries)
- The number of basis functions n = len(knots) - p - 1
- Knot spans (elements) are unique intervals [xi_i, xi_{i+1}] where xi_i < xi_{i+1}

The knot spans double as integration elements for the 1D thickness
quadrature (see quadrature.integration_mesh).
"""

import numpy as np
from typing import List, Tuple
from dataclasses import dataclass


@dataclass
class KnotVector:
    """
    Represents a univariate knot vector.

    Attributes:
        knots: The knot values (non-decreasing sequence)
        degree: Polynomial degree p

    Properties computed:
        n_basis: Number of basis functions
        n_elements: Number of non-zero measure knot spans
        elements: List of (start, end) parametric coordinates for each element
    """
    knots: np.ndarray
    degree: int

    def __post_init__(self):
        self.knots = np.asarray(self.knots, dtype=np.float64)
        self._validate()
        unique_knots = np.unique(self.knots)
        self._unique_knots = unique_knots
        # Zero-measure spans are skipped
        self._elements = [(a, b) for a, b in zip(unique_knots[:-1], unique_knots[1:])
                          if b > a]

    def _validate(self):
        if self.degree < 0:
            raise ValueError(f"Degree must be non-negative, got {self.degree}.")
        if len(self.knots) < 2 * (self.degree + 1):
            raise ValueError(
                f"Knot vector too short for degree {self.degree}. "
                f"Need at least {2 * (self.degree + 1)} knots, got {len(self.knots)}."
            )
        if not np.all(np.diff(self.knots) >= 0):
            raise ValueError("Knot vector must be non-decreasing.")

    @property
    def n_basis(self) -> int:
        """Number of basis functions."""
        return len(self.knots) - self.degree - 1

    @property
    def n_elements(self) -> int:
        """Number of non-zero measure knot spans (elements)."""
        return len(self._elements)

    @property
    def elements(self) -> List[Tuple[float, float]]:
        """List of element intervals as (xi_start, xi_end) tuples."""
        return self._elements.copy()

    @property
    def unique_knots(self) -> np.ndarray:
        """Unique knot values (breakpoints)."""
        return self._unique_knots.copy()

    @property
    def domain(self) -> Tuple[float, float]:
        """Parametric domain (first knot, last knot)."""
        return (self.knots[0], self.knots[-1])

    def find_span(self, xi: float) -> int:
        """
        Find the knot span index containing parameter value xi.

        For xi in [xi_i, xi_{i+1}), returns i.
        Uses the convention that the last span is closed: [xi_{n-1}, xi_n].

        Parameters:
            xi: Parameter value

        Returns:
            Span index i such that xi in [xi_i, xi_{i+1})
        """
        n = self.n_basis
        p = self.degree

        if xi >= self.knots[n]:
            return n - 1
        if xi <= self.knots[p]:
            return p

        # Last index with knots[i] <= xi
        return int(np.searchsorted(self.knots, xi, side='right')) - 1

    def greville_abscissae(self) -> np.ndarray:
        """
        Compute Greville abscissae (nodal parameters for basis functions).

        The i-th Greville abscissa is the average of p consecutive knots:
        xi_i = (xi_{i+1} + xi_{i+2} + ... + xi_{i+p}) / p

        Returns:
            Array of n Greville abscissae
        """
        p = self.degree
        if p == 0:
            return 0.5 * (self.knots[:-1] + self.knots[1:])
        return np.array([np.mean(self.knots[i + 1:i + p + 1])
                         for i in range(self.n_basis)])


def make_open_knot_vector(n_basis: int, degree: int,
                          domain: Tuple[float, float] = (0.0, 1.0)) -> KnotVector:
    """
    Create an open (clamped) uniform knot vector.

    Open knot vectors have the first and last knot repeated p+1 times,
    ensuring the basis interpolates the first and last control points.

    Parameters:
        n_basis: Number of basis functions desired
        degree: Polynomial degree p
        domain: Parametric domain (start, end)

    Returns:
        KnotVector with uniform internal knots
    """
    p = degree
    n_internal = n_basis - p - 1

    if n_internal < 0:
        raise ValueError(
            f"Cannot create knot vector: n_basis={n_basis} too small for degree={degree}"
        )

    a, b = domain
    internal = np.linspace(a, b, n_internal + 2)[1:-1]
    knots = np.concatenate([[a] * (p + 1), internal, [b] * (p + 1)])

    return KnotVector(knots, degree)


def make_uniform_knot_vector(first: float, last: float, n_interior: int,
                             mult_ends: int) -> KnotVector:
    """
    Uniform knot vector on [first, last] with n_interior interior knots.

    The end knots are repeated mult_ends times, so the degree is
    mult_ends - 1 ("order" mult_ends). For example

        make_uniform_knot_vector(-0.5, 0.5, 1, 2)

    gives the knots [-0.5, -0.5, 0, 0.5, 0.5] of degree 1.
    """
    if mult_ends < 1:
        raise ValueError(f"End multiplicity must be at least 1, got {mult_ends}")
    if n_interior < 0:
        raise ValueError(f"Number of interior knots must be non-negative, got {n_interior}")
    degree = mult_ends - 1
    return make_open_knot_vector(n_interior + degree + 1, degree, domain=(first, last))
