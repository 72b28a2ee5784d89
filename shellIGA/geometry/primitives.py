"""
Primitive geometry factory functions.

Flat shell mid-surfaces used in examples and tests:
- Unit square and rectangles, optionally embedded in 3D
"""

import numpy as np
from typing import Tuple

from .nurbs import NURBSSurface
from ..discretization.knot_vector import make_open_knot_vector


def make_nurbs_unit_square(p: int = 2, n_elem_xi: int = 4, n_elem_eta: int = 4,
                           physical_dim: int = 2) -> NURBSSurface:
    """
    Create a NURBS surface representing the unit square [0,1]².

    Control points sit at the Greville abscissae, so the map is the
    identity: parametric coordinates equal physical coordinates.

    Parameters:
        p: Polynomial degree in both directions
        n_elem_xi: Number of elements in xi direction
        n_elem_eta: Number of elements in eta direction
        physical_dim: 2 for 2D domain, 3 for surface in 3D (z=0)

    Returns:
        NURBSSurface representing the unit square
    """
    kv_xi = make_open_knot_vector(n_elem_xi + p, p, domain=(0.0, 1.0))
    kv_eta = make_open_knot_vector(n_elem_eta + p, p, domain=(0.0, 1.0))

    # xi varies fastest
    gx, gy = np.meshgrid(kv_xi.greville_abscissae(), kv_eta.greville_abscissae())
    control_points = np.zeros((gx.size, physical_dim))
    control_points[:, 0] = gx.ravel()
    control_points[:, 1] = gy.ravel()

    return NURBSSurface(kv_xi, kv_eta, control_points)


def make_nurbs_rectangle(x_range: Tuple[float, float] = (0.0, 1.0),
                         y_range: Tuple[float, float] = (0.0, 1.0),
                         p: int = 2,
                         n_elem_xi: int = 4,
                         n_elem_eta: int = 4,
                         physical_dim: int = 2) -> NURBSSurface:
    """
    Create a NURBS surface representing a rectangle.

    Parameters:
        x_range: (x_min, x_max)
        y_range: (y_min, y_max)
        p: Polynomial degree
        n_elem_xi: Number of elements in xi direction
        n_elem_eta: Number of elements in eta direction
        physical_dim: 2 or 3 (rectangle in the z=0 plane)

    Returns:
        NURBSSurface representing the rectangle
    """
    surface = make_nurbs_unit_square(p, n_elem_xi, n_elem_eta, physical_dim)

    x_min, x_max = x_range
    y_min, y_max = y_range

    control_points = surface.control_points
    control_points[:, 0] = x_min + (x_max - x_min) * control_points[:, 0]
    control_points[:, 1] = y_min + (y_max - y_min) * control_points[:, 1]

    return NURBSSurface(*surface.knot_vectors, control_points, surface.weights)
