"""
Discretization module.

Provides:
- KnotVector: Knot vector representation
- make_open_knot_vector / make_uniform_knot_vector: uniform clamped knot vectors
"""

from .knot_vector import KnotVector, make_open_knot_vector, make_uniform_knot_vector
