"""
Geometry module: NURBS surfaces and their use as functions.
"""

from .nurbs import NURBSSurface
from .primitives import make_nurbs_unit_square, make_nurbs_rectangle
from .surface_map import SurfaceMap, MultiPatch, MapData
