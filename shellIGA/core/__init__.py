"""
Function interface shared by geometry maps, integrators and material matrices.
"""

from .function import Function, ConstantFunction, FunctionExpr, as_points
