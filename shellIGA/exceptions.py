"""
Error types raised by shellIGA.

Precondition violations (shape mismatches, inconsistent ply data, broken
elastic symmetry) are programming errors on the caller side and are never
recovered inside the library. Degenerate geometry or material data is
detected where it would otherwise turn into NaN/Inf in a material matrix.
"""


class ShellIGAError(Exception):
    """Base class for all shellIGA errors."""


class PreconditionError(ShellIGAError, ValueError):
    """An input violates a documented contract of an evaluator."""


class DegenerateGeometryError(ShellIGAError, ArithmeticError):
    """The local surface frame [J | n] is singular or not finite."""


class DegenerateMaterialError(ShellIGAError, ArithmeticError):
    """Material constants make the Lame parameters undefined."""
