"""
shellIGA - Shell material matrices and thickness integration for IGA

Composable functions for isogeometric shell analysis:
- Functions: vector fields on parametric domains, evaluated column-wise
- Thickness integration: extend a function by a z coordinate and integrate
  it over a fixed or spatially varying thickness
- Material matrices: isotropic plane-stress tensors on curved NURBS
  surfaces and membrane stiffness of composite laminates

Key modules:
- core: Function base class, constant and expression functions
- geometry: NURBS surfaces, surface maps (Jacobian, normal), multipatches
- quadrature: Gauss-Legendre rules and 1D integration meshes
- thickness: IntegrandZ, IntegrateZ, Integrate
- materials: MaterialMatrix, MaterialMatrixLaminate
- io: JSON material configuration

Quick start (isotropic):
    from shellIGA.geometry import make_nurbs_unit_square, MultiPatch
    from shellIGA.core import ConstantFunction
    from shellIGA.materials import MaterialMatrix

    mp = MultiPatch([make_nurbs_unit_square(p=1, n_elem_xi=1, n_elem_eta=1)]).embed(3)
    mm = MaterialMatrix(mp, ConstantFunction(1.0, 2), ConstantFunction(0.3, 2))
    C = mm.eval([0.5, 0.5, 1.0])[:, 0].reshape(3, 3)

Quick start (thickness integration):
    from shellIGA.core import ConstantFunction, FunctionExpr
    from shellIGA.thickness import Integrate

    f = FunctionExpr(lambda x, y, z: x * y * z**2, domain_dim=3)
    F = Integrate(f, ConstantFunction(1.0, 2))
    F.eval([[0.5], [0.5]])   # 0.25 / 12

Quick start (laminate):
    from shellIGA.materials import MaterialMatrixLaminate, Ply

    mm = MaterialMatrixLaminate.from_plies([Ply(300.0, 200.0, 100.0, 0.3, 0.2, 0.1)])
    A = mm.eval([0.0, 0.0])[:, 0].reshape(3, 3)
"""

__version__ = "0.1.0"

# Core imports for convenience
from .exceptions import (ShellIGAError, PreconditionError, DegenerateGeometryError,
                         DegenerateMaterialError)
from .core.function import Function, ConstantFunction, FunctionExpr
from .geometry.nurbs import NURBSSurface
from .geometry.primitives import make_nurbs_unit_square, make_nurbs_rectangle
from .geometry.surface_map import SurfaceMap, MultiPatch
from .quadrature.integration_mesh import IntegrationMesh1D
from .thickness.integrand import IntegrandZ
from .thickness.integrator import IntegrateZ, Integrate
from .materials.isotropic import MaterialMatrix
from .materials.laminate import MaterialMatrixLaminate, Ply
from .logging_config import setup_logging
