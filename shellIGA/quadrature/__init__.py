"""
Quadrature: Gauss-Legendre rules and 1D integration meshes.
"""

from .gauss import gauss_legendre_1d
from .integration_mesh import IntegrationMesh1D
