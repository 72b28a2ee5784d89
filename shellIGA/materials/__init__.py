"""
Material matrices for shells.

- MaterialMatrix: isotropic plane-stress tensor on a curved surface
- MaterialMatrixLaminate: membrane stiffness of a composite laminate
"""

from .isotropic import MaterialMatrix, lame_parameters, plane_stress_tensor
from .laminate import MaterialMatrixLaminate, Ply, ply_stiffness, rotation_matrix
