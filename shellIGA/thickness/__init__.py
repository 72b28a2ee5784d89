"""
Through-thickness integration of shell quantities.

Provides:
- IntegrandZ: restrict f(x, z) to z at a fixed in-plane point
- IntegrateZ: integral over a fixed thickness
- Integrate: integral over a thickness varying in the plane
"""

from .integrand import IntegrandZ
from .integrator import IntegrateZ, Integrate
