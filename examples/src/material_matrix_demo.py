#!/usr/bin/env python3
"""
Example: thickness integration and shell material matrices.

Walks through the building blocks one at a time and prints intermediate
results:
1. A function f(x, y, z) = (x, 2y, x*y*z^2) and its z-restriction
2. Integral of (1, z, ..., z^8) over a fixed thickness
3. Integral of the z-restriction over a fixed thickness
4. Integral of f over a thickness function, at points on the diagonal
5. An isotropic material matrix, pointwise and integrated (the latter
   is zero: the material matrix is scaled by z, an odd integrand)
6. A one-ply composite laminate rotated by 90 degrees

Usage:
    ./examples/src/material_matrix_demo.py [--thickness 1.0] [--config laminate.json]
"""

import argparse
import logging
import math
import sys
from pathlib import Path

import numpy as np

# Add project root to path (two levels up from examples/src/)
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from shellIGA.core.function import ConstantFunction, FunctionExpr
from shellIGA.geometry.primitives import make_nurbs_unit_square
from shellIGA.geometry.surface_map import MultiPatch
from shellIGA.io.config import load_config, laminate_from_config
from shellIGA.logging_config import setup_logging
from shellIGA.materials.isotropic import MaterialMatrix
from shellIGA.materials.laminate import MaterialMatrixLaminate
from shellIGA.thickness.integrand import IntegrandZ
from shellIGA.thickness.integrator import IntegrateZ, Integrate


def run(thickness: float = 1.0, config_file: str = None):
    """
    Run the demonstration.

    Parameters:
        thickness: Thickness used by the integrators
        config_file: Optional JSON file with a "laminate" section

    Returns:
        Dictionary with the computed arrays
    """
    results = {}
    np.set_printoptions(precision=6, suppress=True)

    pt1 = np.array([0.25])
    pt2 = np.array([0.25, 0.25])
    pt3 = np.array([0.25, 0.25, 0.25])
    points = np.vstack([np.linspace(0.0, 1.0, 11)] * 2)

    # ==========================================================================
    # 1. Function and z-restriction
    # ==========================================================================
    fun = FunctionExpr(lambda x, y, z: x,
                       lambda x, y, z: 2 * y,
                       lambda x, y, z: x * y * z**2,
                       domain_dim=3)

    print(f"f(x, y, z) = (x, 2y, x*y*z^2) at {pt3}")
    print("result =", fun.eval(pt3).ravel())

    fun2 = IntegrandZ(fun)
    for xy in (pt2, np.array([0.1, 0.1])):
        fun2.set_point(xy)
        print(f"f restricted to (x, y) = {xy}, z = {pt1[0]}")
        print("result =", fun2.eval(pt1).ravel())
    results["integrand"] = fun2.eval(pt1)

    # ==========================================================================
    # 2. Fixed-thickness integral of monomials
    # ==========================================================================
    fun3 = FunctionExpr(*[lambda z, k=k: z**k for k in range(9)], domain_dim=1)
    integrator = IntegrateZ(fun3, thickness)
    results["monomials"] = integrator.eval(pt1)

    print(f"\nIntegral of (1, z, ..., z^8) from {-thickness / 2} to {thickness / 2}:")
    print("result =", results["monomials"].ravel())

    # ==========================================================================
    # 3. Fixed-thickness integral of the z-restriction
    # ==========================================================================
    integrator2 = IntegrateZ(fun2, thickness)
    results["restricted"] = integrator2.eval(pt1)

    print(f"\nIntegral of f at (x, y) = {fun2.point.ravel()}:")
    print("result =", results["restricted"].ravel())

    # ==========================================================================
    # 4. Integral over a thickness function
    # ==========================================================================
    thick_fun = ConstantFunction(thickness, domain_dim=2)
    integrate = Integrate(fun, thick_fun)
    results["integrated"] = integrate.eval(points)

    print("\nIntegral of f on points (x, y) =")
    print(points.T)
    print("result =")
    print(results["integrated"].T)

    # ==========================================================================
    # 5. Isotropic material matrix
    # ==========================================================================
    mp = MultiPatch([make_nurbs_unit_square(p=1, n_elem_xi=1, n_elem_eta=1)]).embed(3)
    material = MaterialMatrix(mp, ConstantFunction(1.0, 2), ConstantFunction(0.0, 2))

    results["material"] = material.eval(pt3)
    print("\nMaterial matrix at", pt3)
    print(results["material"][:, 0].reshape(3, 3))

    results["material_integrated"] = Integrate(material, thick_fun).eval(points)
    print("\nMaterial matrix integrated through the thickness (z-scaled, so zero):")
    print(results["material_integrated"].T)

    # ==========================================================================
    # 6. Laminate
    # ==========================================================================
    if config_file:
        laminate = laminate_from_config(load_config(config_file))
    else:
        laminate = MaterialMatrixLaminate([(300.0, 200.0)], [100.0], [(0.3, 0.2)],
                                          [0.1], [math.pi / 2.0])

    results["laminate"] = laminate.eval(pt2)
    print(f"\nLaminate membrane stiffness ({laminate.n_plies} ply/plies):")
    print(results["laminate"][:, 0].reshape(3, 3))

    return results


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Shell material matrix example")
    parser.add_argument("--thickness", "-t", type=float, default=1.0,
                        help="Thickness of the integration interval")
    parser.add_argument("--config", "-c", type=str, default=None,
                        help="JSON file with a laminate definition")
    parser.add_argument("--debug", action="store_true", help="enable debug output")
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.debug else logging.INFO)
    run(thickness=args.thickness, config_file=args.config)
