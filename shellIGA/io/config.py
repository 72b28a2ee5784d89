"""
Material configuration files.

Material and laminate definitions are read from JSON:

    {
      "isotropic": {"E": 210000.0, "nu": 0.3},
      "laminate": {
        "symmetry_rtol": 0.0,
        "plies": [
          {"E1": 300.0, "E2": 200.0, "G12": 100.0,
           "nu12": 0.3, "nu21": 0.2, "thickness": 0.1, "angle_deg": 90.0}
        ]
      }
    }

Ply angles are given either in degrees ("angle_deg") or radians ("phi").
"""

import json
import math
from typing import Any, Dict

from ..core.function import ConstantFunction
from ..exceptions import PreconditionError
from ..materials.isotropic import MaterialMatrix
from ..materials.laminate import MaterialMatrixLaminate, Ply

PLY_KEYS = ("E1", "E2", "G12", "nu12", "nu21", "thickness")


def load_config(filename: str) -> Dict[str, Any]:
    """Load a configuration dictionary from a JSON file."""
    with open(filename, encoding="utf-8") as f:
        config = json.load(f)
    if not isinstance(config, dict):
        raise PreconditionError(f"{filename}: top level must be a JSON object")
    return config


def _require(section: Dict[str, Any], key: str, where: str):
    if key not in section:
        raise PreconditionError(f"Missing '{key}' in {where}")
    return section[key]


def ply_from_config(entry: Dict[str, Any], index: int = 0) -> Ply:
    """Build a Ply from one entry of the "plies" list."""
    where = f"ply {index}"
    values = {key: float(_require(entry, key, where)) for key in PLY_KEYS}

    if "phi" in entry and "angle_deg" in entry:
        raise PreconditionError(f"Give either 'phi' or 'angle_deg' in {where}, not both")
    if "angle_deg" in entry:
        phi = math.radians(float(entry["angle_deg"]))
    else:
        phi = float(entry.get("phi", 0.0))

    return Ply(phi=phi, **values)


def laminate_from_config(config: Dict[str, Any]) -> MaterialMatrixLaminate:
    """
    Build a laminate evaluator from the "laminate" section of a configuration
    (or from the section itself).
    """
    section = config.get("laminate", config)
    entries = _require(section, "plies", "laminate section")
    plies = [ply_from_config(entry, i) for i, entry in enumerate(entries)]
    return MaterialMatrixLaminate.from_plies(
        plies, symmetry_rtol=float(section.get("symmetry_rtol", 0.0)))


def isotropic_from_config(config: Dict[str, Any], geometry,
                          physical_coordinates: bool = False) -> MaterialMatrix:
    """
    Build an isotropic evaluator with constant E and nu from the "isotropic"
    section of a configuration (or from the section itself).
    """
    section = config.get("isotropic", config)
    E = float(_require(section, "E", "isotropic section"))
    nu = float(_require(section, "nu", "isotropic section"))
    dim = 3 if physical_coordinates else 2
    return MaterialMatrix(geometry, ConstantFunction(E, dim), ConstantFunction(nu, dim),
                          physical_coordinates=physical_coordinates)
