"""
Reading material definitions from configuration files.
"""

from .config import (
    load_config,
    ply_from_config,
    laminate_from_config,
    isotropic_from_config,
)
