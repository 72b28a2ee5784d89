#!/usr/bin/env python3
"""
Plot the membrane stiffness of a single ply against its fiber angle.

The A-matrix entries of one ply are evaluated for fiber angles in
[0, 180] degrees. A11 and A22 trade places at 90 degrees, the shear
coupling terms A13 and A23 vanish at 0, 90 and 180 degrees, and every
curve repeats after a half turn.
"""

import sys
import os
import argparse
import math
import numpy as np

# Use Agg backend when saving to file
if '--save' in sys.argv:
    import matplotlib
    matplotlib.use('Agg')

import matplotlib.pyplot as plt

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from shellIGA.io.config import load_config, ply_from_config
from shellIGA.materials.laminate import MaterialMatrixLaminate, Ply

ENTRIES = [((0, 0), "A11"), ((1, 1), "A22"), ((2, 2), "A33"),
           ((0, 1), "A12"), ((0, 2), "A13"), ((1, 2), "A23")]


def sweep(ply, n_angles=181):
    """
    Membrane stiffness of ply for n_angles fiber angles in [0, pi].

    Returns:
        (angles_deg, A) with A of shape (n_angles, 3, 3)
    """
    angles = np.linspace(0.0, math.pi, n_angles)
    A = np.zeros((n_angles, 3, 3))
    for i, phi in enumerate(angles):
        rotated = Ply(ply.E1, ply.E2, ply.G12, ply.nu12, ply.nu21, ply.thickness, phi)
        mm = MaterialMatrixLaminate.from_plies([rotated])
        A[i] = mm.eval([0.0, 0.0])[:, 0].reshape(3, 3)
    return np.degrees(angles), A


def plot_sweep(angles_deg, A, save_path=None):
    fig, ax = plt.subplots(figsize=(10, 6))

    for (i, j), label in ENTRIES:
        style = '-' if i == j else '--'
        ax.plot(angles_deg, A[:, i, j], style, label=label, linewidth=1.5)

    ax.axhline(0.0, color='gray', linewidth=0.5)
    ax.set_xlabel('Fiber angle [deg]')
    ax.set_ylabel('Membrane stiffness')
    ax.set_title('Single-ply A-matrix vs. fiber angle')
    ax.set_xlim(angles_deg[0], angles_deg[-1])
    ax.set_xticks(np.arange(0, 181, 45))
    ax.legend(loc='upper right', ncol=2)
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Saved: {save_path}")

    return fig


def main():
    parser = argparse.ArgumentParser(description="Ply stiffness against fiber angle")
    parser.add_argument("--config", "-c", type=str, default=None,
                        help="JSON file; the first ply of its laminate is used")
    parser.add_argument("--n-angles", type=int, default=181,
                        help="Number of fiber angles")
    parser.add_argument("--save", action="store_true",
                        help="Save the figure to laminate_angle_sweep.png")
    args = parser.parse_args()

    if args.config:
        config = load_config(args.config)
        ply = ply_from_config(config.get("laminate", config)["plies"][0])
    else:
        ply = Ply(E1=300.0, E2=200.0, G12=100.0, nu12=0.3, nu21=0.2, thickness=0.1)

    print(f"Ply: E1={ply.E1}, E2={ply.E2}, G12={ply.G12}, "
          f"nu12={ply.nu12}, nu21={ply.nu21}, t={ply.thickness}")

    angles_deg, A = sweep(ply, args.n_angles)
    mid = len(angles_deg) // 2
    print(f"A at {angles_deg[0]:.0f} deg:\n{A[0]}")
    print(f"A at {angles_deg[mid]:.0f} deg:\n{A[mid]}")

    save_path = "laminate_angle_sweep.png" if args.save else None
    plot_sweep(angles_deg, A, save_path=save_path)

    if not args.save:
        plt.show()


if __name__ == "__main__":
    main()
