import numpy as np
import pytest

from symorder.core.domain.models.coordinate_set import CoordinateSet
from symorder.core.domain.models.rotation_axis import RotationAxis


def arc_repeats(n_repeats: int, radius: float = 10.0, arc_degrees: int = 55, z: float = 0.0):
    """
    Cn-symmetric set: one point per degree on ``n_repeats`` arcs about the z axis.

    Repeat k covers angles 360k/n .. 360k/n + arc_degrees.
    """
    angles = np.radians(
        [360.0 * k / n_repeats + t for k in range(n_repeats) for t in range(arc_degrees + 1)]
    )
    return np.column_stack(
        [radius * np.cos(angles), radius * np.sin(angles), np.full(angles.shape, z)]
    )


@pytest.fixture
def z_axis():
    return RotationAxis([0.0, 0.0, 0.0], [0.0, 0.0, 1.0])


@pytest.fixture
def c3_pair(z_axis):
    """Two halves related by an exact 120 degree rotation of a C3-symmetric set."""
    coords_a = CoordinateSet(arc_repeats(3))
    coords_b = z_axis.rotate(coords_a, np.radians(120.0))
    return coords_a, coords_b, z_axis


def pdb_line(serial, chain, resseq, xyz):
    x, y, z = xyz
    return (
        f"ATOM  {serial:5d}  CA  ALA {chain}{resseq:4d}    "
        f"{x:8.3f}{y:8.3f}{z:8.3f}  1.00  0.00           C"
    )


def write_pdb(path, chains):
    """Write a CA-only PDB file from {chain_id: (n, 3) array}."""
    lines = []
    serial = 1
    for chain_id, coords in chains.items():
        for resseq, xyz in enumerate(coords, start=1):
            lines.append(pdb_line(serial, chain_id, resseq, xyz))
            serial += 1
        lines.append("TER")
    lines.append("END")
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def pdb_writer():
    return write_pdb


@pytest.fixture
def c3_trimer_pdb(tmp_path):
    """Homotrimer with chains A, B, C related by 120 degree turns about z."""
    trimer = arc_repeats(3, radius=20.0)
    n = len(trimer) // 3
    return write_pdb(
        tmp_path / "c3.pdb",
        {"A": trimer[:n], "B": trimer[n : 2 * n], "C": trimer[2 * n :]},
    )
