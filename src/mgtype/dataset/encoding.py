"""Type every atom of an RDKit molecule into dense arrays.

Index typers produce integer type ids; vector typers produce one feature row
per atom. Atoms that a mapped typer sends to the unmapped id (-1) are dropped
unless ``drop_unmapped`` is False.
"""

from __future__ import annotations

from typing import Dict

import numpy as np
from numpy.typing import DTypeLike
from rdkit import Chem

from mgtype.dataset.atoms import perceive_atoms
from mgtype.typers.base import UNMAPPED, AtomIndexTyper, AtomVectorTyper


def _coordinates(mol: Chem.Mol, dtype: DTypeLike) -> np.ndarray | None:
    if mol.GetNumConformers() == 0:
        return None
    return np.asarray(mol.GetConformer().GetPositions(), dtype=dtype)


def encode_molecule(
    mol: Chem.Mol,
    typer: AtomIndexTyper | AtomVectorTyper,
    drop_unmapped: bool = True,
    add_hs: bool = False,
    dtype: DTypeLike = "float32",
) -> Dict[str, np.ndarray]:
    """Encode the atoms of ``mol`` with ``typer``.

    Returns a dict with ``types`` (``(n,)`` int32 for index typers,
    ``(n, typer.num_types())`` for vector typers), ``radii`` (``(n,)``),
    ``atom_indices`` (index of each kept atom in ``mol``) and, when the
    molecule has a conformer, ``coords`` (``(n, 3)``).

    Example:
        >>> from mgtype.typers import GninaIndexTyper
        >>> mol = Chem.MolFromSmiles("CCO")
        >>> encode_molecule(mol, GninaIndexTyper())["types"]
        array([ 2,  3, 12], dtype=int32)
    """
    if add_hs:
        mol = Chem.AddHs(mol, addCoords=mol.GetNumConformers() > 0)
    records = perceive_atoms(mol)
    n_atoms = len(records)
    radii = np.zeros((n_atoms,), dtype=dtype)

    if isinstance(typer, AtomVectorTyper):
        types = np.zeros((n_atoms, typer.num_types()), dtype=dtype)
        for i, record in enumerate(records):
            radii[i] = typer.get_type(record, types[i])
        keep = np.ones((n_atoms,), dtype=bool)
    elif isinstance(typer, AtomIndexTyper):
        types = np.zeros((n_atoms,), dtype=np.int32)
        for i, record in enumerate(records):
            types[i], radii[i] = typer.get_type(record)
        keep = types != UNMAPPED if drop_unmapped else np.ones((n_atoms,), dtype=bool)
    else:
        raise TypeError(f"Expected an AtomIndexTyper or AtomVectorTyper, got {type(typer).__name__}")

    out = {
        "types": types[keep],
        "radii": radii[keep],
        "atom_indices": np.nonzero(keep)[0].astype(np.int32),
    }
    coords = _coordinates(mol, dtype)
    if coords is not None:
        out["coords"] = coords[keep]
    return out


__all__ = ["encode_molecule"]
