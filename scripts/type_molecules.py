"""Type the atoms of every molecule in an SDF file and save them as .npz.

Molecules have different atom counts, so per-atom arrays are concatenated
over molecules and ``offsets`` marks where each molecule starts:
- types: int32 type ids (index typers) or float feature rows (vector typers).
- radii: per-atom radius.
- coords: per-atom coordinates (n_atoms, 3).
- offsets: (n_molecules + 1,) start index of each molecule in the arrays above.
- type_names: names of the type channels.

Atoms that a mapping file leaves unmapped are dropped. Molecules containing an
element the typer cannot handle are skipped.

Example:
    python scripts/type_molecules.py \\
        --input data/raw/ligands.sdf \\
        --output data/processed/ligand_types.npz \\
        --typer gnina
    # or reduce the gnina types with a mapping file
    python scripts/type_molecules.py --typer gnina --map my_types.map
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List

import numpy as np
from rdkit import Chem

from mgtype.dataset.encoding import encode_molecule
from mgtype.typers import TYPERS, AtomIndexTyper, FileAtomMapper, MappedAtomIndexTyper, get_typer


def load_sdf(path: Path, remove_hs: bool) -> List[Chem.Mol]:
    suppl = Chem.SDMolSupplier(str(path), removeHs=remove_hs, sanitize=True)
    return [mol for mol in suppl if mol is not None]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Type molecule atoms for grid encoders.")
    parser.add_argument("--input", type=Path, default=Path("data/raw/molecules.sdf"), help="Path to SDF file.")
    parser.add_argument("--output", type=Path, default=Path("data/processed/atom_types.npz"), help="Output .npz file path.")
    parser.add_argument("--typer", type=str, default="gnina", choices=sorted(TYPERS), help="Typer preset.")
    parser.add_argument("--map", type=Path, default=None, help="Optional mapping file applied to an index typer.")
    parser.add_argument("--remove_hs", action="store_true", help="Strip explicit hydrogens when reading the SDF.")
    parser.add_argument("--dtype", type=str, default="float32", help="Floating dtype for output arrays.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    dtype = np.dtype(args.dtype)

    typer = get_typer(args.typer)
    if args.map is not None:
        if not isinstance(typer, AtomIndexTyper):
            raise SystemExit(f"--map requires an index typer, '{args.typer}' is a vector typer")
        typer = MappedAtomIndexTyper(FileAtomMapper(args.map, typer.get_type_names()), typer)

    mols = load_sdf(args.input, remove_hs=args.remove_hs)
    print(f"Loaded {len(mols)} molecules from {args.input}")

    types_list: List[np.ndarray] = []
    radii_list: List[np.ndarray] = []
    coords_list: List[np.ndarray] = []
    offsets = [0]

    for idx, mol in enumerate(mols):
        try:
            features = encode_molecule(mol, typer, dtype=dtype)
        except ValueError as exc:
            print(f"Skipping molecule {idx} ({exc})")
            continue
        types_list.append(features["types"])
        radii_list.append(features["radii"])
        coords_list.append(features.get("coords", np.zeros((len(features["radii"]), 3), dtype=dtype)))
        offsets.append(offsets[-1] + len(features["radii"]))
        if (idx + 1) % 1000 == 0:
            print(f"Processed {idx + 1}/{len(mols)} molecules...")

    if not types_list:
        raise SystemExit("No molecules could be typed.")

    arrays = {
        "types": np.concatenate(types_list, axis=0),
        "radii": np.concatenate(radii_list, axis=0),
        "coords": np.concatenate(coords_list, axis=0),
        "offsets": np.asarray(offsets, dtype=np.int64),
        "type_names": np.asarray(typer.get_type_names()),
    }

    args.output.parent.mkdir(parents=True, exist_ok=True)
    np.savez_compressed(args.output, **arrays)
    print(f"Saved {len(offsets) - 1} typed molecules to {args.output}")


if __name__ == "__main__":
    main()
