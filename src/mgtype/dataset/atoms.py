"""Atom records consumed by the typers, and their perception from RDKit.

Typers never talk to RDKit directly. They read the already-perceived
properties collected in an ``AtomRecord`` (or any object exposing the same
attributes), so the classification rules stay independent of the toolkit
that did the perception.

Example:
    >>> from rdkit import Chem
    >>> mol = Chem.AddHs(Chem.MolFromSmiles("CCO"))
    >>> records = perceive_atoms(mol)
    >>> records[2].is_hbond_donor, records[2].is_hbond_acceptor
    (True, True)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

from rdkit import Chem, rdBase
from rdkit.Chem import rdPartialCharges

HBOND_DONOR_SMARTS = "[$([N;!H0;v3,v4&+1]),$([O;!H0;+0]),$([S;H1;+0]),n&H1&+0]"
HBOND_ACCEPTOR_SMARTS = (
    "[$([OH2]),$([O,S;H1;v2;!$(*-*=[O,N,P,S])]),$([O,S;H0;v2]),$([O,S;-]),"
    "$([N;v3;!$(N-*=[O,N,P,S])]),n&H0&+0,"
    "$([o,s;+0;!$([o,s]:n);!$([o,s]:c:n)])]"
)

_DONOR = Chem.MolFromSmarts(HBOND_DONOR_SMARTS)
_ACCEPTOR = Chem.MolFromSmarts(HBOND_ACCEPTOR_SMARTS)


@dataclass(frozen=True)
class AtomRecord:
    """Perceived properties of a single atom.

    Attributes:
        atomic_num: atomic number (0 for dummy atoms).
        symbol: element symbol.
        is_aromatic: aromaticity flag.
        num_hydrogens: attached hydrogens, implicit and explicit.
        is_hbond_donor: hydrogen-bond donor flag of this atom.
        is_hbond_acceptor: hydrogen-bond acceptor flag of this atom.
        partial_charge: partial charge (Gasteiger when built from RDKit).
        bonded_to_heteroatom: True if any direct neighbour is neither C nor H.
        bonded_to_donor: True if any direct neighbour is a hydrogen-bond donor.
    """

    atomic_num: int
    symbol: str = ""
    is_aromatic: bool = False
    num_hydrogens: int = 0
    is_hbond_donor: bool = False
    is_hbond_acceptor: bool = False
    partial_charge: float = 0.0
    bonded_to_heteroatom: bool = False
    bonded_to_donor: bool = False


def _match_set(mol: Chem.Mol, pattern: Chem.Mol) -> set[int]:
    # Single-atom patterns: one match per atom at most.
    matches = mol.GetSubstructMatches(pattern, uniquify=False, maxMatches=max(mol.GetNumAtoms(), 1))
    return {match[0] for match in matches}


def _gasteiger_charges(mol: Chem.Mol) -> List[float]:
    # Computed on a copy so the caller's molecule is left untouched.
    work = Chem.Mol(mol)
    with rdBase.BlockLogs():
        rdPartialCharges.ComputeGasteigerCharges(work)
    charges = []
    for atom in work.GetAtoms():
        charge = float(atom.GetProp("_GasteigerCharge")) if atom.HasProp("_GasteigerCharge") else 0.0
        charges.append(0.0 if math.isnan(charge) or math.isinf(charge) else float(charge))
    return charges


def perceive_atoms(mol: Chem.Mol, compute_charges: bool = True) -> List[AtomRecord]:
    """Build one ``AtomRecord`` per atom of ``mol``, in atom index order.

    Donor/acceptor flags come from SMARTS feature patterns; partial charges
    are Gasteiger charges unless ``compute_charges`` is False, in which case
    every charge is 0.0.
    """
    donors = _match_set(mol, _DONOR)
    acceptors = _match_set(mol, _ACCEPTOR)
    charges = _gasteiger_charges(mol) if compute_charges else [0.0] * mol.GetNumAtoms()

    records: List[AtomRecord] = []
    for atom in mol.GetAtoms():
        neighbors = atom.GetNeighbors()
        records.append(
            AtomRecord(
                atomic_num=atom.GetAtomicNum(),
                symbol=atom.GetSymbol(),
                is_aromatic=atom.GetIsAromatic(),
                num_hydrogens=atom.GetTotalNumHs(includeNeighbors=True),
                is_hbond_donor=atom.GetIdx() in donors,
                is_hbond_acceptor=atom.GetIdx() in acceptors,
                partial_charge=charges[atom.GetIdx()],
                bonded_to_heteroatom=any(n.GetAtomicNum() not in (1, 6) for n in neighbors),
                bonded_to_donor=any(n.GetIdx() in donors for n in neighbors),
            )
        )
    return records


__all__ = [
    "AtomRecord",
    "HBOND_DONOR_SMARTS",
    "HBOND_ACCEPTOR_SMARTS",
    "perceive_atoms",
]
