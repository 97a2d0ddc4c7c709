"""Atom perception from RDKit molecules and per-molecule encoding."""

from .atoms import AtomRecord, perceive_atoms
from .encoding import encode_molecule

__all__ = [
    "AtomRecord",
    "perceive_atoms",
    "encode_molecule",
]
