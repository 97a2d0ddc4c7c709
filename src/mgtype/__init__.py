"""Atom typing for molecular grid encoders."""

from .dataset import AtomRecord, encode_molecule, perceive_atoms
from .errors import IndexOutOfRange, UnknownTypeName, UnrecognizedElement
from .typers import (
    UNMAPPED,
    AtomIndexTypeMapper,
    AtomIndexTyper,
    AtomVectorTyper,
    ElementIndexTyper,
    FileAtomMapper,
    GninaIndexTyper,
    GninaVectorTyper,
    MappedAtomIndexTyper,
    SubsetAtomMapper,
    TypeResult,
    get_typer,
)

__all__ = [
    "AtomRecord",
    "perceive_atoms",
    "encode_molecule",
    "UnrecognizedElement",
    "UnknownTypeName",
    "IndexOutOfRange",
    "UNMAPPED",
    "TypeResult",
    "AtomIndexTyper",
    "AtomVectorTyper",
    "AtomIndexTypeMapper",
    "GninaIndexTyper",
    "GninaVectorTyper",
    "ElementIndexTyper",
    "MappedAtomIndexTyper",
    "FileAtomMapper",
    "SubsetAtomMapper",
    "get_typer",
]
