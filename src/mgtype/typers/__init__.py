"""Atom typers, type mappers and their composition."""

from .base import UNMAPPED, AtomIndexTypeMapper, AtomIndexTyper, AtomVectorTyper, TypeResult
from .element import ElementIndexTyper
from .gnina import GninaIndexTyper, GninaVectorTyper
from .mapped import FileMappedElementTyper, FileMappedGninaTyper, MappedAtomIndexTyper
from .mappers import FileAtomMapper, SubsetAtomMapper
from .presets import (
    DEFAULT_LIGAND_MAP,
    DEFAULT_RECEPTOR_MAP,
    TYPERS,
    default_ligand_typer,
    default_receptor_typer,
    get_typer,
)

__all__ = [
    "UNMAPPED",
    "TypeResult",
    "AtomIndexTyper",
    "AtomVectorTyper",
    "AtomIndexTypeMapper",
    "GninaIndexTyper",
    "GninaVectorTyper",
    "ElementIndexTyper",
    "MappedAtomIndexTyper",
    "FileMappedGninaTyper",
    "FileMappedElementTyper",
    "FileAtomMapper",
    "SubsetAtomMapper",
    "DEFAULT_RECEPTOR_MAP",
    "DEFAULT_LIGAND_MAP",
    "TYPERS",
    "default_receptor_typer",
    "default_ligand_typer",
    "get_typer",
]
