"""Named typer presets and the default receptor/ligand type maps."""

from __future__ import annotations

import io
from typing import Callable, Dict

from mgtype.typers.base import AtomIndexTyper, AtomVectorTyper
from mgtype.typers.element import ElementIndexTyper
from mgtype.typers.gnina import GninaIndexTyper, GninaVectorTyper
from mgtype.typers.mapped import FileMappedGninaTyper

DEFAULT_RECEPTOR_MAP = """\
AliphaticCarbonXSHydrophobe
AliphaticCarbonXSNonHydrophobe
AromaticCarbonXSHydrophobe
AromaticCarbonXSNonHydrophobe
Calcium
Iron
Magnesium
Nitrogen
NitrogenXSAcceptor
NitrogenXSDonor
NitrogenXSDonorAcceptor
OxygenXSAcceptor
OxygenXSDonorAcceptor
Phosphorus
Sulfur
Zinc
"""

DEFAULT_LIGAND_MAP = """\
AliphaticCarbonXSHydrophobe
AliphaticCarbonXSNonHydrophobe
AromaticCarbonXSHydrophobe
AromaticCarbonXSNonHydrophobe
Bromine
Chlorine
Fluorine
Nitrogen
NitrogenXSAcceptor
NitrogenXSDonor
NitrogenXSDonorAcceptor
Oxygen
OxygenXSAcceptor
OxygenXSDonorAcceptor
Phosphorus
Sulfur
SulfurAcceptor
Iodine
Boron
"""


def default_receptor_typer(use_covalent: bool = False) -> FileMappedGninaTyper:
    """Gnina types restricted to the 16 channels commonly used for receptors."""
    return FileMappedGninaTyper(io.StringIO(DEFAULT_RECEPTOR_MAP), use_covalent=use_covalent)


def default_ligand_typer(use_covalent: bool = False) -> FileMappedGninaTyper:
    """Gnina types restricted to the 19 channels commonly used for ligands."""
    return FileMappedGninaTyper(io.StringIO(DEFAULT_LIGAND_MAP), use_covalent=use_covalent)


TYPERS: Dict[str, Callable[[], AtomIndexTyper | AtomVectorTyper]] = {
    "gnina": GninaIndexTyper,
    "gnina_covalent": lambda: GninaIndexTyper(use_covalent=True),
    "element": ElementIndexTyper,
    "gnina_vector": GninaVectorTyper,
    "receptor_default": default_receptor_typer,
    "ligand_default": default_ligand_typer,
}


def get_typer(name: str) -> AtomIndexTyper | AtomVectorTyper:
    """Build a typer preset by name."""
    try:
        factory = TYPERS[name]
    except KeyError as exc:
        available = ", ".join(sorted(TYPERS)) or "<empty>"
        raise KeyError(f"Unknown typer '{name}'. Available: {available}") from exc
    return factory()


__all__ = [
    "DEFAULT_RECEPTOR_MAP",
    "DEFAULT_LIGAND_MAP",
    "default_receptor_typer",
    "default_ligand_typer",
    "TYPERS",
    "get_typer",
]
