"""Per-element lookups shared by the typers."""

from __future__ import annotations

from rdkit import Chem

PT = Chem.GetPeriodicTable()

# Radius used for atoms without an element-specific entry (type 0)
DEFAULT_RADIUS = 1.5

# Alkali/alkaline earth, transition, post-transition metals, lanthanides and actinides.
METALS = frozenset(
    [3, 4, 11, 12, 13, 19, 20]
    + list(range(21, 32))
    + list(range(37, 51))
    + list(range(55, 85))
    + list(range(87, 104))
)


def is_metal(atomic_num: int) -> bool:
    return atomic_num in METALS


def element_symbol(atomic_num: int) -> str:
    """Element symbol for an atomic number; 0 is the dummy element."""
    if atomic_num == 0:
        return "Dummy"
    return PT.GetElementSymbol(atomic_num)


def element_radius(atomic_num: int) -> float:
    """Covalent radius in Angstrom, or DEFAULT_RADIUS if unknown."""
    if atomic_num <= 0:
        return DEFAULT_RADIUS
    radius = float(PT.GetRcovalent(atomic_num))
    return radius if radius > 0 else DEFAULT_RADIUS


__all__ = ["PT", "DEFAULT_RADIUS", "METALS", "is_metal", "element_symbol", "element_radius"]
