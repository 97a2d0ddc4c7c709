"""Gnina atom typers: rule-based index types and their vector decomposition."""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from mgtype.chemistry.elements import is_metal
from mgtype.chemistry.gnina import GNINA_INFO, NUM_GNINA_TYPES, CategoryInfo, GninaType
from mgtype.errors import IndexOutOfRange, UnrecognizedElement
from mgtype.typers.base import AtomIndexTyper, AtomVectorTyper, TypeResult

# Element types that need no further refinement.
_SIMPLE_ELEMENTS = {
    5: GninaType.Boron,
    9: GninaType.Fluorine,
    12: GninaType.Magnesium,
    15: GninaType.Phosphorus,
    17: GninaType.Chlorine,
    20: GninaType.Calcium,
    25: GninaType.Manganese,
    26: GninaType.Iron,
    30: GninaType.Zinc,
    35: GninaType.Bromine,
    53: GninaType.Iodine,
}

# (donor, acceptor) -> type
_NITROGEN = {
    (False, False): GninaType.Nitrogen,
    (True, False): GninaType.NitrogenXSDonor,
    (True, True): GninaType.NitrogenXSDonorAcceptor,
    (False, True): GninaType.NitrogenXSAcceptor,
}
_OXYGEN = {
    (False, False): GninaType.Oxygen,
    (True, False): GninaType.OxygenXSDonor,
    (True, True): GninaType.OxygenXSDonorAcceptor,
    (False, True): GninaType.OxygenXSAcceptor,
}


class GninaIndexTyper(AtomIndexTyper):
    """Calculate gnina types, variants of the AutoDock4 types.

    Args:
        use_covalent: report the covalent radius instead of the XS radius.
        data: constant table indexed by type id.
    """

    def __init__(self, use_covalent: bool = False, data: Sequence[CategoryInfo] = GNINA_INFO):
        if len(data) != NUM_GNINA_TYPES:
            raise ValueError(f"Expected {NUM_GNINA_TYPES} type entries, got {len(data)}")
        self.use_covalent = use_covalent
        self._data = tuple(data)

    def num_types(self) -> int:
        return NUM_GNINA_TYPES

    def classify(self, atom) -> GninaType:
        """Gnina type of ``atom`` without the radius lookup."""
        anum = atom.atomic_num
        if anum == 1:
            return GninaType.PolarHydrogen if atom.bonded_to_donor else GninaType.Hydrogen
        if anum == 6:
            hydrophobe = not atom.bonded_to_heteroatom
            if atom.is_aromatic:
                return GninaType.AromaticCarbonXSHydrophobe if hydrophobe else GninaType.AromaticCarbonXSNonHydrophobe
            return GninaType.AliphaticCarbonXSHydrophobe if hydrophobe else GninaType.AliphaticCarbonXSNonHydrophobe
        if anum == 7:
            return _NITROGEN[(bool(atom.is_hbond_donor), bool(atom.is_hbond_acceptor))]
        if anum == 8:
            return _OXYGEN[(bool(atom.is_hbond_donor), bool(atom.is_hbond_acceptor))]
        if anum in (16, 34):  # selenium is typed as sulfur
            return GninaType.SulfurAcceptor if atom.is_hbond_acceptor else GninaType.Sulfur
        if anum in _SIMPLE_ELEMENTS:
            return _SIMPLE_ELEMENTS[anum]
        if is_metal(anum):
            return GninaType.GenericMetal
        raise UnrecognizedElement(anum, getattr(atom, "symbol", None) or None)

    def get_type(self, atom) -> TypeResult:
        t = self.classify(atom)
        return TypeResult(int(t), self.radius(t))

    def radius(self, t: int) -> float:
        info = self.get_info(t)
        return info.covalent_radius if self.use_covalent else info.xs_radius

    def get_info(self, t: int) -> CategoryInfo:
        if not 0 <= t < NUM_GNINA_TYPES:
            raise IndexOutOfRange(t, NUM_GNINA_TYPES)
        return self._data[t]

    def get_type_names(self) -> List[str]:
        return [info.name for info in self._data]


class GninaVectorTyper(AtomVectorTyper):
    """Decompose gnina types into element one-hots and physicochemical properties.

    Layout: 16 element buckets plus a generic bucket (one-hot), AutoDock
    depth/solvation/volume, XS hydrophobe/donor/acceptor flags, the AutoDock
    heteroatom flag, and the atom's partial charge.
    """

    ELEMENT_NAMES = (
        "Hydrogen",
        "Carbon",
        "Nitrogen",
        "Oxygen",
        "Sulfur",
        "Phosphorus",
        "Fluorine",
        "Chlorine",
        "Bromine",
        "Iodine",
        "Magnesium",
        "Manganese",
        "Zinc",
        "Calcium",
        "Iron",
        "Boron",
        "GenericAtom",
    )
    PROPERTY_NAMES = (
        "AD_depth",
        "AD_solvation",
        "AD_volume",
        "XS_hydrophobe",
        "XS_donor",
        "XS_acceptor",
        "AD_heteroatom",
        "OB_partialcharge",
    )
    GENERIC_ATOM = 16
    AD_DEPTH = 17
    XS_HYDROPHOBE = 20
    AD_HETEROATOM = 23
    PARTIAL_CHARGE = 24
    NUM_TYPES = len(ELEMENT_NAMES) + len(PROPERTY_NAMES)

    # atomic number -> element bucket
    _ELEMENT_BUCKET = {1: 0, 6: 1, 7: 2, 8: 3, 16: 4, 15: 5, 9: 6, 17: 7, 35: 8, 53: 9, 12: 10, 25: 11, 30: 12, 20: 13, 26: 14, 5: 15}

    def __init__(self, index_typer: GninaIndexTyper | None = None):
        self.index_typer = index_typer if index_typer is not None else GninaIndexTyper()

    def num_types(self) -> int:
        return self.NUM_TYPES

    def element_bucket(self, t: int) -> int:
        """One-hot position for gnina type ``t``."""
        anum = self.index_typer.get_info(t).atomic_number
        return self._ELEMENT_BUCKET.get(anum, self.GENERIC_ATOM)

    def get_type(self, atom, out: np.ndarray) -> float:
        if len(out) != self.NUM_TYPES:
            raise ValueError(f"Output vector has length {len(out)}, expected {self.NUM_TYPES}")
        t, radius = self.index_typer.get_type(atom)
        info = self.index_typer.get_info(t)

        out[:] = 0.0
        out[self.element_bucket(t)] = 1.0
        out[self.AD_DEPTH : self.XS_HYDROPHOBE] = (info.ad_depth, info.ad_solvation, info.ad_volume)
        out[self.XS_HYDROPHOBE : self.AD_HETEROATOM] = (info.xs_hydrophobe, info.xs_donor, info.xs_acceptor)
        out[self.AD_HETEROATOM] = float(info.ad_heteroatom)
        out[self.PARTIAL_CHARGE] = atom.partial_charge
        return radius

    def get_type_names(self) -> List[str]:
        return list(self.ELEMENT_NAMES + self.PROPERTY_NAMES)


__all__ = ["GninaIndexTyper", "GninaVectorTyper"]
