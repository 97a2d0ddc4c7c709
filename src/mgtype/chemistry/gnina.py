"""Gnina atom types and their constant table.

These are variants of the AutoDock4 types, refined with X-Score (XS)
hydrophobe/donor/acceptor perception. Many fields are kept for legacy
scoring functions only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class GninaType(IntEnum):
    Hydrogen = 0
    PolarHydrogen = 1  # bonded to a donor
    AliphaticCarbonXSHydrophobe = 2
    AliphaticCarbonXSNonHydrophobe = 3  # bonded to a heteroatom
    AromaticCarbonXSHydrophobe = 4
    AromaticCarbonXSNonHydrophobe = 5
    Nitrogen = 6  # no hydrogen bonding
    NitrogenXSDonor = 7
    NitrogenXSDonorAcceptor = 8  # also an autodock acceptor
    NitrogenXSAcceptor = 9  # also an autodock acceptor
    Oxygen = 10
    OxygenXSDonor = 11
    OxygenXSDonorAcceptor = 12
    OxygenXSAcceptor = 13
    Sulfur = 14
    SulfurAcceptor = 15  # XS has no sulfur acceptors
    Phosphorus = 16
    Fluorine = 17
    Chlorine = 18
    Bromine = 19
    Iodine = 20
    Magnesium = 21
    Manganese = 22
    Zinc = 23
    Calcium = 24
    Iron = 25
    GenericMetal = 26
    Boron = 27


NUM_GNINA_TYPES = len(GninaType)


@dataclass(frozen=True)
class CategoryInfo:
    """Constants for one gnina atom type."""

    type: GninaType
    name: str
    ad_name: str  # at most two characters
    atomic_number: int
    ad_radius: float
    ad_depth: float
    ad_solvation: float
    ad_volume: float
    covalent_radius: float
    xs_radius: float
    xs_hydrophobe: bool
    xs_donor: bool
    xs_acceptor: bool
    ad_heteroatom: bool


def _info(t, ad_name, anum, ad_radius, depth, solvation, volume, covalent, xs_radius, hydrophobe, donor, acceptor, hetero):
    return CategoryInfo(
        type=t,
        name=t.name,
        ad_name=ad_name,
        atomic_number=anum,
        ad_radius=ad_radius,
        ad_depth=depth,
        ad_solvation=solvation,
        ad_volume=volume,
        covalent_radius=covalent,
        xs_radius=xs_radius,
        xs_hydrophobe=hydrophobe,
        xs_donor=donor,
        xs_acceptor=acceptor,
        ad_heteroatom=hetero,
    )


T = GninaType

# fmt: off
GNINA_INFO: tuple[CategoryInfo, ...] = (
    _info(T.Hydrogen,                       "H",  1,  1.000, 0.020,  0.00051,  0.0000, 0.37, 0.37, False, False, False, False),
    _info(T.PolarHydrogen,                  "HD", 1,  1.000, 0.020,  0.00051,  0.0000, 0.37, 0.37, False, False, False, False),
    _info(T.AliphaticCarbonXSHydrophobe,    "C",  6,  2.000, 0.150, -0.00143, 33.5103, 0.77, 1.9, True,  False, False, False),
    _info(T.AliphaticCarbonXSNonHydrophobe, "C",  6,  2.000, 0.150, -0.00143, 33.5103, 0.77, 1.9, False, False, False, False),
    _info(T.AromaticCarbonXSHydrophobe,     "A",  6,  2.000, 0.150, -0.00052, 33.5103, 0.77, 1.9, True,  False, False, False),
    _info(T.AromaticCarbonXSNonHydrophobe,  "A",  6,  2.000, 0.150, -0.00052, 33.5103, 0.77, 1.9, False, False, False, False),
    _info(T.Nitrogen,                       "N",  7,  1.750, 0.160, -0.00162, 22.4493, 0.75, 1.8, False, False, False, True),
    _info(T.NitrogenXSDonor,                "N",  7,  1.750, 0.160, -0.00162, 22.4493, 0.75, 1.8, False, True,  False, True),
    _info(T.NitrogenXSDonorAcceptor,        "NA", 7,  1.750, 0.160, -0.00162, 22.4493, 0.75, 1.8, False, True,  True,  True),
    _info(T.NitrogenXSAcceptor,             "NA", 7,  1.750, 0.160, -0.00162, 22.4493, 0.75, 1.8, False, False, True,  True),
    _info(T.Oxygen,                         "O",  8,  1.600, 0.200, -0.00251, 17.1573, 0.73, 1.7, False, False, False, True),
    _info(T.OxygenXSDonor,                  "O",  8,  1.600, 0.200, -0.00251, 17.1573, 0.73, 1.7, False, True,  False, True),
    _info(T.OxygenXSDonorAcceptor,          "OA", 8,  1.600, 0.200, -0.00251, 17.1573, 0.73, 1.7, False, True,  True,  True),
    _info(T.OxygenXSAcceptor,               "OA", 8,  1.600, 0.200, -0.00251, 17.1573, 0.73, 1.7, False, False, True,  True),
    _info(T.Sulfur,                         "S",  16, 2.000, 0.200, -0.00214, 33.5103, 1.02, 2.0, False, False, False, True),
    _info(T.SulfurAcceptor,                 "SA", 16, 2.000, 0.200, -0.00214, 33.5103, 1.02, 2.0, False, False, False, True),
    _info(T.Phosphorus,                     "P",  15, 2.100, 0.200, -0.00110, 38.7924, 1.06, 2.1, False, False, False, True),
    _info(T.Fluorine,                       "F",  9,  1.545, 0.080, -0.00110, 15.4480, 0.71, 1.5, True,  False, False, True),
    _info(T.Chlorine,                       "Cl", 17, 2.045, 0.276, -0.00110, 35.8235, 0.99, 1.8, True,  False, False, True),
    _info(T.Bromine,                        "Br", 35, 2.165, 0.389, -0.00110, 42.5661, 1.14, 2.0, True,  False, False, True),
    _info(T.Iodine,                         "I",  53, 2.360, 0.550, -0.00110, 55.0585, 1.33, 2.2, True,  False, False, True),
    _info(T.Magnesium,                      "Mg", 12, 0.650, 0.875, -0.00110,  1.5600, 1.30, 1.2, False, True,  False, True),
    _info(T.Manganese,                      "Mn", 25, 0.650, 0.875, -0.00110,  2.1400, 1.39, 1.2, False, True,  False, True),
    _info(T.Zinc,                           "Zn", 30, 0.740, 0.550, -0.00110,  1.7000, 1.31, 1.2, False, True,  False, True),
    _info(T.Calcium,                        "Ca", 20, 0.990, 0.550, -0.00110,  2.7700, 1.74, 1.2, False, True,  False, True),
    _info(T.Iron,                           "Fe", 26, 0.650, 0.010, -0.00110,  1.8400, 1.25, 1.2, False, True,  False, True),
    _info(T.GenericMetal,                   "M",  0,  1.200, 0.000, -0.00110, 22.4493, 1.75, 1.2, False, True,  False, True),
    _info(T.Boron,                          "B",  5,  2.040, 0.180, -0.00110, 12.0520, 0.90, 1.92, True, False, False, False),
)
# fmt: on

del T

if len(GNINA_INFO) != NUM_GNINA_TYPES or any(info.type != i for i, info in enumerate(GNINA_INFO)):
    raise RuntimeError("GNINA_INFO must list every GninaType exactly once, in id order")

__all__ = ["GninaType", "NUM_GNINA_TYPES", "CategoryInfo", "GNINA_INFO"]
