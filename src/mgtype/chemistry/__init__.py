"""Chemistry constant tables used by the atom typers."""

from .elements import DEFAULT_RADIUS, METALS, element_radius, element_symbol, is_metal
from .gnina import GNINA_INFO, NUM_GNINA_TYPES, CategoryInfo, GninaType

__all__ = [
    "CategoryInfo",
    "GninaType",
    "GNINA_INFO",
    "NUM_GNINA_TYPES",
    "DEFAULT_RADIUS",
    "METALS",
    "is_metal",
    "element_symbol",
    "element_radius",
]
