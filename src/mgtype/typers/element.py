"""Element typer: the type id is the atomic number."""

from __future__ import annotations

from typing import List

from mgtype.chemistry.elements import DEFAULT_RADIUS, element_radius, element_symbol
from mgtype.typers.base import AtomIndexTyper, TypeResult


# One past the heaviest element in the periodic table (Og, 118).
MAX_ELEMENT_LIMIT = 119


class ElementIndexTyper(AtomIndexTyper):
    """Type atoms by element.

    Any element with atomic number greater than or equal to ``max_element``
    is assigned type zero. There are many elements, so this is usually run
    through a mapper that reduces the number of types.
    """

    def __init__(self, max_element: int = 84):
        if not 1 <= max_element <= MAX_ELEMENT_LIMIT:
            raise ValueError(f"max_element must be in [1, {MAX_ELEMENT_LIMIT}], got {max_element}")
        self.max_element = int(max_element)

    def num_types(self) -> int:
        return self.max_element

    def get_type(self, atom) -> TypeResult:
        anum = int(atom.atomic_num)
        if 0 < anum < self.max_element:
            return TypeResult(anum, element_radius(anum))
        return TypeResult(0, DEFAULT_RADIUS)

    def get_type_names(self) -> List[str]:
        return [element_symbol(i) for i in range(self.max_element)]


__all__ = ["ElementIndexTyper", "MAX_ELEMENT_LIMIT"]
