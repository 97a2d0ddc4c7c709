"""Capability interfaces for atom typers and type mappers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, NamedTuple

import numpy as np

from mgtype.errors import IndexOutOfRange

# Returned by mappers for original types with no counterpart in the new space.
UNMAPPED = -1


class TypeResult(NamedTuple):
    """Type id of an atom together with its radius."""

    type: int
    radius: float


class AtomIndexTyper(ABC):
    """Assigns each atom a single type index along with a radius."""

    @abstractmethod
    def num_types(self) -> int:
        """Number of distinct types this typer can return."""

    @abstractmethod
    def get_type(self, atom) -> TypeResult:
        """Classify ``atom`` (an ``AtomRecord`` or compatible object)."""

    @abstractmethod
    def get_type_names(self) -> List[str]:
        """Names of the types, indexed by type id."""


class AtomVectorTyper(ABC):
    """Assigns each atom a fixed-length feature vector along with a radius."""

    @abstractmethod
    def num_types(self) -> int:
        """Length of the feature vector."""

    @abstractmethod
    def get_type(self, atom, out: np.ndarray) -> float:
        """Write the features of ``atom`` into ``out`` and return its radius."""

    @abstractmethod
    def get_type_names(self) -> List[str]:
        """Names of the vector entries."""

    def get_vector(self, atom, dtype=np.float32) -> tuple[np.ndarray, float]:
        """Allocate a feature vector for ``atom``; returns ``(vector, radius)``."""
        out = np.zeros((self.num_types(),), dtype=dtype)
        radius = self.get_type(atom, out)
        return out, radius


class AtomIndexTypeMapper:
    """Maps original type indices onto a new type space.

    The base class is the identity mapping: ``num_types()`` is 0, meaning
    no remapping takes place and types pass through unchanged.
    """

    def num_types(self) -> int:
        return 0

    def get_type(self, orig_type: int) -> int:
        if orig_type < 0:
            raise IndexOutOfRange(orig_type, None)
        return orig_type

    def get_type_names(self) -> List[str]:
        return []


__all__ = [
    "UNMAPPED",
    "TypeResult",
    "AtomIndexTyper",
    "AtomVectorTyper",
    "AtomIndexTypeMapper",
]
