"""Typers composed with a mapper."""

from __future__ import annotations

import os
from typing import List, TextIO

from mgtype.typers.base import UNMAPPED, AtomIndexTypeMapper, AtomIndexTyper, TypeResult
from mgtype.typers.element import ElementIndexTyper
from mgtype.typers.gnina import GninaIndexTyper
from mgtype.typers.mappers import FileAtomMapper


class MappedAtomIndexTyper(AtomIndexTyper):
    """Wrap an atom typer with a mapper.

    Types are computed by ``typer`` and then passed through ``mapper``; radii
    are left unchanged. An identity mapper (``num_types() == 0``) leaves the
    type space of ``typer`` as is.
    """

    def __init__(self, mapper: AtomIndexTypeMapper, typer: AtomIndexTyper):
        self.mapper = mapper
        self.typer = typer

    def num_types(self) -> int:
        n = self.mapper.num_types()
        return n if n > 0 else self.typer.num_types()

    def get_type(self, atom) -> TypeResult:
        t, radius = self.typer.get_type(atom)
        if t == UNMAPPED:
            return TypeResult(UNMAPPED, radius)
        return TypeResult(self.mapper.get_type(t), radius)

    def get_type_names(self) -> List[str]:
        if self.mapper.num_types() > 0:
            return self.mapper.get_type_names()
        return self.typer.get_type_names()


class FileMappedGninaTyper(MappedAtomIndexTyper):
    """Gnina typer reduced by a mapping file (path or stream)."""

    def __init__(self, source: str | os.PathLike | TextIO, use_covalent: bool = False):
        typer = GninaIndexTyper(use_covalent=use_covalent)
        super().__init__(FileAtomMapper(source, typer.get_type_names()), typer)


class FileMappedElementTyper(MappedAtomIndexTyper):
    """Element typer reduced by a mapping file (path or stream)."""

    def __init__(self, source: str | os.PathLike | TextIO, max_element: int = 84):
        typer = ElementIndexTyper(max_element)
        super().__init__(FileAtomMapper(source, typer.get_type_names()), typer)


__all__ = ["MappedAtomIndexTyper", "FileMappedGninaTyper", "FileMappedElementTyper"]
