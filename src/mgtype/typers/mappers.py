"""Type mappers that reduce an original type space to a smaller one."""

from __future__ import annotations

import io
import os
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, TextIO

from mgtype.errors import IndexOutOfRange, UnknownTypeName
from mgtype.typers.base import UNMAPPED, AtomIndexTypeMapper


class FileAtomMapper(AtomIndexTypeMapper):
    """Map atom types as described by a mapping file.

    Each non-blank line defines one new type and lists, separated by
    whitespace, the names of the original types it aggregates. New type ids
    follow the order of the non-blank lines; blank lines are ignored and do
    not consume an id. There is no comment syntax: every token must be one of
    ``type_names``. Original types not named on any line map to ``UNMAPPED``.

    Args:
        source: path to a mapping file or an open text stream.
        type_names: original type names indexed by type id (normally the
            ``get_type_names()`` of the typer being mapped).

    Example:
        >>> mapper = FileAtomMapper.from_string("A B\\nC\\n", ["A", "B", "C"])
        >>> mapper.get_type_names()
        ['A_B', 'C']
    """

    def __init__(self, source: str | os.PathLike | TextIO, type_names: Sequence[str]):
        self._old_type_names = list(type_names)
        if isinstance(source, (str, os.PathLike)):
            with Path(source).open("r") as f:
                self._setup(f)
        else:
            self._setup(source)

    @classmethod
    def from_string(cls, text: str, type_names: Sequence[str]) -> "FileAtomMapper":
        return cls(io.StringIO(text), type_names)

    def _setup(self, lines: Iterable[str]) -> None:
        old_name_to_type = {name: i for i, name in enumerate(self._old_type_names)}
        old_to_new = [UNMAPPED] * len(self._old_type_names)
        new_names: List[str] = []
        for line in lines:
            tokens = line.split()
            if not tokens:
                continue
            new_type = len(new_names)
            for name in tokens:
                if name not in old_name_to_type:
                    raise UnknownTypeName(name, self._old_type_names)
                old_to_new[old_name_to_type[name]] = new_type
            new_names.append("_".join(tokens))
        self._old_to_new = tuple(old_to_new)
        self._new_type_names = tuple(new_names)

    def num_types(self) -> int:
        return len(self._new_type_names)

    def get_type(self, orig_type: int) -> int:
        if not 0 <= orig_type < len(self._old_to_new):
            raise IndexOutOfRange(orig_type, len(self._old_to_new))
        return self._old_to_new[orig_type]

    def get_type_names(self) -> List[str]:
        return list(self._new_type_names)


class SubsetAtomMapper(AtomIndexTypeMapper):
    """Map atom types onto a provided subset.

    ``subset`` is either a flat list of original ids, each becoming its own
    new type (new id = position in the list), or a list of groups, where every
    id of group ``i`` maps to new type ``i``. Groups may overlap; the later
    group wins. With ``include_catchall`` an extra last type collects every
    id not listed, otherwise such ids map to ``UNMAPPED``.

    Args:
        subset: flat ids or groups of ids.
        include_catchall: append a catch-all type.
        type_names: original type names, used for the new names and to
            bound the original domain.
        num_original_types: size of the original domain when ``type_names``
            is not given. Without either, only negative ids are rejected.
    """

    CATCHALL_NAME = "Other"

    def __init__(
        self,
        subset: Sequence[int] | Sequence[Sequence[int]],
        include_catchall: bool = True,
        type_names: Sequence[str] | None = None,
        num_original_types: int | None = None,
    ):
        if type_names is not None:
            if num_original_types is not None and num_original_types != len(type_names):
                raise ValueError(
                    f"num_original_types={num_original_types} disagrees with {len(type_names)} type names"
                )
            num_original_types = len(type_names)
        self._num_original_types = num_original_types

        groups = [_as_group(entry) for entry in subset]
        old_to_new: Dict[int, int] = {}
        for new_type, group in enumerate(groups):
            for orig in group:
                self._check(orig)
                old_to_new[orig] = new_type

        self._old_to_new = old_to_new
        self._num_new_types = len(groups)
        self._default_type = UNMAPPED
        names = [_group_name(group, type_names) for group in groups]
        if include_catchall:
            self._default_type = len(groups)
            self._num_new_types += 1
            names.append(self.CATCHALL_NAME)
        self._new_type_names = tuple(names)

    def _check(self, orig_type: int) -> None:
        if orig_type < 0 or (self._num_original_types is not None and orig_type >= self._num_original_types):
            raise IndexOutOfRange(orig_type, self._num_original_types)

    def num_types(self) -> int:
        return self._num_new_types

    def get_type(self, orig_type: int) -> int:
        self._check(orig_type)
        return self._old_to_new.get(orig_type, self._default_type)

    def get_type_names(self) -> List[str]:
        return list(self._new_type_names)


def _as_group(entry) -> tuple[int, ...]:
    if isinstance(entry, Iterable) and not isinstance(entry, str):
        return tuple(int(t) for t in entry)
    return (int(entry),)


def _group_name(group: Sequence[int], type_names: Sequence[str] | None) -> str:
    if type_names is None:
        return "_".join(str(t) for t in group)
    return "_".join(type_names[t] for t in group)


__all__ = ["FileAtomMapper", "SubsetAtomMapper"]
