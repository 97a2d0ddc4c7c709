"""Exceptions raised by typers and mappers."""

from __future__ import annotations


class UnrecognizedElement(ValueError):
    """Raised when an atom's element has no category and is not a metal."""

    def __init__(self, atomic_num: int, symbol: str | None = None):
        self.atomic_num = atomic_num
        self.symbol = symbol
        label = f"{symbol} ({atomic_num})" if symbol else str(atomic_num)
        super().__init__(f"Unrecognized element {label}: no atom type available")


class UnknownTypeName(KeyError):
    """Raised when a mapping source references a type name that does not exist."""

    def __init__(self, name: str, available):
        self.name = name
        self.available = list(available)
        super().__init__(f"Unknown atom type '{name}'. Available: {', '.join(self.available) or '<empty>'}")


class IndexOutOfRange(IndexError):
    """Raised when a type id falls outside the domain of a typer or mapper."""

    def __init__(self, index: int, size: int | None):
        self.index = index
        self.size = size
        domain = f"[0, {size})" if size is not None else "non-negative ids"
        super().__init__(f"Type id {index} outside of {domain}")


__all__ = ["UnrecognizedElement", "UnknownTypeName", "IndexOutOfRange"]
