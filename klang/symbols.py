"""Symbol table.

A single flat mapping from variable name to a typed value, shared by the
whole program run. Block bodies of ``if``, ``while`` and ``for`` write into
the same table as the top level, so there is no shadowing and loop variables
stay bound after their loop finishes.

Each entry carries a type tag. Only ``INTEGER`` values are ever stored
today, but rebinding a name with a different tag is still rejected so that
adding a type later cannot silently change a variable's type.


File: symbols.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum

from klang.exceptions import TypeMismatchException


class TypeTag(str, Enum):
    """
    Runtime type tags for stored values.
    """
    INTEGER = "INTEGER"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


class Symbol:
    """A typed value bound to a name."""

    def __init__(self, type_tag: TypeTag, value: int):
        self.type_tag = type_tag
        self.value = value

    def __repr__(self) -> str:
        return f"Symbol({self.type_tag}, {self.value})"


class SymbolTable:
    """
    Flat name -> Symbol store with type-consistency on rebinding.
    """
    def __init__(self, file: str | None = None):
        """
        Initialize an empty table.

        Parameters:
            file (str): The name of the script, used in error messages.
        """
        self.symbols: dict[str, Symbol] = {}
        self.file = file

    def add_or_update(self, name: str, type_tag: TypeTag, value: int) -> None:
        """
        Bind ``name`` to ``value``, inserting it if it is not yet present.

        Raises:
            TypeMismatchException: If ``name`` is already bound with a different type tag.
        """
        symbol = self.symbols.get(name)
        if symbol is None:
            self.symbols[name] = Symbol(type_tag, value)
            return
        if symbol.type_tag != type_tag:
            raise TypeMismatchException(name, symbol.type_tag, type_tag, self.file)
        symbol.value = value

    def get(self, name: str) -> Symbol | None:
        """
        Look up ``name`` without failing; returns None when it is unbound.
        """
        return self.symbols.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self.symbols

    def __len__(self) -> int:
        return len(self.symbols)

    def __repr__(self) -> str:
        return f"SymbolTable({self.symbols!r})"
