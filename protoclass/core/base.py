# protoclass/core/base.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, Dict, ItemsView, Iterator, KeysView, List, Optional, ValuesView

MISSING = object()


class MethodTable(MutableMapping):
    """
    A mapping of member names to methods and constants with at most one
    delegation parent.

    Item access (``table[name]``, ``name in table``, ``get``) resolves through
    the parent chain. Writes, deletes and ``pop`` only ever touch this table's
    own entries, and iteration, ``len``, ``keys()``, ``items()`` and
    ``dict(table)`` cover own entries only. A name can therefore be ``in`` a
    table without appearing in ``list(table)``; use ``all_keys`` for every
    visible name.
    """

    def __init__(self, parent: Optional["MethodTable"] = None, entries: Optional[Dict[str, Any]] = None) -> None:
        """
        :param parent: The table lookups fall through to, or None to end the chain here.
        :param entries: Optional initial own entries.
        """
        self._parent = parent
        self._entries: Dict[str, Any] = dict(entries or {})

    @property
    def parent(self) -> Optional["MethodTable"]:
        """The delegation parent, or None if the chain ends here."""
        return self._parent

    def resolve(self, name: str, default: Any = MISSING) -> Any:
        """
        Walk the delegation chain for ``name``.

        :param name: Member name to look up.
        :param default: Returned when no table in the chain holds the name.
        :return: The first value found, nearest table first.
        """
        table: Optional[MethodTable] = self
        while table is not None:
            if name in table._entries:
                return table._entries[name]
            table = table._parent
        return default

    def has_own(self, name: str) -> bool:
        return name in self._entries

    def own_keys(self) -> List[str]:
        return list(self._entries)

    def own_items(self) -> List[tuple]:
        return list(self._entries.items())

    def chain(self) -> List["MethodTable"]:
        """Return this table followed by each ancestor, nearest first."""
        tables = []
        table: Optional[MethodTable] = self
        while table is not None:
            tables.append(table)
            table = table._parent
        return tables

    def all_keys(self) -> List[str]:
        """Every name visible through the chain, without duplicates, nearest first."""
        seen: Dict[str, None] = {}
        for table in self.chain():
            for name in table._entries:
                seen.setdefault(name, None)
        return list(seen)

    def is_prototype_of(self, other: "MethodTable") -> bool:
        """Whether this table appears in the delegation chain above ``other``."""
        ancestor = other._parent
        while ancestor is not None:
            if ancestor is self:
                return True
            ancestor = ancestor._parent
        return False

    def __getitem__(self, name: str) -> Any:
        value = self.resolve(name)
        if value is MISSING:
            raise KeyError(name)
        return value

    def __setitem__(self, name: str, value: Any) -> None:
        self._entries[name] = value

    def __delitem__(self, name: str) -> None:
        del self._entries[name]

    def pop(self, name: str, default: Any = MISSING) -> Any:
        """Remove and return an own entry; inherited entries are never removed."""
        if name in self._entries:
            return self._entries.pop(name)
        if default is MISSING:
            raise KeyError(name)
        return default

    def keys(self) -> KeysView:
        return self._entries.keys()

    def items(self) -> ItemsView:
        return self._entries.items()

    def values(self) -> ValuesView:
        return self._entries.values()

    def __contains__(self, name: object) -> bool:
        return self.resolve(name) is not MISSING

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MethodTable({self._entries!r}, depth={len(self.chain())})"
