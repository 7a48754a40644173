# protoclass/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Dict, Optional

from protoclass.core.base import MethodTable
from protoclass.core.errors import ValidationError

CONSTRUCT_KEY = "__construct"
VCONSTRUCT_KEY = "__vconstruct"
CONSTRUCTOR_KEY = "constructor"


class DefinitionKind(Enum):
    """Which call form extend was invoked with."""

    CONSTRUCTOR_AND_TABLE = auto()  # explicit constructor, table optional
    TABLE_ONLY = auto()  # constructor omitted, table given
    EMPTY = auto()  # neither given


@dataclass(frozen=True)
class ClassDefinition:
    """
    The normalized arguments of one extend call.

    ``entries`` holds the own entries of the supplied table, copied so later
    changes to the caller's mapping cannot reach the class being built.
    """

    kind: DefinitionKind
    construct_fn: Optional[Callable[..., Any]] = None
    entries: Dict[str, Any] = field(default_factory=dict)

    @property
    def construct_hook(self) -> Optional[Callable[..., Any]]:
        """The ``__construct`` entry, if the table carries one."""
        return self.entries.get(CONSTRUCT_KEY)

    @property
    def vconstruct_hook(self) -> Optional[Callable[..., Any]]:
        """The ``__vconstruct`` entry, if the table carries one."""
        return self.entries.get(VCONSTRUCT_KEY)

    def copied_entries(self) -> Dict[str, Any]:
        """Entries to place in the new method table: everything but ``__construct``."""
        return {name: value for name, value in self.entries.items() if name != CONSTRUCT_KEY}


class Validator:
    """
    Performs the shape check on extend's arguments and decides which call form
    was used. No other validation is done: table contents are the caller's
    responsibility.
    """

    def normalize(self, construct_fn: Any = None, table: Any = None) -> ClassDefinition:
        """
        Turn the two optional extend arguments into a ClassDefinition.

        A table-shaped first argument is taken as the table and the constructor
        slot is cleared; in that case any second argument is ignored.

        :param construct_fn: Constructor function, a table, or None.
        :param table: Method table mapping, or None.
        :raises ValidationError: If either argument has an unusable shape.
        """
        if _is_table(construct_fn):
            return ClassDefinition(DefinitionKind.TABLE_ONLY, None, _own_entries(construct_fn))

        if construct_fn is not None and not callable(construct_fn):
            raise ValidationError(
                f"Constructor must be callable or a mapping, got {type(construct_fn).__name__}"
            )
        if table is not None and not _is_table(table):
            raise ValidationError(f"Method table must be a mapping, got {type(table).__name__}")

        if construct_fn is not None:
            return ClassDefinition(DefinitionKind.CONSTRUCTOR_AND_TABLE, construct_fn, _own_entries(table))
        if table is not None:
            return ClassDefinition(DefinitionKind.TABLE_ONLY, None, _own_entries(table))
        return ClassDefinition(DefinitionKind.EMPTY)


def _is_table(value: Any) -> bool:
    return isinstance(value, Mapping) and not callable(value)


def _own_entries(table: Optional[Mapping]) -> Dict[str, Any]:
    if table is None:
        return {}
    if isinstance(table, MethodTable):
        # Inherited entries of a delegating table are not copied
        return dict(table.own_items())
    return dict(table.items())
