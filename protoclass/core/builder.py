# protoclass/core/builder.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Tuple

from protoclass.core.base import MethodTable
from protoclass.core.classes import Instance, ProtoClass, class_of, own_fields
from protoclass.core.errors import ValidationError
from protoclass.core.validations import CONSTRUCTOR_KEY, VCONSTRUCT_KEY, ClassDefinition, DefinitionKind, Validator

# Receiver meaning "derive with no parent at all"
NO_PARENT = None


class ClassBuilder:
    """
    Derives new classes from existing ones.

    ``extend`` resolves a constructor from its arguments (explicit, the table's
    ``__construct``, or a synthesized one), builds a method table delegating to
    the receiver's table, and returns the new ProtoClass bound to this builder
    so it can be extended in turn.
    """

    def __init__(self, validator: Optional[Validator] = None, logger: Optional[logging.Logger] = None) -> None:
        """
        :param validator: Shape checker for extend's arguments.
        :param logger: Logger for derivation diagnostics; defaults to this module's logger.
        """
        self._validator = validator or Validator()
        self._logger = logger or logging.getLogger(__name__)

    @property
    def validator(self) -> Validator:
        return self._validator

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def extend(
        self,
        receiver: Optional[ProtoClass],
        construct_fn: Any = None,
        table: Any = None,
        *,
        name: Optional[str] = None,
    ) -> ProtoClass:
        """
        Derive a new class from ``receiver``.

        :param receiver: The parent class, OBJECT_ROOT, or NO_PARENT.
        :param construct_fn: Constructor function, or the method table when the constructor is omitted.
        :param table: Mapping of member names to methods and constants.
        :param name: Optional display name for the new class.
        :return: The new class.
        :raises ValidationError: If the receiver or arguments have an unusable shape.
        """
        if receiver is not NO_PARENT and not isinstance(receiver, ProtoClass):
            raise ValidationError(f"Receiver must be a ProtoClass or NO_PARENT, got {type(receiver).__name__}")
        definition = self._validator.normalize(construct_fn, table)

        new_class: Optional[ProtoClass] = None

        def virtual_construct(instance: Instance, /, *args: Any, **kwargs: Any) -> None:
            hook = new_class.method_table.resolve(VCONSTRUCT_KEY)
            hook(instance, new_class, receiver, *args, **kwargs)

        construct, how = self._resolve_constructor(receiver, definition, virtual_construct)

        parent_table = receiver.method_table if receiver is not NO_PARENT else None
        method_table = MethodTable(parent_table, definition.copied_entries())
        new_class = ProtoClass(
            name=name or _name_of(construct, how),
            construct_fn=construct,
            method_table=method_table,
            parent=receiver,
            builder=self,
            virtual=how == "virtual",
        )
        method_table[CONSTRUCTOR_KEY] = new_class

        self._logger.debug(
            "Derived class %s from %s (constructor: %s, %d entries)",
            new_class.name,
            receiver.name if receiver is not NO_PARENT else "no parent",
            how,
            len(method_table),
        )
        return new_class

    def _resolve_constructor(
        self,
        receiver: Optional[ProtoClass],
        definition: ClassDefinition,
        virtual_construct: Callable[..., None],
    ) -> Tuple[Callable[..., Any], str]:
        """
        Pick the constructor for a new class.

        :return: The constructor and a short label saying how it was chosen.
        """
        if definition.kind is DefinitionKind.CONSTRUCTOR_AND_TABLE:
            return definition.construct_fn, "explicit"
        if definition.construct_hook:
            return definition.construct_hook, "__construct"
        if receiver is NO_PARENT:
            return _construct_nothing, "no-op"
        if not definition.vconstruct_hook:
            return _forwarding_constructor(receiver), "forwarding"
        return virtual_construct, "virtual"


def _construct_nothing(instance: Instance, /, *args: Any, **kwargs: Any) -> None:
    pass


def _forwarding_constructor(parent: ProtoClass) -> Callable[..., None]:
    def forward(instance: Instance, /, *args: Any, **kwargs: Any) -> None:
        parent.initialize(instance, *args, **kwargs)

    return forward


def _name_of(construct_fn: Callable[..., Any], how: str) -> str:
    name = getattr(construct_fn, "__name__", "")
    if how not in ("explicit", "__construct") or not name or name.startswith("<"):
        return "anonymous"
    return name


# Default behaviors every class rooted at OBJECT_ROOT inherits


def _has_own_property(self: Instance, name: str) -> bool:
    return name in own_fields(self)


def _to_string(self: Instance) -> str:
    return f"[object {class_of(self).name}]"


def _value_of(self: Instance) -> Instance:
    return self


default_builder = ClassBuilder()

OBJECT_ROOT = default_builder.extend(
    NO_PARENT,
    _construct_nothing,
    {
        "has_own_property": _has_own_property,
        "to_string": _to_string,
        "value_of": _value_of,
    },
    name="object",
)


def _base_class(instance: Instance, /, *args: Any, **kwargs: Any) -> None:
    pass


BaseClass = default_builder.extend(OBJECT_ROOT, _base_class, name="BaseClass")


def extend(
    receiver: Optional[ProtoClass],
    construct_fn: Any = None,
    table: Any = None,
    *,
    name: Optional[str] = None,
) -> ProtoClass:
    """
    Derive a class from an explicit receiver using the default builder.

    Use OBJECT_ROOT to get a class unrelated to BaseClass that still has the
    default object behaviors, or NO_PARENT for a class whose instances inherit
    nothing beyond the given table.
    """
    return default_builder.extend(receiver, construct_fn, table, name=name)
