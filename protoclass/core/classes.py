# protoclass/core/classes.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

from protoclass.core.base import MISSING, MethodTable
from protoclass.core.errors import MissingMemberError
from protoclass.core.validations import VCONSTRUCT_KEY

if TYPE_CHECKING:
    from protoclass.core.builder import ClassBuilder


class ProtoClass:
    """
    A class in the delegation object system: a constructor, the method table
    its instances delegate to, and the class it was derived from.

    Calling a ProtoClass creates an Instance and runs the constructor on it.
    The record itself is not changed after the builder returns it; only the
    entries of its method table are open to later mutation.
    """

    def __init__(
        self,
        name: str,
        construct_fn: Callable[..., Any],
        method_table: MethodTable,
        parent: Optional["ProtoClass"],
        builder: "ClassBuilder",
        virtual: bool = False,
    ) -> None:
        """
        :param name: Display name of the class.
        :param construct_fn: Called as construct_fn(instance, *args, **kwargs) to initialize instances.
        :param method_table: Table instances delegate to.
        :param parent: The class this one derives from, or None when the chain is terminated.
        :param builder: The builder used when this class is extended further.
        :param virtual: Whether the constructor hands off to the table's __vconstruct entry.
        """
        self._name = name
        self._construct_fn = construct_fn
        self._method_table = method_table
        self._parent = parent
        self._builder = builder
        self._virtual = virtual

    @property
    def name(self) -> str:
        return self._name

    @property
    def construct_fn(self) -> Callable[..., Any]:
        return self._construct_fn

    @property
    def method_table(self) -> MethodTable:
        return self._method_table

    @property
    def parent(self) -> Optional["ProtoClass"]:
        return self._parent

    @property
    def virtual_construct_fn(self) -> Optional[Callable[..., Any]]:
        """The __vconstruct hook the constructor will call next, or None if it does not hand off."""
        if not self._virtual:
            return None
        return self._method_table.resolve(VCONSTRUCT_KEY, None)

    def __call__(self, /, *args: Any, **kwargs: Any) -> "Instance":
        """Create a new instance and run this class's constructor on it."""
        instance = Instance(self)
        self.initialize(instance, *args, **kwargs)
        return instance

    def initialize(self, instance: "Instance", /, *args: Any, **kwargs: Any) -> None:
        """
        Run this class's constructor with ``instance`` as receiver. Derived
        constructors use this to chain to their parent.
        """
        self._construct_fn(instance, *args, **kwargs)

    def extend(
        self,
        construct_fn: Any = None,
        table: Any = None,
        *,
        name: Optional[str] = None,
    ) -> "ProtoClass":
        """
        Derive a subclass of this class.

        :param construct_fn: Constructor function, or the method table when the constructor is omitted.
        :param table: Mapping of member names to methods and constants.
        :param name: Optional display name for the new class.
        :return: The new class.
        """
        return self._builder.extend(self, construct_fn, table, name=name)

    def lookup(self, name: str, default: Any = MISSING) -> Any:
        """Resolve ``name`` through the method table chain without binding it."""
        return self._method_table.resolve(name, default)

    def method_resolution_order(self) -> List["ProtoClass"]:
        """Return this class followed by each ancestor up to the root."""
        order = []
        cls: Optional[ProtoClass] = self
        while cls is not None:
            order.append(cls)
            cls = cls._parent
        return order

    def is_subclass(self, other: "ProtoClass") -> bool:
        return any(cls is other for cls in self.method_resolution_order())

    def is_instance(self, obj: Any) -> bool:
        """Whether ``obj`` is an Instance whose delegation chain contains this class's table."""
        if not isinstance(obj, Instance):
            return False
        table = class_of(obj).method_table
        return table is self._method_table or self._method_table.is_prototype_of(table)

    def __repr__(self) -> str:
        parent = self._parent.name if self._parent is not None else None
        return f"<ProtoClass {self._name} parent={parent}>"


class Instance:
    """
    An object created by calling a ProtoClass.

    Attribute reads check the instance's own fields first and then delegate to
    the class's method table chain. Writes always go to own fields, except when
    the chain resolves the name to a data descriptor such as a property.
    """

    __slots__ = ("__cls", "__fields")

    def __init__(self, cls: ProtoClass) -> None:
        object.__setattr__(self, "_Instance__cls", cls)
        object.__setattr__(self, "_Instance__fields", {})

    def __getattr__(self, name: str) -> Any:
        fields = own_fields(self)
        if name in fields:
            return fields[name]
        cls = class_of(self)
        value = cls.method_table.resolve(name)
        if value is MISSING:
            raise MissingMemberError(name, cls.name)
        getter = getattr(type(value), "__get__", None)
        if getter is None:
            return value
        return getter(value, self, Instance)

    def __setattr__(self, name: str, value: Any) -> None:
        member = class_of(self).method_table.resolve(name)
        setter = getattr(type(member), "__set__", None)
        if setter is not None:
            setter(member, self, value)
            return
        own_fields(self)[name] = value

    def __delattr__(self, name: str) -> None:
        fields = own_fields(self)
        if name not in fields:
            raise MissingMemberError(name, class_of(self).name)
        del fields[name]

    def __dir__(self) -> List[str]:
        names = list(own_fields(self))
        names.extend(n for n in class_of(self).method_table.all_keys() if n not in names)
        return names

    def __repr__(self) -> str:
        return f"<{class_of(self).name} instance at {id(self):#x}>"

    def __str__(self) -> str:
        to_string = getattr(self, "to_string", None)
        if callable(to_string):
            return str(to_string())
        return repr(self)


def class_of(instance: Instance) -> ProtoClass:
    """Return the class an instance was created from."""
    return object.__getattribute__(instance, "_Instance__cls")


def own_fields(instance: Instance) -> Dict[str, Any]:
    """Return the live dict of an instance's own fields."""
    return object.__getattribute__(instance, "_Instance__fields")
