# tests/unit/core/test_validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from types import MappingProxyType

import pytest

from protoclass.core.base import MethodTable
from protoclass.core.errors import ValidationError
from protoclass.core.validations import ClassDefinition, DefinitionKind, Validator


def ctor(self):
    pass


def test_constructor_and_table():
    definition = Validator().normalize(ctor, {"x": 1})
    assert definition.kind is DefinitionKind.CONSTRUCTOR_AND_TABLE
    assert definition.construct_fn is ctor
    assert definition.entries == {"x": 1}


def test_constructor_only():
    definition = Validator().normalize(ctor)
    assert definition.kind is DefinitionKind.CONSTRUCTOR_AND_TABLE
    assert definition.entries == {}


def test_table_as_first_argument():
    definition = Validator().normalize({"x": 1})
    assert definition.kind is DefinitionKind.TABLE_ONLY
    assert definition.construct_fn is None
    assert definition.entries == {"x": 1}


def test_table_as_first_argument_ignores_second():
    definition = Validator().normalize({"x": 1}, {"y": 2})
    assert definition.entries == {"x": 1}


def test_table_passed_second_without_constructor():
    definition = Validator().normalize(None, {"y": 2})
    assert definition.kind is DefinitionKind.TABLE_ONLY
    assert definition.entries == {"y": 2}


def test_no_arguments():
    definition = Validator().normalize()
    assert definition.kind is DefinitionKind.EMPTY
    assert definition.entries == {}


def test_any_mapping_is_a_table():
    definition = Validator().normalize(MappingProxyType({"x": 1}))
    assert definition.kind is DefinitionKind.TABLE_ONLY


def test_method_table_contributes_own_entries_only():
    parent = MethodTable(entries={"inherited": 1})
    table = MethodTable(parent, {"own": 2})
    definition = Validator().normalize(table)
    assert definition.entries == {"own": 2}


def test_entries_do_not_track_the_callers_mapping():
    source = {"x": 1}
    definition = Validator().normalize(source)
    source["x"] = 2
    assert definition.entries["x"] == 1


@pytest.mark.parametrize("bad", [5, "Cat", [("x", 1)]])
def test_non_callable_constructor_rejected(bad):
    with pytest.raises(ValidationError, match="Constructor must be callable or a mapping"):
        Validator().normalize(bad)


def test_non_mapping_table_rejected():
    with pytest.raises(ValidationError, match="Method table must be a mapping"):
        Validator().normalize(ctor, [("x", 1)])


def test_hooks_and_copied_entries():
    def construct(self):
        pass

    def vconstruct(self, own, parent):
        pass

    definition = ClassDefinition(
        DefinitionKind.TABLE_ONLY,
        entries={"__construct": construct, "__vconstruct": vconstruct, "x": 1},
    )
    assert definition.construct_hook is construct
    assert definition.vconstruct_hook is vconstruct
    assert definition.copied_entries() == {"__vconstruct": vconstruct, "x": 1}
