# tests/unit/core/test_errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


def test_error_hierarchy(error_classes):
    ProtoClassError, ValidationError, MissingMemberError = error_classes
    assert issubclass(ValidationError, ProtoClassError)
    assert issubclass(MissingMemberError, ProtoClassError)


def test_missing_member_is_attribute_error():
    from protoclass.core.errors import MissingMemberError

    error = MissingMemberError("speak", "Rock")
    assert isinstance(error, AttributeError)
    assert error.name == "speak"
    assert error.owner == "Rock"
    assert str(error) == "'Rock' has no member 'speak'"


def test_exceptions_instantiation(error_classes):
    ProtoClassError, ValidationError, MissingMemberError = error_classes
    assert str(ProtoClassError("Base error")) == "Base error"
    assert str(ValidationError("Bad shape")) == "Bad shape"
    assert str(MissingMemberError("only_name")) == "only_name"


def test_error_empty_messages():
    from protoclass.core.errors import MissingMemberError, ProtoClassError, ValidationError

    assert str(ProtoClassError()) == ""
    assert str(ValidationError()) == ""
    assert str(MissingMemberError()) == ""
