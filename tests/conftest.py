# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


@pytest.fixture
def error_classes():
    """Provides a tuple of error classes for quick reference."""
    from protoclass.core.errors import MissingMemberError, ProtoClassError, ValidationError

    return (ProtoClassError, ValidationError, MissingMemberError)


@pytest.fixture
def builder():
    """A fresh ClassBuilder, independent of the module-level default."""
    from protoclass.core.builder import ClassBuilder

    return ClassBuilder()


@pytest.fixture
def animal():
    """A class with a constructor that records its arguments and two methods."""
    from protoclass.core.builder import BaseClass

    def Animal(self, name=None, legs=4):
        self.name = name or "Animal"
        self.legs = legs

    def describe(self):
        return f"{self.name} has {self.legs} legs"

    def speak(self):
        return f"{self.name} says {self.sound}"

    return BaseClass.extend(Animal, {"sound": "...", "describe": describe, "speak": speak})


@pytest.fixture
def cat_and_tiger():
    """
    Cat and Tiger classes:

    Cat (explicit constructor)
        sound = "meow", say(), hunt()
    Tiger (synthesized constructor through __vconstruct)
        sound = "grooarrr", hunt(prey)
    """
    from protoclass.core.builder import BaseClass

    def Cat(self, name=None):
        self.name = name or "Cat"

    def say(self):
        return f"{self.name} makes {self.sound}"

    def cat_hunt(self):
        return f"{self.name} catches mice"

    cat = BaseClass.extend(Cat, {"sound": "meow", "say": say, "hunt": cat_hunt})

    def tiger_vconstruct(self, own, parent, name=None):
        parent.initialize(self, name or "Tiger")

    def tiger_hunt(self, prey=None):
        return f"{self.name} hunts {prey or 'sheep'}"

    tiger = cat.extend(
        {"sound": "grooarrr", "hunt": tiger_hunt, "__vconstruct": tiger_vconstruct},
        name="Tiger",
    )
    return cat, tiger
