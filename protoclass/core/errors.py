# protoclass/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class ProtoClassError(Exception):
    """
    Base exception class for errors within the protoclass library.
    """


class ValidationError(ProtoClassError):
    """
    Raised when the arguments given to extend do not have a usable shape.
    """


class MissingMemberError(ProtoClassError, AttributeError):
    """
    Raised when a member lookup falls off the end of a delegation chain.
    """

    def __init__(self, name: str = "", owner: str = "") -> None:
        if name and owner:
            super().__init__(f"'{owner}' has no member '{name}'")
        else:
            super().__init__(name)
        # AttributeError.__init__ resets name, so assign afterwards
        self.name = name
        self.owner = owner
