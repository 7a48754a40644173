"""protoclass: one-call subclassing for a prototype-based object system

This package derives classes in a delegation object model with a single
``extend`` call instead of wiring constructors and method tables by hand.

Responsibilities:
    - Constructor resolution (explicit, ``__construct``, synthesized)
    - Method table delegation chains with a single parent
    - Virtual constructor hand-off through ``__vconstruct``
    - Chains rooted at BaseClass, at an unrelated root, or at nothing

Interactions:
    - Client code through the public API below
    - Logging system for derivation diagnostics

Cross-cutting Concerns:
    Error Handling:
        - Structured error hierarchy rooted at ProtoClassError
        - Missing members raise an AttributeError subclass

    Logging:
        - Each derivation logged at DEBUG
        - No handlers installed by the library
"""

from .core.base import MISSING, MethodTable
from .core.builder import NO_PARENT, OBJECT_ROOT, BaseClass, ClassBuilder, default_builder, extend
from .core.classes import Instance, ProtoClass, class_of, own_fields
from .core.errors import MissingMemberError, ProtoClassError, ValidationError
from .core.validations import ClassDefinition, DefinitionKind, Validator

__version__ = "0.1.0"

__all__ = [
    # Building classes
    "extend",
    "ClassBuilder",
    "default_builder",
    "BaseClass",
    "OBJECT_ROOT",
    "NO_PARENT",
    # Object model
    "ProtoClass",
    "Instance",
    "MethodTable",
    "MISSING",
    "class_of",
    "own_fields",
    # Argument handling
    "ClassDefinition",
    "DefinitionKind",
    "Validator",
    # Errors
    "ProtoClassError",
    "ValidationError",
    "MissingMemberError",
]
