"""
Schema Model Generator (schemagen)

Turns a declarative schema (named properties with types, formats and
defaults) into typed data-model descriptors, each carrying a default
value of the correct type.

Pipeline:
    schema tree -> TypeResolver -> DefaultValueSynthesizer
                -> PropertyDescriptorBuilder -> backends

ARCHITECTURAL GUARANTEE:
------------------------
The core (literals, target_types, enums, resolver, defaults, descriptors)
does no I/O and knows nothing about the language a backend writes.
Loading (serialization) and emission (backends) live at the edges.
"""

from .config import GenerationConfig
from .defaults import synthesize
from .descriptors import (
    GeneratedType,
    GenerationResult,
    PropertyDescriptor,
    PropertyDescriptorBuilder,
    build_descriptors,
)
from .enums import resolve_members
from .errors import LiteralConversionError, NameCollisionError, SchemaGenError
from .resolver import TypeResolver
from .schema import SchemaNode

__version__ = "0.1.0"

__all__ = [
    "GenerationConfig",
    "synthesize",
    "GeneratedType",
    "GenerationResult",
    "PropertyDescriptor",
    "PropertyDescriptorBuilder",
    "build_descriptors",
    "resolve_members",
    "LiteralConversionError",
    "NameCollisionError",
    "SchemaGenError",
    "TypeResolver",
    "SchemaNode",
]
