"""
Property Descriptor Builder.

Composes the Type Resolver and the Default Value Synthesizer into one
descriptor per schema property. Nested object schemas become their own
GeneratedType, reachable through a ReferenceType.

ORDERING:
    Properties keep the schema's declaration order (never sorted).
    No property is dropped; an odd declaration degrades to String.

RECURSION:
    A generated type is registered before its properties are built, so
    a schema that refers back to itself resolves to the ReferenceType
    already under construction instead of recursing forever.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from schemagen.config import GenerationConfig
from schemagen.defaults import synthesize
from schemagen.literals import LiteralValue
from schemagen.naming import FieldNameTable, NameAllocator, to_class_name
from schemagen.resolver import TypeResolver
from schemagen.schema import SchemaNode
from schemagen.target_types import EnumType, ReferenceType, TargetType


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PropertyDescriptor:
    """
    One resolved schema property, ready for an emitter.

    Properties:
        name: Property name as declared in the schema
        field_name: Generated attribute name (snake_case identifier)
        target_type: Resolved TargetType
        default: Synthesized default value, None when absent
        literal: The declared default literal, if any
        description: Documentation carried over from the schema
    """

    name: str
    field_name: str
    target_type: TargetType
    default: Any = None
    literal: Optional[LiteralValue] = None
    description: Optional[str] = None

    @property
    def has_default(self) -> bool:
        return self.default is not None


@dataclass
class GeneratedType:
    """A named set of property descriptors produced from an object schema."""

    name: str
    properties: List[PropertyDescriptor] = field(default_factory=list)
    description: Optional[str] = None

    def get_property(self, name: str) -> Optional[PropertyDescriptor]:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None


@dataclass
class GenerationResult:
    """
    Output of one generation pass.

    Properties:
        root: The type generated for the top-level schema
        types: Every generated type by name; nested types first, root last
        enums: Every enum type by name
    """

    root: GeneratedType
    types: Dict[str, GeneratedType] = field(default_factory=dict)
    enums: Dict[str, EnumType] = field(default_factory=dict)

    def get_type(self, name: str) -> Optional[GeneratedType]:
        return self.types.get(name)


class PropertyDescriptorBuilder:
    """
    Builds GeneratedTypes from object schemas.

    One build() call is one generation pass with its own name space and
    reference cache; nothing carries over between calls.
    """

    def __init__(self, config: Optional[GenerationConfig] = None):
        self.config = config or GenerationConfig()
        self._reset()

    def _reset(self) -> None:
        self._names = NameAllocator()
        self._types: Dict[str, GeneratedType] = {}
        self._references: Dict[SchemaNode, ReferenceType] = {}
        self._resolver = TypeResolver(
            self.config,
            object_resolver=self._resolve_object,
            names=self._names,
        )

    def build(self, schema: SchemaNode, name: str = "Root") -> GenerationResult:
        """
        Run one generation pass over an object schema.

        Args:
            schema: Root schema node
            name: Name of the root generated type

        Returns:
            GenerationResult with the root type, nested types and enums

        Raises:
            LiteralConversionError: If a default cannot be converted
            NameCollisionError: If enum members or field names clash
        """
        self._reset()
        root_ref = self._resolve_object(schema, name)
        root = self._types[root_ref.name]

        types = {n: t for n, t in self._types.items() if t is not root}
        types[root.name] = root

        return GenerationResult(root=root, types=types, enums=dict(self._resolver.enums))

    def build_properties(self, schema: SchemaNode, scope: str) -> List[PropertyDescriptor]:
        """Descriptors for the properties of `schema`, in declaration order."""
        fields = FieldNameTable(scope=f"type {scope}")
        descriptors = []

        for prop_name, prop_node in (schema.properties or {}).items():
            field_name = fields.claim(prop_name)
            target = self._resolver.resolve(prop_node, prop_name)
            literal = prop_node.default if prop_node is not None else None
            default = synthesize(target, literal, prop_name)

            descriptors.append(PropertyDescriptor(
                name=prop_name,
                field_name=field_name,
                target_type=target,
                default=default,
                literal=literal,
                description=prop_node.description if prop_node is not None else None,
            ))

        return descriptors

    def _resolve_object(self, node: SchemaNode, name_hint: str) -> ReferenceType:
        existing = self._references.get(node)
        if existing is not None:
            # shared sub-schema, or a cycle back to a type still being built
            return existing

        name = self._names.allocate(to_class_name(name_hint), node)
        ref = ReferenceType(name)
        generated = GeneratedType(name=name, description=node.description or node.title)

        self._references[node] = ref
        self._types[name] = generated
        logger.debug("Registered generated type %s", name)

        generated.properties.extend(self.build_properties(node, name))
        return ref


def build_descriptors(
    schema: SchemaNode,
    name: str = "Root",
    config: Optional[GenerationConfig] = None,
) -> GenerationResult:
    """Convenience wrapper: one pass with a fresh builder."""
    return PropertyDescriptorBuilder(config).build(schema, name)


__all__ = [
    "PropertyDescriptor",
    "GeneratedType",
    "GenerationResult",
    "PropertyDescriptorBuilder",
    "build_descriptors",
]
