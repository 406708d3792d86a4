"""
Schema node tree.

This is the input the core consumes: one node per schema (root object,
property, array item). A loader (see serialization.py) builds the tree
from JSON/YAML; tests and callers may also build it directly.

ARCHITECTURAL RULE:
    These objects:
        - Carry declarations only (kind, format, default, ...)
        - Do not resolve or validate anything
        - Tolerate unknown kinds and formats (resolution falls back)

Nodes are plain (non-frozen) dataclasses so a loader can build
self-referencing schemas: a "$ref" back to an ancestor is the same
node object, not a copy.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from schemagen.literals import LiteralValue


class SchemaKind(Enum):
    """
    Declared kinds the resolver knows about.

    A node's `kind` is kept as a raw string so unknown kinds survive
    loading; use SchemaNode.known_kind to map it here.
    """

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    ARRAY = "array"
    OBJECT = "object"


UTC_MILLISEC = "utc-millisec"


@dataclass(eq=False)
class SchemaNode:
    """
    A single schema declaration.

    Properties:
        kind:
            Declared kind ("string", "integer", "array", ...). May be None
            or an unrecognized string; resolution falls back to String.

        format:
            Optional format tag ("date-time", "utc-millisec", a strftime
            pattern, ...)

        unique_items:
            For arrays: the items form a set

        properties:
            For objects: property name -> node, in declaration order

        items:
            For arrays: the item node

        enum:
            Allowed literal values, in declaration order

        default:
            Declared default, already in Literal Model form

        title / description:
            Documentation only

    IMPORTANT:
        Equality is identity (eq=False). Two structurally equal nodes are
        still two schemas; caches key on the node object itself.
    """

    kind: Optional[str] = None
    format: Optional[str] = None
    unique_items: bool = False
    properties: Optional[Dict[str, "SchemaNode"]] = None
    items: Optional["SchemaNode"] = None
    enum: Optional[List[LiteralValue]] = None
    default: Optional[LiteralValue] = None
    title: Optional[str] = None
    description: Optional[str] = None

    @property
    def known_kind(self) -> Optional[SchemaKind]:
        """The declared kind as a SchemaKind, or None if unrecognized."""
        if self.kind is None:
            return None
        try:
            return SchemaKind(self.kind)
        except ValueError:
            return None

    def get_property(self, name: str) -> Optional["SchemaNode"]:
        if not self.properties:
            return None
        return self.properties.get(name)


def object_schema(properties: Optional[Dict[str, SchemaNode]] = None, **kwargs) -> SchemaNode:
    """Shorthand for an object node with ordered properties."""
    return SchemaNode(kind=SchemaKind.OBJECT.value, properties=dict(properties or {}), **kwargs)


def array_schema(items: Optional[SchemaNode] = None, unique_items: bool = False, **kwargs) -> SchemaNode:
    """Shorthand for an array node."""
    return SchemaNode(kind=SchemaKind.ARRAY.value, items=items, unique_items=unique_items, **kwargs)


def property_names(node: SchemaNode) -> List[str]:
    """Property names of an object node, in declaration order."""
    return list(node.properties or {})


__all__ = [
    "SchemaKind",
    "SchemaNode",
    "UTC_MILLISEC",
    "object_schema",
    "array_schema",
    "property_names",
]
