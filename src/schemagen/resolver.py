"""
Type Resolver.

Maps a schema node (kind + format + items/properties/enum) to exactly one
TargetType. Resolution is total: an odd declaration falls back to the
nearest compatible kind and never raises, with the single exception of
an enum whose literals collide on a member name.

Precedence (first match wins):
    1. enum literals            -> EnumType (declaration order)
    2. format "utc-millisec"    -> DateType(EPOCH_MILLIS_AS_LONG)
    3. kind "date"              -> FormattedStringAsDate / EpochMillisAsDate
    4. "string" + date format   -> DateType(FORMATTED_STRING_AS_DATE)
    5. string/integer/number/boolean -> ScalarType
    6. array                    -> ListType / UniqueSetType
    7. object                   -> ReferenceType (via object_resolver)
    8. anything else            -> ScalarType(STRING), with a warning
"""

import warnings
from typing import Callable, Dict, Optional

from schemagen.config import GenerationConfig
from schemagen.enums import build_enum_type
from schemagen.naming import NameAllocator, to_class_name
from schemagen.schema import SchemaKind, SchemaNode, UTC_MILLISEC
from schemagen.target_types import (
    BOOLEAN,
    DOUBLE,
    INTEGER,
    LONG,
    STRING,
    DateKind,
    DateType,
    EnumType,
    ListType,
    ReferenceType,
    TargetType,
    UniqueSetType,
)


ObjectResolver = Callable[[SchemaNode, str], ReferenceType]


class TypeResolver:
    """
    Resolves schema nodes to TargetTypes.

    Object kinds are delegated to `object_resolver`, which builds the
    nested type's descriptors and returns a ReferenceType to it. Enum
    types are cached per schema node, so a shared enum sub-schema
    resolves to one EnumType.

    Args:
        config: Generation settings
        object_resolver: Callback for object kinds
        names: Shared type-name allocator (enums and generated types live
            in one namespace)
    """

    def __init__(
        self,
        config: Optional[GenerationConfig] = None,
        object_resolver: Optional[ObjectResolver] = None,
        names: Optional[NameAllocator] = None,
    ):
        self.config = config or GenerationConfig()
        self.object_resolver = object_resolver
        self.names = names or NameAllocator()
        self.enums: Dict[str, EnumType] = {}
        self._enum_cache: Dict[SchemaNode, EnumType] = {}

    def resolve(self, node: Optional[SchemaNode], name_hint: str = "") -> TargetType:
        """
        Resolve a schema node.

        Args:
            node: Schema declaration (None resolves to String)
            name_hint: Property name, used to name enums and nested types

        Returns:
            The node's TargetType
        """
        if node is None:
            return STRING

        if node.enum:
            return self._resolve_enum(node, name_hint)

        if node.format == UTC_MILLISEC:
            return DateType(DateKind.EPOCH_MILLIS_AS_LONG, UTC_MILLISEC)

        kind = node.known_kind

        if kind is SchemaKind.DATE:
            if self.config.is_date_time_format(node.format):
                return DateType(DateKind.FORMATTED_STRING_AS_DATE, node.format)
            return DateType(DateKind.EPOCH_MILLIS_AS_DATE)

        if kind is SchemaKind.STRING:
            if self.config.is_date_time_format(node.format):
                return DateType(DateKind.FORMATTED_STRING_AS_DATE, node.format)
            return STRING

        if kind is SchemaKind.INTEGER:
            return LONG if self.config.use_long_integers else INTEGER

        if kind is SchemaKind.NUMBER:
            return DOUBLE

        if kind is SchemaKind.BOOLEAN:
            return BOOLEAN

        if kind is SchemaKind.ARRAY:
            element = self.resolve(node.items, name_hint) if node.items is not None else STRING
            if node.unique_items:
                return UniqueSetType(element)
            return ListType(element)

        if kind is SchemaKind.OBJECT:
            if self.object_resolver is not None:
                return self.object_resolver(node, name_hint)
            # standalone use: name the reference, nobody builds its descriptors
            return ReferenceType(self.names.allocate(to_class_name(name_hint), node))

        warnings.warn(
            f"Unrecognized kind {node.kind!r} for '{name_hint or '<anonymous>'}', using String",
            UserWarning,
        )
        return STRING

    def _resolve_enum(self, node: SchemaNode, name_hint: str) -> EnumType:
        cached = self._enum_cache.get(node)
        if cached is not None:
            return cached

        name = self.names.allocate(to_class_name(name_hint, fallback="Enum"), node)
        enum_type = build_enum_type(name, node.enum)
        self._enum_cache[node] = enum_type
        self.enums[name] = enum_type
        return enum_type
