"""
Serialization helpers: JSON/YAML schema documents <-> schemagen objects.

Loads a schema document into a SchemaNode tree with defaults in Literal
Model form. In-document "$ref" pointers ("#", "#/definitions/x", ...)
resolve to the same node object, so recursive schemas stay recursive.
"""
from __future__ import annotations

import json
from datetime import date, datetime
from typing import Any, Dict, List, Tuple

import yaml

from schemagen.literals import (
    NULL,
    BoolLiteral,
    DecimalLiteral,
    IntLiteral,
    LiteralValue,
    NullLiteral,
    ObjectLiteral,
    SequenceLiteral,
    TextLiteral,
    UniqueSequenceLiteral,
)
from schemagen.schema import SchemaKind, SchemaNode


class SchemaLoadError(Exception):
    """Raised when a schema document cannot be turned into nodes."""
    pass


# =============================================================================
# LITERALS
# =============================================================================

def literal_from_raw(raw: Any, unique: bool = False) -> LiteralValue:
    """
    Convert a decoded JSON/YAML value into a Literal Model value.

    Args:
        raw: Value as produced by json/yaml (None, bool, int, float, str,
            list, dict)
        unique: Top-level lists become UniqueSequenceLiteral

    Raises:
        SchemaLoadError: For values JSON cannot express
    """
    if raw is None:
        return NULL
    # bool before int: bool is an int subclass
    if isinstance(raw, bool):
        return BoolLiteral(raw)
    if isinstance(raw, int):
        return IntLiteral(raw)
    if isinstance(raw, float):
        return DecimalLiteral(raw)
    if isinstance(raw, str):
        return TextLiteral(raw)
    if isinstance(raw, (datetime, date)):
        # YAML turns unquoted timestamps into datetime objects
        return TextLiteral(raw.isoformat())
    if isinstance(raw, (list, tuple)):
        items = tuple(literal_from_raw(item) for item in raw)
        return UniqueSequenceLiteral(items) if unique else SequenceLiteral(items)
    if isinstance(raw, dict):
        return ObjectLiteral(tuple((str(k), literal_from_raw(v)) for k, v in raw.items()))
    raise SchemaLoadError(f"Unsupported default value type: {type(raw).__name__}")


def literal_to_raw(literal: LiteralValue | None) -> Any:
    if literal is None or isinstance(literal, NullLiteral):
        return None
    if isinstance(literal, (BoolLiteral, IntLiteral, DecimalLiteral, TextLiteral)):
        return literal.value
    if isinstance(literal, (SequenceLiteral, UniqueSequenceLiteral)):
        return [literal_to_raw(item) for item in literal.items]
    if isinstance(literal, ObjectLiteral):
        return {name: literal_to_raw(value) for name, value in literal.fields}
    raise TypeError(f"Unsupported LiteralValue type: {type(literal)}")


# =============================================================================
# SCHEMA NODES
# =============================================================================

def _declared_kind(raw_type: Any) -> str | None:
    """A "type" entry may be a string or a list such as ["string", "null"]."""
    if raw_type is None:
        return None
    if isinstance(raw_type, str):
        return raw_type
    if isinstance(raw_type, list):
        for entry in raw_type:
            if isinstance(entry, str) and entry != "null":
                return entry
        return None
    raise SchemaLoadError(f"Invalid type declaration: {raw_type!r}")


def _optional_text(value: Any) -> str | None:
    """Documentation keywords are kept as text, whatever JSON type they arrive as."""
    if value is None or isinstance(value, str):
        return value
    return str(value)


def _escape_pointer_token(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def _unescape_pointer_token(token: str) -> str:
    return token.replace("~1", "/").replace("~0", "~")


class _SchemaReader:
    """
    Builds nodes for one document.

    Nodes are cached by JSON pointer and registered before they are
    filled, so a "$ref" to an ancestor returns the ancestor itself.
    """

    def __init__(self, document: Dict[str, Any]):
        self.document = document
        self.nodes_by_pointer: Dict[str, SchemaNode] = {}

    def read_root(self) -> SchemaNode:
        return self.read(self.document, "#")

    def read(self, d: Any, pointer: str, chain: Tuple[str, ...] = ()) -> SchemaNode:
        if pointer in self.nodes_by_pointer:
            return self.nodes_by_pointer[pointer]

        if isinstance(d, dict) and "$ref" in d:
            ref = d["$ref"]
            if ref == pointer or ref in chain:
                raise SchemaLoadError(f"Reference {ref!r} at {pointer} points to itself")
            node = self.read(self._resolve_pointer(ref), ref, chain + (pointer,))
            self.nodes_by_pointer[pointer] = node
            return node

        node = SchemaNode()
        self.nodes_by_pointer[pointer] = node
        self._fill(node, d, pointer)
        return node

    def _resolve_pointer(self, ref: str) -> Any:
        if ref == "#":
            return self.document
        if not ref.startswith("#/"):
            raise SchemaLoadError(f"Only in-document references are supported: {ref!r}")
        target: Any = self.document
        for token in ref[2:].split("/"):
            token = _unescape_pointer_token(token)
            if isinstance(target, dict) and token in target:
                target = target[token]
            elif isinstance(target, list) and token.isdigit() and int(token) < len(target):
                target = target[int(token)]
            else:
                raise SchemaLoadError(f"Unresolvable reference: {ref!r}")
        return target

    def _fill(self, node: SchemaNode, d: Any, pointer: str) -> None:
        if not isinstance(d, dict):
            raise SchemaLoadError(f"Schema at {pointer} must be an object, got {type(d).__name__}")

        node.kind = _declared_kind(d.get("type"))
        node.format = d.get("format")
        node.unique_items = bool(d.get("uniqueItems", False))
        node.title = _optional_text(d.get("title"))
        node.description = _optional_text(d.get("description"))

        if node.kind is None and "properties" in d:
            node.kind = SchemaKind.OBJECT.value

        if "properties" in d:
            props = d["properties"]
            if not isinstance(props, dict):
                raise SchemaLoadError(f"'properties' at {pointer} must be an object")
            node.properties = {}
            for name, prop in props.items():
                node.properties[name] = self.read(
                    prop, f"{pointer}/properties/{_escape_pointer_token(name)}"
                )

        if "items" in d:
            node.items = self.read(d["items"], f"{pointer}/items")

        if "enum" in d:
            values = d["enum"]
            if not isinstance(values, list):
                raise SchemaLoadError(f"'enum' at {pointer} must be an array")
            node.enum = [literal_from_raw(v) for v in values]

        if "default" in d:
            node.default = literal_from_raw(d["default"], unique=node.unique_items)


def schema_from_dict(d: Dict[str, Any]) -> SchemaNode:
    """
    Build a SchemaNode tree from a decoded schema document.

    Raises:
        SchemaLoadError: If the document is malformed
    """
    if not isinstance(d, dict):
        raise SchemaLoadError("Schema document must be an object")
    return _SchemaReader(d).read_root()


def schema_from_json(s: str) -> SchemaNode:
    try:
        d = json.loads(s)
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"Invalid JSON schema document: {e}") from e
    return schema_from_dict(d)


def schema_from_yaml(s: str) -> SchemaNode:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML schema document: {e}") from e
    return schema_from_dict(d)


def schema_from_file(filepath: str) -> SchemaNode:
    """Load a .json, .yaml or .yml schema file."""
    with open(filepath, "r", encoding="utf-8") as f:
        content = f.read()
    if filepath.endswith((".yaml", ".yml")):
        return schema_from_yaml(content)
    return schema_from_json(content)


def schema_to_dict(node: SchemaNode) -> Dict[str, Any]:
    """
    Inverse of schema_from_dict for acyclic trees.

    Recursive schemas cannot be written back without "$ref" bookkeeping
    and raise ValueError.
    """
    return _node_to_dict(node, [])


def _node_to_dict(node: SchemaNode, stack: List[SchemaNode]) -> Dict[str, Any]:
    if any(node is seen for seen in stack):
        raise ValueError("Cannot serialize a recursive schema")
    stack = stack + [node]

    d: Dict[str, Any] = {}
    if node.kind is not None:
        d["type"] = node.kind
    if node.format is not None:
        d["format"] = node.format
    if node.unique_items:
        d["uniqueItems"] = True
    if node.title is not None:
        d["title"] = node.title
    if node.description is not None:
        d["description"] = node.description
    if node.properties is not None:
        d["properties"] = {name: _node_to_dict(p, stack) for name, p in node.properties.items()}
    if node.items is not None:
        d["items"] = _node_to_dict(node.items, stack)
    if node.enum is not None:
        d["enum"] = [literal_to_raw(v) for v in node.enum]
    if node.default is not None:
        d["default"] = literal_to_raw(node.default)
    return d


def schema_to_json(node: SchemaNode) -> str:
    return json.dumps(schema_to_dict(node))


def schema_to_yaml(node: SchemaNode) -> str:
    return yaml.safe_dump(schema_to_dict(node), sort_keys=False)
