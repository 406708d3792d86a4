"""
Name derivation for generated types, fields and enum members.

All functions here are pure: the same text always yields the same name.
Collision handling is the caller's job (see NameAllocator and the enum
resolver).
"""

import keyword
import re
from typing import Dict, Optional

from schemagen.errors import NameCollisionError


_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_NON_ALNUM_RE = re.compile(r"[^0-9A-Za-z]+")


def _words(text: str) -> list:
    text = _CAMEL_BOUNDARY_RE.sub("_", text)
    return [w for w in _NON_ALNUM_RE.split(text) if w]


def to_class_name(text: str, fallback: str = "Type") -> str:
    """
    PascalCase class name.

    Examples:
        complexPropertyWithDefault -> ComplexPropertyWithDefault
        enum-with-default -> EnumWithDefault
    """
    words = _words(text)
    if not words:
        return fallback
    name = "".join(w[0].upper() + w[1:] for w in words)
    if name[0].isdigit():
        name = f"_{name}"
    return name


def to_field_name(text: str, fallback: str = "field") -> str:
    """
    snake_case attribute name, safe to use as a Python identifier.

    Examples:
        stringWithDefault -> string_with_default
        class -> class_
    """
    words = _words(text)
    if not words:
        return fallback
    name = "_".join(w.lower() for w in words)
    if name[0].isdigit():
        name = f"_{name}"
    if keyword.iskeyword(name) or keyword.issoftkeyword(name):
        name = f"{name}_"
    return name


def to_constant_name(text: str) -> str:
    """
    UPPER_SNAKE enum member name.

    Examples:
        one -> ONE
        two words -> TWO_WORDS
        camelCase -> CAMEL_CASE
        1st -> _1ST
        "" -> EMPTY
    """
    words = _words(text)
    if not words:
        return "EMPTY"
    name = "_".join(w.upper() for w in words)
    if name[0].isdigit():
        name = f"_{name}"
    return name


class NameAllocator:
    """
    Hands out unique type names within one generation pass.

    The same owner asking twice gets the same name back; a different
    owner asking for a taken name gets a numeric suffix (Address,
    Address2, Address3, ...).
    """

    def __init__(self):
        self._owners: Dict[str, object] = {}

    def allocate(self, base: str, owner: object) -> str:
        name = base
        counter = 1
        while name in self._owners and self._owners[name] is not owner:
            counter += 1
            name = f"{base}{counter}"
        self._owners[name] = owner
        return name

    def is_taken(self, name: str) -> bool:
        return name in self._owners


class FieldNameTable:
    """
    Tracks field names inside one generated type.

    Unlike type names, field names are never renamed: a clash means the
    schema is ambiguous, so it raises NameCollisionError.
    """

    def __init__(self, scope: str):
        self.scope = scope
        self._sources: Dict[str, str] = {}

    def claim(self, source: str) -> str:
        name = to_field_name(source)
        previous: Optional[str] = self._sources.get(name)
        if previous is not None and previous != source:
            raise NameCollisionError(name, previous, source, self.scope)
        self._sources[name] = source
        return name
