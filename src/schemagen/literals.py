"""
Literal Model for schema-declared default values.

A default value in a schema document is represented as a small tree of
literals, independent of the type the property eventually resolves to.
The schema loader builds these trees; the core only reads them.

This ensures:
    - Defaults can be inspected before their target type is known
    - The same literal can be converted to different target types
    - No raw JSON/YAML objects leak into the core

ARCHITECTURAL RULE:
    Literals are immutable (frozen=True).
    Conversion logic belongs in the synthesizer, not here.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Optional, Tuple


class LiteralValue(ABC):
    """
    Base class for all default-value literals.

    Structure only. No conversion, no rendering.
    """
    pass


@dataclass(frozen=True)
class NullLiteral(LiteralValue):
    """An explicit null default (treated as "no default" by the synthesizer)."""
    pass


@dataclass(frozen=True)
class BoolLiteral(LiteralValue):
    value: bool


@dataclass(frozen=True)
class IntLiteral(LiteralValue):
    """
    An integral number literal.

    The loader produces this for any JSON number without a fractional part.
    Width checks (32/64-bit) happen during synthesis.
    """

    value: int


@dataclass(frozen=True)
class DecimalLiteral(LiteralValue):
    value: float


@dataclass(frozen=True)
class TextLiteral(LiteralValue):
    value: str


@dataclass(frozen=True)
class SequenceLiteral(LiteralValue):
    """
    An ordered list literal. Order is preserved, duplicates are allowed.

    Example:
        ["one", "two", "three"]

    Becomes:
        SequenceLiteral(items=(
            TextLiteral("one"),
            TextLiteral("two"),
            TextLiteral("three"),
        ))
    """

    items: Tuple[LiteralValue, ...] = ()


@dataclass(frozen=True)
class UniqueSequenceLiteral(LiteralValue):
    """
    A list literal declared under a "unique items" array.

    Declaration order is kept; set semantics are applied when the
    value is synthesized, not here.
    """

    items: Tuple[LiteralValue, ...] = ()


@dataclass(frozen=True)
class ObjectLiteral(LiteralValue):
    """
    A nested object literal.

    Fields are stored as (name, literal) pairs to keep declaration
    order and to stay hashable.
    """

    fields: Tuple[Tuple[str, LiteralValue], ...] = ()

    def get(self, name: str) -> Optional[LiteralValue]:
        for field_name, value in self.fields:
            if field_name == name:
                return value
        return None

    def keys(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.fields)


NULL = NullLiteral()


def is_null(literal: Optional[LiteralValue]) -> bool:
    """True for a missing default or an explicit null literal."""
    return literal is None or isinstance(literal, NullLiteral)


def literal_text(literal: LiteralValue) -> Optional[str]:
    """
    Textual form of a scalar literal, or None for composites and null.

    Numbers and booleans use their JSON spelling, so a default of
    `true` declared on a string property becomes "true".
    """
    if isinstance(literal, TextLiteral):
        return literal.value
    if isinstance(literal, BoolLiteral):
        return "true" if literal.value else "false"
    if isinstance(literal, IntLiteral):
        return str(literal.value)
    if isinstance(literal, DecimalLiteral):
        return repr(literal.value)
    return None
