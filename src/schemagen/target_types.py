"""
Target Type descriptors.

Every schema property resolves to exactly one of these:

    - ScalarType: String, Integer, Long, Double, Boolean
    - DateType: one of three date representations
    - EnumType: ordered members, one per distinct literal
    - ListType / UniqueSetType: collections of an element type
    - ReferenceType: a nested, independently generated type

These objects know nothing about the language the emitter writes.
They are frozen, so two resolutions of the same schema compare equal.
"""

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple


class TargetType(ABC):
    """Base class for resolved types. Structure only."""
    pass


class ScalarKind(Enum):
    STRING = "String"
    INTEGER = "Integer"
    LONG = "Long"
    DOUBLE = "Double"
    BOOLEAN = "Boolean"


class DateKind(Enum):
    """
    How a date-valued property is represented.

    EPOCH_MILLIS_AS_DATE:
        Date declared without a format; defaults are epoch milliseconds
    FORMATTED_STRING_AS_DATE:
        Date carried as a formatted string; defaults parse with that format
    EPOCH_MILLIS_AS_LONG:
        "utc-millisec" format; the value stays a 64-bit integer
    """

    EPOCH_MILLIS_AS_DATE = "EpochMillisAsDate"
    FORMATTED_STRING_AS_DATE = "FormattedStringAsDate"
    EPOCH_MILLIS_AS_LONG = "EpochMillisAsLong"


@dataclass(frozen=True)
class ScalarType(TargetType):
    kind: ScalarKind

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class DateType(TargetType):
    """
    Properties:
        kind: DateKind representation
        format: The format declared on the property (None for plain dates)
    """

    kind: DateKind
    format: Optional[str] = None

    def __str__(self) -> str:
        if self.format:
            return f"{self.kind.value}({self.format})"
        return self.kind.value


@dataclass(frozen=True)
class EnumMember:
    """
    A single generated enum member.

    Properties:
        name: Generated member name (e.g. "TWO_X")
        ordinal: Position in declaration order, starting at 0
        literal: The original literal text, used for default matching
    """

    name: str
    ordinal: int
    literal: str


@dataclass(frozen=True)
class EnumType(TargetType):
    """
    An enumerated type with members in declaration order.

    IMPORTANT:
        Defaults select a member by its original literal text through
        member_for(), never by position in some other list.
    """

    name: str
    members: Tuple[EnumMember, ...] = ()
    _by_literal: Dict[str, EnumMember] = field(
        default_factory=dict, init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        # frozen dataclass: build the lookup table once, bypassing __setattr__
        object.__setattr__(self, "_by_literal", {m.literal: m for m in self.members})

    def member_for(self, literal: str) -> Optional[EnumMember]:
        return self._by_literal.get(literal)

    @property
    def literals(self) -> Tuple[str, ...]:
        return tuple(m.literal for m in self.members)

    def __str__(self) -> str:
        return f"Enum {self.name}"


@dataclass(frozen=True)
class ListType(TargetType):
    """Ordered, duplicates allowed, mutable."""

    element: TargetType

    def __str__(self) -> str:
        return f"List<{self.element}>"


@dataclass(frozen=True)
class UniqueSetType(TargetType):
    """Mutable set that iterates in insertion order."""

    element: TargetType

    def __str__(self) -> str:
        return f"Set<{self.element}>"


@dataclass(frozen=True)
class ReferenceType(TargetType):
    """
    Points at a generated type by name.

    The descriptors of the referenced type live in the GenerationResult,
    not here, so self-referencing schemas do not produce infinite values.
    """

    name: str

    def __str__(self) -> str:
        return self.name


STRING = ScalarType(ScalarKind.STRING)
INTEGER = ScalarType(ScalarKind.INTEGER)
LONG = ScalarType(ScalarKind.LONG)
DOUBLE = ScalarType(ScalarKind.DOUBLE)
BOOLEAN = ScalarType(ScalarKind.BOOLEAN)
