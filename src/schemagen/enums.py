"""
Enum Resolver.

Maps the literals of an enumerated schema type to generated members.

RULES:
    - Ordinal 0 is the first declared literal; declaration order is kept
    - The same literal declared twice produces one member (first wins)
    - Member names are a pure function of the literal text
    - Two distinct literals with the same member name is fatal
"""

from typing import Dict, Iterable, List, Tuple

from schemagen.errors import NameCollisionError
from schemagen.literals import LiteralValue, literal_text
from schemagen.naming import to_constant_name
from schemagen.target_types import EnumMember, EnumType


def enum_literal_texts(literals: Iterable[LiteralValue]) -> List[str]:
    """
    Textual form of each declared enum literal.

    Non-text scalars use their JSON spelling (1 -> "1", true -> "true").
    Null and composite literals cannot name a member and are skipped.
    """
    texts = []
    for literal in literals:
        text = literal_text(literal)
        if text is not None:
            texts.append(text)
    return texts


def resolve_members(literals: Iterable[str], scope: str = "enum") -> Tuple[EnumMember, ...]:
    """
    Build ordered enum members from literal texts.

    Args:
        literals: Literal texts in declaration order
        scope: Enum name, used in collision messages

    Returns:
        Tuple of EnumMember, ordinals 0..n-1

    Raises:
        NameCollisionError: If two distinct literals share a member name
    """
    members: List[EnumMember] = []
    seen_literals = set()
    names: Dict[str, str] = {}

    for text in literals:
        if text in seen_literals:
            continue
        seen_literals.add(text)

        name = to_constant_name(text)
        if name in names:
            raise NameCollisionError(name, names[name], text, scope)
        names[name] = text

        members.append(EnumMember(name=name, ordinal=len(members), literal=text))

    return tuple(members)


def build_enum_type(name: str, literals: Iterable[LiteralValue]) -> EnumType:
    """Resolve an enumerated schema type into an EnumType named `name`."""
    texts = enum_literal_texts(literals)
    return EnumType(name=name, members=resolve_members(texts, scope=f"enum {name}"))
