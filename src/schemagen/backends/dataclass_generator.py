"""
Python dataclass generator for schemagen results.

Converts a GenerationResult into Python source: one Enum class per enum
type and one @dataclass per generated type, every field initialised with
its synthesized default.

Collection fields use default_factory, so each instance owns a fresh
mutable list/set. Reference fields always default to None.
"""

import math
from datetime import datetime, timezone
from typing import Any, List

from schemagen.containers import OrderedSet
from schemagen.descriptors import GeneratedType, GenerationResult, PropertyDescriptor
from schemagen.errors import NameCollisionError
from schemagen.target_types import (
    DateKind,
    DateType,
    EnumMember,
    EnumType,
    ListType,
    ReferenceType,
    ScalarKind,
    ScalarType,
    TargetType,
    UniqueSetType,
)


INDENT = "    "

_SCALAR_ANNOTATIONS = {
    ScalarKind.STRING: "str",
    ScalarKind.INTEGER: "int",
    ScalarKind.LONG: "int",
    ScalarKind.DOUBLE: "float",
    ScalarKind.BOOLEAN: "bool",
}

_HEADER = [
    '"""Generated by schemagen. Do not edit."""',
    "",
    "from __future__ import annotations",
    "",
    "import datetime as _dt",
    "from dataclasses import dataclass, field as _field",
    "from enum import Enum",
    "from typing import List, MutableSet, Optional",
    "",
    "from schemagen.containers import OrderedSet as _OrderedSet",
]

# module-level names the header binds; generated classes may not reuse them
_RESERVED_NAMES = {"Enum", "List", "MutableSet", "Optional"}


def _annotation(target: TargetType) -> str:
    """Python type annotation for a resolved type."""
    if isinstance(target, ScalarType):
        return _SCALAR_ANNOTATIONS[target.kind]
    if isinstance(target, DateType):
        if target.kind is DateKind.EPOCH_MILLIS_AS_LONG:
            return "int"
        return "_dt.datetime"
    if isinstance(target, EnumType):
        return target.name
    if isinstance(target, ListType):
        return f"List[{_annotation(target.element)}]"
    if isinstance(target, UniqueSetType):
        return f"MutableSet[{_annotation(target.element)}]"
    if isinstance(target, ReferenceType):
        return target.name
    return "object"


def _render_datetime(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return (
        f"_dt.datetime({value.year}, {value.month}, {value.day}, "
        f"{value.hour}, {value.minute}, {value.second}, {value.microsecond}, "
        f"tzinfo=_dt.timezone.utc)"
    )


def render_value(value: Any, target: TargetType) -> str:
    """
    Render a synthesized default as a Python expression.

    Args:
        value: Value returned by synthesize()
        target: The TargetType it was synthesized for

    Returns:
        Source text that evaluates to an equal value
    """
    if value is None:
        return "None"

    if isinstance(value, EnumMember) and isinstance(target, EnumType):
        return f"{target.name}.{value.name}"

    if isinstance(value, bool):
        return repr(value)

    if isinstance(value, float):
        if not math.isfinite(value):
            return f"float('{value}')"
        return repr(value)

    if isinstance(value, (int, str)):
        return repr(value)

    if isinstance(value, datetime):
        return _render_datetime(value)

    if isinstance(value, OrderedSet) and isinstance(target, UniqueSetType):
        items = ", ".join(render_value(v, target.element) for v in value)
        return f"_OrderedSet([{items}])"

    if isinstance(value, list) and isinstance(target, ListType):
        items = ", ".join(render_value(v, target.element) for v in value)
        return f"[{items}]"

    raise TypeError(f"Cannot render {value!r} as {target}")


def _render_field(prop: PropertyDescriptor) -> str:
    target = prop.target_type
    annotation = _annotation(target)

    if isinstance(target, ListType):
        if prop.default:
            factory = f"lambda: {render_value(prop.default, target)}"
        else:
            factory = "lambda: []"
        return f"{prop.field_name}: {annotation} = _field(default_factory={factory})"

    if isinstance(target, UniqueSetType):
        if prop.default:
            factory = f"lambda: {render_value(prop.default, target)}"
        else:
            factory = "_OrderedSet"
        return f"{prop.field_name}: {annotation} = _field(default_factory={factory})"

    return f"{prop.field_name}: Optional[{annotation}] = {render_value(prop.default, target)}"


def _escape_docstring(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')


def generate_enum(enum_type: EnumType) -> List[str]:
    lines = [f"class {enum_type.name}(Enum):"]
    if not enum_type.members:
        lines.append(f"{INDENT}pass")
    for member in enum_type.members:
        lines.append(f"{INDENT}{member.name} = {member.literal!r}")
    return lines


def generate_dataclass(generated: GeneratedType) -> List[str]:
    lines = ["@dataclass", f"class {generated.name}:"]
    if generated.description:
        lines.append(f'{INDENT}"""{_escape_docstring(str(generated.description))}"""')
        if generated.properties:
            lines.append("")
    for prop in generated.properties:
        lines.append(f"{INDENT}{_render_field(prop)}")
    if not generated.properties and not generated.description:
        lines.append(f"{INDENT}pass")
    return lines


def generate_module(result: GenerationResult) -> str:
    """
    Generate Python source for a whole generation result.

    Args:
        result: Output of PropertyDescriptorBuilder.build()

    Returns:
        Module source text
    """
    for name in list(result.enums) + list(result.types):
        if name in _RESERVED_NAMES:
            raise NameCollisionError(name, "generated module imports", name, "module")

    lines = list(_HEADER)

    # =========================================================================
    # ENUMS
    # =========================================================================

    for enum_type in result.enums.values():
        lines.extend(["", ""])
        lines.extend(generate_enum(enum_type))

    # =========================================================================
    # DATACLASSES (nested first, root last)
    # =========================================================================

    for generated in result.types.values():
        lines.extend(["", ""])
        lines.extend(generate_dataclass(generated))

    lines.append("")
    return "\n".join(lines)


def save_module_file(result: GenerationResult, filename: str) -> None:
    """
    Generate the module and save it to a file.

    Args:
        result: Generation result
        filename: Output file path (.py extension recommended)
    """
    source = generate_module(result)
    with open(filename, 'w') as f:
        f.write(source)


__all__ = [
    "generate_module",
    "generate_dataclass",
    "generate_enum",
    "render_value",
    "save_module_file",
]
