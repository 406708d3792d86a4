"""
Default Value Synthesizer.

Converts a declared default (Literal Model) into a value of the property's
resolved TargetType.

POLICY:
    Scalars, dates, enums:
        literal present -> converted value
        literal absent or null -> None (no initializer)
    List / UniqueSet:
        literal present -> fresh mutable collection, elements converted in
        declared order
        literal absent or null -> fresh EMPTY mutable collection, never None
    Reference (nested object):
        always None, even when a default is declared

Every call builds new collections; nothing is shared between calls.
A literal that cannot be converted raises LiteralConversionError.
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional

from dateutil.parser import isoparse

from schemagen.containers import OrderedSet
from schemagen.errors import LiteralConversionError
from schemagen.literals import (
    BoolLiteral,
    DecimalLiteral,
    IntLiteral,
    LiteralValue,
    SequenceLiteral,
    TextLiteral,
    UniqueSequenceLiteral,
    is_null,
    literal_text,
)
from schemagen.target_types import (
    DateKind,
    DateType,
    EnumType,
    ListType,
    ReferenceType,
    ScalarKind,
    ScalarType,
    TargetType,
    UniqueSetType,
)


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

INT32_MIN, INT32_MAX = -(2 ** 31), 2 ** 31 - 1
INT64_MIN, INT64_MAX = -(2 ** 63), 2 ** 63 - 1


# =============================================================================
# DATE HELPERS
# =============================================================================

def epoch_millis_to_datetime(millis: int) -> datetime:
    """UTC datetime for a count of milliseconds since the epoch."""
    try:
        return EPOCH + timedelta(milliseconds=millis)
    except OverflowError as e:
        raise ValueError(f"{millis} ms is outside the supported date range") from e


def datetime_to_epoch_millis(value: datetime) -> int:
    """Milliseconds since the epoch. Naive datetimes are read as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH) // timedelta(milliseconds=1)


def parse_formatted_date(text: str, fmt: Optional[str]) -> datetime:
    """
    Parse a date string with the format declared on its property.

    A format containing a strftime directive is applied with strptime;
    named formats ("date-time", "date") are ISO-8601.

    Returns:
        Timezone-aware UTC datetime

    Raises:
        ValueError: If the text does not match the format
    """
    if fmt and "%" in fmt:
        parsed = datetime.strptime(text, fmt)
    else:
        parsed = isoparse(text)

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError as e:
        raise ValueError(f"{text!r} is outside the supported date range") from e


# =============================================================================
# SCALAR CONVERSIONS
# =============================================================================
# Each converter raises ValueError; synthesize() wraps it with context.

def _to_integer(literal: LiteralValue, low: int, high: int) -> int:
    if isinstance(literal, BoolLiteral):
        raise ValueError("boolean is not a number")
    if isinstance(literal, IntLiteral):
        value = literal.value
    elif isinstance(literal, DecimalLiteral):
        if not math.isfinite(literal.value):
            raise ValueError("not a finite number")
        # truncate toward zero
        value = int(literal.value)
    elif isinstance(literal, TextLiteral):
        value = int(literal.value.strip())
    else:
        raise ValueError("not a number")

    if not low <= value <= high:
        raise ValueError(f"{value} does not fit in [{low}, {high}]")
    return value


def _to_double(literal: LiteralValue) -> float:
    if isinstance(literal, (IntLiteral, DecimalLiteral)):
        try:
            return float(literal.value)
        except OverflowError as e:
            raise ValueError("too large for a double") from e
    if isinstance(literal, TextLiteral):
        return float(literal.value.strip())
    raise ValueError("not a number")


def _to_boolean(literal: LiteralValue) -> bool:
    if isinstance(literal, BoolLiteral):
        return literal.value
    if isinstance(literal, TextLiteral):
        text = literal.value.strip().lower()
        if text in ("true", "false"):
            return text == "true"
    raise ValueError("not a boolean")


def _to_string(literal: LiteralValue) -> str:
    text = literal_text(literal)
    if text is None:
        raise ValueError("not a scalar")
    return text


_SCALAR_CONVERTERS: Dict[ScalarKind, Callable[[LiteralValue], Any]] = {
    ScalarKind.STRING: _to_string,
    ScalarKind.INTEGER: lambda lit: _to_integer(lit, INT32_MIN, INT32_MAX),
    ScalarKind.LONG: lambda lit: _to_integer(lit, INT64_MIN, INT64_MAX),
    ScalarKind.DOUBLE: _to_double,
    ScalarKind.BOOLEAN: _to_boolean,
}


def _to_date(target: DateType, literal: LiteralValue) -> Any:
    if target.kind is DateKind.EPOCH_MILLIS_AS_LONG:
        return _to_integer(literal, INT64_MIN, INT64_MAX)

    if target.kind is DateKind.EPOCH_MILLIS_AS_DATE:
        return epoch_millis_to_datetime(_to_integer(literal, INT64_MIN, INT64_MAX))

    if not isinstance(literal, TextLiteral):
        raise ValueError(f"expected a date string in format {target.format!r}")
    return parse_formatted_date(literal.value, target.format)


def _to_enum_member(target: EnumType, literal: LiteralValue) -> Any:
    text = literal_text(literal)
    member = target.member_for(text) if text is not None else None
    if member is None:
        raise ValueError(f"not one of {list(target.literals)}")
    return member


# =============================================================================
# COLLECTIONS
# =============================================================================

def _sequence_items(literal: LiteralValue) -> tuple:
    if isinstance(literal, (SequenceLiteral, UniqueSequenceLiteral)):
        return literal.items
    raise ValueError("expected an array")


def _synthesize_list(target: ListType, literal: Optional[LiteralValue], property_name: str) -> List[Any]:
    values: List[Any] = []
    if is_null(literal) or isinstance(target.element, ReferenceType):
        return values
    for item in _sequence_items(literal):
        values.append(synthesize(target.element, item, property_name))
    return values


def _synthesize_set(target: UniqueSetType, literal: Optional[LiteralValue], property_name: str) -> OrderedSet:
    values = OrderedSet()
    if is_null(literal) or isinstance(target.element, ReferenceType):
        return values
    for item in _sequence_items(literal):
        values.add(synthesize(target.element, item, property_name))
    return values


# =============================================================================
# ENTRY POINT
# =============================================================================

def synthesize(
    target: TargetType,
    literal: Optional[LiteralValue] = None,
    property_name: str = "",
) -> Any:
    """
    Synthesize the default value for a resolved type.

    Args:
        target: Resolved TargetType
        literal: Declared default, or None when the schema declares none
        property_name: Used in error messages only

    Returns:
        The converted value, a fresh collection, or None (no initializer)

    Raises:
        LiteralConversionError: If the literal does not fit the type
    """
    if isinstance(target, ReferenceType):
        return None

    try:
        if isinstance(target, ListType):
            return _synthesize_list(target, literal, property_name)

        if isinstance(target, UniqueSetType):
            return _synthesize_set(target, literal, property_name)

        if is_null(literal):
            return None

        if isinstance(target, ScalarType):
            return _SCALAR_CONVERTERS[target.kind](literal)

        if isinstance(target, DateType):
            return _to_date(target, literal)

        if isinstance(target, EnumType):
            return _to_enum_member(target, literal)

    except ValueError as e:
        raise LiteralConversionError(property_name, target, literal, str(e)) from e

    raise TypeError(f"Unsupported TargetType: {type(target)}")


__all__ = [
    "synthesize",
    "epoch_millis_to_datetime",
    "datetime_to_epoch_millis",
    "parse_formatted_date",
]
