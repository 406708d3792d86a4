"""
Errors raised by the schema model generator.

Only two failures cross the core boundary:

    - LiteralConversionError: a declared default cannot become a value of
      its resolved type
    - NameCollisionError: two distinct sources would generate the same name

Both are fatal for the schema being generated. Every other irregularity
(unknown kind, odd format, object default, missing default) is absorbed
by a fallback rule and never raises.
"""

from typing import Any


class SchemaGenError(Exception):
    """Base class for all schemagen errors."""
    pass


class LiteralConversionError(SchemaGenError):
    """
    Raised when a default literal cannot be converted to its target type.

    Properties:
        property_name: Schema property that declared the default
        target_type: Resolved TargetType the literal was converted to
        literal: The offending LiteralValue
        reason: Optional detail (parser message, range, ...)
    """

    def __init__(self, property_name: str, target_type: Any, literal: Any, reason: str = ""):
        self.property_name = property_name
        self.target_type = target_type
        self.literal = literal
        self.reason = reason
        message = (
            f"Cannot convert default {literal!r} of property "
            f"'{property_name or '<anonymous>'}' to {target_type}"
        )
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class NameCollisionError(SchemaGenError):
    """
    Raised when two distinct sources map to the same generated name.

    Examples:
        - enum literals "a b" and "a-b" both become member A_B
        - properties "fooBar" and "foo_bar" both become field foo_bar

    Properties:
        name: The generated name both sources map to
        first: The source that claimed the name first
        second: The source that collided with it
        scope: Where the clash happened (enum or type name)
    """

    def __init__(self, name: str, first: str, second: str, scope: str):
        self.name = name
        self.first = first
        self.second = second
        self.scope = scope
        super().__init__(
            f"'{first}' and '{second}' both generate the name '{name}' in {scope}"
        )
