"""
Example schema: one property per default-value rule.

Mirrors the classic "Default" fixture: a string, integer, number and
boolean default, the three date representations, an enum, a nested object
whose default is ignored, and ordered/unique arrays with and without
defaults.
"""
from schemagen.literals import (
    BoolLiteral,
    DecimalLiteral,
    IntLiteral,
    ObjectLiteral,
    SequenceLiteral,
    TextLiteral,
    UniqueSequenceLiteral,
)
from schemagen.schema import SchemaNode, array_schema, object_schema


DEFAULT_SCHEMA_DOCUMENT = {
    "type": "object",
    "properties": {
        "stringWithDefault": {"type": "string", "default": "abc"},
        "integerWithDefault": {"type": "integer", "default": 1337},
        "numberWithDefault": {"type": "number", "default": 1.337},
        "booleanWithDefault": {"type": "boolean", "default": True},
        "dateWithDefault": {"type": "date", "default": 123456789},
        "dateAsStringWithDefault": {
            "type": "string",
            "format": "date-time",
            "default": "2011-02-24T09:25:23.112+0000",
        },
        "utcmillisecWithDefault": {
            "type": "integer",
            "format": "utc-millisec",
            "default": 123456789,
        },
        "enumWithDefault": {"enum": ["one", "two", "three"], "default": "two"},
        "complexPropertyWithDefault": {
            "type": "object",
            "properties": {"abc": {"type": "string"}},
            "default": {"abc": "xyz"},
        },
        "arrayWithDefault": {
            "type": "array",
            "items": {"type": "string"},
            "default": ["one", "two", "three"],
        },
        "uniqueArrayWithDefault": {
            "type": "array",
            "uniqueItems": True,
            "items": {"type": "integer"},
            "default": [100, 200, 300],
        },
        "arrayWithoutDefault": {"type": "array", "items": {"type": "string"}},
        "uniqueArrayWithoutDefault": {
            "type": "array",
            "uniqueItems": True,
            "items": {"type": "boolean"},
        },
    },
}


def build_default_schema() -> SchemaNode:
    """Build the "Default" fixture as a SchemaNode tree."""
    properties = {
        "stringWithDefault": SchemaNode(kind="string", default=TextLiteral("abc")),
        "integerWithDefault": SchemaNode(kind="integer", default=IntLiteral(1337)),
        "numberWithDefault": SchemaNode(kind="number", default=DecimalLiteral(1.337)),
        "booleanWithDefault": SchemaNode(kind="boolean", default=BoolLiteral(True)),
        "dateWithDefault": SchemaNode(kind="date", default=IntLiteral(123456789)),
        "dateAsStringWithDefault": SchemaNode(
            kind="string",
            format="date-time",
            default=TextLiteral("2011-02-24T09:25:23.112+0000"),
        ),
        "utcmillisecWithDefault": SchemaNode(
            kind="integer",
            format="utc-millisec",
            default=IntLiteral(123456789),
        ),
        "enumWithDefault": SchemaNode(
            enum=[TextLiteral("one"), TextLiteral("two"), TextLiteral("three")],
            default=TextLiteral("two"),
        ),
        "complexPropertyWithDefault": object_schema(
            {"abc": SchemaNode(kind="string")},
            default=ObjectLiteral((("abc", TextLiteral("xyz")),)),
        ),
        "arrayWithDefault": array_schema(
            SchemaNode(kind="string"),
            default=SequenceLiteral((TextLiteral("one"), TextLiteral("two"), TextLiteral("three"))),
        ),
        "uniqueArrayWithDefault": array_schema(
            SchemaNode(kind="integer"),
            unique_items=True,
            default=UniqueSequenceLiteral((IntLiteral(100), IntLiteral(200), IntLiteral(300))),
        ),
        "arrayWithoutDefault": array_schema(SchemaNode(kind="string")),
        "uniqueArrayWithoutDefault": array_schema(SchemaNode(kind="boolean"), unique_items=True),
    }
    return object_schema(properties)
