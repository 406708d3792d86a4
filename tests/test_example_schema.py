"""
Test the "Default" example schema end to end.

Validates that the example builder and the example document describe the
same schema and that generation yields the expected defaults.
"""

from schemagen.defaults import datetime_to_epoch_millis
from schemagen.descriptors import build_descriptors
from schemagen.examples import DEFAULT_SCHEMA_DOCUMENT, build_default_schema
from schemagen.schema import property_names


def test_example_schema_structure():
    schema = build_default_schema()

    assert schema.kind == "object"
    assert property_names(schema) == list(DEFAULT_SCHEMA_DOCUMENT["properties"])

    # The enum property declares no kind of its own
    assert schema.get_property("enumWithDefault").kind is None
    assert schema.get_property("uniqueArrayWithDefault").unique_items is True


def test_example_schema_defaults():
    result = build_descriptors(build_default_schema(), name="Default")
    defaults = {p.name: p.default for p in result.root.properties}

    assert defaults["stringWithDefault"] == "abc"
    assert datetime_to_epoch_millis(defaults["dateWithDefault"]) == 123456789
    assert datetime_to_epoch_millis(defaults["dateAsStringWithDefault"]) == 1298539523112
    assert defaults["utcmillisecWithDefault"] == 123456789
    assert defaults["enumWithDefault"].ordinal == 1
    assert defaults["complexPropertyWithDefault"] is None
