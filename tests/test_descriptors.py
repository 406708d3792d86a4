"""
Tests for the Property Descriptor Builder.

These tests verify:
    - One descriptor per property, in declaration order
    - Types and defaults composed from resolver + synthesizer
    - Nested objects become their own generated types
    - Shared and recursive sub-schemas resolve once
    - Repeated passes produce equal results
"""

import logging
from datetime import datetime

import pytest

from schemagen.config import GenerationConfig
from schemagen.containers import OrderedSet
from schemagen.defaults import datetime_to_epoch_millis
from schemagen.descriptors import PropertyDescriptorBuilder, build_descriptors
from schemagen.errors import LiteralConversionError, NameCollisionError
from schemagen.examples import build_default_schema
from schemagen.literals import IntLiteral, TextLiteral
from schemagen.schema import SchemaNode, array_schema, object_schema
from schemagen.target_types import (
    BOOLEAN,
    DOUBLE,
    INTEGER,
    LONG,
    STRING,
    DateKind,
    EnumType,
    ListType,
    ReferenceType,
    UniqueSetType,
)


@pytest.fixture
def default_result():
    return build_descriptors(build_default_schema(), name="Default")


class TestDefaultSchema:
    """The "Default" fixture, property by property."""

    def test_properties_keep_declaration_order(self, default_result):
        assert [p.name for p in default_result.root.properties] == [
            "stringWithDefault",
            "integerWithDefault",
            "numberWithDefault",
            "booleanWithDefault",
            "dateWithDefault",
            "dateAsStringWithDefault",
            "utcmillisecWithDefault",
            "enumWithDefault",
            "complexPropertyWithDefault",
            "arrayWithDefault",
            "uniqueArrayWithDefault",
            "arrayWithoutDefault",
            "uniqueArrayWithoutDefault",
        ]

    def test_field_names(self, default_result):
        prop = default_result.root.get_property("dateAsStringWithDefault")
        assert prop.field_name == "date_as_string_with_default"

    def test_scalar_defaults(self, default_result):
        root = default_result.root
        assert root.get_property("stringWithDefault").default == "abc"
        assert root.get_property("integerWithDefault").default == 1337
        assert root.get_property("numberWithDefault").default == 1.337
        assert root.get_property("booleanWithDefault").default is True

    def test_scalar_types(self, default_result):
        root = default_result.root
        assert root.get_property("stringWithDefault").target_type == STRING
        assert root.get_property("integerWithDefault").target_type == INTEGER
        assert root.get_property("numberWithDefault").target_type == DOUBLE
        assert root.get_property("booleanWithDefault").target_type == BOOLEAN

    def test_date_defaults(self, default_result):
        root = default_result.root
        date = root.get_property("dateWithDefault")
        assert date.target_type.kind is DateKind.EPOCH_MILLIS_AS_DATE
        assert datetime_to_epoch_millis(date.default) == 123456789

        date_as_string = root.get_property("dateAsStringWithDefault")
        assert date_as_string.target_type.kind is DateKind.FORMATTED_STRING_AS_DATE
        assert datetime_to_epoch_millis(date_as_string.default) == 1298539523112

        millis = root.get_property("utcmillisecWithDefault")
        assert millis.target_type.kind is DateKind.EPOCH_MILLIS_AS_LONG
        assert millis.default == 123456789
        assert not isinstance(millis.default, datetime)

    def test_enum_default(self, default_result):
        prop = default_result.root.get_property("enumWithDefault")
        assert isinstance(prop.target_type, EnumType)
        assert prop.target_type.name == "EnumWithDefault"
        assert prop.default is prop.target_type.members[1]
        assert prop.default.literal == "two"
        assert default_result.enums["EnumWithDefault"] is prop.target_type

    def test_complex_default_is_not_materialized(self, default_result):
        prop = default_result.root.get_property("complexPropertyWithDefault")
        assert prop.target_type == ReferenceType("ComplexPropertyWithDefault")
        assert prop.literal is not None
        assert prop.default is None
        assert not prop.has_default

    def test_nested_type_is_generated(self, default_result):
        nested = default_result.get_type("ComplexPropertyWithDefault")
        assert [p.name for p in nested.properties] == ["abc"]

    def test_collection_defaults(self, default_result):
        root = default_result.root
        array = root.get_property("arrayWithDefault")
        assert array.target_type == ListType(STRING)
        assert array.default == ["one", "two", "three"]

        unique = root.get_property("uniqueArrayWithDefault")
        assert unique.target_type == UniqueSetType(INTEGER)
        assert isinstance(unique.default, OrderedSet)
        assert list(unique.default) == [100, 200, 300]

    def test_collections_without_default_are_empty(self, default_result):
        root = default_result.root
        assert root.get_property("arrayWithoutDefault").default == []
        unique = root.get_property("uniqueArrayWithoutDefault")
        assert isinstance(unique.default, OrderedSet)
        assert len(unique.default) == 0

    def test_root_type_is_last(self, default_result):
        assert list(default_result.types) == ["ComplexPropertyWithDefault", "Default"]
        assert default_result.root.name == "Default"


class TestIdempotence:
    """Two passes over one schema give equal results."""

    def test_descriptor_sequences_are_equal(self):
        schema = build_default_schema()
        first = build_descriptors(schema, name="Default")
        second = build_descriptors(schema, name="Default")
        assert first.root.properties == second.root.properties
        assert list(first.types) == list(second.types)

    def test_builder_can_be_reused(self):
        schema = build_default_schema()
        builder = PropertyDescriptorBuilder()
        first = builder.build(schema, name="Default")
        second = builder.build(schema, name="Default")
        assert first.root.properties == second.root.properties

    def test_passes_do_not_share_collections(self):
        schema = build_default_schema()
        first = build_descriptors(schema, name="Default")
        second = build_descriptors(schema, name="Default")
        first_list = first.root.get_property("arrayWithDefault").default
        second_list = second.root.get_property("arrayWithDefault").default
        first_list.append("four")
        assert second_list == ["one", "two", "three"]


class TestNestedTypes:
    """Shared, clashing and recursive sub-schemas."""

    def test_shared_sub_schema_resolves_once(self):
        address = object_schema({"street": SchemaNode(kind="string")})
        schema = object_schema({"home": address, "work": address})
        result = build_descriptors(schema, name="Person")
        assert result.root.get_property("home").target_type == ReferenceType("Home")
        assert result.root.get_property("work").target_type == ReferenceType("Home")
        assert list(result.types) == ["Home", "Person"]

    def test_distinct_schemas_with_same_name_get_suffix(self):
        schema = object_schema({
            "address": object_schema({"street": SchemaNode(kind="string")}),
            "company": object_schema({
                "address": object_schema({"postcode": SchemaNode(kind="string")}),
            }),
        })
        result = build_descriptors(schema, name="Person")
        company = result.get_type("Company")
        assert company.get_property("address").target_type == ReferenceType("Address2")
        assert [p.name for p in result.get_type("Address2").properties] == ["postcode"]

    def test_self_reference_terminates(self):
        node = object_schema({"name": SchemaNode(kind="string")})
        node.properties["parent"] = node
        result = build_descriptors(node, name="Category")
        parent = result.root.get_property("parent")
        assert parent.target_type == ReferenceType("Category")
        assert parent.default is None
        assert list(result.types) == ["Category"]

    def test_mutual_reference_terminates(self):
        a = object_schema()
        b = object_schema({"a": a})
        a.properties["b"] = b
        result = build_descriptors(a, name="A")
        assert result.get_type("B").get_property("a").target_type == ReferenceType("A")

    def test_array_of_objects(self):
        item = object_schema({"sku": SchemaNode(kind="string")})
        schema = object_schema({"lineItems": array_schema(item)})
        result = build_descriptors(schema, name="Order")
        prop = result.root.get_property("lineItems")
        assert prop.target_type == ListType(ReferenceType("LineItems"))
        assert prop.default == []


class TestBuilderRules:
    """Fallbacks, config and fatal errors."""

    def test_odd_property_is_not_dropped(self):
        schema = object_schema({"mystery": SchemaNode(kind="wibble"), "name": SchemaNode(kind="string")})
        with pytest.warns(UserWarning):
            result = build_descriptors(schema)
        assert [p.name for p in result.root.properties] == ["mystery", "name"]
        assert result.root.get_property("mystery").target_type == STRING

    def test_missing_property_node_is_string(self):
        schema = object_schema({"anything": None})
        result = build_descriptors(schema)
        assert result.root.get_property("anything").target_type == STRING

    def test_use_long_integers(self):
        schema = object_schema({"count": SchemaNode(kind="integer", default=IntLiteral(7))})
        result = build_descriptors(schema, config=GenerationConfig(use_long_integers=True))
        prop = result.root.get_property("count")
        assert prop.target_type == LONG
        assert prop.default == 7

    def test_bad_default_aborts_generation(self):
        schema = object_schema({"count": SchemaNode(kind="integer", default=TextLiteral("many"))})
        with pytest.raises(LiteralConversionError) as exc_info:
            build_descriptors(schema)
        assert exc_info.value.property_name == "count"

    def test_field_name_clash_aborts_generation(self):
        schema = object_schema({
            "fooBar": SchemaNode(kind="string"),
            "foo_bar": SchemaNode(kind="string"),
        })
        with pytest.raises(NameCollisionError):
            build_descriptors(schema, name="Clash")

    def test_description_is_carried(self):
        schema = object_schema(
            {"name": SchemaNode(kind="string", description="Full name")},
            description="A person",
        )
        result = build_descriptors(schema, name="Person")
        assert result.root.description == "A person"
        assert result.root.get_property("name").description == "Full name"

    def test_type_registration_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="schemagen.descriptors"):
            build_descriptors(build_default_schema(), name="Default")
        assert "Registered generated type Default" in caplog.text
