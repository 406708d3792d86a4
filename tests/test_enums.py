"""
Tests for the Enum Resolver.

Ordinals follow declaration order; member names are a pure function of
the literal text; collisions are fatal.
"""

import pytest

from schemagen.enums import build_enum_type, enum_literal_texts, resolve_members
from schemagen.errors import NameCollisionError
from schemagen.literals import NULL, BoolLiteral, IntLiteral, SequenceLiteral, TextLiteral
from schemagen.target_types import EnumMember


class TestResolveMembers:
    """Member ordering and naming."""

    def test_ordinals_follow_declaration_order(self):
        members = resolve_members(["one", "two", "three"])
        assert [(m.name, m.ordinal, m.literal) for m in members] == [
            ("ONE", 0, "one"),
            ("TWO", 1, "two"),
            ("THREE", 2, "three"),
        ]

    def test_order_is_not_sorted(self):
        members = resolve_members(["zeta", "alpha"])
        assert [m.literal for m in members] == ["zeta", "alpha"]

    def test_repeated_literal_produces_one_member(self):
        members = resolve_members(["a", "b", "a"])
        assert [m.literal for m in members] == ["a", "b"]
        assert [m.ordinal for m in members] == [0, 1]

    def test_names_are_deterministic(self):
        assert resolve_members(["two words"]) == resolve_members(["two words"])

    def test_name_shapes(self):
        names = [m.name for m in resolve_members(["two words", "camelCase", "1st", ""])]
        assert names == ["TWO_WORDS", "CAMEL_CASE", "_1ST", "EMPTY"]

    def test_collision_is_fatal(self):
        with pytest.raises(NameCollisionError) as exc_info:
            resolve_members(["a b", "a-b"], scope="enum Spacing")
        err = exc_info.value
        assert err.name == "A_B"
        assert err.first == "a b"
        assert err.second == "a-b"
        assert "Spacing" in str(err)

    def test_case_variants_collide(self):
        with pytest.raises(NameCollisionError):
            resolve_members(["yes", "YES"])


class TestBuildEnumType:
    """EnumType construction from literals."""

    def test_member_lookup_by_literal(self):
        enum_type = build_enum_type("Letter", [TextLiteral("X"), TextLiteral("Y")])
        assert enum_type.member_for("Y") == EnumMember(name="Y", ordinal=1, literal="Y")
        assert enum_type.member_for("y") is None

    def test_non_text_literals_use_json_text(self):
        enum_type = build_enum_type("Level", [IntLiteral(1), BoolLiteral(False)])
        assert enum_type.literals == ("1", "false")
        assert [m.name for m in enum_type.members] == ["_1", "FALSE"]

    def test_null_and_composite_literals_are_skipped(self):
        assert enum_literal_texts([NULL, SequenceLiteral(), TextLiteral("a")]) == ["a"]

    def test_equal_enum_types_compare_equal(self):
        first = build_enum_type("Letter", [TextLiteral("X")])
        second = build_enum_type("Letter", [TextLiteral("X")])
        assert first == second
