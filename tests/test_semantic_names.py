"""Tests for the semantic field name overlay."""

from typing import NamedTuple

from pyqt_inspector.reflection import Quat, SemanticFieldNames, Vec2, Vec3


class Rgb(NamedTuple):
    r: float
    g: float
    b: float


class Position(Vec3):
    __slots__ = ()


def test_math_types_are_seeded():
    names = SemanticFieldNames()
    assert [names.get_field_name(Vec3, i) for i in range(3)] == ["x", "y", "z"]
    assert names.get_field_name(Quat, 3) == "w"
    assert names.get_field_name(Vec2, 2) is None


def test_unregistered_type_has_no_names():
    names = SemanticFieldNames()
    assert names.get_field_name(Rgb, 0) is None
    assert not names.has_override(Rgb)


def test_unseeded_registry_is_empty():
    names = SemanticFieldNames(seed_defaults=False)
    assert names.get_field_name(Vec3, 0) is None


def test_register_and_override():
    names = SemanticFieldNames()
    names.register(Rgb, ["red", "green", "blue"])
    assert names.has_override(Rgb)
    assert names.get_field_name(Rgb, 1) == "green"

    names.register(Vec3, ["u", "v", "w"])
    assert names.get_field_name(Vec3, 0) == "u"


def test_subclass_inherits_parent_names():
    names = SemanticFieldNames()
    assert names.get_field_name(Position, 1) == "y"

    names.register(Position, ["east", "north", "up"])
    assert names.get_field_name(Position, 1) == "north"
    assert names.get_field_name(Vec3, 1) == "y"
