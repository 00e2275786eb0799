"""Tests for field paths, path parsing and step navigation."""

import pytest

from pyqt_inspector.reflection import (
    FieldPath, Index, Named, Vec3, format_steps, parse_steps, reflect, resolve_steps, step_into,
)
from pyqt_inspector.store import ObjectId, PathResolutionFailed

from conftest import Transform


def test_format_and_parse_steps():
    steps = (Named("translation"), Index(1))
    assert format_steps(steps) == "translation[1]"
    assert parse_steps("translation[1]") == steps


def test_parse_dotted_index_and_nested_names():
    assert parse_steps("a.b.2") == (Named("a"), Named("b"), Index(2))
    assert parse_steps("[0].x") == (Index(0), Named("x"))
    assert parse_steps("") == ()


@pytest.mark.parametrize("text", ["a..b", "[x]", "a b", "a[1"])
def test_parse_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_steps(text)


def test_field_path_str():
    path = FieldPath(ObjectId(3), Transform, (Named("translation"), Index(1)))
    assert str(path) == "3v0:Transform.translation[1]"
    assert str(FieldPath(ObjectId(0, 2), Vec3, (Index(0),))) == "0v2:Vec3[0]"


def test_field_path_child():
    path = FieldPath(ObjectId(1), Transform).child(Named("scale")).child(Index(2))
    assert path.steps == (Named("scale"), Index(2))
    assert path.object_id == ObjectId(1)


def test_resolve_steps_reaches_leaf():
    transform = Transform(translation=Vec3(1.0, 2.0, 3.0))
    assert resolve_steps(transform, (Named("translation"), Index(1))) == 2.0
    assert resolve_steps(transform, ()) is transform


def test_index_into_struct_uses_field_order():
    transform = Transform(translation=Vec3(1.0, 2.0, 3.0))
    assert resolve_steps(transform, (Index(0), Index(2))) == 3.0


@pytest.mark.parametrize("value, step", [
    (Vec3(), Named("x")),          # tuple struct has no named steps
    (Vec3(), Index(3)),            # out of range
    (Transform(), Named("nope")),  # unknown field
    (Transform(), Index(-1)),
    ([1, 2, 3], Index(0)),         # lists are not addressable
    (1.0, Index(0)),
])
def test_step_into_failures(value, step):
    with pytest.raises(PathResolutionFailed):
        step_into(reflect(value), step)
