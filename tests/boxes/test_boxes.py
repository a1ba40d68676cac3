"""Tests for observable boxes."""

import pytest

from proptree import (
    Box,
    FloatBox,
    IntBox,
    ListBox,
    LongBox,
    MapBox,
    ReadOnlyBox,
    ReadOnlyIntBox,
    ReadOnlyListBox,
    SetBox,
    SimpleBox,
)


def test_boxes_cannot_be_abstract_instances():
    with pytest.raises(TypeError):
        ReadOnlyBox()
    with pytest.raises(TypeError):
        Box()


def test_simple_box_holds_a_value():
    box = SimpleBox("a")

    box.set_value("b")

    assert box.get_value() == "b"
    assert SimpleBox().get_value() is None


def test_primitive_box_defaults():
    assert IntBox().get_value() == 0
    assert LongBox().get_value() == 0
    assert FloatBox().get_value() == 0.0


def test_collection_box_defaults_are_not_shared():
    first, second = ListBox(), ListBox()

    first.get_value().append(1)

    assert second.get_value() == []
    assert SetBox().get_value() == set()
    assert MapBox().get_value() == {}


def test_map_box_copies_its_input():
    source = {"a": 1}
    box = MapBox(source)

    source["b"] = 2

    assert box.get_value() == {"a": 1}


def test_writable_boxes_are_read_only_boxes_too():
    assert isinstance(IntBox(), ReadOnlyIntBox)
    assert isinstance(IntBox(), Box)
    assert isinstance(ListBox(), ReadOnlyListBox)
    assert not issubclass(ReadOnlyIntBox, Box)


def test_repr_names_the_property():
    assert repr(IntBox(3, name="count")) == "IntBox count(3)"
    assert repr(SimpleBox("x")) == "SimpleBox('x')"
